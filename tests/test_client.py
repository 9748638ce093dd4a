import pytest
import responses

from tuuba.api import Api
from tuuba.client import (
    Client,
    ClientCommand,
    CommandKind,
    GuiState,
    Slot,
    VideoPage,
)
from tuuba.playback import VideoPlaybackData

BASE = "https://tube.example.com"
PLAYLIST = "https://tube.example.com/static/streaming-playlists/hls/master.m3u8"


def _run_now(task):
    task()


def _drop(task):
    return None


def _image():
    return {
        "path": "/lazy-static/avatars/a.png",
        "width": 48,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }


def _summary(name):
    return {
        "id": 1,
        "name": name,
        "displayName": name.title(),
        "url": f"{BASE}/a/{name}",
        "host": "tube.example.com",
        "avatars": [_image()],
    }


def _account(name):
    return {
        **_summary(name),
        "followingCount": 0,
        "followersCount": 3,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }


def _common(video_id, name):
    return {
        "id": video_id,
        "uuid": "uuid-placeholder",
        "shortUUID": "short-placeholder",
        "isLive": False,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
        "publishedAt": "2024-01-02T00:00:00Z",
        "duration": 60,
        "isLocal": True,
        "name": name,
        "thumbnailPath": "/thumb.jpg",
        "previewPath": "/preview.jpg",
        "embedPath": "/embed",
        "views": 10,
        "likes": 2,
        "dislikes": 1,
        "comments": 0,
        "nsfw": False,
        "nsfwFlags": 0,
    }


def _details(video_id):
    channel = {
        **_account("channel"),
        "isLocal": True,
        "banners": [],
        "ownerAccount": _account("owner"),
    }
    return {
        **_common(video_id, "Sample"),
        "account": _account("owner"),
        "channel": channel,
        "viewers": 0,
        "tags": [],
        "downloadEnabled": True,
        "trackerUrls": [],
        "streamingPlaylists": [{"playlistUrl": PLAYLIST}],
        "files": [],
    }


def _videos():
    item = {
        **_common(8, "Other"),
        "account": _summary("owner"),
        "channel": _summary("channel"),
    }
    return {"data": [item], "total": 1}


def _config():
    return {
        "instance": {
            "defaultClientRoute": "/videos/trending",
            "defaultNSFWPolicy": "do_not_list",
            "isNSFW": False,
            "name": "Example Tube",
            "serverCountry": "",
            "shortDescription": "A test instance",
        }
    }


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, f"{BASE}/api/v1/config", json=_config())
        rsps.add(responses.GET, f"{BASE}/api/v1/videos/7", json=_details(7))
        rsps.add(responses.GET, f"{BASE}/api/v1/videos", json=_videos())
        yield rsps


def test_gui_state_toggle():
    state = GuiState()
    assert state.expand_sidebar is True
    state.toggle_sidebar_expand()
    assert state.expand_sidebar is False
    state.toggle_sidebar_expand()
    assert state.expand_sidebar is True


def test_commands():
    assert ClientCommand().kind is CommandKind.NONE
    assert ClientCommand.close_page().kind is CommandKind.CLOSE_PAGE
    command = ClientCommand.open_video(42)
    assert (command.kind, command.video_id) == (CommandKind.OPEN_VIDEO, 42)


def test_slot_take():
    slot = Slot("value")
    assert slot.get() == "value"
    assert slot.take() == "value"
    assert slot.get() is None
    slot.set("again")
    assert slot.get() == "again"


def test_instance_config_loaded(mocked):
    client = Client(Api(BASE), _run_now, initial_video=None)
    config = client.instance_config.get()
    assert config.instance.name == "Example Tube"
    assert client.page is None


def test_open_video_loads_page(mocked):
    client = Client(Api(BASE), _run_now, initial_video=7)
    page = client.page
    assert page.id == 7
    assert page.video.get().name == "Sample"
    assert page.videos.get().total == 1
    assert client.playback.get().url == PLAYLIST
    assert page.playback is client.playback


def test_open_video_stops_previous_playback():
    client = Client(Api(BASE), _drop, initial_video=None)
    client.playback.set(VideoPlaybackData(PLAYLIST))
    client.open_video(3)
    assert client.playback.get() is None
    assert client.page.id == 3


def test_fetch_failure_is_reported(capsys):
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, f"{BASE}/api/v1/config", body="oops", status=500)
        rsps.add(responses.GET, f"{BASE}/api/v1/videos/7", body="oops", status=500)
        rsps.add(responses.GET, f"{BASE}/api/v1/videos", body="oops", status=500)
        client = Client(Api(BASE), _run_now, initial_video=7)
    assert client.instance_config.get() is None
    assert client.page.video.get() is None
    assert "Couldn't parse response" in capsys.readouterr().out


def test_handle_commands(mocked):
    client = Client(Api(BASE), _run_now, initial_video=None)
    client.handle_command(ClientCommand.open_video(7))
    assert client.page.id == 7
    client.handle_command(ClientCommand())
    assert client.page.id == 7
    client.handle_command(ClientCommand.close_page())
    assert client.page is None


def test_open_command_without_id():
    client = Client(Api(BASE), _drop, initial_video=None)
    with pytest.raises(ValueError):
        client.handle_command(ClientCommand(CommandKind.OPEN_VIDEO))


def test_play_open_video_restarts():
    client = Client(Api(BASE), _drop, initial_video=None)
    assert client.play_open_video() is False
    playback = VideoPlaybackData(PLAYLIST, frame_rate=25.0, start_time=0.0)
    playback.frame = 40
    client.playback.set(playback)
    assert client.play_open_video() is True
    restarted = client.playback.get()
    assert restarted.frame == 0
    assert restarted.url == PLAYLIST
    assert restarted.frame_rate == 25.0


def test_video_page_fetch_uses_spawn():
    tasks = []
    page = VideoPage(7, Slot())
    page.fetch_data(Api(BASE), tasks.append)
    assert len(tasks) == 2
    assert page.video.get() is None