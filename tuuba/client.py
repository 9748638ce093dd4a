"""Application state: the instance, the open page and the playing video."""

from __future__ import annotations

import enum
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from tuuba.api import Api
from tuuba.errors import ApiError
from tuuba.models import Config, VideoDetails, Videos, fetch_config, fetch_video_details, fetch_videos
from tuuba.playback import VideoPlaybackData

T = TypeVar("T")

DEFAULT_INSTANCE = "https://peertube.wtf"
DEFAULT_VIDEO = 4811

Spawn = Callable[[Callable[[], None]], Any]


def _spawn_thread(task: Callable[[], None]) -> threading.Thread:
    thread = threading.Thread(target=task, daemon=True)
    thread.start()
    return thread


def _report(error: Exception) -> None:
    print(error)


@dataclass
class GuiState:
    expand_sidebar: bool = True

    def toggle_sidebar_expand(self) -> None:
        self.expand_sidebar = not self.expand_sidebar


class CommandKind(enum.Enum):
    NONE = "none"
    CLOSE_PAGE = "close_page"
    OPEN_VIDEO = "open_video"


@dataclass(frozen=True)
class ClientCommand:
    """A request from the interface to change the client state."""

    kind: CommandKind = CommandKind.NONE
    video_id: int | None = None

    @classmethod
    def close_page(cls) -> ClientCommand:
        return cls(CommandKind.CLOSE_PAGE)

    @classmethod
    def open_video(cls, video_id: int) -> ClientCommand:
        return cls(CommandKind.OPEN_VIDEO, video_id)


class Slot(Generic[T]):
    """A value shared between threads that may be absent."""

    def __init__(self, value: T | None = None) -> None:
        self._lock = threading.Lock()
        self._value = value

    def __repr__(self) -> str:
        return f"Slot({self.get()!r})"

    def get(self) -> T | None:
        with self._lock:
            return self._value

    def set(self, value: T | None) -> None:
        with self._lock:
            self._value = value

    def take(self) -> T | None:
        """Remove and return the value."""
        with self._lock:
            value, self._value = self._value, None
            return value


@dataclass
class VideoPage:
    """The page of one video, with the listing shown beside it."""

    id: int
    playback: Slot[VideoPlaybackData]
    video: Slot[VideoDetails] = field(default_factory=Slot)
    videos: Slot[Videos] = field(default_factory=Slot)

    def fetch_data(self, api: Api, spawn: Spawn) -> None:
        """Load the video details, start its playback and load the listing."""

        def load_video() -> None:
            try:
                details = fetch_video_details(api, self.id)
                self.video.set(details)
                self.playback.set(VideoPlaybackData(details.playback_url()))
            except (ApiError, ValueError) as exc:
                _report(exc)

        def load_videos() -> None:
            try:
                self.videos.set(fetch_videos(api))
            except ApiError as exc:
                _report(exc)

        spawn(load_video)
        spawn(load_videos)


class Client:
    """Holds everything the interface shows and reacts to its commands."""

    def __init__(
        self,
        api: Api | None = None,
        spawn: Spawn | None = None,
        initial_video: int | None = DEFAULT_VIDEO,
    ) -> None:
        self.api = api if api is not None else Api(DEFAULT_INSTANCE)
        self.spawn = spawn if spawn is not None else _spawn_thread
        self.instance_config: Slot[Config] = Slot()
        self.playback: Slot[VideoPlaybackData] = Slot()
        self.page: VideoPage | None = None
        self.gui_state = GuiState()

        self.fetch_instance_config()
        if initial_video is not None:
            self.open_video(initial_video)

    def fetch_instance_config(self) -> None:
        def load() -> None:
            try:
                self.instance_config.set(fetch_config(self.api))
            except ApiError as exc:
                _report(exc)

        self.spawn(load)

    def open_video(self, video_id: int) -> None:
        """Stop the current playback and show the page of ``video_id``."""
        self.playback.take()
        page = VideoPage(video_id, self.playback)
        page.fetch_data(self.api, self.spawn)
        self.page = page

    def play_open_video(self) -> bool:
        """Restart playback of the open video; False if nothing is playing."""
        playback = self.playback.get()
        if playback is None:
            return False
        self.playback.set(
            VideoPlaybackData(
                playback.url,
                frame_rate=playback.frame_rate,
                width=playback.width,
                height=playback.height,
                texture=playback.texture,
            )
        )
        return True

    def close_page(self) -> None:
        self.page = None

    def handle_command(self, command: ClientCommand) -> None:
        match command.kind:
            case CommandKind.NONE:
                pass
            case CommandKind.CLOSE_PAGE:
                self.close_page()
            case CommandKind.OPEN_VIDEO:
                if command.video_id is None:
                    raise ValueError("open-video command without a video id")
                self.open_video(command.video_id)