"""Typed views of the PeerTube API responses the client uses."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from tuuba.api import Api
from tuuba.errors import ParseFailed

T = TypeVar("T")


class _Fields:
    """Strict accessor over one JSON object."""

    def __init__(self, data: Any, what: str) -> None:
        if not isinstance(data, Mapping):
            raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
        self._data = data
        self._what = what

    def _value(self, key: str, optional: bool) -> Any:
        value = self._data.get(key)
        if value is None and not optional:
            raise ValueError(f"{self._what}: missing field '{key}'")
        return value

    def _fail(self, key: str, expected: str) -> ValueError:
        return ValueError(f"{self._what}: field '{key}' is not {expected}")

    def string(self, key: str) -> str:
        value = self._value(key, optional=False)
        if not isinstance(value, str):
            raise self._fail(key, "a string")
        return value

    def opt_string(self, key: str) -> str | None:
        value = self._value(key, optional=True)
        if value is not None and not isinstance(value, str):
            raise self._fail(key, "a string")
        return value

    def _check_uint(self, key: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise self._fail(key, "a non-negative integer")
        return value

    def uint(self, key: str) -> int:
        return self._check_uint(key, self._value(key, optional=False))

    def opt_uint(self, key: str) -> int | None:
        value = self._value(key, optional=True)
        return None if value is None else self._check_uint(key, value)

    def _check_bool(self, key: str, value: Any) -> bool:
        if not isinstance(value, bool):
            raise self._fail(key, "a boolean")
        return value

    def boolean(self, key: str) -> bool:
        return self._check_bool(key, self._value(key, optional=False))

    def opt_boolean(self, key: str) -> bool | None:
        value = self._value(key, optional=True)
        return None if value is None else self._check_bool(key, value)

    def opt_float(self, key: str) -> float | None:
        value = self._value(key, optional=True)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._fail(key, "a number")
        return float(value)

    def obj(self, key: str, parser: Callable[[Any], T]) -> T:
        return parser(self._value(key, optional=False))

    def _check_list(self, key: str, value: Any) -> list:
        if not isinstance(value, list):
            raise self._fail(key, "a list")
        return value

    def objects(self, key: str, parser: Callable[[Any], T]) -> tuple[T, ...]:
        items = self._check_list(key, self._value(key, optional=False))
        return tuple(parser(item) for item in items)

    def opt_objects(self, key: str, parser: Callable[[Any], T]) -> tuple[T, ...] | None:
        value = self._value(key, optional=True)
        if value is None:
            return None
        return tuple(parser(item) for item in self._check_list(key, value))

    def strings(self, key: str) -> tuple[str, ...]:
        items = self._check_list(key, self._value(key, optional=False))
        if not all(isinstance(item, str) for item in items):
            raise self._fail(key, "a list of strings")
        return tuple(items)


@dataclass(frozen=True)
class ActorImage:
    path: str
    width: int
    created_at: str
    updated_at: str

    @classmethod
    def from_json(cls, data: Any) -> ActorImage:
        f = _Fields(data, cls.__name__)
        return cls(
            path=f.string("path"),
            width=f.uint("width"),
            created_at=f.string("createdAt"),
            updated_at=f.string("updatedAt"),
        )


@dataclass(frozen=True)
class AccountSummary:
    id: int
    name: str
    display_name: str
    url: str
    host: str
    avatars: tuple[ActorImage, ...]

    @classmethod
    def from_json(cls, data: Any) -> AccountSummary:
        f = _Fields(data, cls.__name__)
        return cls(
            id=f.uint("id"),
            name=f.string("name"),
            display_name=f.string("displayName"),
            url=f.string("url"),
            host=f.string("host"),
            avatars=f.objects("avatars", ActorImage.from_json),
        )


@dataclass(frozen=True)
class Account:
    id: int
    name: str
    display_name: str
    url: str
    host: str
    avatars: tuple[ActorImage, ...]
    host_redundancy_allowed: bool | None
    following_count: int
    followers_count: int
    created_at: str
    updated_at: str
    user_id: int | None
    description: str | None

    @classmethod
    def from_json(cls, data: Any) -> Account:
        f = _Fields(data, cls.__name__)
        return cls(
            id=f.uint("id"),
            name=f.string("name"),
            display_name=f.string("displayName"),
            url=f.string("url"),
            host=f.string("host"),
            avatars=f.objects("avatars", ActorImage.from_json),
            host_redundancy_allowed=f.opt_boolean("hostRedundancyAllowed"),
            following_count=f.uint("followingCount"),
            followers_count=f.uint("followersCount"),
            created_at=f.string("createdAt"),
            updated_at=f.string("updatedAt"),
            user_id=f.opt_uint("userId"),
            description=f.opt_string("description"),
        )


@dataclass(frozen=True)
class VideoChannelSummary:
    id: int
    name: str
    display_name: str
    url: str
    host: str
    avatars: tuple[ActorImage, ...]

    @classmethod
    def from_json(cls, data: Any) -> VideoChannelSummary:
        f = _Fields(data, cls.__name__)
        return cls(
            id=f.uint("id"),
            name=f.string("name"),
            display_name=f.string("displayName"),
            url=f.string("url"),
            host=f.string("host"),
            avatars=f.objects("avatars", ActorImage.from_json),
        )


@dataclass(frozen=True)
class VideoChannel:
    id: int
    url: str
    name: str
    avatars: tuple[ActorImage, ...]
    host: str
    host_redundancy_allowed: bool | None
    following_count: int
    followers_count: int
    created_at: str
    updated_at: str
    display_name: str
    description: str | None
    support: str | None
    is_local: bool
    banners: tuple[ActorImage, ...]
    owner_account: Account

    @classmethod
    def from_json(cls, data: Any) -> VideoChannel:
        f = _Fields(data, cls.__name__)
        return cls(
            id=f.uint("id"),
            url=f.string("url"),
            name=f.string("name"),
            avatars=f.objects("avatars", ActorImage.from_json),
            host=f.string("host"),
            host_redundancy_allowed=f.opt_boolean("hostRedundancyAllowed"),
            following_count=f.uint("followingCount"),
            followers_count=f.uint("followersCount"),
            created_at=f.string("createdAt"),
            updated_at=f.string("updatedAt"),
            display_name=f.string("displayName"),
            description=f.opt_string("description"),
            support=f.opt_string("support"),
            is_local=f.boolean("isLocal"),
            banners=f.objects("banners", ActorImage.from_json),
            owner_account=f.obj("ownerAccount", Account.from_json),
        )


@dataclass(frozen=True)
class VideoFile:
    file_url: str

    @classmethod
    def from_json(cls, data: Any) -> VideoFile:
        return cls(file_url=_Fields(data, cls.__name__).string("fileUrl"))


@dataclass(frozen=True)
class VideoStreamingPlaylist:
    playlist_url: str

    @classmethod
    def from_json(cls, data: Any) -> VideoStreamingPlaylist:
        return cls(playlist_url=_Fields(data, cls.__name__).string("playlistUrl"))


def _common_video_fields(f: _Fields) -> dict[str, Any]:
    return {
        "id": f.uint("id"),
        "uuid": f.string("uuid"),
        "short_uuid": f.string("shortUUID"),
        "is_live": f.boolean("isLive"),
        "created_at": f.string("createdAt"),
        "updated_at": f.string("updatedAt"),
        "published_at": f.string("publishedAt"),
        "originally_published_at": f.opt_string("originallyPublishedAt"),
        "truncated_description": f.opt_string("truncatedDescription"),
        "duration": f.uint("duration"),
        "aspect_ratio": f.opt_float("aspectRatio"),
        "is_local": f.boolean("isLocal"),
        "name": f.string("name"),
        "thumbnail_path": f.string("thumbnailPath"),
        "preview_path": f.string("previewPath"),
        "embed_path": f.string("embedPath"),
        "views": f.uint("views"),
        "likes": f.uint("likes"),
        "dislikes": f.uint("dislikes"),
        "comments": f.uint("comments"),
        "nsfw": f.boolean("nsfw"),
        "nsfw_flags": f.uint("nsfwFlags"),
        "nsfw_summary": f.opt_string("nsfwSummary"),
        "wait_transcoding": f.opt_boolean("waitTranscoding"),
        "blacklisted": f.opt_boolean("blacklisted"),
        "blacklisted_reason": f.opt_string("blacklistedReason"),
    }


def _publish_timestamp(originally_published_at: str | None, published_at: str) -> str:
    if originally_published_at is not None:
        return originally_published_at
    return published_at


@dataclass(frozen=True)
class Video:
    id: int
    uuid: str
    short_uuid: str
    is_live: bool
    created_at: str
    updated_at: str
    published_at: str
    originally_published_at: str | None
    truncated_description: str | None
    duration: int
    aspect_ratio: float | None
    is_local: bool
    name: str
    thumbnail_path: str
    preview_path: str
    embed_path: str
    views: int
    likes: int
    dislikes: int
    comments: int
    nsfw: bool
    nsfw_flags: int
    nsfw_summary: str | None
    wait_transcoding: bool | None
    blacklisted: bool | None
    blacklisted_reason: str | None
    account: AccountSummary
    channel: VideoChannelSummary

    @classmethod
    def from_json(cls, data: Any) -> Video:
        f = _Fields(data, cls.__name__)
        return cls(
            **_common_video_fields(f),
            account=f.obj("account", AccountSummary.from_json),
            channel=f.obj("channel", VideoChannelSummary.from_json),
        )

    def publish_timestamp(self) -> str:
        """The original publication date if known, else the upload publication date."""
        return _publish_timestamp(self.originally_published_at, self.published_at)


@dataclass(frozen=True)
class VideoDetails:
    id: int
    uuid: str
    short_uuid: str
    is_live: bool
    created_at: str
    updated_at: str
    published_at: str
    originally_published_at: str | None
    truncated_description: str | None
    duration: int
    aspect_ratio: float | None
    is_local: bool
    name: str
    thumbnail_path: str
    preview_path: str
    embed_path: str
    views: int
    likes: int
    dislikes: int
    comments: int
    nsfw: bool
    nsfw_flags: int
    nsfw_summary: str | None
    wait_transcoding: bool | None
    blacklisted: bool | None
    blacklisted_reason: str | None
    account: Account
    channel: VideoChannel
    viewers: int
    description: str | None
    support: str | None
    tags: tuple[str, ...]
    download_enabled: bool
    input_file_updated_at: str | None
    tracker_urls: tuple[str, ...]
    streaming_playlists: tuple[VideoStreamingPlaylist, ...] | None
    files: tuple[VideoFile, ...] | None

    @classmethod
    def from_json(cls, data: Any) -> VideoDetails:
        f = _Fields(data, cls.__name__)
        return cls(
            **_common_video_fields(f),
            account=f.obj("account", Account.from_json),
            channel=f.obj("channel", VideoChannel.from_json),
            viewers=f.uint("viewers"),
            description=f.opt_string("description"),
            support=f.opt_string("support"),
            tags=f.strings("tags"),
            download_enabled=f.boolean("downloadEnabled"),
            input_file_updated_at=f.opt_string("input_file_updated_at"),
            tracker_urls=f.strings("trackerUrls"),
            streaming_playlists=f.opt_objects(
                "streamingPlaylists", VideoStreamingPlaylist.from_json
            ),
            files=f.opt_objects("files", VideoFile.from_json),
        )

    def publish_timestamp(self) -> str:
        """The original publication date if known, else the upload publication date."""
        return _publish_timestamp(self.originally_published_at, self.published_at)

    def playback_url(self) -> str:
        """URL to play: the first streaming playlist, else the first plain file."""
        if self.streaming_playlists:
            return self.streaming_playlists[0].playlist_url
        if not self.files:
            raise ValueError(f"video {self.id} has no playable source")
        return self.files[0].file_url


@dataclass(frozen=True)
class Videos:
    data: tuple[Video, ...]
    total: int

    @classmethod
    def from_json(cls, data: Any) -> Videos:
        f = _Fields(data, cls.__name__)
        return cls(data=f.objects("data", Video.from_json), total=f.uint("total"))


@dataclass(frozen=True)
class Instance:
    default_client_route: str
    default_nsfw_policy: str
    is_nsfw: bool
    name: str
    server_country: str
    short_description: str

    @classmethod
    def from_json(cls, data: Any) -> Instance:
        f = _Fields(data, cls.__name__)
        return cls(
            default_client_route=f.string("defaultClientRoute"),
            default_nsfw_policy=f.string("defaultNSFWPolicy"),
            is_nsfw=f.boolean("isNSFW"),
            name=f.string("name"),
            server_country=f.string("serverCountry"),
            short_description=f.string("shortDescription"),
        )


@dataclass(frozen=True)
class Config:
    instance: Instance

    @classmethod
    def from_json(cls, data: Any) -> Config:
        return cls(instance=_Fields(data, cls.__name__).obj("instance", Instance.from_json))


def _fetch(api: Api, path: str, parser: Callable[[Any], T]) -> T:
    data = api.get(path)
    try:
        return parser(data)
    except ValueError as exc:
        raise ParseFailed(f"{api.base_url}{path}") from exc


def fetch_config(api: Api) -> Config:
    """Fetch the instance configuration."""
    return _fetch(api, "/api/v1/config", Config.from_json)


def fetch_video_details(api: Api, video_id: int) -> VideoDetails:
    """Fetch the full details of one video."""
    return _fetch(api, f"/api/v1/videos/{video_id}", VideoDetails.from_json)


def fetch_videos(api: Api) -> Videos:
    """Fetch the instance's default video listing."""
    return _fetch(api, "/api/v1/videos", Videos.from_json)


def fetch_video_channel(api: Api, channel_handle: str) -> VideoChannel:
    """Fetch one video channel by its handle."""
    return _fetch(api, f"/api/v1/video-channels/{channel_handle}", VideoChannel.from_json)