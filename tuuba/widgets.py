"""What the panels, pages and widgets of the interface display."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tuuba.client import DEFAULT_INSTANCE
from tuuba.models import Config, Video, VideoDetails, Videos

SIDEBAR_WIDTH = 256.0
SIDEBAR_WIDTH_COLLAPSED = 64.0
HEADER_HEIGHT = 64.0
NAV_BUTTON_HEIGHT = 32.0
NAV_BUTTON_TEXT_SIZE = 18.0
LIST_MIN_WIDTH = 400.0
LIST_ROW_HEIGHT = 96.0
LIST_THUMBNAIL_WIDTH = LIST_ROW_HEIGHT * 16.0 / 9.0
LIST_TITLE_MAX_ROWS = 2
AVATAR_SIZE = 48.0
VOTE_BAR_WIDTH = 192.0
VOTE_BAR_HEIGHT = 4.0
TITLE_SIZE = 28.0

LOADING_TEXT = "loading"
LOADING_TITLE = "Loading..."
UNKNOWN = "???"

_NAV_SECTIONS: tuple[tuple[str, ...], ...] = (
    ("Home", "Subscriptions"),
    ("Profile", "Playlists", "History", "Watch later", "Liked videos"),
    ("Chatrooms", "Channels", "Videos", "Upload"),
    ("Settings", "Instance info"),
)


def vote_ratio(upvotes: int, downvotes: int) -> float:
    """Share of upvotes among all votes; 0.5 when there are none."""
    if upvotes < 0 or downvotes < 0:
        raise ValueError(f"vote counts must be non-negative: {upvotes}, {downvotes}")
    total = upvotes + downvotes
    if total == 0:
        return 0.5
    return upvotes / total


def views_line(views: int, timestamp: str) -> str:
    """The "N views ⚫ date" line shown under a video title."""
    return f"{views} views ⚫ {timestamp}"


def nav_sections() -> tuple[tuple[str, ...], ...]:
    """Labels of the navigation buttons, grouped by the separators between them."""
    return _NAV_SECTIONS


def sidebar_width(expanded: bool) -> float:
    """Width of the navigation sidebar in its expanded or collapsed form."""
    return SIDEBAR_WIDTH if expanded else SIDEBAR_WIDTH_COLLAPSED


def header_title(config: Config | None) -> str:
    """Heading of the site header: the instance name once the config is loaded."""
    if config is None:
        return LOADING_TITLE
    return config.instance.name


@dataclass(frozen=True)
class VideoListEntry:
    """One row of the video listing beside the player."""

    id: int
    name: str
    channel_name: str
    views: int
    timestamp: str
    thumbnail_url: str

    @classmethod
    def from_video(cls, video: Video, base_url: str = DEFAULT_INSTANCE) -> VideoListEntry:
        return cls(
            id=video.id,
            name=video.name,
            channel_name=video.channel.display_name,
            views=video.views,
            timestamp=video.publish_timestamp(),
            thumbnail_url=base_url + video.thumbnail_path,
        )

    @property
    def info_line(self) -> str:
        return views_line(self.views, self.timestamp)


def video_list_entries(
    videos: Videos | Iterable[Video], base_url: str = DEFAULT_INSTANCE
) -> list[VideoListEntry]:
    """Rows for every video of a listing, in listing order."""
    items = videos.data if isinstance(videos, Videos) else videos
    return [VideoListEntry.from_video(video, base_url) for video in items]


@dataclass(frozen=True)
class VideoPageInfo:
    """Text and images shown on the page of one video."""

    name: str
    description: str | None
    views: int
    likes: int
    dislikes: int
    timestamp: str
    account_name: str
    channel_name: str
    channel_avatar: str | None

    @classmethod
    def loading(cls) -> VideoPageInfo:
        """Placeholder shown while the video details are being fetched."""
        return cls(
            name=LOADING_TITLE,
            description=None,
            views=0,
            likes=0,
            dislikes=0,
            timestamp=UNKNOWN,
            account_name=UNKNOWN,
            channel_name=UNKNOWN,
            channel_avatar=None,
        )

    @classmethod
    def from_details(
        cls, details: VideoDetails, base_url: str = DEFAULT_INSTANCE
    ) -> VideoPageInfo:
        avatars = details.channel.avatars
        return cls(
            name=details.name,
            description=details.description,
            views=details.views,
            likes=details.likes,
            dislikes=details.dislikes,
            timestamp=details.publish_timestamp(),
            account_name=details.account.display_name,
            channel_name=details.channel.display_name,
            channel_avatar=base_url + avatars[0].path if avatars else None,
        )

    @property
    def info_line(self) -> str:
        return views_line(self.views, self.timestamp)

    @property
    def byline(self) -> str:
        return f"by {self.account_name}"

    @property
    def vote_ratio(self) -> float:
        return vote_ratio(self.likes, self.dislikes)