# tuuba

A small desktop client for PeerTube instances, together with a typed helper
layer for the parts of the PeerTube REST API it uses.

The window (built with tkinter from the standard library) has:

- a header with a ☰ button that collapses or expands the navigation sidebar,
  and the instance name as its title ("Loading..." until the configuration
  has arrived);
- a navigation sidebar with the sections Home / Subscriptions, Profile /
  Playlists / History / Watch later / Liked videos, Chatrooms / Channels /
  Videos / Upload, and Settings / Instance info;
- a video page with a player area, the video title, a "N views ⚫ date" line,
  a like/dislike bar, the channel name, "by <account>" and the description;
- a list of the instance's videos on the right; selecting an entry opens
  that video.

## Running

    tuuba [--instance URL] [--video ID] [--width W] [--height H]

- `--instance` — base URL of the instance (a trailing `/` is removed).
- `--video` — id of the video opened at start; must be non-negative.
- `--width`, `--height` — initial window size, default 1200x800; the window
  cannot be smaller than 300x220.

Data is fetched in background threads. Until it arrives the page shows
placeholders ("Loading...", "???", "loading"). Fetch errors are printed to
standard output and the placeholders stay in place.

## What it does not do

- It does not decode or display video. The player area is a black 16:9
  rectangle that shows a frame counter advancing with the playback clock, or
  "loading" when no playback is set up.
- There is no home feed: "Home" closes the video page and leaves the central
  area empty. The other navigation buttons do nothing.
- The Like, Dislike and Subscribe controls are display only; there is no
  login and nothing is ever sent to the instance.

## Using the API layer

```python
import requests

from tuuba.api import Api
from tuuba.errors import ApiError
from tuuba.models import fetch_config, fetch_video_details, fetch_videos

api = Api("https://videos.example.com", requests.Session())

try:
    config = fetch_config(api)
    videos = fetch_videos(api)
    details = fetch_video_details(api, 42)
except ApiError as error:
    print(error)
else:
    print(config.instance.name, videos.total)
    print(details.publish_timestamp())
    print(details.playback_url())
```

`Api(base_url, session=None)` creates its own `requests.Session` when none is
given. `Api.get(path)` requests `base_url + path` and returns the decoded
JSON. `tuuba.models` also offers `fetch_video_channel(api, channel_handle)`.

The models (`Config`, `Instance`, `Videos`, `Video`, `VideoDetails`,
`VideoChannel`, `VideoChannelSummary`, `Account`, `AccountSummary`,
`ActorImage`, `VideoFile`, `VideoStreamingPlaylist`) are frozen dataclasses
with snake_case fields, each built by `from_json(data)`, which raises
`ValueError` on a missing or mistyped field.

Failures of the fetch functions are raised as subclasses of
`tuuba.errors.ApiError`:

- `RequestFailed` — the HTTP request itself failed.
- `ParseFailed` — the body was not JSON, or not the expected shape.
- `InvalidUrl` — the base URL and path do not form an absolute URL.

`VideoDetails.playback_url()` prefers the first streaming playlist, falls back
to the first plain file, and raises `ValueError` when there is neither.
`publish_timestamp()` returns the original publication date when one is set,
and the instance's publication date otherwise.

## Other modules

- `tuuba.client` — `Client` holds the application state (instance config,
  open `VideoPage`, playback, `GuiState`) and applies `ClientCommand`s;
  `Slot` is a lock-guarded optional value shared with the fetch threads.
- `tuuba.playback` — `VideoPlaybackData` (playback clock and frame count),
  `fit_video_size` and `centered_offset` for the player geometry.
- `tuuba.widgets` — what the panels show: `vote_ratio`, `views_line`,
  `nav_sections`, `sidebar_width`, `header_title`, `VideoListEntry`,
  `video_list_entries` and `VideoPageInfo`.
- `tuuba.style` — `Color`, `ColorScheme`, `Visuals`, `apply_style` and
  `page_fill`.
- `tuuba.app` — `TuubaApp`, `parse_args` and the `main` entry point.

## Tests

The test suite uses pytest and responses, available through the `test` extra:

    pip install -e ".[test]"
    pytest