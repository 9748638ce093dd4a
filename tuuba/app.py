"""Desktop window of the PeerTube client and its command-line entry point."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any

from tuuba.api import Api
from tuuba.client import DEFAULT_INSTANCE, DEFAULT_VIDEO, Client, ClientCommand
from tuuba.playback import centered_offset, fit_video_size
from tuuba.style import BLACK, Visuals, apply_style, page_fill
from tuuba.widgets import (
    HEADER_HEIGHT,
    LIST_MIN_WIDTH,
    LOADING_TEXT,
    TITLE_SIZE,
    VOTE_BAR_WIDTH,
    VideoListEntry,
    VideoPageInfo,
    header_title,
    nav_sections,
    sidebar_width,
    video_list_entries,
)

WINDOW_TITLE = "Tuuba"
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800
MIN_WIDTH = 300
MIN_HEIGHT = 220
REPAINT_MS = 16


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line of the viewer."""
    parser = argparse.ArgumentParser(prog="tuuba", description="Watch videos from a PeerTube instance.")
    parser.add_argument("--instance", default=DEFAULT_INSTANCE, help="base URL of the instance")
    parser.add_argument("--video", type=int, default=DEFAULT_VIDEO, help="id of the video to open")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="initial window width")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="initial window height")
    args = parser.parse_args(argv)
    if args.video < 0:
        parser.error(f"video id must be non-negative: {args.video}")
    if args.width < MIN_WIDTH or args.height < MIN_HEIGHT:
        parser.error(f"window must be at least {MIN_WIDTH}x{MIN_HEIGHT}")
    args.instance = args.instance.rstrip("/")
    return args


@dataclass(frozen=True)
class _Screen:
    """Everything one refresh of the window shows."""

    title: str
    sidebar_expanded: bool
    sidebar_width: float
    page_id: int | None
    page: VideoPageInfo | None
    entries: tuple[VideoListEntry, ...] | None
    playing: bool
    frame: int


class _TkView:
    """The widgets of the window, updated from one screen at a time."""

    def __init__(self, root: Any, app: TuubaApp) -> None:
        import tkinter as tk
        from tkinter import ttk

        self._tk = tk
        self._app = app
        visuals = apply_style(Visuals())
        panel = visuals.panel_fill.to_hex()
        page_bg = page_fill().to_hex()
        root.configure(bg=panel)

        header = tk.Frame(root, height=int(HEADER_HEIGHT), bg=panel)
        header.pack(side=tk.TOP, fill=tk.X)
        header.pack_propagate(False)
        tk.Button(header, text="☰", command=app.client.gui_state.toggle_sidebar_expand).pack(side=tk.LEFT)
        self._title = tk.Label(header, font=("TkDefaultFont", 18, "bold"), bg=panel, fg="white")
        self._title.pack(side=tk.LEFT, padx=8)

        self._sidebar = tk.Frame(root, bg=panel)
        self._sidebar.pack(side=tk.LEFT, fill=tk.Y)
        self._sidebar.pack_propagate(False)
        for index, section in enumerate(nav_sections()):
            if index:
                ttk.Separator(self._sidebar, orient=tk.HORIZONTAL).pack(fill=tk.X, pady=4)
            for label in section:
                command = self._close_page if label == "Home" else None
                tk.Button(self._sidebar, text=label, anchor="w", relief=tk.FLAT, command=command).pack(fill=tk.X)

        self._central = tk.Frame(root, bg=page_bg)
        self._central.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self._list = tk.Listbox(self._central, width=int(LIST_MIN_WIDTH // 8), activestyle="none")
        self._list.bind("<<ListboxSelect>>", self._on_select)
        self._entry_ids: list[int] = []
        self._shown_entries: tuple[VideoListEntry, ...] | None = None

        self._main = tk.Frame(self._central, bg=page_bg)
        self._canvas = tk.Canvas(self._main, bg=page_bg, highlightthickness=0, height=360)
        self._canvas.pack(fill=tk.X)
        self._name = tk.Label(self._main, font=("TkDefaultFont", int(TITLE_SIZE), "bold"), bg=page_bg, fg="white", anchor="w")
        self._name.pack(fill=tk.X, pady=8)
        self._info = tk.Label(self._main, bg=page_bg, fg="gray", anchor="w")
        self._info.pack(fill=tk.X)
        self._votes = ttk.Progressbar(self._main, maximum=1.0, length=int(VOTE_BAR_WIDTH))
        self._votes.pack(anchor="e")
        ttk.Separator(self._main, orient=tk.HORIZONTAL).pack(fill=tk.X, pady=4)
        self._channel = tk.Label(self._main, bg=page_bg, fg="white", anchor="w")
        self._channel.pack(fill=tk.X)
        self._byline = tk.Label(self._main, bg=page_bg, fg="gray", anchor="w")
        self._byline.pack(fill=tk.X)
        self._description = tk.Label(self._main, bg=page_bg, fg="white", anchor="w", justify=tk.LEFT, wraplength=600)
        self._description.pack(fill=tk.X)
        self._page_visible = False

    def _close_page(self) -> None:
        self._app.command = ClientCommand.close_page()

    def _on_select(self, _event: Any) -> None:
        selection = self._list.curselection()
        if selection:
            self._app.command = ClientCommand.open_video(self._entry_ids[selection[0]])

    def _set_page_visible(self, visible: bool) -> None:
        if visible == self._page_visible:
            return
        tk = self._tk
        if visible:
            self._list.pack(side=tk.RIGHT, fill=tk.Y)
            self._main.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        else:
            self._list.pack_forget()
            self._main.pack_forget()
        self._page_visible = visible

    def _show_entries(self, entries: tuple[VideoListEntry, ...] | None) -> None:
        if entries == self._shown_entries:
            return
        self._shown_entries = entries
        self._list.delete(0, self._tk.END)
        if entries is None:
            self._entry_ids = []
            self._list.insert(self._tk.END, LOADING_TEXT)
            return
        self._entry_ids = [entry.id for entry in entries]
        for entry in entries:
            self._list.insert(self._tk.END, f"{entry.name} — {entry.channel_name} — {entry.info_line}")

    def _draw_player(self, screen: _Screen) -> None:
        canvas = self._canvas
        canvas.delete("all")
        avail_w = max(canvas.winfo_width(), 1)
        avail_h = max(canvas.winfo_height(), 1)
        video_w, video_h = fit_video_size(avail_w, avail_h)
        x = centered_offset(avail_w, video_w)
        canvas.create_rectangle(x, 0, x + video_w, video_h, fill=BLACK.to_hex(), outline="")
        text = f"frame {screen.frame}" if screen.playing else LOADING_TEXT
        canvas.create_text(x + video_w / 2, video_h / 2, text=text, fill="white")

    def show(self, screen: _Screen) -> None:
        self._title.configure(text=screen.title)
        self._sidebar.configure(width=int(screen.sidebar_width))
        page = screen.page
        self._set_page_visible(page is not None)
        if page is None:
            return
        self._show_entries(screen.entries)
        self._draw_player(screen)
        self._name.configure(text=page.name)
        self._info.configure(text=page.info_line)
        self._votes.configure(value=page.vote_ratio)
        self._channel.configure(text=page.channel_name)
        self._byline.configure(text=page.byline)
        self._description.configure(text=page.description or "")


class TuubaApp:
    """The viewer window: refreshes what it shows from the client state."""

    def __init__(self, root: Any = None, client: Client | None = None, base_url: str | None = None) -> None:
        self.root = root
        self.client = client if client is not None else Client()
        self.base_url = base_url if base_url is not None else self.client.api.base_url
        self.command = ClientCommand()
        self._view: _TkView | None = None

    def _advance_playback(self) -> None:
        playback = self.client.playback.get()
        if playback is not None and playback.should_advance_frame():
            playback.advance()

    def _screen(self) -> _Screen:
        client = self.client
        expanded = client.gui_state.expand_sidebar
        page = client.page
        info: VideoPageInfo | None = None
        entries: tuple[VideoListEntry, ...] | None = None
        if page is not None:
            details = page.video.get()
            info = VideoPageInfo.loading() if details is None else VideoPageInfo.from_details(details, self.base_url)
            videos = page.videos.get()
            if videos is not None:
                entries = tuple(video_list_entries(videos, self.base_url))
        playback = client.playback.get()
        return _Screen(
            title=header_title(client.instance_config.get()),
            sidebar_expanded=expanded,
            sidebar_width=sidebar_width(expanded),
            page_id=None if page is None else page.id,
            page=info,
            entries=entries,
            playing=playback is not None,
            frame=0 if playback is None else playback.frame,
        )

    def refresh(self) -> _Screen:
        """Handle the pending command, advance playback and redraw; return what is shown."""
        command, self.command = self.command, ClientCommand()
        self.client.handle_command(command)
        self._advance_playback()
        screen = self._screen()
        if self._view is None and self.root is not None:
            self._view = _TkView(self.root, self)
        if self._view is not None:
            self._view.show(screen)
        return screen

    def _tick(self) -> None:
        self.refresh()
        self.root.after(REPAINT_MS, self._tick)

    def run(self) -> None:
        """Open the window and refresh it until it is closed."""
        if self.root is None:
            import tkinter as tk

            self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self._tick()
        self.root.mainloop()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    import tkinter as tk

    root = tk.Tk()
    root.geometry(f"{args.width}x{args.height}")
    root.minsize(MIN_WIDTH, MIN_HEIGHT)
    client = Client(Api(args.instance), initial_video=args.video)
    TuubaApp(root, client, args.instance).run()
    return 0