"""Textual TUI for browsing discovered packages and linking compile_commands.json."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import DataTable, Footer, Header, Input, Static
from textual.worker import Worker, WorkerState

from rosls.api import list_packages
from rosls.core.finder import DiscoveredEntry
from rosls.core.symlinks import provision_symlink, LinkStatus
from rosls.core.paths import resolve_build_base
from rosls.exceptions import RoslsError

COLUMNS = ("Name", "Build type", "Path")

COLOR_HEADER = "bold magenta"
COLOR_STATS = "cyan"

_SEVERITY = {
    LinkStatus.CREATED: "information",
    LinkStatus.SKIPPED: "warning",
    LinkStatus.FAILED: "error",
}


def _filter_entries(entries: list[DiscoveredEntry], query: str) -> list[DiscoveredEntry]:
    """Entries whose name or path contains query (case-insensitive)."""
    query = query.strip().lower()
    if not query:
        return list(entries)
    return [e for e in entries if query in e.name.lower() or query in str(e.path).lower()]


def _row_for(entry: DiscoveredEntry) -> tuple[str, str, str]:
    return (entry.name, entry.build_type, str(entry.path))


class FilterScreen(ModalScreen[str | None]):
    """Modal to filter the package table. Enter applies, Escape cancels, empty clears."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    DEFAULT_CSS = """
    FilterScreen {
        align: center middle;
        padding: 2 4;
    }
    FilterScreen #filter_title {
        text-align: center;
        padding-bottom: 1;
    }
    FilterScreen #filter_input {
        width: 60;
        margin: 1 0;
    }
    """

    def __init__(self, current: str = "", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._current = current

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(
                "[bold cyan]Filter[/]\n\nPart of a package name or path. Leave empty to show all.",
                id="filter_title",
                markup=True,
            )
            yield Input(value=self._current, placeholder="package name or path...", id="filter_input")

    def on_mount(self) -> None:
        self.query_one("#filter_input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "filter_input":
            return
        self.dismiss(event.value.strip())

    def action_cancel(self) -> None:
        self.dismiss(None)


class PackageBrowserApp(App[None]):
    """Terminal UI listing workspace packages."""

    TITLE = "rosls"
    BINDINGS = [
        Binding("/", "filter", "Filter"),
        Binding("l", "link", "Link compile_commands"),
        Binding("F", "toggle_force", "Toggle force"),
        Binding("r", "refresh", "Rescan"),
        Binding("q", "quit", "Quit"),
    ]

    DEFAULT_CSS = """
    #status {
        padding: 0 1;
        height: auto;
    }
    #packages {
        height: 1fr;
    }
    """

    def __init__(
        self,
        paths: list[Path] | None = None,
        base_paths: list[Path] | None = None,
        build_base: Path = Path("build"),
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._paths = paths or []
        self._base_paths = base_paths or []
        self._build_base = build_base
        self._entries: list[DiscoveredEntry] = []
        self._visible: list[DiscoveredEntry] = []
        self._query = ""
        self._force = False
        self._scanning = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield Static("[dim]Scanning for packages...[/]", id="status", markup=True)
        yield DataTable(id="packages", cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Package browser"
        table = self.query_one("#packages", DataTable)
        table.add_columns(*COLUMNS)
        table.focus()
        self._start_scan()

    def _start_scan(self) -> None:
        if self._scanning:
            return
        self._scanning = True
        self._set_status("[dim]Scanning for packages...[/]")
        self.run_worker(self._scan_worker, thread=True)

    def _scan_worker(self) -> list[DiscoveredEntry]:
        """Worker that runs discovery in a background thread."""
        return list_packages(self._paths or None, self._base_paths or None)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Handle scan completion."""
        if event.state == WorkerState.SUCCESS:
            self._scanning = False
            self._entries = event.worker.result or []
            self._show_entries()
        elif event.state == WorkerState.ERROR:
            self._scanning = False
            self._set_status(f"[red]Error: {event.worker.error}[/]")

    def _set_status(self, text: str) -> None:
        self.query_one("#status", Static).update(text)

    def _show_entries(self) -> None:
        table = self.query_one("#packages", DataTable)
        table.clear()
        self._visible = _filter_entries(self._entries, self._query)
        for entry in self._visible:
            table.add_row(*_row_for(entry))
        shown = f"[{COLOR_STATS}]{len(self._visible)}[/] of [{COLOR_STATS}]{len(self._entries)}[/]"
        filt = f"  ·  filter: [bold]{self._query}[/]" if self._query else ""
        force = "  ·  [bold red]force[/]" if self._force else ""
        self._set_status(
            f"[{COLOR_HEADER}]Packages[/] {shown}{filt}{force}  ·  build base: [dim]{self._build_base}[/]"
        )

    def _highlighted_entry(self) -> DiscoveredEntry | None:
        table = self.query_one("#packages", DataTable)
        row = table.cursor_row
        if row is None or not 0 <= row < len(self._visible):
            return None
        return self._visible[row]

    def action_filter(self) -> None:
        def _apply(query: str | None) -> None:
            if query is None:
                return
            self._query = query
            self._show_entries()

        self.push_screen(FilterScreen(current=self._query), _apply)

    def action_toggle_force(self) -> None:
        self._force = not self._force
        self._show_entries()

    def action_refresh(self) -> None:
        self._start_scan()

    def action_link(self) -> None:
        entry = self._highlighted_entry()
        if entry is None:
            self.notify("No package selected", severity="warning", timeout=3)
            return
        try:
            build_base = resolve_build_base(self._build_base)
        except RoslsError as e:
            self.notify(str(e), severity="error", timeout=5)
            return
        messages: list[str] = []
        status = provision_symlink(entry, build_base, force=self._force, echo=messages.append)
        self.notify("\n".join(messages) or status.value, severity=_SEVERITY[status], timeout=5)
