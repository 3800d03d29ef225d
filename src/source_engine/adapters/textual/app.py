"""Textual app showing two normalized sources side by side."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the viewer is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use source_engine.adapters.textual.app"
    ) from exc

from source_engine.errors import UnreadableSourceError
from source_engine.runtime import telemetry
from source_engine.runtime.config import load_settings

from .controller import ComparisonController, ComparisonHooks, ComparisonView


class SourceCompareApp(App[None]):
    """Two panes plus a status line with the mismatch count."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#panes {
		height: 1fr;
	}

	.pane {
		width: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("n", "toggle_normalised", "Raw/normalised"),
        ("r", "reload", "Reload"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        first: str,
        second: str,
        *,
        window_size: Optional[int] = None,
        normalised: bool = True,
    ) -> None:
        super().__init__()
        self._first_path = first
        self._second_path = second
        self._first_pane: Static | None = None
        self._second_pane: Static | None = None
        self._status: Static | None = None
        self.controller = ComparisonController(
            ComparisonHooks(
                update_panes=self._update_panes,
                update_status=self._update_status,
                log=self._log_line,
            ),
            window_size=window_size,
            normalised=normalised,
        )
        self._logger = telemetry.get_logger("source_engine.viewer")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="panes"):
            self._first_pane = Static("", classes="pane")
            self._second_pane = Static("", classes="pane")
            yield self._first_pane
            yield self._second_pane
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        self._load()

    def action_toggle_normalised(self) -> None:
        self.controller.toggle_normalised()

    def action_reload(self) -> None:
        self._load()

    def _load(self) -> None:
        try:
            self.controller.load_files(self._first_path, self._second_path)
        except UnreadableSourceError:
            # the controller already surfaced the error on the status line
            return

    def _update_panes(self, view: ComparisonView) -> None:
        if self._first_pane:
            self._first_pane.border_title = view.first_name
            self._first_pane.update(view.first_text)
        if self._second_pane:
            self._second_pane.border_title = view.second_name
            self._second_pane.update(view.second_text)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare two source files after normalizing comments and whitespace"
    )
    parser.add_argument("first", help="First file to compare")
    parser.add_argument("second", help="Second file to compare")
    parser.add_argument(
        "--window",
        type=int,
        default=load_settings().resync_window,
        help="Resynchronization window (default: SOURCE_ENGINE_RESYNC_WINDOW or 20)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Start by showing the files as loaded instead of normalized",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = SourceCompareApp(
        args.first,
        args.second,
        window_size=args.window,
        normalised=not args.raw,
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
