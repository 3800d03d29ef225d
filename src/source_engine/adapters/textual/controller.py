"""UI-agnostic controller behind the Textual comparison viewer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from source_engine.buffer import PathLike, Source
from source_engine.compare import mismatches
from source_engine.errors import UnreadableSourceError
from source_engine.transform import clean_all


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class ComparisonView:
    """Everything the host needs to render one comparison."""

    first_name: str
    second_name: str
    first_text: str
    second_text: str
    mismatches: int
    normalised: bool


@dataclass(slots=True)
class ComparisonHooks:
    """Callbacks invoked by the controller to update host widgets."""

    update_panes: Callable[[ComparisonView], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class ComparisonController:
    """Loads two buffers, normalizes them and reports how far apart they are."""

    def __init__(
        self,
        hooks: ComparisonHooks,
        *,
        window_size: Optional[int] = None,
        normalised: bool = True,
    ) -> None:
        self.hooks = hooks
        self.window_size = window_size
        self.normalised = normalised
        self._sources: Optional[tuple[Source, Source]] = None
        self._names = ("first", "second")
        self._paths: Optional[tuple[PathLike, PathLike]] = None

    def load_files(self, first: PathLike, second: PathLike) -> ComparisonView:
        self._log("load ->", first=str(first), second=str(second))
        try:
            sources = (Source.from_file(first), Source.from_file(second))
        except UnreadableSourceError as exc:
            self.hooks.update_status(f"error: {exc}")
            raise
        self._paths = (first, second)
        return self.load_sources(
            *sources, first_name=str(first), second_name=str(second)
        )

    def load_sources(
        self,
        first: Source,
        second: Source,
        *,
        first_name: str = "first",
        second_name: str = "second",
    ) -> ComparisonView:
        self._sources = (first, second)
        self._names = (first_name, second_name)
        return self._render()

    def reload(self) -> Optional[ComparisonView]:
        if self._paths is None:
            return self.refresh()
        return self.load_files(*self._paths)

    def toggle_normalised(self) -> Optional[ComparisonView]:
        self.normalised = not self.normalised
        return self.refresh()

    def refresh(self) -> Optional[ComparisonView]:
        if self._sources is None:
            return None
        return self._render()

    def _render(self) -> ComparisonView:
        assert self._sources is not None
        first, second = self._sources
        cleaned_first, cleaned_second = clean_all(first), clean_all(second)
        count = mismatches(
            cleaned_first, cleaned_second, self.window_size, report=False
        )
        shown = (cleaned_first, cleaned_second) if self.normalised else (first, second)
        view = ComparisonView(
            first_name=self._names[0],
            second_name=self._names[1],
            first_text=shown[0].to_text(),
            second_text=shown[1].to_text(),
            mismatches=count,
            normalised=self.normalised,
        )
        self.hooks.update_panes(view)
        mode = "normalised" if self.normalised else "raw"
        self.hooks.update_status(f"{count} mismatch(es) [{mode}]")
        self._log("result <-", mismatches=count, mode=mode)
        return view

    def _log(self, prefix: str, **fields: object) -> None:
        details: Dict[str, object] = {k: v for k, v in fields.items() if v is not None}
        parts = [prefix] + [f"{key}={value!r}" for key, value in details.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["ComparisonController", "ComparisonHooks", "ComparisonView"]
