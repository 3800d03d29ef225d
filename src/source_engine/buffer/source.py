"""Line-oriented text buffer that every scanner operates on."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Sequence, Union

from source_engine.errors import UnreadableSourceError
from source_engine.runtime import telemetry

from .chars import char_at, is_identifier_char

PathLike = Union[str, Path]


@dataclass(slots=True)
class Source:
    """Ordered list of lines, none of which contains a line terminator.

    The buffer is immutable by convention: normalization builds a new
    ``Source``. ``splice`` exists for callers that rewrite matches while
    iterating over them and need the scan to observe their edits.
    """

    lines: List[str] = field(default_factory=list)
    version: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        self.lines = list(self.lines)
        for index, line in enumerate(self.lines):
            if "\n" in line:
                raise ValueError(f"Line {index} contains a line terminator")

    @classmethod
    def from_text(cls, text: str) -> "Source":
        """Split ``text`` on ``\\n`` into a buffer.

        ``from_text(source.to_text())`` gives back the same lines for every
        buffer except ``Source([""])``, which serializes to ``""`` exactly
        like the empty buffer and therefore reads back as empty.
        """

        if not text:
            return cls()
        return cls(lines=text.split("\n"))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Source":
        return cls(lines=list(lines))

    @classmethod
    def from_stream(cls, stream: IO[str]) -> "Source":
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise UnreadableSourceError(f"Stream could not be read: {exc}") from exc
        return cls.from_text(text)

    @classmethod
    def from_file(cls, path: PathLike, *, encoding: str = "utf-8") -> "Source":
        try:
            text = Path(path).read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise UnreadableSourceError(
                f"File could not be opened: {path}", path=str(path)
            ) from exc
        telemetry.record_event(
            "source.loaded", level="debug", data={"path": str(path)}
        )
        return cls.from_text(text)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, index: int) -> str:
        return self.lines[index]

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing the backing list."""

        return tuple(self.lines)

    def replace(self, lines: Iterable[str]) -> "Source":
        """Return a new buffer holding ``lines`` with a bumped version."""

        return Source(lines=list(lines), version=self.version + 1)

    def splice(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        """Replace ``lines[start:end]`` in place."""

        replacement = list(new_lines)
        for line in replacement:
            if "\n" in line:
                raise ValueError("Spliced lines cannot contain line terminators")
        self.lines[start:end] = replacement
        self.version += 1

    def to_text(self, one_line: bool = False) -> str:
        """Serialize the buffer.

        With ``one_line`` the terminators are dropped, and a single space is
        put between two lines only where the join would otherwise fuse two
        identifier characters into one token.
        """

        if not one_line:
            return "\n".join(self.lines)
        parts: List[str] = []
        previous = ""
        for index, line in enumerate(self.lines):
            if index and _joins_identifiers(previous, line):
                parts.append(" ")
            parts.append(line)
            previous = line
        return "".join(parts)

    def to_stream(self, stream: IO[str], one_line: bool = False) -> None:
        stream.write(self.to_text(one_line))

    def to_file(self, path: PathLike, one_line: bool = False) -> None:
        Path(path).write_text(self.to_text(one_line), encoding="utf-8")
        telemetry.record_event("source.saved", data={"path": str(path)})

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


def _joins_identifiers(left: str, right: str) -> bool:
    return is_identifier_char(char_at(left, len(left) - 1)) and is_identifier_char(
        char_at(right, 0)
    )


__all__ = ["Source", "PathLike"]
