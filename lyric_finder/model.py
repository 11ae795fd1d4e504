from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .errors import DecodeError


@dataclass(frozen=True, slots=True)
class Line:
    start_time_ms: int
    words: str


@dataclass(frozen=True, slots=True)
class Lyrics:
    sync_type: str
    lines: tuple[Line, ...]
    language: str


@dataclass(frozen=True, slots=True)
class LyricsDocument:
    lyrics: Lyrics

    @classmethod
    def from_json(cls, data: Any) -> LyricsDocument:
        """
        Decode the service payload. Extra fields are ignored; missing or
        mistyped required fields raise DecodeError.
        """
        root = _require_mapping(data, "document")
        raw_lyrics = _require_mapping(_field(root, "lyrics", "document"), "lyrics")

        raw_lines = _field(raw_lyrics, "lines", "lyrics")
        if not isinstance(raw_lines, list):
            raise DecodeError(f"lyrics.lines: expected array, got {type(raw_lines).__name__}")

        lines = tuple(_decode_line(item, i) for i, item in enumerate(raw_lines))
        return cls(
            lyrics=Lyrics(
                sync_type=_require_str(_field(raw_lyrics, "syncType", "lyrics"), "lyrics.syncType"),
                lines=lines,
                language=_require_str(_field(raw_lyrics, "language", "lyrics"), "lyrics.language"),
            )
        )


def fold_lines(lines: Iterable[Line]) -> str:
    return "".join(f"{line.words}\n" for line in lines)


def _decode_line(item: Any, index: int) -> Line:
    where = f"lyrics.lines[{index}]"
    obj = _require_mapping(item, where)

    start = _field(obj, "startTimeMs", where)
    # bool is an int subclass, reject it explicitly
    if isinstance(start, bool) or not isinstance(start, int) or start < 0:
        raise DecodeError(f"{where}.startTimeMs: expected non-negative integer, got {start!r}")

    return Line(start_time_ms=start, words=_require_str(_field(obj, "words", where), f"{where}.words"))


def _field(obj: dict[str, Any], key: str, where: str) -> Any:
    try:
        return obj[key]
    except KeyError:
        raise DecodeError(f"{where}: missing field '{key}'") from None


def _require_mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{where}: expected object, got {type(value).__name__}")
    return value


def _require_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"{where}: expected string, got {type(value).__name__}")
    return value
