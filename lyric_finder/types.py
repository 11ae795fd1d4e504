from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Found:
    lyric: str


@dataclass(frozen=True, slots=True)
class NotFound:
    pass


LyricOutcome = Union[Found, NotFound]
