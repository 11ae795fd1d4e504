"""
Fetch plain-text lyrics from the lyricstify service.

    client = LyricClient.create()
    outcome = await client.lookup("shape of you")
    if isinstance(outcome, Found):
        print(outcome.lyric)
"""

from .client import BASE_URL, LyricClient
from .errors import DecodeError, LyricFinderError, TransportError
from .types import Found, LyricOutcome, NotFound

__all__ = [
    "BASE_URL",
    "DecodeError",
    "Found",
    "LyricClient",
    "LyricFinderError",
    "LyricOutcome",
    "NotFound",
    "TransportError",
]
