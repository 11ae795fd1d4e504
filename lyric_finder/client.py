from __future__ import annotations

import asyncio
import logging

import requests
from requests.adapters import HTTPAdapter

from .errors import DecodeError, TransportError
from .model import LyricsDocument, fold_lines
from .types import Found, LyricOutcome, NotFound

logger = logging.getLogger(__name__)

BASE_URL = "https://api.lyricstify.vercel.app/v1/lyrics"

# Worker threads that may hold a pooled connection at once (urllib3 default is 10)
POOL_SIZE = 32


def _new_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=4, pool_maxsize=POOL_SIZE)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class LyricClient:
    """
    Looks up lyrics on the lyricstify service.

    The client holds a single requests.Session, either its own or one shared
    by the caller. Lookups are independent of each other, so one client can
    serve many concurrent tasks: each lookup() runs session.get() in the
    default thread pool, and only the session's connection pool is shared
    between threads. Sessions created here get a pool of POOL_SIZE
    connections; a session passed to create_from() keeps whatever adapters
    the caller mounted, and the caller must not mutate it (headers, cookies,
    adapters) while lookups are in flight.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        base_url: str = BASE_URL,
        timeout: float | None = None,
    ):
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be positive or None, got {timeout!r}")
        self._owns_session = session is None
        self.session = session if session is not None else _new_session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def create(cls, *, base_url: str = BASE_URL, timeout: float | None = None) -> LyricClient:
        return cls(base_url=base_url, timeout=timeout)

    @classmethod
    def create_from(
        cls,
        session: requests.Session,
        *,
        base_url: str = BASE_URL,
        timeout: float | None = None,
    ) -> LyricClient:
        """Reuse an existing session (and its connection pool) instead of opening a new one."""
        return cls(session, base_url=base_url, timeout=timeout)

    def url_for(self, query: str) -> str:
        return f"{self.base_url}/{requests.utils.quote(query, safe='')}"

    async def lookup(self, query: str) -> LyricOutcome:
        return await asyncio.to_thread(self.fetch, query)

    def fetch(self, query: str) -> LyricOutcome:
        """Blocking variant of lookup()."""
        url = self.url_for(query)
        logger.debug("fetching for %s", query)

        try:
            r = self.session.get(url, timeout=self.timeout)
            if r.status_code == 404:
                return NotFound()
            r.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"request for '{query}' failed: {e}") from e

        try:
            data = r.json()
        except ValueError as e:
            raise DecodeError(f"response for '{query}' is not valid JSON: {e}") from e

        doc = LyricsDocument.from_json(data)
        return Found(lyric=fold_lines(doc.lyrics.lines))

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> LyricClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
