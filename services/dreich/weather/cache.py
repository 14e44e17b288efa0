"""
Response cache — one file per request URL, fresh for 300 seconds.

Cache key format:  sha1(request_url) as 40 hex chars
File:              {cache_dir}/{key}.json, content is the verbatim response body
Freshness:         file mtime is the only signal; entries older than the
                   window are ignored, never deleted

The request URL is hashed before the API key is appended, so credentials
never end up in file names.

Graceful degradation: read faults are cache misses, write faults are logged.
The cache is an optimisation only; callers always have the network fallback.
"""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Callable

from services.dreich.weather.errors import CacheReadError, CacheWriteError

logger = logging.getLogger(__name__)

FRESHNESS_SECONDS = 300


def cache_key(url: str) -> str:
    """Fixed-width hex digest of the request URL. Filesystem-safe for any URL."""
    return hashlib.sha1(url.encode("utf-8")).hexdigest()


class ResponseCache:
    """
    File-backed cache of raw provider responses.

    Usage:
        cache = ResponseCache(Path("~/.dreich/cache").expanduser())
        body = cache.get(url)
        if body is None:
            body = fetch(url)
            cache.put(url, body)
    """

    def __init__(
        self,
        cache_dir: Path | str,
        freshness_seconds: float = FRESHNESS_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """
        Args:
            cache_dir:         Directory holding one file per cached URL.
            freshness_seconds: Max entry age before it is treated as stale.
            clock:             Returns current Unix time. Injected by tests.
        """
        self._dir = Path(cache_dir)
        self._freshness = freshness_seconds
        self._clock = clock

    @property
    def cache_dir(self) -> Path:
        return self._dir

    def path_for(self, url: str) -> Path:
        return self._dir / f"{cache_key(url)}.json"

    def get(self, url: str) -> bytes | None:
        """Return the cached body for url if present and fresh, else None."""
        path = self.path_for(url)
        try:
            return self._read_fresh(path)
        except CacheReadError as exc:
            logger.warning("Response cache read failed for %s: %s", path.name, exc)
            return None

    def put(self, url: str, body: bytes) -> None:
        """Write or overwrite the entry for url, stamped with the current time."""
        path = self.path_for(url)
        try:
            self._write_atomic(path, body)
            logger.debug("Response cached: %s (%d bytes)", path.name, len(body))
        except CacheWriteError as exc:
            logger.warning("Response cache write failed for %s: %s", path.name, exc)

    def ensure_dir(self) -> bool:
        """Create the cache directory. Returns False (and logs) if that fails."""
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create cache directory %s: %s", self._dir, exc)
            return False
        return True

    # -- internals --------------------------------------------------------

    def _read_fresh(self, path: Path) -> bytes | None:
        try:
            stat = path.stat()
        except FileNotFoundError:
            logger.debug("Response cache miss: %s", path.name)
            return None
        except OSError as exc:
            raise CacheReadError(str(exc)) from exc

        age = self._clock() - stat.st_mtime
        if age >= self._freshness:
            logger.debug("Response cache stale: %s (age %.0fs)", path.name, age)
            return None

        try:
            body = path.read_bytes()
        except OSError as exc:
            raise CacheReadError(str(exc)) from exc

        logger.debug("Response cache hit: %s (age %.0fs)", path.name, age)
        return body

    def _write_atomic(self, path: Path, body: bytes) -> None:
        # Readers must never see a half-written entry: write a sibling temp
        # file, then rename over the target.
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=path.parent, prefix=".tmp-", suffix=".json", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(body)
            os.replace(tmp_name, path)
            tmp_name = None
            now = self._clock()
            os.utime(path, (now, now))
        except OSError as exc:
            raise CacheWriteError(str(exc)) from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
