# lazy_index.py
# Process-wide tries built on first use.
# A LazyIndex owns one Trie and a lock; the first caller builds it, callers
# arriving during the build wait on the lock, and once the trie is published
# every read goes straight to it without locking.

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Optional, Tuple, Union

from .trie import DEFAULT_LIMIT, SearchResult, Trie
from .vocabulary import city_names, country_names
from ..utils.logger_utils import Log

logger = logging.getLogger(__name__)

Entry = Union[str, Tuple[str, str]]
Loader = Callable[[], Iterable[Entry]]


class LazyIndex:
    """
    Build-once Trie behind an accessor.
    loader: zero-arg callable yielding names, or (word, display) pairs
    name: label used in log lines
    """

    def __init__(self, loader: Loader, name: str = "index") -> None:
        self._loader = loader
        self.name = name
        self._lock = threading.Lock()
        self._trie: Optional[Trie] = None
        self.builds = 0  # number of completed builds, for inspection

    @property
    def is_built(self) -> bool:
        return self._trie is not None

    def get(self) -> Trie:
        """Return the trie, building it first if nobody has yet."""
        trie = self._trie
        if trie is not None:
            return trie
        with self._lock:
            if self._trie is None:
                self._trie = self._build()
            return self._trie

    def _build(self) -> Trie:
        # populate a private trie; it is only published once complete
        trie = Trie()
        count = 0
        with Log.time_block(f"{self.name} build", logger):
            for entry in self._loader():
                if isinstance(entry, tuple):
                    trie.insert(*entry)
                else:
                    trie.insert(entry)
                count += 1
        self.builds += 1
        logger.debug("%s: indexed %d entries", self.name, count)
        return trie

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> SearchResult:
        return self.get().search(query, limit)

    def reset(self) -> None:
        """Forget the built trie (tests only; a live process never rebuilds)."""
        with self._lock:
            self._trie = None


# cities and countries get separate tries so each kind of query only ever
# sees names of its own kind
CITY_INDEX = LazyIndex(city_names, name="city index")
COUNTRY_INDEX = LazyIndex(country_names, name="country index")
