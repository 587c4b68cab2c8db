"""PatternCache: LRU-backed cache of compiled regular expressions.

The regex and wildcard rules run at every node of every comparison, and the
same expectation strings recur across many comparisons.  ``PatternCache``
compiles each distinct pattern once and keeps it in memory.  LRU eviction
occurs silently when ``max_size`` is exceeded; no error is raised.

Each ``PatternCache`` instance maintains its own ``LRUCache`` guarded by its
own lock, so one instance can be shared across threads and two separate
instances never interfere with each other.

Example::

    from json_rule_diff.cache import PatternCache

    cache = PatternCache(max_size=128)
    cache.regex("^a*$").search("aaa")       # compiled on first use
    cache.wildcard("user-*").match("user-1")  # anchored, '*' matches anything
"""

from __future__ import annotations

import logging
import re
import threading

from cachetools import LRUCache

__all__ = ["PatternCache"]

logger = logging.getLogger(__name__)


class PatternCache:
    """LRU cache of compiled regex and wildcard patterns.

    Args:
        max_size: Maximum number of compiled patterns to hold in memory.
            Defaults to 256.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 256) -> None:
        # Regex and wildcard sources share one cache; the key carries the kind.
        self._cache: LRUCache[tuple[str, str], re.Pattern[str]] = LRUCache(
            maxsize=max_size
        )
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def regex(self, pattern: str) -> re.Pattern[str]:
        """Return ``pattern`` compiled as a regular expression.

        Raises:
            re.error: If ``pattern`` is not a valid regular expression.
        """
        return self._get("regex", pattern)

    def wildcard(self, pattern: str) -> re.Pattern[str]:
        """Return ``pattern`` compiled as an anchored wildcard.

        ``*`` matches any run of characters other than line breaks (including
        none); every other character matches itself literally.
        """
        return self._get("wildcard", pattern)

    def _get(self, kind: str, pattern: str) -> re.Pattern[str]:
        key = (kind, pattern)
        with self._lock:
            compiled = self._cache.get(key)
        if compiled is not None:
            return compiled

        logger.debug("compiling %s pattern %r", kind, pattern)
        if kind == "wildcard":
            source = "^" + re.escape(pattern).replace("\\*", ".*") + "$"
            compiled = re.compile(source)
        else:
            compiled = re.compile(pattern)

        with self._lock:
            self._cache[key] = compiled
        return compiled
