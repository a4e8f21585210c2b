"""Provider registry — one published tree per provider id.

The registry is a plain keyed store: ids are chosen by the provider
page, never allocated here. Each publish swaps in a new immutable
``ProviderRecord`` under a lock, so a reader sees either the previous
tree or the new one, never a mixture.

Thread safety:
    ``publish`` and ``resolve`` hold ``_lock`` only for the dict access.
    No lock is held across an ``await``; handlers read the request body
    before they publish.
"""

import itertools
import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from file_bridge.errors import ProviderNotFound
from file_bridge.tree import DirectoryEntry, count_entries

logger = logging.getLogger("file_bridge.registry")


@dataclass(frozen=True, slots=True)
class ProviderRecord:
    """The tree currently published by one provider."""

    provider_id: int
    children: tuple[DirectoryEntry, ...]


class ProviderRegistry:
    """Process-lifetime store of provider trees, last write wins.

    Usage::

        registry = ProviderRegistry()
        registry.publish(1, (File("a.txt"),))
        record = registry.resolve(1)
    """

    __slots__ = ("_lock", "_records")

    def __init__(self) -> None:
        self._records: dict[int, ProviderRecord] = {}
        self._lock = threading.Lock()

    def publish(self, provider_id: int, children: Iterable[DirectoryEntry]) -> None:
        """Create or replace the record for *provider_id*."""
        record = ProviderRecord(provider_id=provider_id, children=tuple(children))
        with self._lock:
            replaced = provider_id in self._records
            self._records[provider_id] = record

        if logger.isEnabledFor(logging.DEBUG):
            files, directories = count_entries(record.children)
            logger.debug(
                "%s provider %d (%d files, %d directories)",
                "replaced" if replaced else "published",
                provider_id,
                files,
                directories,
            )

    def resolve(self, provider_id: int) -> ProviderRecord:
        """Return the current record for *provider_id*.

        Raises ``ProviderNotFound`` if nothing was published under that id,
        which is distinct from a provider that published an empty folder.
        """
        with self._lock:
            record = self._records.get(provider_id)
        if record is None:
            raise ProviderNotFound(provider_id)
        return record

    def provider_ids(self) -> list[int]:
        """Ids with a published tree, in first-publish order."""
        with self._lock:
            return list(self._records)

    def __contains__(self, provider_id: object) -> bool:
        with self._lock:
            return provider_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class ProviderIdCounter:
    """Hands out provider ids to freshly served provider pages.

    Starts at 1 with each process; ids are not unique across restarts.
    """

    __slots__ = ("_counter", "_lock")

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)
