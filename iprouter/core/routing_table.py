"""
Static routing table with longest-prefix-match lookup.

The table keeps entries in insertion order. Lookup scans every entry and picks
the most specific network that contains the destination; among entries with
the same winning prefix length the one inserted first is kept. Metric plays no
part in selection and only orders the human-readable listing.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from threading import RLock

from loguru import logger

from iprouter.datastructures.address import Address
from iprouter.datastructures.type_aliases import RemovedCount, RouteMetric


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """Destination network, next-hop gateway and display metric."""

    network: Address
    gateway: Address
    metric: RouteMetric = 0

    def matches(self, destination: Address) -> bool:
        return self.network.contains(destination)

    def render(self) -> str:
        return f"network {self.network} gateway {self.gateway} metric {self.metric}"


@dataclass(slots=True)
class RoutingTable:
    """Insertion-ordered route entries guarded by a single lock."""

    _entries: list[RouteEntry] = field(default_factory=list)
    _lock: RLock = field(default_factory=RLock)

    def insert(self, entry: RouteEntry) -> None:
        with self._lock:
            self._entries.append(entry)
            logger.debug(
                "Route inserted: network={} gateway={} metric={} total={}",
                entry.network,
                entry.gateway,
                entry.metric,
                len(self._entries),
            )

    def remove(self, network: Address) -> RemovedCount:
        """Remove every entry whose network equals ``network`` exactly."""
        with self._lock:
            remaining = [entry for entry in self._entries if entry.network != network]
            removed = len(self._entries) - len(remaining)
            if removed:
                self._entries[:] = remaining
            logger.debug("Route removal: network={} removed={}", network, removed)
            return removed

    def find_best_match(self, destination: Address) -> RouteEntry | None:
        with self._lock:
            best: RouteEntry | None = None
            for entry in self._entries:
                if not entry.matches(destination):
                    continue
                # Strictly greater: the first entry at the winning length stays.
                if (
                    best is None
                    or entry.network.prefix_length > best.network.prefix_length
                ):
                    best = entry
        if best is None:
            logger.debug("No route for destination={}", destination)
        else:
            logger.debug(
                "Best route for destination={}: network={} gateway={}",
                destination,
                best.network,
                best.gateway,
            )
        return best

    def matching_entries(self, destination: Address) -> tuple[RouteEntry, ...]:
        with self._lock:
            return tuple(
                entry for entry in self._entries if entry.matches(destination)
            )

    def sorted_by_metric(self) -> tuple[RouteEntry, ...]:
        with self._lock:
            return tuple(sorted(self._entries, key=lambda entry: entry.metric))

    def render_all(self) -> list[str] | None:
        """Render entries in ascending metric order, or ``None`` when empty."""
        snapshot = self.sorted_by_metric()
        if not snapshot:
            return None
        return [entry.render() for entry in snapshot]

    def entries(self) -> tuple[RouteEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self.entries())
