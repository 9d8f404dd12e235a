"""Forward/drop decisions for simulated packets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from iprouter.core.routing_table import RouteEntry, RoutingTable
from iprouter.datastructures.address import Address
from iprouter.datastructures.type_aliases import ProtocolName


class ForwardVerdict(StrEnum):
    FORWARD = "forward"
    DROP = "drop"


@dataclass(frozen=True, slots=True)
class Packet:
    """A packet that exists only for the duration of one ``send``."""

    source: Address
    destination: Address
    protocol: ProtocolName

    def render(self) -> str:
        return f"packet from {self.source} to {self.destination} [{self.protocol}]"


@dataclass(frozen=True, slots=True)
class ForwardingDecision:
    verdict: ForwardVerdict
    route: RouteEntry | None = None

    @property
    def forwarded(self) -> bool:
        return self.verdict is ForwardVerdict.FORWARD

    @property
    def gateway(self) -> Address | None:
        return self.route.gateway if self.route is not None else None

    @classmethod
    def forward(cls, route: RouteEntry) -> ForwardingDecision:
        return cls(verdict=ForwardVerdict.FORWARD, route=route)

    @classmethod
    def drop(cls) -> ForwardingDecision:
        return cls(verdict=ForwardVerdict.DROP)


def decide(table: RoutingTable, destination: Address) -> ForwardingDecision:
    """Forward through the best matching route, or drop when none matches."""
    route = table.find_best_match(destination)
    if route is None:
        return ForwardingDecision.drop()
    return ForwardingDecision.forward(route)
