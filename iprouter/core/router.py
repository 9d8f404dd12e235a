"""
Router service: the operations the command interpreter calls.

Each operation parses all of its text arguments before touching the table or
the activity log, so a parse failure leaves both untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from iprouter.core.activity_log import (
    ActivityEventKind,
    ActivityLogSink,
    ActivityRecord,
    MemoryActivityLog,
)
from iprouter.core.errors import InvalidMetricError
from iprouter.core.forwarding import ForwardingDecision, Packet, decide
from iprouter.core.routing_table import RouteEntry, RoutingTable
from iprouter.datastructures.address import Address
from iprouter.datastructures.type_aliases import (
    AddressText,
    ProtocolName,
    RemovedCount,
    RouteMetric,
)


@dataclass(frozen=True, slots=True)
class ForwardReport:
    packet: Packet
    decision: ForwardingDecision

    @property
    def rendered_packet(self) -> str:
        return self.packet.render()


@dataclass(slots=True)
class RouterService:
    """Owns the routing table and records every decision to the activity log."""

    activity_log: ActivityLogSink = field(default_factory=MemoryActivityLog)
    table: RoutingTable = field(default_factory=RoutingTable)

    def add_route(
        self, network_text: AddressText, gateway_text: AddressText, metric: RouteMetric
    ) -> RouteEntry:
        network = Address.parse(network_text)
        gateway = Address.parse(gateway_text)
        if metric < 0:
            raise InvalidMetricError(f"Metric must be non-negative, got {metric}")
        entry = RouteEntry(network=network, gateway=gateway, metric=metric)
        self.table.insert(entry)
        self._record(ActivityEventKind.ADD, f"{network} via {gateway} metric {metric}")
        logger.info("Route added: {}", entry.render())
        return entry

    def delete_route(self, network_text: AddressText) -> RemovedCount:
        network = Address.parse(network_text)
        removed = self.table.remove(network)
        self._record(ActivityEventKind.DEL, f"{network} removed {removed}")
        if removed:
            logger.info("Routes removed: network={} count={}", network, removed)
        else:
            logger.info("No route to remove: network={}", network)
        return removed

    def list_routes(self) -> list[str] | None:
        """Metric-ordered renderings, or ``None`` when the table is empty."""
        return self.table.render_all()

    def route_entries(self) -> tuple[RouteEntry, ...]:
        return self.table.sorted_by_metric()

    def forward(
        self,
        source_text: AddressText,
        destination_text: AddressText,
        protocol_text: ProtocolName,
    ) -> ForwardReport:
        packet = Packet(
            source=Address.parse(source_text),
            destination=Address.parse(destination_text),
            protocol=protocol_text,
        )
        decision = decide(self.table, packet.destination)
        if decision.forwarded:
            self._record(
                ActivityEventKind.FWD, f"{packet.render()} via {decision.gateway}"
            )
            logger.info("Forwarded {} via {}", packet.render(), decision.gateway)
        else:
            self._record(ActivityEventKind.DROP, packet.render())
            logger.info("Dropped {}", packet.render())
        return ForwardReport(packet=packet, decision=decision)

    def _record(self, kind: ActivityEventKind, detail: str) -> None:
        self.activity_log.append(ActivityRecord(kind=kind, detail=detail).to_line())
