"""Core router components: routing table, forwarding, activity log, service."""

from .activity_log import (
    ActivityEventKind,
    ActivityLogSink,
    ActivityRecord,
    FileActivityLog,
    MemoryActivityLog,
)
from .config import RouterSettings
from .errors import (
    AddressError,
    InvalidMetricError,
    InvalidPrefixError,
    ParseError,
    RouterError,
)
from .forwarding import ForwardingDecision, ForwardVerdict, Packet, decide
from .router import ForwardReport, RouterService
from .routing_table import RouteEntry, RoutingTable

__all__ = [
    "ActivityEventKind",
    "ActivityLogSink",
    "ActivityRecord",
    "AddressError",
    "FileActivityLog",
    "ForwardReport",
    "ForwardVerdict",
    "ForwardingDecision",
    "InvalidMetricError",
    "InvalidPrefixError",
    "MemoryActivityLog",
    "Packet",
    "ParseError",
    "RouteEntry",
    "RouterError",
    "RouterService",
    "RouterSettings",
    "RoutingTable",
    "decide",
]
