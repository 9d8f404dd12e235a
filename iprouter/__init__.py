"""
iprouter - IP Router Simulator

Simulates a single IPv4 router with a static routing table, longest-prefix
match lookup and forward/drop decisions for simulated packets.

## Quick Start

```python
from iprouter import MemoryActivityLog, RouterService

log = MemoryActivityLog()
router = RouterService(activity_log=log)
router.add_route("10.0.0.0/8", "10.0.0.1", 10)
report = router.forward("192.168.0.7", "10.1.2.3", "ICMP")
assert report.decision.forwarded
```
"""

from .core import (
    ActivityEventKind,
    FileActivityLog,
    ForwardingDecision,
    ForwardReport,
    ForwardVerdict,
    InvalidMetricError,
    InvalidPrefixError,
    MemoryActivityLog,
    Packet,
    ParseError,
    RouteEntry,
    RouterError,
    RouterService,
    RouterSettings,
    RoutingTable,
)
from .datastructures import Address

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "ActivityEventKind",
    "Address",
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
]
