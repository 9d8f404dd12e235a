"""
Semantic type aliases for iprouter datastructures.

These aliases keep signatures self-documenting where raw ``int`` and ``str``
would otherwise carry addressing semantics.
"""

# Addressing types
type AddressValue = int  # 32-bit unsigned IPv4 value
type PrefixLength = int  # 0..32
type NetworkMask = int  # 32-bit mask derived from a prefix length
type AddressText = str  # "a.b.c.d" or "a.b.c.d/n"

# Routing types
type RouteMetric = int
type ProtocolName = str
type RemovedCount = int

# Logging types
type LogLine = str
type LogLevelName = str
type DebugScope = str
