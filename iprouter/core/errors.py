"""Exception hierarchy for router operations."""


class RouterError(Exception):
    """Base exception for recoverable router errors."""

    pass


class AddressError(RouterError, ValueError):
    """Raised when address text cannot be turned into an Address."""

    pass


class ParseError(AddressError):
    """Raised for a malformed dotted-quad, octet or prefix."""

    pass


class InvalidPrefixError(AddressError):
    """Raised when a prefix length falls outside 0-32."""

    pass


class InvalidMetricError(RouterError, ValueError):
    """Raised when a route metric is negative."""

    pass
