"""
IPv4 network addresses with prefix-masked containment.

An :class:`Address` always stores the *network* address: every bit outside
the prefix is cleared at construction time, so ``192.168.1.5/24`` and
``192.168.1.0/24`` are the same value.

Examples:
    >>> net = Address.parse("10.1.0.0/16")
    >>> net.contains(Address.parse("10.1.2.3"))
    True
    >>> Address.parse("192.168.1.5/24").render()
    '192.168.1.0/24'
"""

from __future__ import annotations

from dataclasses import dataclass

from iprouter.core.errors import InvalidPrefixError, ParseError
from iprouter.datastructures.type_aliases import (
    AddressText,
    AddressValue,
    NetworkMask,
    PrefixLength,
)

MAX_PREFIX_LENGTH: PrefixLength = 32
FULL_MASK: NetworkMask = 0xFFFFFFFF
OCTET_COUNT = 4
OCTET_MAX = 255


def mask_from_prefix(prefix_length: PrefixLength) -> NetworkMask:
    """Return the 32-bit network mask for ``prefix_length``."""
    if prefix_length < 0 or prefix_length > MAX_PREFIX_LENGTH:
        raise InvalidPrefixError(
            f"Invalid prefix length {prefix_length}; allowed range is 0-32"
        )
    if prefix_length == 0:
        return 0
    return (FULL_MASK << (MAX_PREFIX_LENGTH - prefix_length)) & FULL_MASK


def is_decimal(text: str) -> bool:
    """True for a non-empty run of ASCII digits and nothing else."""
    return text.isascii() and text.isdigit()


def _parse_octets(text: str) -> AddressValue:
    parts = text.split(".")
    if len(parts) != OCTET_COUNT:
        raise ParseError(
            f"Invalid IP address format: {text!r}. "
            "Example of a valid one: 192.168.0.1"
        )
    value = 0
    for part in parts:
        if not is_decimal(part):
            raise ParseError(f"Invalid octet {part!r} in address {text!r}")
        octet = int(part)
        if octet > OCTET_MAX:
            raise ParseError(f"Octet {octet} out of range 0-255 in address {text!r}")
        value = (value << 8) | octet
    return value


def _parse_prefix(text: str, source: str) -> PrefixLength:
    # A leading minus is still a number; the range check rejects it later.
    if not is_decimal(text.removeprefix("-")):
        raise ParseError(f"Invalid prefix {text!r} in address {source!r}")
    return int(text)


@dataclass(frozen=True, slots=True)
class Address:
    """IPv4 network address plus prefix length."""

    value: AddressValue
    prefix_length: PrefixLength = MAX_PREFIX_LENGTH

    def __post_init__(self) -> None:
        # Enforce the network-address invariant for direct construction too.
        object.__setattr__(
            self, "value", self.value & mask_from_prefix(self.prefix_length)
        )

    @classmethod
    def parse(cls, text: AddressText) -> Address:
        """Parse ``"a.b.c.d"`` or ``"a.b.c.d/n"``; the prefix defaults to 32."""
        raw = text.strip()
        host, slash, prefix_text = raw.partition("/")
        prefix_length = _parse_prefix(prefix_text, raw) if slash else MAX_PREFIX_LENGTH
        value = _parse_octets(host)
        return cls(value=value, prefix_length=prefix_length)

    @classmethod
    def from_int(
        cls, value: AddressValue, prefix_length: PrefixLength = MAX_PREFIX_LENGTH
    ) -> Address:
        return cls(value=value & FULL_MASK, prefix_length=prefix_length)

    @property
    def mask(self) -> NetworkMask:
        return mask_from_prefix(self.prefix_length)

    @property
    def netmask(self) -> str:
        return _dotted_quad(self.mask)

    def contains(self, other: Address) -> bool:
        """True if this address, taken as a network, covers ``other``.

        Only this address's prefix is applied; the prefix carried by ``other``
        is ignored.
        """
        return (other.value & self.mask) == self.value

    def render(self) -> str:
        return f"{_dotted_quad(self.value)}/{self.prefix_length}"

    def __str__(self) -> str:
        return self.render()


def _dotted_quad(value: AddressValue) -> str:
    return ".".join(str((value >> shift) & 0xFF) for shift in (24, 16, 8, 0))
