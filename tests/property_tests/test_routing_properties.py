"""
Property-Based Tests for address masking and longest-prefix routing.

Key Test Areas:
- Address: masking idempotence, rendering, reflexive containment
- RoutingTable: lookup agrees with a brute-force longest-prefix reference
- RoutingTable: metric listing is a stable sort of insertion order
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from iprouter.core.routing_table import RouteEntry, RoutingTable
from iprouter.datastructures.address import Address, mask_from_prefix

octets = st.integers(min_value=0, max_value=255)
prefix_lengths = st.integers(min_value=0, max_value=32)
address_values = st.integers(min_value=0, max_value=0xFFFFFFFF)


@st.composite
def cidr_text(draw):
    parts = [draw(octets) for _ in range(4)]
    prefix = draw(prefix_lengths)
    return ".".join(str(part) for part in parts) + f"/{prefix}"


@st.composite
def route_entries(draw):
    # Narrow value space so overlapping and duplicate networks are common.
    base = draw(st.sampled_from([0x0A000000, 0x0A010000, 0x0A010200, 0xC0A80000]))
    prefix = draw(st.sampled_from([0, 8, 16, 24, 32]))
    gateway = Address.from_int(draw(address_values))
    metric = draw(st.integers(min_value=0, max_value=5))
    return RouteEntry(Address.from_int(base, prefix), gateway, metric)


@given(cidr_text())
def test_masking_is_idempotent(text: str) -> None:
    address = Address.parse(text)
    assert Address.parse(address.render()) == address
    assert address.value & ~mask_from_prefix(address.prefix_length) == 0


@given(cidr_text())
def test_render_round_trips_octets_and_prefix(text: str) -> None:
    address = Address.parse(text)
    assert address.render().endswith(f"/{text.rsplit('/', 1)[1]}")
    host, _ = address.render().split("/")
    assert all(0 <= int(part) <= 255 for part in host.split("."))


@given(cidr_text())
def test_contains_is_reflexive(text: str) -> None:
    network = Address.parse(text)
    assert network.contains(network)
    assert network.contains(Address.from_int(network.value))


@given(address_values, prefix_lengths, prefix_lengths)
def test_wider_network_contains_narrower(value: int, wide: int, extra: int) -> None:
    narrow = min(32, wide + extra)
    assert Address.from_int(value, wide).contains(Address.from_int(value, narrow))


def reference_best_match(
    entries: list[RouteEntry], destination: Address
) -> RouteEntry | None:
    candidates = [
        entry
        for entry in entries
        if destination.value & mask_from_prefix(entry.network.prefix_length)
        == entry.network.value
    ]
    if not candidates:
        return None
    longest = max(entry.network.prefix_length for entry in candidates)
    return next(
        entry for entry in candidates if entry.network.prefix_length == longest
    )


@settings(max_examples=200)
@given(
    st.lists(route_entries(), max_size=12),
    st.sampled_from([0x0A010203, 0x0A020000, 0x0A0102FF, 0xC0A80001, 0x08080808]),
)
def test_lookup_matches_reference(entries: list[RouteEntry], value: int) -> None:
    table = RoutingTable()
    for entry in entries:
        table.insert(entry)
    destination = Address.from_int(value)

    expected = reference_best_match(entries, destination)
    actual = table.find_best_match(destination)

    # The table stores the inserted objects, so the same duplicate must win.
    assert actual is expected


@given(st.lists(route_entries(), max_size=20))
def test_metric_listing_is_stable(entries: list[RouteEntry]) -> None:
    table = RoutingTable()
    for entry in entries:
        table.insert(entry)

    listed = table.sorted_by_metric()

    assert list(listed) == sorted(entries, key=lambda entry: entry.metric)
    assert table.entries() == tuple(entries)
