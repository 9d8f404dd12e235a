import pytest

from iprouter.core.activity_log import MemoryActivityLog
from iprouter.core.errors import InvalidMetricError, InvalidPrefixError, ParseError
from iprouter.core.router import RouterService
from iprouter.datastructures.address import Address


def test_add_route_records_activity(
    router: RouterService, activity_log: MemoryActivityLog
) -> None:
    entry = router.add_route("10.1.2.3/8", "10.0.0.1", 10)

    assert entry.network == Address.parse("10.0.0.0/8")
    assert entry.gateway == Address.parse("10.0.0.1/32")
    assert activity_log.lines == ["ADD 10.0.0.0/8 via 10.0.0.1/32 metric 10"]


def test_delete_route_reports_count(
    router: RouterService, activity_log: MemoryActivityLog
) -> None:
    router.add_route("10.0.0.0/24", "1.1.1.1", 1)
    router.add_route("10.0.0.0/24", "2.2.2.2", 2)
    router.add_route("10.0.0.0/25", "3.3.3.3", 3)

    assert router.delete_route("10.0.0.0/16") == 0
    assert router.delete_route("10.0.0.0/24") == 2
    assert router.list_routes() == ["network 10.0.0.0/25 gateway 3.3.3.3/32 metric 3"]
    assert activity_log.lines[-2:] == [
        "DEL 10.0.0.0/16 removed 0",
        "DEL 10.0.0.0/24 removed 2",
    ]


def test_list_routes_metric_order(router: RouterService) -> None:
    assert router.list_routes() is None
    router.add_route("10.0.0.0/8", "1.1.1.1", 30)
    router.add_route("20.0.0.0/8", "2.2.2.2", 10)
    router.add_route("30.0.0.0/8", "3.3.3.3", 20)

    assert [entry.metric for entry in router.route_entries()] == [10, 20, 30]
    listing = router.list_routes()
    assert listing is not None
    assert [line.rsplit(" ", 1)[1] for line in listing] == ["10", "20", "30"]


def test_forward_uses_longest_prefix(
    router: RouterService, activity_log: MemoryActivityLog
) -> None:
    router.add_route("10.0.0.0/8", "192.0.2.1", 1)
    router.add_route("10.1.0.0/16", "192.0.2.2", 99)

    report = router.forward("172.16.0.1", "10.1.2.3", "ICMP")

    assert report.decision.forwarded
    assert report.decision.gateway == Address.parse("192.0.2.2")
    assert report.rendered_packet == "packet from 172.16.0.1/32 to 10.1.2.3/32 [ICMP]"
    assert activity_log.lines[-1] == (
        "FWD packet from 172.16.0.1/32 to 10.1.2.3/32 [ICMP] via 192.0.2.2/32"
    )


def test_forward_drops_without_route(
    router: RouterService, activity_log: MemoryActivityLog
) -> None:
    router.add_route("10.0.0.0/8", "192.0.2.1", 1)

    report = router.forward("10.0.0.9", "192.0.0.0", "TCP")

    assert not report.decision.forwarded
    assert activity_log.lines[-1] == (
        "DROP packet from 10.0.0.9/32 to 192.0.0.0/32 [TCP]"
    )


@pytest.mark.parametrize(
    ("call", "error"),
    [
        (lambda r: r.add_route("10.0.0.0/33", "1.1.1.1", 1), InvalidPrefixError),
        (lambda r: r.add_route("999.1.1.1", "1.1.1.1", 1), ParseError),
        (lambda r: r.add_route("10.0.0.0/8", "1.1.1", 1), ParseError),
        (lambda r: r.add_route("10.0.0.0/8", "1.1.1.1", -5), InvalidMetricError),
        (lambda r: r.delete_route("10.0.0.0/33"), InvalidPrefixError),
        (lambda r: r.delete_route("999.1.1.1"), ParseError),
        (lambda r: r.forward("999.1.1.1", "10.0.0.1", "ICMP"), ParseError),
        (lambda r: r.forward("10.0.0.1", "10.0.0.1/33", "ICMP"), InvalidPrefixError),
    ],
)
def test_failed_operations_leave_state_untouched(
    router: RouterService, activity_log: MemoryActivityLog, call, error
) -> None:
    router.add_route("10.0.0.0/8", "1.1.1.1", 1)
    before_entries = router.table.entries()
    before_lines = list(activity_log.lines)

    with pytest.raises(error):
        call(router)

    assert router.table.entries() == before_entries
    assert activity_log.lines == before_lines


def test_default_service_uses_memory_log() -> None:
    service = RouterService()
    service.add_route("0.0.0.0/0", "192.0.2.1", 0)
    assert isinstance(service.activity_log, MemoryActivityLog)
    assert service.activity_log.lines == ["ADD 0.0.0.0/0 via 192.0.2.1/32 metric 0"]
