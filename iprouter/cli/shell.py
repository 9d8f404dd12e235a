"""
Line-oriented command interpreter for the router simulator.

Commands:
    add <network> <gateway> <metric>
    del <network>
    show
    send <source> <destination> <protocol>
    help
    exit
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iprouter.core.errors import RouterError
from iprouter.core.router import RouterService
from iprouter.datastructures.address import is_decimal

USAGE_ADD = "Usage: add <network> <gateway> <metric>"
USAGE_DEL = "Usage: del <network>"
USAGE_SEND = "Usage: send <source> <destination> <protocol>"

HELP_LINES = (
    "=== IP Router Simulator ===",
    "Available commands:",
    "  add <network> <gateway> <metric>  - add a route "
    "(e.g. add 192.168.1.0/24 192.168.1.1 10)",
    "  del <network>                     - delete a route (e.g. del 192.168.1.0/24)",
    "  show                              - show the routing table",
    "  send <source> <destination> <protocol> - send a packet "
    "(e.g. send 10.0.0.1 192.168.1.100 ICMP)",
    "  help                              - show this help",
    "  exit                              - quit",
)


@dataclass(slots=True)
class RouterShell:
    """Parse command lines and report RouterService results on a console."""

    service: RouterService
    console: Console = field(default_factory=Console)
    prompt: str = "> "

    def execute(self, line: str) -> bool:
        """Run one command line; returns False once the session should end."""
        tokens = line.split()
        if not tokens:
            return True
        command, args = tokens[0], tokens[1:]
        try:
            match command:
                case "add":
                    self._handle_add(args)
                case "del":
                    self._handle_delete(args)
                case "show":
                    self._handle_show()
                case "send":
                    self._handle_send(args)
                case "help":
                    self.print_help()
                case "exit":
                    return False
                case _:
                    self.console.print(
                        "Unknown command. Type 'help' to see the available commands."
                    )
        except RouterError as e:
            logger.debug("Command failed: line={!r} error={}", line, e)
            self.console.print(f"[red]Error:[/red] {escape(str(e))}", emoji=False)
        return True

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            if not self.execute(line):
                break

    def interact(self) -> None:
        while True:
            try:
                line = self.console.input(escape(self.prompt))
            except EOFError:
                break
            if not self.execute(line):
                break

    def print_help(self) -> None:
        for help_line in HELP_LINES:
            self.console.print(escape(help_line))

    def _handle_add(self, args: list[str]) -> None:
        if len(args) < 3:
            self.console.print(USAGE_ADD)
            return
        if not is_decimal(args[2]):
            self.console.print(USAGE_ADD)
            return
        self.service.add_route(args[0], args[1], int(args[2]))
        self.console.print("Route added.")

    def _handle_delete(self, args: list[str]) -> None:
        if not args:
            self.console.print(USAGE_DEL)
            return
        if self.service.delete_route(args[0]):
            self.console.print("Route removed.")
        else:
            self.console.print("Route not found.")

    def _handle_show(self) -> None:
        entries = self.service.route_entries()
        if not entries:
            self.console.print("Routing table is empty.")
            return
        table = Table(title="Routing table")
        table.add_column("Network", style="cyan", no_wrap=True)
        table.add_column("Gateway", style="green", no_wrap=True)
        table.add_column("Metric", justify="right")
        for entry in entries:
            table.add_row(str(entry.network), str(entry.gateway), str(entry.metric))
        self.console.print(table)

    def _handle_send(self, args: list[str]) -> None:
        if len(args) < 3:
            self.console.print(USAGE_SEND)
            return
        report = self.service.forward(args[0], args[1], args[2])
        self.console.print(report.rendered_packet, markup=False, emoji=False)
        if report.decision.forwarded:
            self.console.print(f"Forwarding via gateway {report.decision.gateway}")
        else:
            self.console.print("[yellow]Packet dropped (no matching route).[/yellow]")
