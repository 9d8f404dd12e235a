"""
Diagnostic logging setup for a router session.

Diagnostics go to stderr through loguru and are separate from the activity
log. The effective level comes from ``RouterSettings.log_level`` unless the
session asks for ``verbose`` output or passes an explicit override. Scopes
listed in ``RouterSettings.debug_scopes`` (for example ``core.routing_table``)
additionally emit DEBUG records when the main level is higher.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping

from loguru import logger

from iprouter.core.config import RouterSettings
from iprouter.datastructures.type_aliases import DebugScope, LogLevelName

PACKAGE_PREFIX = "iprouter."

ROUTER_LOG_FORMAT = (
    "{time:HH:mm:ss.SSS} | {level: <8} | {extra[component]: <14} | {message}"
)


def resolve_level(
    settings: RouterSettings,
    *,
    verbose: bool = False,
    level: LogLevelName | None = None,
) -> LogLevelName:
    """Pick the session level: verbose wins, then an override, then settings."""
    if verbose:
        return "DEBUG"
    return (level or settings.log_level).upper()


def scope_matches(record_name: str, scopes: Iterable[DebugScope]) -> bool:
    """True if a module name falls under any scope, with or without the prefix."""
    for scope in scopes:
        qualified = (
            scope if scope.startswith(PACKAGE_PREFIX) else PACKAGE_PREFIX + scope
        )
        if record_name.startswith(scope) or record_name.startswith(qualified):
            return True
    return False


def _tag_component(record: dict) -> None:
    # "iprouter.core.routing_table" -> "routing_table"
    name = record.get("name") or ""
    record["extra"].setdefault("component", name.rsplit(".", 1)[-1] or "-")


def _scoped_debug_filter(scopes: tuple[DebugScope, ...]):
    def _filter(record: object) -> bool:
        if not isinstance(record, Mapping):
            return False
        if getattr(record.get("level"), "name", None) != "DEBUG":
            return False
        return scope_matches(record.get("name", ""), scopes)

    return _filter


def configure_logging(
    settings: RouterSettings,
    *,
    verbose: bool = False,
    level: LogLevelName | None = None,
) -> tuple[int, ...]:
    """Install stderr handlers for a session and return their handler ids."""
    effective = resolve_level(settings, verbose=verbose, level=level)
    logger.remove()
    logger.configure(patcher=_tag_component)

    handler_ids = [
        logger.add(
            sys.stderr,
            level=effective,
            format=ROUTER_LOG_FORMAT,
            colorize=settings.colorize_logs,
        )
    ]

    scopes = tuple(scope.strip() for scope in settings.debug_scopes if scope.strip())
    if scopes and effective not in ("TRACE", "DEBUG"):
        handler_ids.append(
            logger.add(
                sys.stderr,
                level="DEBUG",
                format=ROUTER_LOG_FORMAT,
                colorize=settings.colorize_logs,
                filter=_scoped_debug_filter(scopes),
            )
        )

    logger.debug(
        "Logging configured: level={} scopes={} colorize={}",
        effective,
        scopes,
        settings.colorize_logs,
    )
    return tuple(handler_ids)
