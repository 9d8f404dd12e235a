#!/usr/bin/env python3
"""
Console entry point for the IP router simulator.

Starts a command session against a fresh routing table. Activity records are
appended to the configured log file, which is opened once for the session.
"""

from pathlib import Path
from typing import TextIO

import click
from loguru import logger
from rich.console import Console

from iprouter.cli.shell import RouterShell
from iprouter.core.activity_log import FileActivityLog
from iprouter.core.config import LOG_LEVELS, RouterSettings
from iprouter.core.logging import configure_logging
from iprouter.core.router import RouterService


@click.command()
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Activity log file (default: router.log)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostic log level",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--script",
    type=click.File("r"),
    default=None,
    help="Run commands from a file instead of interactively",
)
@click.option("--quiet-banner", is_flag=True, help="Do not print the command summary")
def cli(
    log_file: Path | None,
    log_level: str | None,
    verbose: bool,
    script: TextIO | None,
    quiet_banner: bool,
) -> None:
    """
    IP Router Simulator.

    Maintain a static routing table and decide whether simulated packets are
    forwarded or dropped using longest-prefix matching.
    """
    settings = RouterSettings()
    configure_logging(settings, verbose=verbose, level=log_level)

    activity_path = log_file or settings.activity_log_path
    console = Console()
    with FileActivityLog(activity_path) as activity_log:
        shell = RouterShell(
            service=RouterService(activity_log=activity_log),
            console=console,
            prompt=settings.prompt,
        )
        if settings.show_banner and not quiet_banner:
            shell.print_help()
        if script is not None:
            logger.info("Running commands from {}", script.name)
            shell.run(script)
        else:
            shell.interact()
    logger.info("Session ended; activity log at {}", activity_path)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
