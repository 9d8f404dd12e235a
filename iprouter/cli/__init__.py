"""
iprouter command line interface.

Provides the interactive command interpreter and the ``iprouter`` console
entry point.
"""

from .main import cli, main
from .shell import RouterShell

__all__ = ["RouterShell", "cli", "main"]
