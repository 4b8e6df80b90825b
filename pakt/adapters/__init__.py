"""Adapters — process execution for composed commands.

Public re-exports for convenient access.
"""

from pakt.adapters.base import Executor
from pakt.adapters.mock import MockExecutor
from pakt.adapters.shell.command import ShellExecutor

__all__ = [
    "Executor",
    "MockExecutor",
    "ShellExecutor",
]
