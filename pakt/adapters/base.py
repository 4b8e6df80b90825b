"""
Executor base — the contract between use cases and child processes.

Use cases hand an executor a ``CommandChain`` and get a ``Receipt``
back. Executors NEVER raise for a failed or missing command; the
receipt carries the failure and the caller decides whether it is fatal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pakt.core.models.command import CommandChain
from pakt.core.models.receipt import Receipt


class Executor(ABC):
    """Abstract base class for command executors.

    To create a new executor:
        1. Subclass Executor
        2. Implement name, is_available, execute
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The executor identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def is_available(self, chain: CommandChain) -> bool:
        """Whether every binary the chain needs can be found.

        Should be fast and never raise.
        """

    @abstractmethod
    def execute(self, chain: CommandChain, *, manager: str | None = None) -> Receipt:
        """Run the chain to completion and return a receipt.

        Args:
            chain: The composed command.
            manager: Label for the receipt (default: the chain's managers).
        """

    @staticmethod
    def label(chain: CommandChain, manager: str | None) -> str:
        """Receipt label for a chain."""
        return manager or ",".join(chain.managers) or "?"
