"""
Mock executor — test double and ``--mock`` backend.

Records every chain it is asked to run and returns success, unless a
failure was configured for one of the chain's managers. Nothing is
spawned.
"""

from __future__ import annotations

from pakt.adapters.base import Executor
from pakt.core.models.command import CommandChain
from pakt.core.models.receipt import Receipt


class MockExecutor(Executor):
    """Universal mock executor.

    By default, returns success for everything. Can be configured to
    fail per manager id.
    """

    def __init__(self, available: bool = True):
        self._available = available
        self._failures: dict[str, tuple[str, int]] = {}
        self._call_log: list[CommandChain] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[CommandChain]:
        """All chains this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times execute has been called."""
        return len(self._call_log)

    @property
    def commands(self) -> list[str]:
        """Rendered form of every chain received."""
        return [c.render() for c in self._call_log]

    def is_available(self, chain: CommandChain) -> bool:
        return self._available

    def set_failure(self, manager: str, error: str = "Mock failure", return_code: int = 1) -> None:
        """Make any chain touching ``manager`` fail."""
        self._failures[manager] = (error, return_code)

    def reset(self) -> None:
        """Clear call log and configured failures."""
        self._call_log.clear()
        self._failures.clear()

    def execute(self, chain: CommandChain, *, manager: str | None = None) -> Receipt:
        self._call_log.append(chain)
        label = self.label(chain, manager)
        command = chain.render()

        for mgr in chain.managers:
            if mgr in self._failures:
                error, code = self._failures[mgr]
                return Receipt.failure(
                    manager=label,
                    error=error,
                    command=command,
                    return_code=code,
                    metadata={"mock": True},
                )

        return Receipt.success(
            manager=label,
            command=command,
            return_code=0,
            output=f"[mock] {command}",
            metadata={"mock": True},
        )
