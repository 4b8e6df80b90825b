"""
Shell executor — run a composed chain with the terminal attached.

Standard input, output and error are inherited so package managers can
prompt for passwords and confirmations. A single-segment chain runs
directly from its argv (no shell, no re-splitting of package names);
only a multi-segment chain goes through ``sh -c`` for ``&&``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from datetime import UTC, datetime

from pakt.adapters.base import Executor
from pakt.core.models.command import CommandChain
from pakt.core.models.receipt import Receipt

logger = logging.getLogger(__name__)


class ShellExecutor(Executor):
    """Execute command chains as child processes."""

    def __init__(self, shell: str = "sh"):
        self._shell = shell

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self, chain: CommandChain) -> bool:
        binaries = {seg.argv[0] for seg in chain.segments if seg.argv}
        if chain.needs_shell:
            binaries.add(self._shell)
        return all(shutil.which(b) is not None for b in binaries)

    def _args(self, chain: CommandChain) -> list[str]:
        if chain.needs_shell:
            return [self._shell, "-c", chain.render()]
        return chain.argv()

    def execute(self, chain: CommandChain, *, manager: str | None = None) -> Receipt:
        label = self.label(chain, manager)
        command = chain.render()

        if chain.is_empty:
            return Receipt.failure(manager=label, error="Empty command", command=command)

        args = self._args(chain)
        logger.info("Executing: %s", command)
        started_at = datetime.now(UTC).isoformat()
        start = time.monotonic()

        try:
            result = subprocess.run(args)
        except FileNotFoundError:
            return Receipt.failure(
                manager=label,
                error=f"Executable not found: {args[0]}",
                command=command,
                started_at=started_at,
            )
        except OSError as e:
            return Receipt.failure(
                manager=label,
                error=f"Command execution error: {e}",
                command=command,
                started_at=started_at,
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        timing = {
            "started_at": started_at,
            "ended_at": datetime.now(UTC).isoformat(),
            "duration_ms": elapsed_ms,
        }

        if result.returncode == 0:
            return Receipt.success(
                manager=label,
                command=command,
                return_code=0,
                **timing,
            )

        logger.debug("%s exited with code %d", command, result.returncode)
        return Receipt.failure(
            manager=label,
            error=f"Command exited with code {result.returncode}",
            command=command,
            return_code=result.returncode,
            **timing,
        )
