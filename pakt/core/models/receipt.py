"""
Receipt — the outcome of running one command chain.

Executors return receipts, never exceptions. Use cases decide whether a
failed receipt is fatal (install/remove/update) or merely recorded
(sync).
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Receipt(BaseModel):
    """Result of one executor run."""

    manager: str
    command: str = ""
    status: Literal["ok", "skipped", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    return_code: int | None = None
    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the command failed."""
        return self.status == "failed"

    @classmethod
    def success(cls, manager: str, command: str = "", **kwargs: Any) -> Receipt:
        """Create a success receipt."""
        return cls(manager=manager, command=command, status="ok", **kwargs)

    @classmethod
    def failure(cls, manager: str, error: str, command: str = "", **kwargs: Any) -> Receipt:
        """Create a failure receipt."""
        return cls(manager=manager, command=command, status="failed", error=error, **kwargs)

    @classmethod
    def skip(cls, manager: str, reason: str = "", command: str = "", **kwargs: Any) -> Receipt:
        """Create a skip receipt."""
        return cls(manager=manager, command=command, status="skipped", output=reason, **kwargs)
