"""
Sync use case — replay the tracking store on this machine.

For every tracked manager, in store order, compose that manager's
install command, append its whole package list, and run it. One
manager failing doesn't stop the rest; the report says which batches
succeeded. Sync never detects anything and never writes the store.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pakt.adapters.base import Executor
from pakt.adapters.shell.command import ShellExecutor
from pakt.core.config.loader import load_config, resolve_store_path
from pakt.core.errors import PaktError
from pakt.core.models.manager import ManagerSpec, PackageAction
from pakt.core.models.receipt import Receipt
from pakt.core.persistence.store_file import load_store
from pakt.core.services.composer import compose

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Result of replaying the tracking store."""

    store_path: Path | None = None
    receipts: list[Receipt] = field(default_factory=list)
    packages: dict[str, list[str]] = field(default_factory=dict)
    dry_run: bool = False
    error: str | None = None
    error_kind: str | None = None

    @property
    def total(self) -> int:
        return len(self.receipts)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.receipts if r.ok)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.receipts if r.failed)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.receipts if r.status == "skipped")

    @property
    def status(self) -> str:
        if self.error:
            return "error"
        if not self.receipts:
            return "empty"
        if self.failed == 0:
            return "ok"
        if self.succeeded > 0:
            return "partial"
        return "failed"

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            result["error_kind"] = self.error_kind
            return result

        return {
            "store_path": str(self.store_path) if self.store_path else None,
            "status": self.status,
            "dry_run": self.dry_run,
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "skipped": self.skipped,
            "packages": self.packages,
            "receipts": [r.model_dump(mode="json") for r in self.receipts],
        }


def run_sync(
    *,
    config_path: Path | None = None,
    store_path: Path | None = None,
    executor: Executor | None = None,
    catalog: Mapping[str, ManagerSpec] | None = None,
    dry_run: bool = False,
) -> SyncResult:
    """Install every tracked package through its tracked manager.

    Args:
        config_path: Explicit config.yml.
        store_path: Explicit tracking store location.
        executor: Process executor (default: :class:`ShellExecutor`).
        catalog: Alternate manager catalog.
        dry_run: Report the commands without running them.

    Returns:
        SyncResult. ``error`` is set only if the store itself can't be
        located or loaded; per-manager failures are failed receipts.
    """
    result = SyncResult(dry_run=dry_run)

    try:
        config = load_config(config_path)
        result.store_path = resolve_store_path(store_path, config)
        store = load_store(result.store_path)
    except PaktError as e:
        result.error = str(e)
        result.error_kind = e.kind
        return result

    if store.is_empty:
        logger.info("Nothing tracked in %s — nothing to sync", result.store_path)
        return result

    runner = executor or ShellExecutor()

    for manager in store.managers():
        packages = store.packages_for(manager)
        result.packages[manager] = packages

        chain = compose(PackageAction.INSTALL, [manager], catalog=catalog)
        if chain.is_empty:
            logger.warning("Skipping %s: not a supported package manager", manager)
            result.receipts.append(
                Receipt.skip(manager=manager, reason=f"Unsupported package manager: {manager}")
            )
            continue

        chain = chain.with_packages(packages)

        if dry_run:
            result.receipts.append(
                Receipt.skip(
                    manager=manager,
                    reason=f"[dry-run] Would execute: {chain.render()}",
                    command=chain.render(),
                    metadata={"dry_run": True},
                )
            )
            continue

        if not runner.is_available(chain):
            logger.error("Skipping %s: not available on this system", manager)
            result.receipts.append(
                Receipt.failure(
                    manager=manager,
                    error=f"Package manager not available on this system: {manager}",
                    command=chain.render(),
                )
            )
            continue

        receipt = runner.execute(chain, manager=manager)
        if receipt.failed:
            logger.error("Sync of %s failed: %s", manager, receipt.error)
        result.receipts.append(receipt)

    return result
