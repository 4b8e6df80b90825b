"""
Package action use case — install, remove or update through native managers.

The vertical slice for the three mutating verbs:

    flags → select managers → compose → execute → track (install/remove)

Everything up to and including execution is fatal on failure. Tracking
is not: once the package manager has done its job, a store that can't
be written only produces a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pakt.adapters.base import Executor
from pakt.adapters.shell.command import ShellExecutor
from pakt.core.config.loader import load_config, resolve_store_path
from pakt.core.errors import ExecutionError, PaktError, PersistenceError, UnsupportedOperationError
from pakt.core.models.manager import ManagerSpec, PackageAction
from pakt.core.models.receipt import Receipt
from pakt.core.persistence.store_file import load_store, save_store
from pakt.core.services.composer import build_command
from pakt.core.services.detection import detect_manager
from pakt.core.services.selection import SelectionOptions, select_managers

logger = logging.getLogger(__name__)

_PAST = {PackageAction.INSTALL: "installed", PackageAction.REMOVE: "removed"}


@dataclass
class ActionResult:
    """Result of an install/remove/update invocation."""

    action: str = ""
    package: str | None = None
    managers: list[str] = field(default_factory=list)
    command: str = ""
    receipt: Receipt | None = None
    store_path: Path | None = None
    tracked_under: str | None = None
    store_changed: bool = False
    dry_run: bool = False
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {"action": self.action, "package": self.package}
        if self.error:
            result["error"] = self.error
            result["error_kind"] = self.error_kind
            return result

        result["managers"] = self.managers
        result["command"] = self.command
        result["dry_run"] = self.dry_run
        result["store_path"] = str(self.store_path) if self.store_path else None
        result["tracked_under"] = self.tracked_under
        result["store_changed"] = self.store_changed
        if self.receipt:
            result["receipt"] = self.receipt.model_dump(mode="json")
        if self.warnings:
            result["warnings"] = self.warnings
        return result


def run_package_action(
    action: str | PackageAction,
    package: str | None = None,
    *,
    options: SelectionOptions | None = None,
    config_path: Path | None = None,
    store_path: Path | None = None,
    executor: Executor | None = None,
    catalog: Mapping[str, ManagerSpec] | None = None,
    detect: Callable[[], str] | None = None,
    dry_run: bool = False,
) -> ActionResult:
    """Install, remove or update a package.

    Args:
        action: ``install``, ``remove`` or ``update``.
        package: Package name. Required for install/remove; omit for a
            full update.
        options: Manager-selection flags.
        config_path: Explicit config.yml.
        store_path: Explicit tracking store location.
        executor: Process executor (default: :class:`ShellExecutor`).
        catalog: Alternate manager catalog.
        detect: System manager detector override.
        dry_run: Compose and report the command without running it.

    Returns:
        ActionResult. ``error`` is set for every fatal failure; tracking
        failures are reported in ``warnings``.
    """
    name = action.value if isinstance(action, PackageAction) else str(action)
    result = ActionResult(action=name, package=package, dry_run=dry_run)

    try:
        act = _parse_action(action)
        if act is not PackageAction.UPDATE and not package:
            raise UnsupportedOperationError(f"'{act.value}' requires a package name")

        config = load_config(config_path)
        store_file = resolve_store_path(store_path, config)
        result.store_path = store_file

        detector = detect or (lambda: detect_manager(aliases=config.distro_aliases))
        result.managers = select_managers(options or SelectionOptions(), detect=detector)
        chain = build_command(act, result.managers, package, catalog=catalog)
        result.command = chain.render()

        if dry_run:
            result.receipt = Receipt.skip(
                manager=",".join(chain.managers),
                reason=f"[dry-run] Would execute: {result.command}",
                command=result.command,
                metadata={"dry_run": True},
            )
            return result

        runner = executor or ShellExecutor()
        if not runner.is_available(chain):
            raise ExecutionError(
                f"Package manager not available on this system: {', '.join(chain.managers)}"
            )
        receipt = runner.execute(chain)
        result.receipt = receipt
        if not receipt.ok:
            raise ExecutionError(
                f"{result.command}: {receipt.error or 'command failed'}",
                return_code=receipt.return_code,
            )
    except PaktError as e:
        logger.debug("%s failed: %s", name, e)
        result.error = str(e)
        result.error_kind = e.kind
        return result

    if package and act is not PackageAction.UPDATE:
        # The package lands on the chain's last segment, so that
        # segment's manager is the one that actually owns it.
        _track(result, act, chain.segments[-1].manager, package, store_file)

    return result


def _parse_action(action: str | PackageAction) -> PackageAction:
    try:
        return PackageAction.parse(action)
    except ValueError:
        raise UnsupportedOperationError(f"Unknown action: {action}") from None


def _track(
    result: ActionResult,
    action: PackageAction,
    manager: str,
    package: str,
    store_file: Path,
) -> None:
    """Record the outcome in the tracking store; failures become warnings."""
    result.tracked_under = manager
    try:
        store = load_store(store_file)
        if action is PackageAction.INSTALL:
            changed = store.add(manager, package)
        else:
            changed = store.remove(manager, package)
        if changed:
            save_store(store, store_file)
        result.store_changed = changed
    except PersistenceError as e:
        logger.warning("Tracking store not updated: %s", e)
        result.warnings.append(f"Package {_PAST[action]}, but tracking failed: {e}")
