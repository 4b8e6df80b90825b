"""
Status use case — the manager catalog as seen from this machine.

Reports the detected distro and system manager, and for every catalog
entry whether its binary is on PATH and how many packages are tracked
under it. Nothing here is fatal: an unknown distro or unreadable store
is reported, not raised.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pakt.core.config.loader import load_config, resolve_store_path
from pakt.core.data.catalog import known_managers, lookup
from pakt.core.errors import PaktError
from pakt.core.models.manager import ManagerSpec
from pakt.core.persistence.store_file import load_store
from pakt.core.services import detection


@dataclass
class ManagerStatus:
    id: str
    binary: str
    needs_sudo: bool
    available: bool
    actions: list[str]
    tracked: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "binary": self.binary,
            "needs_sudo": self.needs_sudo,
            "available": self.available,
            "actions": self.actions,
            "tracked": self.tracked,
        }


@dataclass
class StatusResult:
    """Detection outcome plus per-manager status."""

    distro: str | None = None
    system_manager: str | None = None
    store_path: Path | None = None
    managers: list[ManagerStatus] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "error_kind": self.error_kind}
        result: dict = {
            "distro": self.distro,
            "system_manager": self.system_manager,
            "store_path": str(self.store_path) if self.store_path else None,
            "managers": [m.to_dict() for m in self.managers],
        }
        if self.warnings:
            result["warnings"] = self.warnings
        return result


def get_status(
    *,
    config_path: Path | None = None,
    store_path: Path | None = None,
    catalog: Mapping[str, ManagerSpec] | None = None,
    probe: Callable[[], str | None] | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> StatusResult:
    result = StatusResult()
    try:
        config = load_config(config_path)
        result.store_path = resolve_store_path(store_path, config)
    except PaktError as e:
        result.error = str(e)
        result.error_kind = e.kind
        return result

    result.distro = (probe or detection.detect_distro)()
    result.system_manager = detection.manager_for_distro(result.distro, config.distro_aliases)
    if result.system_manager is None:
        result.warnings.append(
            f"No system package manager for distro '{result.distro or 'unknown'}'"
        )

    counts: dict[str, int] = {}
    try:
        store = load_store(result.store_path)
        counts = {m: len(store.packages_for(m)) for m in store.managers()}
    except PaktError as e:
        result.warnings.append(str(e))

    for manager_id in known_managers(catalog):
        spec = lookup(manager_id, catalog)
        result.managers.append(
            ManagerStatus(
                id=spec.id,
                binary=spec.executable,
                needs_sudo=spec.needs_sudo,
                available=which(spec.executable) is not None,
                actions=[a.value for a in spec.actions],
                tracked=counts.get(spec.id, 0),
            )
        )

    return result
