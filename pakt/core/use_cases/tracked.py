"""
List use case — show what the tracking store holds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pakt.core.config.loader import load_config, resolve_store_path
from pakt.core.errors import PaktError
from pakt.core.persistence.store_file import load_store


@dataclass
class TrackedResult:
    """Tracked packages, optionally narrowed to one manager."""

    store_path: Path | None = None
    package_managers: dict[str, list[str]] = field(default_factory=dict)
    error: str | None = None
    error_kind: str | None = None

    @property
    def total(self) -> int:
        return sum(len(p) for p in self.package_managers.values())

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error, "error_kind": self.error_kind}
        return {
            "store_path": str(self.store_path) if self.store_path else None,
            "total": self.total,
            "package_managers": self.package_managers,
        }


def list_tracked(
    *,
    manager: str | None = None,
    config_path: Path | None = None,
    store_path: Path | None = None,
) -> TrackedResult:
    result = TrackedResult()
    try:
        config = load_config(config_path)
        result.store_path = resolve_store_path(store_path, config)
        store = load_store(result.store_path)
    except PaktError as e:
        result.error = str(e)
        result.error_kind = e.kind
        return result

    if manager:
        pkgs = store.packages_for(manager)
        result.package_managers = {manager: pkgs} if pkgs else {}
    else:
        result.package_managers = {m: store.packages_for(m) for m in store.managers()}
    return result
