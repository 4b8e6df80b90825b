"""
TrackingStore — the persisted record of what pakt installed.

Serialized to ``~/.config/pakt/package.json``::

    {
        "package_managers": {
            "dnf": ["vim", "git"],
            "flatpak": ["org.mozilla.firefox"]
        }
    }

Lists are ordered (replay order matches install order) and never hold
the same package twice.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class TrackingStore(BaseModel):
    """Manager id → ordered, de-duplicated package names."""

    package_managers: dict[str, list[str]] = Field(default_factory=dict)

    @field_validator("package_managers")
    @classmethod
    def _dedupe(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        # Hand-edited files may repeat a name; keep the first occurrence.
        return {mgr: list(dict.fromkeys(pkgs)) for mgr, pkgs in value.items()}

    @property
    def is_empty(self) -> bool:
        return not any(self.package_managers.values())

    def managers(self) -> list[str]:
        """Manager ids with at least one tracked package, in store order."""
        return [m for m, pkgs in self.package_managers.items() if pkgs]

    def packages_for(self, manager: str) -> list[str]:
        return list(self.package_managers.get(manager, []))

    def contains(self, manager: str, package: str) -> bool:
        return package in self.package_managers.get(manager, [])

    def add(self, manager: str, package: str) -> bool:
        """Track ``package`` under ``manager``. Returns True if it was new."""
        if self.contains(manager, package):
            return False
        self.package_managers.setdefault(manager, []).append(package)
        return True

    def remove(self, manager: str, package: str) -> bool:
        """Stop tracking ``package``. Returns True if it was tracked.

        A manager whose list becomes empty is dropped from the store.
        """
        if not self.contains(manager, package):
            return False
        packages = self.package_managers[manager]
        packages.remove(package)
        if not packages:
            del self.package_managers[manager]
        return True

    def total(self) -> int:
        return sum(len(p) for p in self.package_managers.values())
