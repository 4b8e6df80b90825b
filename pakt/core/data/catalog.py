"""
Package manager catalog — the fixed command table.

Pure data plus one lookup. The catalog is a read-only mapping built
once at import; callers that need a different table (tests, mostly)
pass their own mapping through the ``catalog`` keyword that every
consumer accepts.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pakt.core.models.manager import ManagerSpec, PackageAction

_I = PackageAction.INSTALL
_R = PackageAction.REMOVE
_U = PackageAction.UPDATE


_SPECS: tuple[ManagerSpec, ...] = (
    ManagerSpec(
        id="dnf",
        needs_sudo=True,
        actions={_I: (("install",),), _R: (("remove",),), _U: (("update",),)},
    ),
    ManagerSpec(
        id="apt",
        needs_sudo=True,
        # apt refreshes metadata and upgrades in separate invocations
        actions={
            _I: (("install",),),
            _R: (("remove",),),
            _U: (("update",), ("upgrade",)),
        },
    ),
    ManagerSpec(
        id="pacman",
        needs_sudo=True,
        actions={_I: (("-S",),), _R: (("-R",),), _U: (("-Syu",),)},
    ),
    ManagerSpec(
        id="flatpak",
        actions={_I: (("install",),), _R: (("remove",),), _U: (("update",),)},
    ),
    ManagerSpec(
        id="nix",
        actions={
            # package reference must read nixpkgs#<name>
            _I: (("profile", "install", "nixpkgs#"),),
            _R: (("profile", "remove"),),
            _U: (("profile", "upgrade"),),
        },
        attached_package_actions=frozenset({_I}),
        update_all_args=("--all",),
    ),
)

MANAGER_CATALOG: Mapping[str, ManagerSpec] = MappingProxyType({s.id: s for s in _SPECS})

# /etc/os-release ID → system package manager.
DISTRO_MANAGERS: Mapping[str, str] = MappingProxyType({
    "fedora": "dnf",
    "ubuntu": "apt",
    "linuxmint": "apt",
    "arch": "pacman",
})

# Privilege-escalation prefix for managers with ``needs_sudo``.
SUDO = "sudo"


def lookup(
    manager_id: str,
    catalog: Mapping[str, ManagerSpec] | None = None,
) -> ManagerSpec | None:
    """Return the spec for ``manager_id``, or None if it is not in the catalog."""
    table = MANAGER_CATALOG if catalog is None else catalog
    return table.get(manager_id)


def known_managers(catalog: Mapping[str, ManagerSpec] | None = None) -> list[str]:
    """Manager ids in catalog order."""
    table = MANAGER_CATALOG if catalog is None else catalog
    return list(table.keys())
