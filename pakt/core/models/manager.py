"""
Package manager models — actions and the per-manager command spec.

A ``ManagerSpec`` describes how one native package manager spells each
action. Specs are frozen; the catalog in ``pakt.core.data.catalog``
builds them once at import time.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PackageAction(str, Enum):
    """An operation the user can ask a package manager to perform."""

    INSTALL = "install"
    REMOVE = "remove"
    UPDATE = "update"

    @classmethod
    def parse(cls, value: str | PackageAction) -> PackageAction:
        """Coerce a plain string (e.g. a CLI command name) to an action."""
        if isinstance(value, cls):
            return value
        return cls(value.strip().lower())


# A step is one invocation of the manager binary: the argv fragments
# that follow ``[sudo] <binary>``.
Step = tuple[str, ...]


class ManagerSpec(BaseModel):
    """How to drive one package manager.

    ``actions`` maps each supported action to one or more steps. Most
    actions are a single step; apt's update is two (``update`` then
    ``upgrade``), each run with its own privilege prefix.

    ``attached_package_actions`` lists the actions for which the package
    name is glued onto the last fragment with no separating space
    (``nixpkgs#ripgrep``). ``update_all_args`` is appended to an update
    that names no package.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    binary: str = ""
    actions: Mapping[PackageAction, tuple[Step, ...]] = Field(
        default_factory=dict, validate_default=True
    )
    needs_sudo: bool = False
    attached_package_actions: frozenset[PackageAction] = frozenset()
    update_all_args: tuple[str, ...] = ()

    @field_validator("actions")
    @classmethod
    def _read_only(
        cls, value: Mapping[PackageAction, tuple[Step, ...]]
    ) -> Mapping[PackageAction, tuple[Step, ...]]:
        # Frozen only guards reassignment; the table itself must not change.
        return MappingProxyType(dict(value))

    @property
    def executable(self) -> str:
        """Binary name, defaulting to the manager id."""
        return self.binary or self.id

    def supports(self, action: PackageAction) -> bool:
        return bool(self.actions.get(action))

    def steps(self, action: PackageAction) -> tuple[Step, ...]:
        """Argv fragments for each step of ``action`` (empty if unsupported)."""
        return self.actions.get(action, ())

    def attaches_package(self, action: PackageAction) -> bool:
        return action in self.attached_package_actions
