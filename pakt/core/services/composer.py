"""
Command composer — (action, managers) → CommandChain.

For each manager, in the order given, the composer looks up its spec and
emits one segment per step: ``[sudo] <binary> <fragments...>``. Managers
that don't support the action are skipped; if nothing is left the chain
is empty and callers must treat that as "unsupported action or package
manager".

Package placement:
    A package name goes onto the *last* segment of the whole chain.
    If that segment belongs to a manager that attaches packages for the
    action (nix install), the name is glued onto its final fragment with
    no space. Every other segment is left untouched.

Chaining law:
    compose(a, [m1, m2]).render()
        == compose(a, [m1]).render() + " && " + compose(a, [m2]).render()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pakt.core.data.catalog import SUDO, lookup
from pakt.core.errors import UnsupportedOperationError
from pakt.core.models.command import CommandChain, CommandSegment
from pakt.core.models.manager import ManagerSpec, PackageAction

logger = logging.getLogger(__name__)


def _segments_for(
    spec: ManagerSpec,
    action: PackageAction,
    *,
    wildcard: bool,
) -> list[CommandSegment]:
    """Build the segments one manager contributes for ``action``."""
    steps = spec.steps(action)
    prefix = [SUDO] if spec.needs_sudo else []
    segments: list[CommandSegment] = []

    for i, step in enumerate(steps):
        last = i == len(steps) - 1
        argv = [*prefix, spec.executable, *step]
        if last and wildcard and action is PackageAction.UPDATE:
            argv.extend(spec.update_all_args)
        segments.append(
            CommandSegment(
                manager=spec.id,
                argv=tuple(argv),
                attach_package=last and spec.attaches_package(action),
            )
        )

    return segments


def compose(
    action: str | PackageAction,
    manager_ids: Sequence[str],
    package: str | None = None,
    *,
    catalog: Mapping[str, ManagerSpec] | None = None,
) -> CommandChain:
    """Compose the command chain for ``action`` across ``manager_ids``.

    Args:
        action: ``install``, ``remove`` or ``update``.
        manager_ids: Managers to chain, in execution order.
        package: Optional package name. For ``update``, None means
            "update everything".
        catalog: Alternate manager catalog (default: the built-in one).

    Returns:
        The chain. Empty when no manager supports the action, or when the
        action itself is unknown.
    """
    try:
        act = PackageAction.parse(action)
    except ValueError:
        logger.debug("Unknown action %r — composing nothing", action)
        return CommandChain()

    segments: list[CommandSegment] = []
    for manager_id in manager_ids:
        spec = lookup(manager_id, catalog)
        if spec is None:
            logger.debug("Skipping unknown package manager %r", manager_id)
            continue
        if not spec.supports(act):
            logger.debug("Skipping %s: %s not supported", manager_id, act.value)
            continue
        segments.extend(_segments_for(spec, act, wildcard=not package))

    chain = CommandChain(segments=tuple(segments))
    if package:
        chain = chain.with_packages([package])
    return chain


def build_command(
    action: str | PackageAction,
    manager_ids: Sequence[str],
    package: str | None = None,
    *,
    catalog: Mapping[str, ManagerSpec] | None = None,
) -> CommandChain:
    """Like :func:`compose`, but an empty result is an error.

    Raises:
        UnsupportedOperationError: If no manager yields a segment.
    """
    name = action.value if isinstance(action, PackageAction) else action
    chain = compose(action, manager_ids, package, catalog=catalog)
    if chain.is_empty:
        label = ", ".join(manager_ids) or "no package manager"
        raise UnsupportedOperationError(
            f"Unsupported action or package manager: {name} ({label})"
        )
    logger.debug("Composed %s → %s", name, chain.render())
    return chain
