"""
Manager selection — which package manager(s) does this invocation use?

Precedence is a table, not an if/else chain. Each strategy looks at the
CLI flags and either returns a manager list or None ("no decision");
the first decision wins. Autodetection sits last and always decides
(or raises ``DetectionError``).

    --flatpak  >  --nix  >  --update-all (system + flatpak)  >  autodetect
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from pakt.core.services.detection import detect_manager

logger = logging.getLogger(__name__)

Detector = Callable[[], str]


@dataclass(frozen=True)
class SelectionOptions:
    """Manager-related CLI flags."""

    flatpak: bool = False
    nix: bool = False
    update_all: bool = False


Strategy = Callable[[SelectionOptions, Detector], "list[str] | None"]


def _flatpak_flag(opts: SelectionOptions, detect: Detector) -> list[str] | None:
    return ["flatpak"] if opts.flatpak else None


def _nix_flag(opts: SelectionOptions, detect: Detector) -> list[str] | None:
    return ["nix"] if opts.nix else None


def _update_all(opts: SelectionOptions, detect: Detector) -> list[str] | None:
    if not opts.update_all:
        return None
    return [detect(), "flatpak"]


def _autodetect(opts: SelectionOptions, detect: Detector) -> list[str] | None:
    return [detect()]


SELECTION_STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ("flatpak", _flatpak_flag),
    ("nix", _nix_flag),
    ("update-all", _update_all),
    ("autodetect", _autodetect),
)


def select_managers(
    options: SelectionOptions,
    *,
    detect: Detector | None = None,
    strategies: tuple[tuple[str, Strategy], ...] = SELECTION_STRATEGIES,
) -> list[str]:
    """Resolve the manager list for an install/remove/update invocation.

    Args:
        options: The CLI flags.
        detect: System manager detector (default: :func:`detect_manager`).
            Only called by strategies that need it.
        strategies: Ordered strategy table.

    Returns:
        Manager ids, in execution order. Empty only if no strategy decides.

    Raises:
        DetectionError: Propagated from the detector.
    """
    detector = detect or detect_manager
    for name, strategy in strategies:
        managers = strategy(options, detector)
        if managers is not None:
            logger.debug("Manager selection: %s → %s", name, managers)
            return managers
    return []
