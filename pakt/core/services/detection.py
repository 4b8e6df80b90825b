"""
Distro detection — which system package manager does this machine use?

Reads the ``ID=`` field of /etc/os-release through a shell one-liner
and maps it to a manager id. Only the system manager is detected;
flatpak and nix are always chosen explicitly.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Mapping

from pakt.core.data.catalog import DISTRO_MANAGERS
from pakt.core.errors import DetectionError

logger = logging.getLogger(__name__)

_DETECT_COMMAND = "grep '^ID=' /etc/os-release | cut -d'=' -f2 | tr -d '\\n'"
_DETECT_TIMEOUT = 10


def detect_distro() -> str | None:
    """Return the lowercase distro id, or None if it can't be determined."""
    try:
        r = subprocess.run(
            ["sh", "-c", _DETECT_COMMAND],
            capture_output=True,
            text=True,
            timeout=_DETECT_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Distro detection failed: %s", e)
        return None

    if r.returncode != 0:
        logger.debug("Distro detection exited %d: %s", r.returncode, r.stderr.strip())
        return None

    # Some distros quote the value (ID="rocky")
    distro = r.stdout.strip().strip("\"'").lower()
    return distro or None


def manager_for_distro(
    distro: str | None,
    aliases: Mapping[str, str] | None = None,
) -> str | None:
    """Map a distro id to its system manager. Aliases win over the built-in table."""
    if not distro:
        return None
    if aliases and distro in aliases:
        return aliases[distro]
    return DISTRO_MANAGERS.get(distro)


def detect_manager(
    *,
    aliases: Mapping[str, str] | None = None,
    probe: Callable[[], str | None] | None = None,
) -> str:
    """Detect the system package manager.

    Args:
        aliases: Extra distro → manager mappings (from config.yml).
        probe: Distro probe override (default: :func:`detect_distro`).

    Raises:
        DetectionError: If the distro is unknown or unsupported.
    """
    distro = (probe or detect_distro)()
    if distro is None:
        raise DetectionError("Could not detect the Linux distribution")

    manager = manager_for_distro(distro, aliases)
    if manager is None:
        raise DetectionError(
            f"No package manager detected for distro '{distro}' "
            "(use --flatpak/--nix or add a distro_aliases entry)"
        )

    logger.info("Detected distro %s → %s", distro, manager)
    return manager
