"""
Error taxonomy — every failure pakt reports derives from ``PaktError``.

Use cases catch these into their result objects; the CLI renders the
message and exits non-zero. ``kind`` is the short label shown in
``--json`` output.
"""

from __future__ import annotations


class PaktError(Exception):
    """Base class for all pakt errors."""

    kind = "error"


class ConfigurationError(PaktError):
    """Home/config location cannot be determined, or config.yml is invalid."""

    kind = "configuration"


class DetectionError(PaktError):
    """Distro is unrecognized or the detection command failed."""

    kind = "detection"


class UnsupportedOperationError(PaktError):
    """The composed command is empty for the chosen action and managers."""

    kind = "unsupported"


class ExecutionError(PaktError):
    """The child process could not be spawned or exited non-zero."""

    kind = "execution"

    def __init__(self, message: str, return_code: int | None = None):
        super().__init__(message)
        self.return_code = return_code


class PersistenceError(PaktError):
    """Tracking store could not be read, parsed or written."""

    kind = "persistence"
