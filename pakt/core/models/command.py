"""
Command models — structured argv segments chained by ``&&``.

The composer never builds raw shell strings. A ``CommandChain`` is an
ordered list of ``CommandSegment`` argv lists where each segment runs
only if the previous one succeeded. It is rendered to a shell string
only at the executor boundary, and only when more than one segment has
to run.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field, replace

# Sequential-on-success combinator used when rendering for ``sh -c``.
CHAIN_OPERATOR = "&&"


@dataclass(frozen=True)
class CommandSegment:
    """One process invocation, attributed to the manager that owns it."""

    manager: str
    argv: tuple[str, ...]
    attach_package: bool = False

    def with_packages(self, packages: list[str] | tuple[str, ...]) -> CommandSegment:
        """Return a copy with package names appended.

        When ``attach_package`` is set, the first name is glued onto the
        last fragment with no space and any further names repeat that
        fragment as their prefix (``nixpkgs#a nixpkgs#b``).
        """
        if not packages:
            return self
        if self.attach_package and self.argv:
            prefix = self.argv[-1]
            head = self.argv[:-1]
            return replace(self, argv=head + tuple(prefix + p for p in packages))
        return replace(self, argv=self.argv + tuple(packages))

    def render(self) -> str:
        return " ".join(_quote(token) for token in self.argv)


@dataclass(frozen=True)
class CommandChain:
    """Segments joined by sequential-on-success."""

    segments: tuple[CommandSegment, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def needs_shell(self) -> bool:
        """Whether running this chain requires ``sh -c`` for ``&&``."""
        return len(self.segments) > 1

    @property
    def managers(self) -> list[str]:
        """Manager ids in chain order, without repeats."""
        seen: list[str] = []
        for seg in self.segments:
            if seg.manager not in seen:
                seen.append(seg.manager)
        return seen

    def with_packages(self, packages: list[str] | tuple[str, ...]) -> CommandChain:
        """Append package names to the last segment of the chain."""
        if self.is_empty or not packages:
            return self
        last = self.segments[-1].with_packages(packages)
        return CommandChain(segments=self.segments[:-1] + (last,))

    def argv(self) -> list[str]:
        """The single argv list of a one-segment chain.

        Raises:
            ValueError: If the chain is empty or needs a shell.
        """
        if len(self.segments) != 1:
            raise ValueError(
                f"Chain with {len(self.segments)} segments has no single argv"
            )
        return list(self.segments[0].argv)

    def render(self) -> str:
        """Render as a shell command line (``a && b``)."""
        return f" {CHAIN_OPERATOR} ".join(seg.render() for seg in self.segments)

    def __str__(self) -> str:
        return self.render()


def _quote(token: str) -> str:
    # shlex.quote would wrap "nixpkgs#" and friends; only quote what
    # the shell would actually split or expand.
    if token and not token.startswith("#") and all(
        c.isalnum() or c in "-_.,:/=+@#%^" for c in token
    ):
        return token
    return shlex.quote(token)
