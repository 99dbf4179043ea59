"""Path resolution with explicit confinement semantics.

Two resolvers share one interface so that every call site states its intent:

* :class:`ConfinedResolver` joins a relative path onto a base directory and
  rejects any result that is not the base itself or inside it.
* :class:`UnconfinedResolver` only makes a path absolute and normalised; it
  performs no traversal protection at all.

Resolution is lexical (``os.path.abspath``/``normpath``); symlinks are not
followed.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path

from .errors import PathTraversalError


class PathResolver(ABC):
    """Turns a user- or manifest-supplied path into an absolute ``Path``."""

    @abstractmethod
    def resolve(self, path: str | Path) -> Path:
        """Return the absolute, normalised path for *path*."""

    def read_bytes(self, path: str | Path) -> bytes:
        """Resolve *path* and return the file's content."""
        return self.resolve(path).read_bytes()


class ConfinedResolver(PathResolver):
    """Resolves paths relative to ``base`` and refuses to leave it.

    A candidate is accepted only when it equals the base or the base is one of
    its parent directories, so ``/data/app-evil`` is rejected for base
    ``/data/app`` even though it shares a string prefix.
    """

    def __init__(self, base: str | Path) -> None:
        self.base = Path(os.path.abspath(base))

    def resolve(self, path: str | Path) -> Path:
        candidate = Path(os.path.normpath(os.path.join(self.base, path)))
        if candidate != self.base and self.base not in candidate.parents:
            raise PathTraversalError(str(path), str(self.base))
        return candidate

    def __repr__(self) -> str:
        return f"ConfinedResolver(base={str(self.base)!r})"


class UnconfinedResolver(PathResolver):
    """Makes a path absolute and normalised without any confinement."""

    def resolve(self, path: str | Path) -> Path:
        return Path(os.path.abspath(os.path.normpath(path)))

    def __repr__(self) -> str:
        return "UnconfinedResolver()"
