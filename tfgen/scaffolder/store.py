"""Template sources.

Templates are addressed by a relative identifier such as
``"project/go.mod.j2"``.  Two interchangeable stores resolve those ids:

* :class:`BundledTemplateStore` reads the templates shipped inside the
  ``tfgen.scaffolder`` package.
* :class:`DirectoryTemplateStore` reads from a user-supplied override
  directory.

:func:`select_store` picks exactly one of them per run; the two are never
mixed, so an override directory must provide every template it is asked for.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from jinja2 import BaseLoader, Environment, TemplateNotFound

from .errors import PathTraversalError, TemplateNotFoundError
from .paths import ConfinedResolver, UnconfinedResolver

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


class TemplateStore(ABC):
    """A read-only source of template bodies."""

    @abstractmethod
    def read(self, template_id: str) -> bytes:
        """Return the raw bytes of *template_id*.

        Raises:
            TemplateNotFoundError: if the store has no such template.
            PathTraversalError: if the id escapes the store's directory.
        """

    @abstractmethod
    def list_templates(self, prefix: str = "") -> list[str]:
        """Return the sorted ids of every template under *prefix*."""

    def exists(self, template_id: str) -> bool:
        try:
            self.read(template_id)
        except (TemplateNotFoundError, PathTraversalError):
            return False
        return True

    @staticmethod
    def _scan(root: Path, prefix: str) -> list[str]:
        search_dir = root / prefix if prefix else root
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(root).as_posix()
            for p in search_dir.rglob(f"*{TEMPLATE_SUFFIX}")
            if p.is_file()
        )


class BundledTemplateStore(TemplateStore):
    """Templates packaged with ``tfgen`` itself."""

    def __init__(self, root: Path = BUNDLED_TEMPLATE_DIR) -> None:
        self.root = root
        self._resolver = ConfinedResolver(root)

    def read(self, template_id: str) -> bytes:
        try:
            path = self._resolver.resolve(template_id)
            return path.read_bytes()
        except PathTraversalError as exc:
            raise TemplateNotFoundError(template_id, str(exc)) from exc
        except OSError as exc:
            raise TemplateNotFoundError(
                template_id, f"failed to read bundled template: {exc.strerror or exc}"
            ) from exc

    def list_templates(self, prefix: str = "") -> list[str]:
        return self._scan(self.root, prefix)

    def __repr__(self) -> str:
        return "BundledTemplateStore()"


class DirectoryTemplateStore(TemplateStore):
    """Templates read from an override directory.

    The id is first confined to ``template_dir``; the resulting absolute path
    is then read through the unconfined resolver.
    """

    def __init__(self, template_dir: str | Path) -> None:
        self.template_dir = Path(template_dir)
        self._confined = ConfinedResolver(self.template_dir)
        self._reader = UnconfinedResolver()

    def read(self, template_id: str) -> bytes:
        path = self._confined.resolve(template_id)
        try:
            return self._reader.read_bytes(path)
        except OSError as exc:
            raise TemplateNotFoundError(
                template_id, f"failed to read {path}: {exc.strerror or exc}"
            ) from exc

    def list_templates(self, prefix: str = "") -> list[str]:
        return self._scan(self._confined.base, prefix)

    def __repr__(self) -> str:
        return f"DirectoryTemplateStore({str(self.template_dir)!r})"


def select_store(template_dir: str | Path | None) -> TemplateStore:
    """Return the directory store when *template_dir* is set, else the bundled one."""
    if template_dir:
        return DirectoryTemplateStore(template_dir)
    return BundledTemplateStore()


class StoreLoader(BaseLoader):
    """Jinja2 loader backed by a :class:`TemplateStore`."""

    def __init__(self, store: TemplateStore) -> None:
        self.store = store

    def get_source(
        self, environment: Environment, template: str
    ) -> tuple[str, str | None, Callable[[], bool] | None]:
        try:
            raw = self.store.read(template)
        except TemplateNotFoundError as exc:
            raise TemplateNotFound(template) from exc
        return raw.decode("utf-8"), None, None

    def list_templates(self) -> list[str]:
        return self.store.list_templates()
