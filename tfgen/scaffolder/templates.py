"""Jinja2 template rendering for project scaffolding.

Provides the ``TemplateRenderer`` class, which loads template bodies from a
:class:`~tfgen.scaffolder.store.TemplateStore` and renders them with a
``TemplateContext`` plus a shared registry of helper functions.  Rendering is
all-or-nothing: the caller either gets the complete text or a
``TemplateRenderError``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from jinja2 import (
    Environment,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from .context import TemplateContext
from .errors import ScaffoldError, TemplateNotFoundError, TemplateRenderError
from .naming import camel_case, pascal_case, pluralize, snake_case
from .store import StoreLoader, TemplateStore, select_store


# ---------------------------------------------------------------------------
# Function registry
# ---------------------------------------------------------------------------


def _contains(value: str, sub: str) -> bool:
    return sub in value


def _replace(value: str, old: str, new: str) -> str:
    return value.replace(old, new)


def _trim_prefix(value: str, prefix: str) -> str:
    return value.removeprefix(prefix)


def _trim_suffix(value: str, suffix: str) -> str:
    return value.removesuffix(suffix)


def _add(a: int, b: int) -> int:
    return a + b


def _is_last(index: int, seq: Any) -> bool:
    """True when *index* is the final position of a list-like *seq*."""
    if isinstance(seq, (str, bytes)) or not isinstance(seq, Sequence):
        return False
    return index == len(seq) - 1


FUNCTIONS: dict[str, Callable[..., Any]] = {
    "lower": str.lower,
    "upper": str.upper,
    "title": str.title,
    "pascal": pascal_case,
    "camel": camel_case,
    "snake": snake_case,
    "plural": pluralize,
    "contains": _contains,
    "replace": _replace,
    "trim_prefix": _trim_prefix,
    "trim_suffix": _trim_suffix,
    "add": _add,
    "is_last": _is_last,
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders scaffolding templates from a single ``TemplateStore``.

    Every helper in :data:`FUNCTIONS` is available both as a global
    (``{{ pascal(entity_name) }}``) and as a filter
    (``{{ entity_name | snake }}``).  Undefined names are errors, not empty
    strings.
    """

    def __init__(self, store: TemplateStore | None = None) -> None:
        self.store = store if store is not None else select_store(None)
        self.env = Environment(
            loader=StoreLoader(self.store),
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals.update(FUNCTIONS)
        self.env.filters.update(FUNCTIONS)

    # -- Rendering ---------------------------------------------------------

    def render(
        self,
        template_id: str,
        context: TemplateContext | Mapping[str, Any],
    ) -> str:
        """Render the template stored under *template_id*.

        Raises:
            TemplateNotFoundError: the store has no such template.
            PathTraversalError: the id escapes an override directory.
            TemplateRenderError: the body is malformed or rendering failed.
        """
        try:
            template = self.env.get_template(template_id)
            return template.render(**_as_variables(context))
        except ScaffoldError:
            raise
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(exc.name or template_id) from exc
        except TemplateSyntaxError as exc:
            raise TemplateRenderError(
                template_id, f"line {exc.lineno}: {exc.message}"
            ) from exc
        except TemplateError as exc:
            raise TemplateRenderError(template_id, str(exc)) from exc
        except Exception as exc:
            raise TemplateRenderError(template_id, f"{type(exc).__name__}: {exc}") from exc

    def render_bytes(
        self,
        template_id: str,
        context: TemplateContext | Mapping[str, Any],
    ) -> bytes:
        """Render *template_id* and encode the result as UTF-8."""
        return self.render(template_id, context).encode("utf-8")


def _as_variables(context: TemplateContext | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(context, TemplateContext):
        return context.template_vars()
    return dict(context)
