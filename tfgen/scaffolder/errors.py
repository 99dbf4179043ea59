"""Exceptions raised by the scaffolding engine."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every scaffolding failure."""


class PathTraversalError(ScaffoldError):
    """Raised when a path resolves outside its confining base directory."""

    def __init__(self, path: str, base: str) -> None:
        self.path = path
        self.base = base
        super().__init__(f"path traversal detected: {path} escapes base directory {base}")


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template id is not present in the active store."""

    def __init__(self, template_id: str, reason: str = "") -> None:
        self.template_id = template_id
        message = f"template {template_id} not found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TemplateRenderError(ScaffoldError):
    """Raised when a template fails to parse or render."""

    def __init__(self, template_id: str, reason: str) -> None:
        self.template_id = template_id
        super().__init__(f"failed to render template {template_id}: {reason}")


class GenerationError(ScaffoldError):
    """Raised when a generation run cannot proceed at all."""
