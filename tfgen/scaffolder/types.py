"""Abstract field-type tokens to Go type names."""

from __future__ import annotations

DEFAULT_GO_TYPE = "string"

_GO_TYPE_MAP: dict[str, str] = {
    "string": "string",
    "text": "string",
    "int": "int",
    "integer": "int",
    "int64": "int64",
    "bigint": "int64",
    "float": "float64",
    "float64": "float64",
    "decimal": "float64",
    "bool": "bool",
    "boolean": "bool",
    "time": "time.Time",
    "datetime": "time.Time",
    "timestamp": "time.Time",
    "uuid": "uuid.UUID",
}


def is_nullable(type_token: str) -> bool:
    """Return ``True`` when the token carries the ``?`` nullable marker."""
    return type_token.endswith("?")


def resolve_go_type(type_token: str) -> str:
    """Map a field-type token such as ``"int64"`` or ``"uuid?"`` to Go.

    Unknown tokens fall back to ``string``; no error is raised.
    """
    key = type_token.removesuffix("?").lower()
    return _GO_TYPE_MAP.get(key, DEFAULT_GO_TYPE)


def known_type_tokens() -> list[str]:
    """Return every recognised token, sorted."""
    return sorted(_GO_TYPE_MAP)
