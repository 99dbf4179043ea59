"""Entity field-specification parsing.

A field specification is a comma-separated list of ``name:type`` pairs where
the type may carry a trailing ``?`` to mark the field as nullable::

    "name:string,email:string,age:int,bio:text?"

Malformed entries are skipped rather than rejected; callers that need to
know about them use :func:`parse_fields_detailed`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .naming import camel_case, pascal_case, snake_case
from .types import is_nullable, resolve_go_type


class FieldSpec(BaseModel):
    """One entity attribute with its derived identifiers and Go type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name as given by the user")
    raw_type: str = Field(..., description="Type token, optionally suffixed with '?'")
    pascal_name: str
    camel_name: str
    snake_name: str
    resolved_type: str
    nullable: bool = False

    @classmethod
    def from_pair(cls, name: str, raw_type: str) -> "FieldSpec":
        """Build a ``FieldSpec`` from an already-trimmed name and type token."""
        return cls(
            name=name,
            raw_type=raw_type,
            pascal_name=pascal_case(name),
            camel_name=camel_case(name),
            snake_name=snake_case(name),
            resolved_type=resolve_go_type(raw_type),
            nullable=is_nullable(raw_type),
        )


class FieldParseResult(BaseModel):
    """Parsed fields plus the raw entries that were dropped as malformed."""

    model_config = ConfigDict(frozen=True)

    fields: list[FieldSpec] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)


def parse_fields_detailed(spec: str) -> FieldParseResult:
    """Parse *spec* and report skipped entries alongside the fields.

    Order is preserved and duplicate names are kept as-is.
    """
    fields: list[FieldSpec] = []
    skipped: list[str] = []
    if not spec:
        return FieldParseResult()

    for entry in spec.split(","):
        parts = entry.strip().split(":")
        if len(parts) != 2:
            skipped.append(entry)
            continue
        name, raw_type = parts[0].strip(), parts[1].strip()
        if not name or not raw_type:
            skipped.append(entry)
            continue
        fields.append(FieldSpec.from_pair(name, raw_type))

    return FieldParseResult(fields=fields, skipped=skipped)


def parse_fields(spec: str) -> list[FieldSpec]:
    """Parse a field-specification string into an ordered list of fields."""
    return parse_fields_detailed(spec).fields
