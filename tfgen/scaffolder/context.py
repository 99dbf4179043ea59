"""The single, read-only record passed to every template render."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_ENDPOINT, IntegrationConfig, ProjectConfig
from .fields import FieldSpec, parse_fields
from .naming import camel_case, pascal_case, pluralize, snake_case


class EntityInfo(BaseModel):
    """Summary of one entity, used by the cross-entity documentation."""

    model_config = ConfigDict(frozen=True)

    name: str
    plural_name: str
    fields: list[FieldSpec] = Field(default_factory=list)

    @classmethod
    def from_spec(cls, name: str, field_spec: str) -> "EntityInfo":
        return cls(
            name=pascal_case(name),
            plural_name=pluralize(name.lower()),
            fields=parse_fields(field_spec),
        )


class TemplateContext(BaseModel):
    """Aggregate of project, database, feature, entity and docs data.

    Built once per command; the ``with_*`` helpers return modified copies.
    """

    model_config = ConfigDict(frozen=True)

    # Project
    project_name: str
    module_path: str
    service_name: str
    service_version: str = "1.0.0"
    environment: str = "development"
    env_prefix: str
    server_port: str = "8080"

    # Database
    db_driver: str = "postgres"
    db_host: str = "localhost"
    db_port: str = "5432"
    db_name: str = ""
    db_user: str = "postgres"

    # Features
    enable_telemetry: bool = True
    enable_swagger: bool = True
    enable_cors: bool = True
    enable_auth: bool = True
    enable_rate_limit: bool = True

    # Entity mode
    entity_name: str = ""
    entity_name_lower: str = ""
    entity_name_camel: str = ""
    entity_name_snake: str = ""
    entity_name_plural: str = ""
    entity_fields: list[FieldSpec] = Field(default_factory=list)

    # Documentation mode
    entities: list[EntityInfo] = Field(default_factory=list)

    # SDK integration mode
    api_key_id: str = ""
    api_key_secret: str = ""
    endpoint: str = DEFAULT_ENDPOINT
    enable_metrics: bool = True
    enable_logs: bool = True
    enable_traces: bool = True
    num_workers: int = 5
    queue_size: int = 100

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    )

    @classmethod
    def from_project(cls, project: ProjectConfig) -> "TemplateContext":
        db = project.database
        flags = project.features
        return cls(
            project_name=project.name,
            module_path=project.module_path,
            service_name=project.service_name,
            service_version=project.service_version,
            environment=project.environment,
            env_prefix=project.env_prefix,
            server_port=project.server_port,
            db_driver=db.driver,
            db_host=db.host,
            db_port=db.port,
            db_name=db.name,
            db_user=db.user,
            enable_telemetry=flags.telemetry,
            enable_swagger=flags.swagger,
            enable_cors=flags.cors,
            enable_auth=flags.auth,
            enable_rate_limit=flags.rate_limit,
        )

    def with_entity(self, name: str, fields: list[FieldSpec]) -> "TemplateContext":
        """Return a copy populated for generating one entity."""
        return self.model_copy(
            update={
                "entity_name": pascal_case(name),
                "entity_name_lower": name.lower(),
                "entity_name_camel": camel_case(name),
                "entity_name_snake": snake_case(name),
                "entity_name_plural": pluralize(name.lower()),
                "entity_fields": list(fields),
            }
        )

    def with_entities(self, entities: list[EntityInfo]) -> "TemplateContext":
        """Return a copy carrying the entity summaries for documentation."""
        return self.model_copy(update={"entities": list(entities)})

    def with_integration(self, integration: IntegrationConfig) -> "TemplateContext":
        """Return a copy carrying SDK credentials and signal toggles."""
        return self.model_copy(
            update={
                "api_key_id": integration.api_key_id,
                "api_key_secret": integration.api_key_secret,
                "endpoint": integration.endpoint,
                "enable_metrics": integration.metrics,
                "enable_logs": integration.logs,
                "enable_traces": integration.traces,
                "num_workers": integration.num_workers,
                "queue_size": integration.queue_size,
            }
        )

    def template_vars(self) -> dict[str, Any]:
        """Top-level template variables; nested models stay as objects."""
        return dict(self)

    def path_vars(self) -> dict[str, str]:
        """String fields usable as ``{placeholders}`` in output path patterns."""
        return {key: value for key, value in self if isinstance(value, str)}
