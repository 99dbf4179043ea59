"""tfgen configuration.

Typed, immutable configuration for a generator run.  All settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON (the generated project keeps a copy under
``.tfgen/project.json``) or read from environment variables.

Instances are created once by the CLI and passed explicitly to every
component; nothing reads configuration from module globals.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_ENDPOINT = "api.telemetryflow.id:4317"

_TRUTHY = {"1", "true", "yes", "on"}


class DatabaseConfig(BaseModel):
    """Connection settings rendered into the generated project."""

    model_config = ConfigDict(frozen=True)

    driver: str = Field(default="postgres", description="postgres, mysql or sqlite")
    host: str = Field(default="localhost")
    port: str = Field(default="5432")
    name: str = Field(default="", description="Defaults to the project name")
    user: str = Field(default="postgres")


class FeatureFlags(BaseModel):
    """Optional parts of the generated project."""

    model_config = ConfigDict(frozen=True)

    telemetry: bool = True
    swagger: bool = True
    cors: bool = True
    auth: bool = True
    rate_limit: bool = True


class ProjectConfig(BaseModel):
    """Project-level settings for the ``new``, ``entity`` and ``docs`` commands.

    Empty optional values are filled from the project name during validation,
    so a loaded or constructed config is always complete.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name (directory and package name)")
    module_path: str = Field(default="", description="Go module path")
    service_name: str = Field(default="", description="Defaults to the project name")
    service_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")
    server_port: str = Field(default="8080")
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    features: FeatureFlags = Field(default_factory=FeatureFlags)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        if "\x00" in value:
            raise ValueError("project name must not contain NUL characters")
        return value

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            return data
        name = data["name"].strip()
        data = dict(data)
        if not data.get("module_path"):
            data["module_path"] = f"github.com/example/{name.lower()}"
        if not data.get("service_name"):
            data["service_name"] = name
        database = data.get("database")
        default_db_name = name.replace("-", "_").lower()
        if database is None:
            data["database"] = DatabaseConfig(name=default_db_name)
        elif isinstance(database, dict) and not database.get("name"):
            data["database"] = {**database, "name": default_db_name}
        elif isinstance(database, DatabaseConfig) and not database.name:
            data["database"] = database.model_copy(update={"name": default_db_name})
        return data

    @property
    def env_prefix(self) -> str:
        """Environment-variable prefix, e.g. ``MY_API`` for ``my-api``."""
        return self.name.replace("-", "_").upper()

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file, creating parents."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "ProjectConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)


class IntegrationConfig(BaseModel):
    """Settings for the SDK integration files (``init``/``config``/``example``)."""

    model_config = ConfigDict(frozen=True)

    api_key_id: str = ""
    api_key_secret: str = ""
    endpoint: str = DEFAULT_ENDPOINT
    metrics: bool = True
    logs: bool = True
    traces: bool = True
    num_workers: int = Field(default=5, ge=1)
    queue_size: int = Field(default=100, ge=1)


class GeneratorConfig(BaseModel):
    """Run-level settings shared by every command."""

    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(default=Path("."))
    template_dir: Path | None = Field(
        default=None, description="Override directory; bundled templates when unset"
    )
    no_banner: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            TFGEN_OUTPUT_DIR, TFGEN_TEMPLATE_DIR, TFGEN_NO_BANNER.

        Keyword *overrides* that are not ``None`` win over the environment.
        """
        values: dict[str, Any] = {}
        if os.environ.get("TFGEN_OUTPUT_DIR"):
            values["output_dir"] = Path(os.environ["TFGEN_OUTPUT_DIR"])
        if os.environ.get("TFGEN_TEMPLATE_DIR"):
            values["template_dir"] = Path(os.environ["TFGEN_TEMPLATE_DIR"])
        if os.environ.get("TFGEN_NO_BANNER"):
            values["no_banner"] = os.environ["TFGEN_NO_BANNER"].strip().lower() in _TRUTHY
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
