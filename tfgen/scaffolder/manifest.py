"""Static generation manifests.

Each command owns an ordered list of :class:`GenerationTask` entries that is
fixed at import time.  At run time only two things vary: whether a task's
predicate is true for the current ``TemplateContext``, and the values
substituted into its ``{placeholder}`` output path.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .context import TemplateContext

Predicate = Callable[[TemplateContext], bool]


def always(_: TemplateContext) -> bool:
    return True


def telemetry_enabled(ctx: TemplateContext) -> bool:
    return ctx.enable_telemetry


def swagger_enabled(ctx: TemplateContext) -> bool:
    return ctx.enable_swagger


def cors_enabled(ctx: TemplateContext) -> bool:
    return ctx.enable_cors


def auth_enabled(ctx: TemplateContext) -> bool:
    return ctx.enable_auth


def rate_limit_enabled(ctx: TemplateContext) -> bool:
    return ctx.enable_rate_limit


@dataclass(frozen=True)
class GenerationTask:
    """One artifact: which template, where it goes, and when it applies."""

    template_id: str
    output_pattern: str
    when: Predicate = field(default=always, compare=False)
    executable: bool = False

    def is_active(self, ctx: TemplateContext) -> bool:
        return self.when(ctx)

    def output_path(self, ctx: TemplateContext) -> str:
        """Substitute context identifiers into the output pattern.

        Raises:
            KeyError: if the pattern names an unknown placeholder.
        """
        return self.output_pattern.format(**ctx.path_vars())


# ---------------------------------------------------------------------------
# new: full project tree
# ---------------------------------------------------------------------------

PROJECT_DIRECTORIES: tuple[str, ...] = (
    "cmd/api",
    # Domain layer
    "internal/domain/entity",
    "internal/domain/repository",
    "internal/domain/valueobject",
    # Application layer (CQRS)
    "internal/application/command",
    "internal/application/query",
    "internal/application/handler",
    "internal/application/dto",
    # Infrastructure layer
    "internal/infrastructure/persistence",
    "internal/infrastructure/http",
    "internal/infrastructure/http/middleware",
    "internal/infrastructure/http/handler",
    "internal/infrastructure/config",
    "pkg/logger",
    "pkg/validator",
    "pkg/response",
    "pkg/safefile",
    "telemetry",
    "telemetry/metrics",
    "telemetry/logs",
    "telemetry/traces",
    "docs/api",
    "docs/diagrams",
    "docs/postman",
    "configs",
    "migrations",
    "scripts",
    "tests/unit",
    "tests/integration",
    "tests/e2e",
    "tests/mocks",
    "tests/fixtures",
)

DOCS_TASKS: tuple[GenerationTask, ...] = (
    GenerationTask("docs/openapi.yaml.j2", "docs/api/openapi.yaml"),
    GenerationTask("docs/swagger.json.j2", "docs/api/swagger.json"),
    GenerationTask("docs/erd.md.j2", "docs/diagrams/ERD.md"),
    GenerationTask("docs/dfd.md.j2", "docs/diagrams/DFD.md"),
    GenerationTask("docs/postman_collection.json.j2", "docs/postman/collection.json"),
    GenerationTask("docs/postman_environment.json.j2", "docs/postman/environment.json"),
)

NEW_PROJECT_TASKS: tuple[GenerationTask, ...] = (
    GenerationTask("project/go.mod.j2", "go.mod"),
    GenerationTask("project/main.go.j2", "cmd/api/main.go"),
    GenerationTask("project/Makefile.j2", "Makefile"),
    GenerationTask("project/README.md.j2", "README.md"),
    GenerationTask("project/Dockerfile.j2", "Dockerfile"),
    GenerationTask("project/docker-compose.yml.j2", "docker-compose.yml"),
    GenerationTask("project/env.example.j2", ".env.example"),
    GenerationTask("project/gitignore.j2", ".gitignore"),
    # Config
    GenerationTask("config/config.go.j2", "internal/infrastructure/config/config.go"),
    GenerationTask("config/config.yaml.j2", "configs/config.yaml"),
    # Domain base
    GenerationTask("domain/entity_base.go.j2", "internal/domain/entity/base.go"),
    GenerationTask("domain/repository_base.go.j2", "internal/domain/repository/base.go"),
    # Application base (CQRS)
    GenerationTask("application/command_base.go.j2", "internal/application/command/base.go"),
    GenerationTask("application/query_base.go.j2", "internal/application/query/base.go"),
    GenerationTask("application/handler_base.go.j2", "internal/application/handler/base.go"),
    GenerationTask("application/dto_base.go.j2", "internal/application/dto/base.go"),
    # Infrastructure - HTTP
    GenerationTask("infrastructure/server.go.j2", "internal/infrastructure/http/server.go"),
    GenerationTask("infrastructure/router.go.j2", "internal/infrastructure/http/router.go"),
    GenerationTask(
        "infrastructure/middleware_logger.go.j2",
        "internal/infrastructure/http/middleware/logger.go",
    ),
    GenerationTask(
        "infrastructure/middleware_auth.go.j2",
        "internal/infrastructure/http/middleware/auth.go",
        when=auth_enabled,
    ),
    GenerationTask(
        "infrastructure/middleware_cors.go.j2",
        "internal/infrastructure/http/middleware/cors.go",
        when=cors_enabled,
    ),
    GenerationTask(
        "infrastructure/middleware_ratelimit.go.j2",
        "internal/infrastructure/http/middleware/ratelimit.go",
        when=rate_limit_enabled,
    ),
    GenerationTask(
        "infrastructure/health_handler.go.j2",
        "internal/infrastructure/http/handler/health.go",
    ),
    GenerationTask(
        "infrastructure/home_handler.go.j2",
        "internal/infrastructure/http/handler/home.go",
    ),
    GenerationTask(
        "infrastructure/swagger_handler.go.j2",
        "internal/infrastructure/http/handler/swagger.go",
        when=swagger_enabled,
    ),
    GenerationTask(
        "infrastructure/swagger_ui.html.j2",
        "internal/infrastructure/http/handler/swagger_ui.html",
        when=swagger_enabled,
    ),
    # Infrastructure - Persistence
    GenerationTask(
        "infrastructure/database.go.j2",
        "internal/infrastructure/persistence/database.go",
    ),
    # Shared packages
    GenerationTask("pkg/logger.go.j2", "pkg/logger/logger.go"),
    GenerationTask("pkg/validator.go.j2", "pkg/validator/validator.go"),
    GenerationTask("pkg/response.go.j2", "pkg/response/response.go"),
    GenerationTask("pkg/safefile.go.j2", "pkg/safefile/safefile.go"),
    # Telemetry
    GenerationTask("telemetry/init.go.j2", "telemetry/init.go", when=telemetry_enabled),
    GenerationTask("telemetry/metrics.go.j2", "telemetry/metrics/metrics.go", when=telemetry_enabled),
    GenerationTask("telemetry/logs.go.j2", "telemetry/logs/logs.go", when=telemetry_enabled),
    GenerationTask("telemetry/traces.go.j2", "telemetry/traces/traces.go", when=telemetry_enabled),
    # Docs
    DOCS_TASKS[0],
    DOCS_TASKS[1],
    GenerationTask("docs/embed.go.j2", "docs/api/embed.go"),
    *DOCS_TASKS[2:],
    # Migrations
    GenerationTask("migrations/000001_init.up.sql.j2", "migrations/000001_init.up.sql"),
    GenerationTask("migrations/000001_init.down.sql.j2", "migrations/000001_init.down.sql"),
    # Scripts
    GenerationTask("scripts/run.sh.j2", "scripts/run.sh", executable=True),
    GenerationTask("scripts/test.sh.j2", "scripts/test.sh", executable=True),
    # Tests
    GenerationTask("tests/unit_test.go.j2", "tests/unit/example_test.go"),
    GenerationTask("tests/integration_test.go.j2", "tests/integration/api_test.go"),
    GenerationTask("tests/e2e_test.go.j2", "tests/e2e/e2e_test.go"),
    GenerationTask("tests/mocks.go.j2", "tests/mocks/mocks.go"),
    GenerationTask("tests/fixtures.go.j2", "tests/fixtures/fixtures.go"),
)


# ---------------------------------------------------------------------------
# entity: one vertical slice
# ---------------------------------------------------------------------------

ENTITY_DIRECTORIES: tuple[str, ...] = (
    "internal/domain/entity",
    "internal/domain/repository",
    "internal/application/command",
    "internal/application/query",
    "internal/application/handler",
    "internal/application/dto",
    "internal/infrastructure/persistence",
    "internal/infrastructure/http/handler",
    "migrations",
)

ENTITY_TASKS: tuple[GenerationTask, ...] = (
    GenerationTask("entity/entity.go.j2", "internal/domain/entity/{entity_name_lower}.go"),
    GenerationTask(
        "entity/repository.go.j2",
        "internal/domain/repository/{entity_name_lower}_repository.go",
    ),
    GenerationTask(
        "entity/commands.go.j2",
        "internal/application/command/{entity_name_lower}_commands.go",
    ),
    GenerationTask(
        "entity/queries.go.j2",
        "internal/application/query/{entity_name_lower}_queries.go",
    ),
    GenerationTask(
        "entity/command_handler.go.j2",
        "internal/application/handler/{entity_name_lower}_command_handler.go",
    ),
    GenerationTask(
        "entity/query_handler.go.j2",
        "internal/application/handler/{entity_name_lower}_query_handler.go",
    ),
    GenerationTask("entity/dto.go.j2", "internal/application/dto/{entity_name_lower}_dto.go"),
    GenerationTask(
        "entity/persistence.go.j2",
        "internal/infrastructure/persistence/{entity_name_lower}_repository.go",
    ),
    GenerationTask(
        "entity/http_handler.go.j2",
        "internal/infrastructure/http/handler/{entity_name_lower}_handler.go",
    ),
    GenerationTask(
        "entity/migration.up.sql.j2",
        "migrations/000002_create_{entity_name_plural}.up.sql",
    ),
    GenerationTask(
        "entity/migration.down.sql.j2",
        "migrations/000002_create_{entity_name_plural}.down.sql",
    ),
)


# ---------------------------------------------------------------------------
# docs: documentation only
# ---------------------------------------------------------------------------

DOCS_DIRECTORIES: tuple[str, ...] = ("docs/api", "docs/diagrams", "docs/postman")


# ---------------------------------------------------------------------------
# init / config / example: SDK integration into an existing Go project
# ---------------------------------------------------------------------------

INTEGRATION_DIRECTORIES: tuple[str, ...] = (
    "telemetry",
    "telemetry/metrics",
    "telemetry/logs",
    "telemetry/traces",
)

ENV_CONFIG_TASK = GenerationTask("integration/env.j2", ".env.telemetryflow")

INIT_TASKS: tuple[GenerationTask, ...] = (
    GenerationTask("integration/init.go.j2", "telemetry/init.go"),
    GenerationTask("telemetry/metrics.go.j2", "telemetry/metrics/metrics.go"),
    GenerationTask("telemetry/logs.go.j2", "telemetry/logs/logs.go"),
    GenerationTask("telemetry/traces.go.j2", "telemetry/traces/traces.go"),
    ENV_CONFIG_TASK,
    GenerationTask("integration/README.md.j2", "telemetry/README.md"),
)

EXAMPLE_TASKS: dict[str, GenerationTask] = {
    "basic": GenerationTask("examples/basic.go.j2", "example_basic.go"),
    "http-server": GenerationTask("examples/http_server.go.j2", "example_http_server.go"),
    "grpc-server": GenerationTask("examples/grpc_server.go.j2", "example_grpc_server.go"),
    "worker": GenerationTask("examples/worker.go.j2", "example_worker.go"),
}


def all_template_ids() -> list[str]:
    """Every template id referenced by any manifest, sorted and unique."""
    tasks = [
        *NEW_PROJECT_TASKS,
        *ENTITY_TASKS,
        *DOCS_TASKS,
        *INIT_TASKS,
        *EXAMPLE_TASKS.values(),
    ]
    return sorted({task.template_id for task in tasks})
