"""tfgen command-line interface.

Generates DDD + CQRS RESTful API projects and TelemetryFlow SDK integration
code.

Usage::

    tfgen new -n shop -m example.com/shop --db-driver postgres
    tfgen entity -n Order -f 'total:decimal,status:string' -o ./shop
    tfgen docs -o ./shop
    tfgen init --project my-service -o .
    tfgen example http-server
    tfgen version
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from . import banner
from .config import (
    DEFAULT_ENDPOINT,
    DatabaseConfig,
    FeatureFlags,
    GeneratorConfig,
    IntegrationConfig,
    ProjectConfig,
)
from .scaffolder import ProjectGenerator, TemplateRenderer, select_store
from .scaffolder.context import TemplateContext
from .scaffolder.errors import GenerationError
from .scaffolder.fields import parse_fields_detailed
from .scaffolder.manifest import EXAMPLE_TASKS, all_template_ids
from .scaffolder.project import discover_module_path, load_entities, load_project_config
from .scaffolder.report import GenerationReport
from .scaffolder.store import TemplateStore
from .scaffolder.types import known_type_tokens
from .utils import console, print_error, print_success, print_summary_table, print_warning


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _global_options(defaults: bool) -> argparse.ArgumentParser:
    """Options accepted both before and after the sub-command name."""
    parser = argparse.ArgumentParser(add_help=False)
    default = None if defaults else argparse.SUPPRESS
    parser.add_argument(
        "--template-dir",
        type=Path,
        default=default,
        help="Custom template directory (uses bundled templates if not set)",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        default=False if defaults else argparse.SUPPRESS,
        help="Disable banner output",
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfgen",
        description=(
            "TelemetryFlow RESTful API Generator: DDD + CQRS Go projects with "
            "OpenAPI docs, Postman collections, ERD/DFD diagrams and "
            "TelemetryFlow observability."
        ),
        parents=[_global_options(defaults=True)],
    )
    common = _global_options(defaults=False)
    sub = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    # -- new --------------------------------------------------------------
    new = sub.add_parser(
        "new", parents=[common], help="Create a new RESTful API project"
    )
    new.add_argument("-n", "--name", required=True, help="Project name (required)")
    new.add_argument("-m", "--module", default="", help="Go module path (e.g. github.com/user/project)")
    new.add_argument("--service", default="", help="Service name (defaults to project name)")
    new.add_argument("--version", dest="service_version", default="1.0.0", help="Service version")
    new.add_argument("--env", default="development", help="Environment (development, staging, production)")
    new.add_argument("--db-driver", default="postgres", help="Database driver (postgres, mysql, sqlite)")
    new.add_argument("--db-host", default="localhost", help="Database host")
    new.add_argument("--db-port", default="5432", help="Database port")
    new.add_argument("--db-name", default="", help="Database name (defaults to project name)")
    new.add_argument("--db-user", default="postgres", help="Database user")
    new.add_argument("--port", default="8080", help="Server port")
    for flag, help_text in (
        ("telemetry", "TelemetryFlow integration"),
        ("swagger", "Swagger documentation"),
        ("cors", "CORS middleware"),
        ("auth", "JWT authentication"),
        ("rate-limit", "rate limiting"),
    ):
        new.add_argument(
            f"--{flag}",
            action=argparse.BooleanOptionalAction,
            default=True,
            help=f"Enable {help_text}",
        )
    new.add_argument("-o", "--output", type=Path, default=None, help="Output directory (default: .)")

    # -- entity -----------------------------------------------------------
    entity = sub.add_parser(
        "entity", parents=[common], help="Add a new entity with full CRUD"
    )
    entity.add_argument("-n", "--name", required=True, help="Entity name (e.g. User, Product)")
    entity.add_argument(
        "-f",
        "--fields",
        default="",
        help=(
            "Entity fields (e.g. 'name:string,email:string,age:int'); "
            f"types: {', '.join(known_type_tokens())}, '?' suffix for nullable"
        ),
    )
    entity.add_argument("-m", "--module", default="", help="Override the module path read from go.mod")
    entity.add_argument("-o", "--output", type=Path, default=None, help="Project root directory")

    # -- docs -------------------------------------------------------------
    docs = sub.add_parser("docs", parents=[common], help="Generate API documentation")
    docs.add_argument("-m", "--module", default="", help="Override the module path read from go.mod")
    docs.add_argument("-o", "--output", type=Path, default=None, help="Project root directory")

    # -- init / config / example -------------------------------------------
    init = sub.add_parser(
        "init", parents=[common], help="Initialize a TelemetryFlow integration"
    )
    init.add_argument("-p", "--project", required=True, help="Project name (required)")
    _integration_options(init)
    for signal in ("metrics", "logs", "traces"):
        init.add_argument(
            f"--{signal}",
            action=argparse.BooleanOptionalAction,
            default=True,
            help=f"Enable {signal}",
        )
    init.add_argument("-o", "--output", type=Path, default=None, help="Output directory")

    config = sub.add_parser(
        "config", parents=[common], help="Generate a .env.telemetryflow file"
    )
    _integration_options(config)
    config.add_argument("-o", "--output", type=Path, default=None, help="Output directory")

    example = sub.add_parser("example", parents=[common], help="Generate example code")
    example.add_argument(
        "type", help=f"Example type ({', '.join(sorted(EXAMPLE_TASKS))})"
    )
    example.add_argument("-o", "--output", type=Path, default=None, help="Output directory")

    sub.add_parser("version", parents=[common], help="Print version information")
    return parser


def _integration_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-k", "--key-id", default="", help="TelemetryFlow API Key ID")
    parser.add_argument("-s", "--key-secret", default="", help="TelemetryFlow API Key Secret")
    parser.add_argument("-e", "--endpoint", default=DEFAULT_ENDPOINT, help="OTLP endpoint")
    parser.add_argument("-n", "--service", default="", help="Service name (defaults to project name)")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def run_new(args: argparse.Namespace, settings: GeneratorConfig, generator: ProjectGenerator) -> int:
    console.print(f"Creating new RESTful API project: [bold]{escape(args.name)}[/bold]")
    project = ProjectConfig(
        name=args.name,
        module_path=args.module,
        service_name=args.service,
        service_version=args.service_version,
        environment=args.env,
        server_port=args.port,
        database=DatabaseConfig(
            driver=args.db_driver,
            host=args.db_host,
            port=args.db_port,
            name=args.db_name,
            user=args.db_user,
        ),
        features=FeatureFlags(
            telemetry=args.telemetry,
            swagger=args.swagger,
            cors=args.cors,
            auth=args.auth,
            rate_limit=args.rate_limit,
        ),
    )
    report = generator.new_project(project, settings.output_dir)
    _print_report(report, "Project created")
    console.print("\nNext steps:")
    console.print(f"  1. cd {project.name}")
    console.print("  2. cp .env.example .env")
    console.print("  3. Edit .env with your configuration")
    console.print("  4. go mod tidy")
    console.print("  5. make run")
    console.print("\nTo add a new entity:")
    console.print("  tfgen entity -n User -f 'name:string,email:string,password:string'")
    return 0


def project_context(root: Path, module_override: str = "") -> TemplateContext:
    """Rebuild the template context for an existing project at *root*."""
    project = load_project_config(root) or ProjectConfig(name=root.resolve().name)
    module_path = module_override or discover_module_path(root)
    if module_path:
        project = project.model_copy(update={"module_path": module_path})
    return TemplateContext.from_project(project)


def run_entity(args: argparse.Namespace, settings: GeneratorConfig, generator: ProjectGenerator) -> int:
    name = args.name.strip()
    if not name:
        print_error("Error: entity name must not be empty")
        return 1
    console.print(f"Adding entity: [bold]{escape(name)}[/bold]")
    root = settings.output_dir
    parsed = parse_fields_detailed(args.fields)
    for entry in parsed.skipped:
        print_warning(f"Warning: Skipping malformed field {entry!r} (expected name:type)")
    report = generator.add_entity(
        root, project_context(root, args.module), name, parsed.fields, args.fields
    )
    _print_report(report, "Entity created")
    console.print("\nDon't forget to:")
    console.print("  1. Register routes in internal/infrastructure/http/router.go")
    console.print("  2. Register repository in dependency injection")
    console.print("  3. Run migrations: make migrate-up")
    console.print("  4. Regenerate docs: tfgen docs")
    return 0


def run_docs(args: argparse.Namespace, settings: GeneratorConfig, generator: ProjectGenerator) -> int:
    console.print("Generating documentation...")
    root = settings.output_dir
    report = generator.regenerate_docs(
        root, project_context(root, args.module), load_entities(root)
    )
    _print_report(report, "Documentation generated")
    return 0


def _integration_project(name: str, service: str) -> ProjectConfig:
    return ProjectConfig(
        name=name,
        module_path=name.lower().replace(" ", "-"),
        service_name=service,
        environment="production",
    )


def _integration_config(args: argparse.Namespace, **signals: bool) -> IntegrationConfig:
    return IntegrationConfig(
        api_key_id=args.key_id,
        api_key_secret=args.key_secret,
        endpoint=args.endpoint,
        **signals,
    )


def run_init(args: argparse.Namespace, settings: GeneratorConfig, generator: ProjectGenerator) -> int:
    console.print(f"Initializing TelemetryFlow integration for project: [bold]{escape(args.project)}[/bold]")
    project = _integration_project(args.project, args.service)
    integration = _integration_config(
        args, metrics=args.metrics, logs=args.logs, traces=args.traces
    )
    report = generator.init_integration(project, integration, settings.output_dir)
    _print_report(report, "TelemetryFlow integration initialized")
    console.print("\nNext steps:")
    console.print("  1. Review the generated .env.telemetryflow file and add your API credentials")
    console.print('  2. Import the telemetry package in your main.go: import "your-module/telemetry"')
    console.print("  3. Initialize in main: telemetry.Init() and defer telemetry.Shutdown()")
    return 0


def run_config(args: argparse.Namespace, settings: GeneratorConfig, generator: ProjectGenerator) -> int:
    name = args.service or settings.output_dir.resolve().name or "app"
    report = generator.write_env_config(
        _integration_project(name, args.service), _integration_config(args), settings.output_dir
    )
    _print_report(report, "Configuration file generated: .env.telemetryflow")
    return 0


def run_example(args: argparse.Namespace, settings: GeneratorConfig, generator: ProjectGenerator) -> int:
    if args.type not in EXAMPLE_TASKS:
        print_error(
            f"Error: unknown example type {args.type!r}; "
            f"choose one of: {', '.join(sorted(EXAMPLE_TASKS))}"
        )
        return 1
    console.print(f"Generating {escape(args.type)} example...")
    name = settings.output_dir.resolve().name or "app"
    report = generator.write_example(
        args.type, _integration_project(name, ""), IntegrationConfig(), settings.output_dir
    )
    _print_report(report, "Example generated")
    return 0


def _print_report(report: GenerationReport, success_message: str) -> None:
    counts = report.summary()
    console.print()
    print_summary_table(
        {
            "Output": str(report.root),
            "Written": counts["written"],
            "Skipped (failed)": counts["failed"],
            "Disabled by flags": counts["disabled"],
            "Directories failed": counts["directories_failed"],
        },
        title="Generation Summary",
    )
    if report.ok:
        print_success(f"{success_message} successfully!")
        return
    problems = []
    if counts["failed"]:
        problems.append(f"{counts['failed']} artifact(s) skipped")
    if counts["directories_failed"]:
        problems.append(f"{counts['directories_failed']} director(ies) not created")
    print_warning(f"{success_message} with {', '.join(problems)}; see warnings above.")


def _check_override_dir(store: TemplateStore, template_dir: Path) -> None:
    """Warn up front when an override directory lacks manifest templates."""
    provided = set(store.list_templates())
    missing = [tid for tid in all_template_ids() if tid not in provided]
    if missing:
        print_warning(
            f"Warning: {len(missing)} of {len(all_template_ids())} templates not found in "
            f"{template_dir}; artifacts that need them will be skipped."
        )


_COMMANDS = {
    "new": run_new,
    "entity": run_entity,
    "docs": run_docs,
    "init": run_init,
    "config": run_config,
    "example": run_example,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        settings = GeneratorConfig.from_env(
            output_dir=getattr(args, "output", None),
            template_dir=args.template_dir,
            no_banner=True if args.no_banner else None,
        )
    except ValidationError as exc:
        print_error(f"Error: invalid configuration: {exc}")
        return 1

    if args.command == "version":
        banner.print_full()
        return 0
    if not settings.no_banner:
        banner.print_compact()

    store = select_store(settings.template_dir)
    if settings.template_dir is not None:
        _check_override_dir(store, settings.template_dir)
    generator = ProjectGenerator(TemplateRenderer(store))
    try:
        return _COMMANDS[args.command](args, settings, generator)
    except ValidationError as exc:
        print_error(f"Error: {exc}")
        return 1
    except GenerationError as exc:
        print_error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
