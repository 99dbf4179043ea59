"""Main scaffolding orchestrator.

Takes a ``TemplateContext`` and one of the static manifests in
:mod:`tfgen.scaffolder.manifest` and writes the artifacts to disk, following
the DDD + CQRS layout of a generated Go service.

A run is a single linear pass:

1. create the mode's directory tree (the root must succeed, leaves may fail);
2. for every task in manifest order: evaluate its predicate, resolve the
   output path inside the root, render the template, write the file.

Any failure of a single task is reported and the pass moves on; nothing is
retried and nothing already written is rolled back.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..config import IntegrationConfig, ProjectConfig
from ..utils import make_executable, print_info, print_warning
from .context import EntityInfo, TemplateContext
from .errors import GenerationError, PathTraversalError, ScaffoldError
from .fields import FieldSpec
from .manifest import (
    DOCS_DIRECTORIES,
    DOCS_TASKS,
    ENTITY_DIRECTORIES,
    ENTITY_TASKS,
    ENV_CONFIG_TASK,
    EXAMPLE_TASKS,
    INIT_TASKS,
    INTEGRATION_DIRECTORIES,
    NEW_PROJECT_TASKS,
    PROJECT_DIRECTORIES,
    GenerationTask,
)
from .paths import ConfinedResolver
from .project import record_entity, save_project_config
from .report import ArtifactOutcome, ArtifactStatus, GenerationReport
from .templates import TemplateRenderer


class ProjectGenerator:
    """Runs generation manifests against one template store.

    Given a ``TemplateRenderer`` (and through it a single template store),
    produces:
    - a new project tree (``new_project``)
    - one entity's vertical slice in an existing tree (``add_entity``)
    - the documentation artifacts only (``regenerate_docs``)
    - SDK integration files and examples (``init_integration``,
      ``write_env_config``, ``write_example``)
    """

    def __init__(self, renderer: TemplateRenderer | None = None, *, echo: bool = True) -> None:
        self.renderer = renderer if renderer is not None else TemplateRenderer()
        self.echo = echo

    # -- Public API --------------------------------------------------------

    def new_project(self, project: ProjectConfig, output_dir: str | Path) -> GenerationReport:
        """Generate the complete project structure.

        Args:
            project: Project-level settings.
            output_dir: Parent directory; a folder named after the project is
                created inside it.

        Returns:
            The run report; ``report.root`` is the generated project root.
        """
        parent = ConfinedResolver(output_dir)
        try:
            root = parent.resolve(project.name)
        except PathTraversalError as exc:
            raise GenerationError(f"invalid project name {project.name!r}: {exc}") from exc
        if root == parent.base:
            raise GenerationError(f"invalid project name {project.name!r}")
        context = TemplateContext.from_project(project)
        report = self.generate(root, PROJECT_DIRECTORIES, NEW_PROJECT_TASKS, context)
        try:
            save_project_config(root, project)
        except (OSError, ScaffoldError) as exc:
            self._warn(f"Warning: Failed to save project metadata: {exc}")
        return report

    def add_entity(
        self,
        project_root: str | Path,
        context: TemplateContext,
        name: str,
        fields: list[FieldSpec],
        field_spec: str = "",
    ) -> GenerationReport:
        """Generate one entity's artifacts inside an existing project.

        *field_spec* is the raw specification string; it is recorded in the
        project metadata so ``docs`` can include the entity later.
        """
        root = Path(project_root)
        entity_context = context.with_entity(name, fields)
        report = self.generate(root, ENTITY_DIRECTORIES, ENTITY_TASKS, entity_context)
        if report.written:
            try:
                record_entity(root, name, field_spec)
            except (OSError, ScaffoldError) as exc:
                self._warn(f"Warning: Failed to record entity metadata: {exc}")
        return report

    def regenerate_docs(
        self,
        project_root: str | Path,
        context: TemplateContext,
        entities: list[EntityInfo] | None = None,
    ) -> GenerationReport:
        """Regenerate OpenAPI, Swagger, ERD, DFD and Postman artifacts."""
        docs_context = context.with_entities(entities or [])
        return self.generate(Path(project_root), DOCS_DIRECTORIES, DOCS_TASKS, docs_context)

    def init_integration(
        self,
        project: ProjectConfig,
        integration: IntegrationConfig,
        output_dir: str | Path,
    ) -> GenerationReport:
        """Write the ``telemetry`` package and env file into *output_dir*."""
        context = TemplateContext.from_project(project).with_integration(integration)
        return self.generate(Path(output_dir), INTEGRATION_DIRECTORIES, INIT_TASKS, context)

    def write_env_config(
        self,
        project: ProjectConfig,
        integration: IntegrationConfig,
        output_dir: str | Path,
    ) -> GenerationReport:
        """Write only ``.env.telemetryflow``."""
        context = TemplateContext.from_project(project).with_integration(integration)
        return self.generate(Path(output_dir), (), (ENV_CONFIG_TASK,), context)

    def write_example(
        self,
        example_type: str,
        project: ProjectConfig,
        integration: IntegrationConfig,
        output_dir: str | Path,
    ) -> GenerationReport:
        """Write one example program.

        Raises:
            KeyError: if *example_type* is not one of :data:`EXAMPLE_TASKS`.
        """
        task = EXAMPLE_TASKS[example_type]
        context = TemplateContext.from_project(project).with_integration(integration)
        if example_type == "grpc-server":
            context = context.model_copy(update={"server_port": "50051"})
        return self.generate(Path(output_dir), (), (task,), context)

    # -- Orchestration -----------------------------------------------------

    def generate(
        self,
        root: Path,
        directories: Iterable[str],
        tasks: Iterable[GenerationTask],
        context: TemplateContext,
    ) -> GenerationReport:
        """Create *directories* under *root*, then run every task in order.

        Raises:
            GenerationError: if *root* itself cannot be created.
        """
        try:
            root.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as exc:
            raise GenerationError(f"failed to create directory {root}: {exc}") from exc

        report = GenerationReport(root=root)
        resolver = ConfinedResolver(root)
        self._create_directories(resolver, directories, report)

        for task in tasks:
            report.add(self._run_task(task, resolver, context))
        return report

    def _create_directories(
        self,
        resolver: ConfinedResolver,
        directories: Iterable[str],
        report: GenerationReport,
    ) -> None:
        for directory in directories:
            try:
                resolver.resolve(directory).mkdir(parents=True, exist_ok=True)
            except (OSError, ValueError, ScaffoldError) as exc:
                report.directories_failed.append(directory)
                self._warn(f"Failed to create directory {directory}: {exc}")

    def _run_task(
        self,
        task: GenerationTask,
        resolver: ConfinedResolver,
        context: TemplateContext,
    ) -> ArtifactOutcome:
        if not task.is_active(context):
            return ArtifactOutcome(
                template_id=task.template_id,
                output_path=task.output_pattern,
                status=ArtifactStatus.DISABLED,
            )

        output = task.output_pattern
        try:
            output = task.output_path(context)
            target = resolver.resolve(output)
            content = self.renderer.render_bytes(task.template_id, context)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
            if task.executable:
                make_executable(target)
        except (ScaffoldError, OSError, KeyError, ValueError) as exc:
            self._warn(f"Warning: Template {task.template_id} skipped: {exc}")
            return ArtifactOutcome(
                template_id=task.template_id,
                output_path=output,
                status=ArtifactStatus.FAILED,
                error=str(exc),
            )

        if self.echo:
            print_info(f"Generated: {target}")
        return ArtifactOutcome(
            template_id=task.template_id,
            output_path=str(target),
            status=ArtifactStatus.WRITTEN,
        )

    def _warn(self, message: str) -> None:
        if self.echo:
            print_warning(message)
