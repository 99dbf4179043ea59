"""tfgen scaffolder -- renders project trees from static manifests.

Quick usage::

    from tfgen.config import ProjectConfig
    from tfgen.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    report = generator.new_project(ProjectConfig(name="shop"), "/tmp/output")
    assert report.ok, report.failed
"""

from tfgen.scaffolder.context import EntityInfo, TemplateContext
from tfgen.scaffolder.fields import FieldSpec, parse_fields, parse_fields_detailed
from tfgen.scaffolder.generator import ProjectGenerator
from tfgen.scaffolder.paths import ConfinedResolver, PathResolver, UnconfinedResolver
from tfgen.scaffolder.report import ArtifactOutcome, ArtifactStatus, GenerationReport
from tfgen.scaffolder.store import (
    BundledTemplateStore,
    DirectoryTemplateStore,
    TemplateStore,
    select_store,
)
from tfgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArtifactOutcome",
    "ArtifactStatus",
    "BundledTemplateStore",
    "ConfinedResolver",
    "DirectoryTemplateStore",
    "EntityInfo",
    "FieldSpec",
    "GenerationReport",
    "PathResolver",
    "ProjectGenerator",
    "TemplateContext",
    "TemplateRenderer",
    "TemplateStore",
    "UnconfinedResolver",
    "parse_fields",
    "parse_fields_detailed",
    "select_store",
]
