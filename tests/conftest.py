"""Shared pytest fixtures for the tfgen test suite.

Provides reusable fixtures for:
- Project, integration and template-context models
- A quiet ``ProjectGenerator`` (no console output)
- Template override directories
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tfgen.config import FeatureFlags, IntegrationConfig, ProjectConfig
from tfgen.scaffolder import ProjectGenerator, TemplateContext, TemplateRenderer
from tfgen.scaffolder.context import EntityInfo
from tfgen.scaffolder.fields import parse_fields
from tfgen.scaffolder.store import DirectoryTemplateStore


# ---------------------------------------------------------------------------
# Configuration models
# ---------------------------------------------------------------------------


@pytest.fixture
def shop_project() -> ProjectConfig:
    """The canonical ``shop`` project with every feature enabled."""
    return ProjectConfig(name="shop", module_path="example.com/shop")


@pytest.fixture
def minimal_project() -> ProjectConfig:
    """A project with every optional feature disabled."""
    return ProjectConfig(
        name="bare-api",
        features=FeatureFlags(
            telemetry=False, swagger=False, cors=False, auth=False, rate_limit=False
        ),
    )


@pytest.fixture
def integration() -> IntegrationConfig:
    return IntegrationConfig(api_key_id="tfk_test", api_key_secret="tfs_test")


# ---------------------------------------------------------------------------
# Template contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def shop_context(shop_project: ProjectConfig) -> TemplateContext:
    return TemplateContext.from_project(shop_project)


@pytest.fixture
def order_context(shop_context: TemplateContext) -> TemplateContext:
    """``shop`` context populated for the ``Order`` entity."""
    fields = parse_fields("total:decimal,status:string,placed_at:datetime,note:text?")
    return shop_context.with_entity("Order", fields)


@pytest.fixture
def full_context(
    order_context: TemplateContext, integration: IntegrationConfig
) -> TemplateContext:
    """A context that satisfies every bundled template at once."""
    entities = [
        EntityInfo.from_spec("Order", "total:decimal,status:string"),
        EntityInfo.from_spec("category", "name:string,parent_id:uuid?"),
    ]
    return order_context.with_entities(entities).with_integration(integration)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


@pytest.fixture
def generator() -> ProjectGenerator:
    """Generator over the bundled templates with console output disabled."""
    return ProjectGenerator(echo=False)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """An empty template override directory."""
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def override_generator(template_dir: Path) -> ProjectGenerator:
    """Generator reading exclusively from ``template_dir``."""
    renderer = TemplateRenderer(DirectoryTemplateStore(template_dir))
    return ProjectGenerator(renderer, echo=False)


@pytest.fixture
def write_template(template_dir: Path):
    """Return a helper that writes ``template_dir/<template_id>``."""

    def _write(template_id: str, body: str) -> Path:
        path = template_dir / template_id
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        return path

    return _write
