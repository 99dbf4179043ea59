"""Reading and recording state of an already-generated project.

Generated projects keep a small metadata directory, ``.tfgen/``, holding the
``ProjectConfig`` used by ``new`` and the list of entities added since.  The
``entity`` and ``docs`` commands use it, together with ``go.mod``, to rebuild
the same template context on later runs.

Every lookup degrades to ``None``/``[]`` with a warning instead of failing
the command.
"""

from __future__ import annotations

from pathlib import Path

from ..config import ProjectConfig
from ..utils import load_json_list, print_warning, save_json
from .context import EntityInfo
from .errors import PathTraversalError
from .naming import pascal_case
from .paths import ConfinedResolver, UnconfinedResolver

METADATA_DIR = ".tfgen"
PROJECT_FILE = f"{METADATA_DIR}/project.json"
ENTITIES_FILE = f"{METADATA_DIR}/entities.json"
MODULE_MANIFEST = "go.mod"
MODULE_KEYWORD = "module"


def discover_module_path(project_root: str | Path) -> str | None:
    """Return the module path declared in ``<project_root>/go.mod``.

    The manifest location is confined to *project_root*; the file itself is
    read through the unconfined resolver.  Returns ``None`` when the file is
    missing, unreadable, or has no ``module`` line.
    """
    try:
        manifest = ConfinedResolver(project_root).resolve(MODULE_MANIFEST)
    except PathTraversalError as exc:
        print_warning(f"Warning: Invalid {MODULE_MANIFEST} path: {exc}")
        return None

    try:
        content = UnconfinedResolver().read_bytes(manifest).decode("utf-8", errors="replace")
    except OSError:
        return None

    for line in content.splitlines():
        if line.startswith(MODULE_KEYWORD + " "):
            return line.removeprefix(MODULE_KEYWORD).strip()
    return None


def load_project_config(project_root: str | Path) -> ProjectConfig | None:
    """Load ``.tfgen/project.json`` if the project has one."""
    try:
        path = ConfinedResolver(project_root).resolve(PROJECT_FILE)
    except PathTraversalError as exc:
        print_warning(f"Warning: {exc}")
        return None
    if not path.exists():
        return None
    try:
        return ProjectConfig.load(path)
    except (OSError, ValueError) as exc:
        print_warning(f"Warning: Ignoring unreadable {PROJECT_FILE}: {exc}")
        return None


def save_project_config(project_root: str | Path, project: ProjectConfig) -> Path:
    """Write *project* to ``.tfgen/project.json`` under *project_root*."""
    path = ConfinedResolver(project_root).resolve(PROJECT_FILE)
    return project.save(path)


def load_entity_records(project_root: str | Path) -> list[dict[str, str]]:
    """Return the raw ``{"name", "fields"}`` records in ``.tfgen/entities.json``."""
    try:
        path = ConfinedResolver(project_root).resolve(ENTITIES_FILE)
        records = load_json_list(path)
    except (PathTraversalError, OSError, ValueError) as exc:
        print_warning(f"Warning: Ignoring unreadable {ENTITIES_FILE}: {exc}")
        return []
    return [
        {"name": str(r["name"]), "fields": str(r.get("fields", ""))}
        for r in records
        if isinstance(r, dict) and r.get("name")
    ]


def record_entity(project_root: str | Path, name: str, field_spec: str) -> Path:
    """Add or replace the entity *name* in ``.tfgen/entities.json``.

    Entities are keyed by their Pascal-case name, so re-running ``entity``
    for the same name replaces its field list in place.
    """
    key = pascal_case(name)
    entry = {"name": name, "fields": field_spec}
    records = load_entity_records(project_root)
    for index, record in enumerate(records):
        if pascal_case(record["name"]) == key:
            records[index] = entry
            break
    else:
        records.append(entry)
    path = ConfinedResolver(project_root).resolve(ENTITIES_FILE)
    save_json(records, path)
    return path


def load_entities(project_root: str | Path) -> list[EntityInfo]:
    """Build documentation summaries for every recorded entity."""
    return [
        EntityInfo.from_spec(record["name"], record["fields"])
        for record in load_entity_records(project_root)
    ]
