"""Startup banner rendered with Rich."""

from __future__ import annotations

from pydantic import BaseModel
from rich.panel import Panel
from rich.table import Table

from . import version as _version
from .utils import console


class BannerConfig(BaseModel):
    product_name: str = "TelemetryFlow RESTful API Generator"
    motto: str = "DDD + CQRS Pattern RESTful API Generator"
    version: str = _version.VERSION
    git_commit: str = _version.GIT_COMMIT
    git_branch: str = _version.GIT_BRANCH
    build_time: str = _version.BUILD_TIME
    python_version: str = ""
    platform: str = ""
    vendor: str = "TelemetryFlow"
    vendor_url: str = "https://telemetryflow.id"
    developer: str = "DevOpsCorner Indonesia"
    license: str = "Apache-2.0"
    support_url: str = "https://docs.telemetryflow.id"


def default_config() -> BannerConfig:
    return BannerConfig(
        python_version=_version.python_version(),
        platform=_version.platform_name(),
    )


def print_compact(config: BannerConfig | None = None) -> None:
    """One-panel banner printed before every generating command."""
    cfg = config or default_config()
    console.print(
        Panel(
            f"[bold]{cfg.product_name}[/bold] v{cfg.version}\n[dim]{cfg.motto}[/dim]",
            border_style="cyan",
            expand=False,
        )
    )


def print_full(config: BannerConfig | None = None) -> None:
    """Banner with build details, used by the ``version`` command."""
    cfg = config or default_config()
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim", no_wrap=True)
    table.add_column()
    for label, value in (
        ("Version", cfg.version),
        ("Git Commit", cfg.git_commit),
        ("Git Branch", cfg.git_branch),
        ("Build Time", cfg.build_time),
        ("Python", cfg.python_version),
        ("Platform", cfg.platform),
        ("Vendor", f"{cfg.vendor} ({cfg.vendor_url})"),
        ("Developer", cfg.developer),
        ("License", cfg.license),
        ("Support", cfg.support_url),
    ):
        table.add_row(label, value)
    console.print(
        Panel(
            table,
            title=f"[bold]{cfg.product_name}[/bold]",
            subtitle=cfg.motto,
            border_style="cyan",
            expand=False,
        )
    )
