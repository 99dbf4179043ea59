"""Per-artifact outcomes of a generation run."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ArtifactStatus(str, Enum):
    WRITTEN = "written"
    FAILED = "failed"
    DISABLED = "disabled"


class ArtifactOutcome(BaseModel):
    """What happened to one manifest task."""

    template_id: str
    output_path: str = Field(default="", description="Resolved path, or the raw pattern")
    status: ArtifactStatus
    error: str = ""


class GenerationReport(BaseModel):
    """Ordered outcomes for every manifest task of one run.

    A run always attempts every active task; this report is how callers
    tell "everything written" from "nothing written".
    """

    root: Path
    outcomes: list[ArtifactOutcome] = Field(default_factory=list)
    directories_failed: list[str] = Field(default_factory=list)

    def add(self, outcome: ArtifactOutcome) -> None:
        self.outcomes.append(outcome)

    def _with_status(self, status: ArtifactStatus) -> list[ArtifactOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def written(self) -> list[ArtifactOutcome]:
        return self._with_status(ArtifactStatus.WRITTEN)

    @property
    def failed(self) -> list[ArtifactOutcome]:
        return self._with_status(ArtifactStatus.FAILED)

    @property
    def disabled(self) -> list[ArtifactOutcome]:
        return self._with_status(ArtifactStatus.DISABLED)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.directories_failed

    def summary(self) -> dict[str, int]:
        return {
            "written": len(self.written),
            "failed": len(self.failed),
            "disabled": len(self.disabled),
            "directories_failed": len(self.directories_failed),
        }
