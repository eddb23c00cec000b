from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from report_worker.core.constants import (
    REPORT_INCLUDE_KEY_PATTERNS,
    REPORT_NUMBER_OF_LATEST_VERSIONS,
)


class ReportType(str, Enum):
    VULNERABILITIES = "vulnerabilities"
    VIOLATIONS = "violations"


class ProjectScope(BaseModel):
    names: List[str] = Field(default_factory=list)
    include_key_patterns: List[str] = Field(default_factory=lambda: list(REPORT_INCLUDE_KEY_PATTERNS))
    number_of_latest_versions: int = REPORT_NUMBER_OF_LATEST_VERSIONS


class ReportResources(BaseModel):
    projects: ProjectScope = Field(default_factory=ProjectScope)


class ReportFilters(BaseModel):
    # Empty values mean "no filter"
    vulnerable_component: str = ""
    impacted_artifact: str = ""
    cve: str = ""
    issue_id: str = ""
    severities: List[str] = Field(default_factory=list)


class ReportPayload(BaseModel):
    """Request body for the Xray report creation endpoints."""

    name: str
    resources: ReportResources = Field(default_factory=ReportResources)
    filters: ReportFilters = Field(default_factory=ReportFilters)


class ReportSummary(BaseModel):
    """One entry of the Xray report listing."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    status: Optional[str] = None
    progress: Optional[float] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        # Xray returns numeric report ids
        return str(v) if v is not None else v


class ReportListing(BaseModel):
    """Worker reports from a listing, index-aligned ids and names."""

    report_ids: List[str] = Field(default_factory=list)
    report_names: List[str] = Field(default_factory=list)

    @classmethod
    def from_summaries(cls, reports: List[ReportSummary]) -> "ReportListing":
        return cls(
            report_ids=[r.id for r in reports],
            report_names=[r.name for r in reports],
        )

    def __len__(self) -> int:
        return len(self.report_ids)


class DeletionResult(BaseModel):
    deleted: List[str] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list)
