"""Integrity report model."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .DanglingLink import DanglingLink
from .ResourceLink import ResourceLink
from .SelfReference import SelfReference


class IntegrityReport(BaseModel):
    """Result of an integrity check. Findings are data, never errors."""

    model_config = ConfigDict(extra="forbid")

    root: str = ""
    document_count: int = Field(..., ge=1)
    link_count: int = Field(..., ge=0)
    dangling: list[DanglingLink] = Field(default_factory=list)
    orphans: list[str] = Field(default_factory=list)
    isolated: list[str] = Field(default_factory=list)
    self_references: list[SelfReference] = Field(default_factory=list)
    resources: list[ResourceLink] = Field(default_factory=list)
    skipped: list[dict[str, str]] = Field(default_factory=list)
    entry_points: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def dangling_count(self) -> int:
        return len(self.dangling)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def orphan_count(self) -> int:
        return len(self.orphans)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def isolated_count(self) -> int:
        return len(self.isolated)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def self_reference_count(self) -> int:
        return len(self.self_references)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def resource_count(self) -> int:
        return len(self.resources)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.dangling
