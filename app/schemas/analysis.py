"""
Schemas for configuration analysis results.

Field names are snake_case in Python; the JSON form uses the camelCase keys
consumers of the analysis API expect (serialize with ``by_alias=True``).
"""
import enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.utils.parsers.config_models import ConfigSummary


class Severity(str, enum.Enum):
    """Finding severity, highest first."""
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class PasswordStrength(str, enum.Enum):
    """Strength tier assigned by the password analyzer."""
    CRITICAL = "CRITICAL"
    WEAK = "WEAK"
    MODERATE = "MODERATE"
    STRONG = "STRONG"


class Issue(BaseModel):
    """A single security finding."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    severity: Severity
    category: str  # e.g. "Weak Authentication"
    title: str
    description: str
    location: str  # "Line N" or a named scope such as "Global configuration"
    recommendation: str
    reference_id: str = Field(default="N/A", alias="cve")  # CWE identifier or "N/A"


class PasswordAnalysis(BaseModel):
    """Strength assessment of a single credential."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    strength: PasswordStrength
    score: int = Field(ge=0, le=100)
    issues: List[Issue] = Field(default_factory=list)


class SeverityCounts(BaseModel):
    """Number of findings per severity."""
    model_config = ConfigDict(frozen=True)

    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.high + self.medium + self.low

    @classmethod
    def from_issues(cls, issues: List[Issue]) -> "SeverityCounts":
        counts: Dict[str, int] = {"critical": 0, "high": 0, "medium": 0, "low": 0}
        for issue in issues:
            counts[issue.severity.value.lower()] += 1
        return cls(**counts)


class AnalysisResult(BaseModel):
    """Complete, immutable outcome of one configuration analysis."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_issues: int = Field(alias="totalIssues")
    critical: int
    high: int
    medium: int
    low: int
    security_score: int = Field(alias="securityScore", ge=0, le=100)
    issues: List[Issue]
    recommendations: List[str]
    password_analysis: Optional[PasswordAnalysis] = Field(default=None, alias="passwordAnalysis")
    config_summary: ConfigSummary = Field(alias="configSummary")

    @property
    def counts(self) -> SeverityCounts:
        return SeverityCounts(
            critical=self.critical, high=self.high, medium=self.medium, low=self.low
        )

    def to_dict(self) -> Dict:
        """JSON-ready dictionary using the public camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
