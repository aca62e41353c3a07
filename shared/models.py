"""
PassShield Shared Data Models
==============================

Pydantic v2 models for the findings, risk assessments and scan results
emitted by the PassShield engine facade. Analysis-specific models live in
:mod:`passshield.core.models`; these are the envelope around them.

References:
    - OWASP Risk Rating Methodology.
      https://owasp.org/www-community/OWASP_Risk_Rating_Methodology
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity, ordered from most to least severe."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def css_class(self) -> str:
        """CSS class name used by the HTML report."""
        return f"severity-{self.value.lower()}"


class RiskLevel(str, Enum):
    """Qualitative risk level derived from a 0-100 risk score."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NEGLIGIBLE = "NEGLIGIBLE"

    @classmethod
    def from_score(cls, score: float) -> RiskLevel:
        """Map a numeric score onto a level.

        Ranges follow the OWASP Risk Rating Methodology:
          - 90-100 : CRITICAL
          - 70-89  : HIGH
          - 40-69  : MEDIUM
          - 10-39  : LOW
          - 0-9    : NEGLIGIBLE
        """
        if score >= 90:
            return cls.CRITICAL
        if score >= 70:
            return cls.HIGH
        if score >= 40:
            return cls.MEDIUM
        if score >= 10:
            return cls.LOW
        return cls.NEGLIGIBLE


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation produced by the engine.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Supporting data (dicts/lists are stored as JSON).
        recommendation: Suggested remediation action.
        references:     External reference citations.
        confidence:     Confidence in the finding, 0.0-1.0.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity = Field(..., description="Severity level of this finding")
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = Field(default="")
    recommendation: str = Field(default="")
    references: list[str] = Field(default_factory=list)
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Store non-string evidence (dict, list) as a JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class Risk(BaseModel):
    """Quantitative plus qualitative risk assessment.

    *score* (0-100) is canonical; *level* is derived when omitted.
    """

    model_config = ConfigDict(validate_assignment=False)

    score: float = Field(..., ge=0.0, le=100.0)
    level: Optional[RiskLevel] = Field(default=None)
    factors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _derive_level(self) -> Risk:
        if self.level is None:
            self.level = RiskLevel.from_score(self.score)
        return self


class ScanResult(BaseModel):
    """Result envelope of a single engine operation.

    Attributes:
        tool_name:  Component that produced the result.
        target:     What was analysed. Never the plaintext password.
        start_time: UTC timestamp when the operation started.
        end_time:   UTC timestamp when the operation finished.
        findings:   Individual findings.
        risk:       Overall risk assessment.
        summary:    Human-readable summary.
        metadata:   Serialised analysis payload.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    risk: Optional[Risk] = None
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` while unfinished."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Findings per severity, e.g. ``{"CRITICAL": 1, "HIGH": 0, ...}``."""
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        if not self.findings:
            return None
        order = list(Severity)
        return min((f.severity for f in self.findings), key=order.index)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    @property
    def critical_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == Severity.CRITICAL)

    @property
    def high_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == Severity.HIGH)

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the result."""
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Set *end_time* and *summary*; returns ``self`` for chaining.

        Without an explicit *summary* one is built from the severity counts.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            parts = [f"{sev}: {cnt}" for sev, cnt in self.severity_counts.items() if cnt]
            self.summary = (
                f"Analysis complete. Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self
