"""
Routing domain models.

StructuredSpec is the record the spec-extraction step produces from an
interview transcript. It is untrusted input: missing arrays and nulls are
tolerated, unknown integration types and priorities are kept as None.
Only dataClassification is mandatory.

ScoreBreakdown and RoutingResult are derived values owned by the engine.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional, Tuple

from pydantic import ConfigDict, Field, field_validator, model_validator

from intake_router.routing.domain.enums import (
    DataClassification,
    DeliveryPath,
    IntegrationType,
    RequirementPriority,
)
from intake_router.shared.domain.base_model import BaseDomainModel


def _lenient_enum(enum_cls, value: Any):
    """Map a free-text value onto enum_cls, or None when it is not a member."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None


class SpecRecord(BaseDomainModel):
    """Base for records produced by the extraction step: explicit nulls fall back to defaults."""

    # numeric values in text fields ("probability": 0.3) are kept as text
    model_config = ConfigDict(coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class UserDefinition(SpecRecord):
    """A user persona and how many people it covers."""

    persona: str = ""
    count: str = "0"  # numeric text, parsed leniently by the user-scale scorer
    tech_level: str = ""  # 'non-technical' | 'technical' | 'mixed'

    @field_validator("count", mode="before")
    @classmethod
    def _count_as_text(cls, v: Any) -> Any:
        if isinstance(v, float) and not math.isfinite(v):
            return "0"
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(int(v))
        return v


class IntegrationNeed(SpecRecord):
    """A system the solution must connect to."""

    system: str = ""
    type: Optional[IntegrationType] = None  # None = unrecognized
    priority: Optional[RequirementPriority] = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v: Any) -> Optional[IntegrationType]:
        return _lenient_enum(IntegrationType, v)

    @field_validator("priority", mode="before")
    @classmethod
    def _parse_priority(cls, v: Any) -> Optional[RequirementPriority]:
        return _lenient_enum(RequirementPriority, v)


class UxRequirement(SpecRecord):
    """A user-experience need (mobile, scanner, offline, accessibility, dashboard, other)."""

    type: str = ""
    description: str = ""
    priority: Optional[RequirementPriority] = None

    @field_validator("priority", mode="before")
    @classmethod
    def _parse_priority(cls, v: Any) -> Optional[RequirementPriority]:
        return _lenient_enum(RequirementPriority, v)


class NonFunctionalRequirements(SpecRecord):
    """Non-functional requirements; availability is free text."""

    availability: str = ""
    response_time: str = ""
    throughput: str = ""
    auditability: bool = False
    support_hours: str = ""
    data_retention: str = ""


class Risk(SpecRecord):
    """A risk identified during the interview. Only used by the explanation."""

    id: str = ""
    description: str = ""
    probability: str = ""  # 'low' | 'medium' | 'high'
    impact: str = ""  # 'low' | 'medium' | 'high'
    mitigation: str = ""


class StructuredSpec(SpecRecord):
    """
    Structured answer set extracted from an interview transcript.

    Fields read by the routing engine:
        data_types, data_classification, privacy_requirements, integrations,
        users, nfrs, ux_needs, acceptance_criteria, risks
    Everything else is carried for downstream consumers.
    """

    problem_statement: str = ""
    current_process: str = ""
    pain_points: Tuple[str, ...] = ()
    goals: Tuple[str, ...] = ()
    constraints: Tuple[str, ...] = ()
    users: Tuple[UserDefinition, ...] = ()
    frequency: str = ""
    volumes: str = ""
    environments: Tuple[str, ...] = ()
    data_types: Tuple[str, ...] = ()
    data_classification: DataClassification
    retention_period: str = ""
    privacy_requirements: Tuple[str, ...] = ()
    integrations: Tuple[IntegrationNeed, ...] = ()
    ux_needs: Tuple[UxRequirement, ...] = ()
    nfrs: NonFunctionalRequirements = Field(default_factory=NonFunctionalRequirements)
    acceptance_criteria: Tuple[Any, ...] = ()  # arbitrary records, only the count is read
    test_suggestions: Tuple[Any, ...] = ()
    risks: Tuple[Risk, ...] = ()
    assumptions: Tuple[str, ...] = ()
    open_questions: Tuple[str, ...] = ()

    @field_validator("data_classification", mode="before")
    @classmethod
    def _normalize_classification(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


# Stable order of the six computed factors (explanation table, CLI output)
FACTOR_ORDER: Tuple[str, ...] = (
    "data_complexity",
    "integration_complexity",
    "user_scale",
    "security_requirements",
    "availability_requirements",
    "customization_needs",
)

FACTOR_LABELS: Dict[str, str] = {
    "data_complexity": "Data Complexity",
    "integration_complexity": "Integration Complexity",
    "user_scale": "User Scale",
    "security_requirements": "Security Requirements",
    "availability_requirements": "Availability Requirements",
    "customization_needs": "Customization Needs",
    "time_to_market": "Time to Market",
}


class ScoreBreakdown(BaseDomainModel):
    """Seven named sub-scores, each an integer in [0, 100]."""

    data_complexity: int = Field(..., ge=0, le=100)
    integration_complexity: int = Field(..., ge=0, le=100)
    user_scale: int = Field(..., ge=0, le=100)
    security_requirements: int = Field(..., ge=0, le=100)
    availability_requirements: int = Field(..., ge=0, le=100)
    customization_needs: int = Field(..., ge=0, le=100)
    time_to_market: int = Field(..., ge=0, le=100)

    def values(self) -> Tuple[int, ...]:
        """All seven values, six computed factors first, then time to market."""
        return tuple(getattr(self, name) for name in FACTOR_ORDER) + (self.time_to_market,)

    @property
    def mean(self) -> float:
        """Unrounded arithmetic mean of all seven values."""
        values = self.values()
        return sum(values) / len(values)


class RoutingResult(BaseDomainModel):
    """
    Routing decision for one StructuredSpec version.

    Immutable fact of record: a changed spec needs a fresh routing call.
    """

    path: DeliveryPath
    score: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    explanation: str
