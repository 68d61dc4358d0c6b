"""
Routing configuration.

Every weight, breakpoint and rule threshold used by the scorers and the
classifier lives here. RoutingConfig is immutable; callers pass a config
into compute_routing instead of mutating module state. DEFAULT_ROUTING_CONFIG
holds the documented values.

YAML form (camelCase or snake_case, partial overrides allowed):
```yaml
thresholds:
  aiDisposableMaxScore: 35
  productGradeMinScore: 60
  criticalSecurityScore: 80
  criticalAvailabilityScore: 85
scoring:
  userScaleBreakpoints: [[10, 10], [50, 25], [200, 50], [1000, 75]]
unknownClassification: restricted
```
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from pydantic import Field, field_serializer, field_validator, model_validator

from intake_router.routing.domain.enums import (
    AvailabilityTier,
    DataClassification,
    IntegrationType,
    UnknownClassificationPolicy,
)
from intake_router.shared.domain.base_model import BaseDomainModel


# Weight tables are exposed read-only
_TABLE_FIELDS = (
    "data_classification_weights",
    "integration_type_weights",
    "security_classification_weights",
    "availability_tier_scores",
)


class ScoringWeights(BaseDomainModel):
    """Bases, increments and weights for the six factor scorers."""

    max_score: int = 100

    # Data complexity
    data_base: int = 20
    data_per_type: int = 5
    data_per_privacy_requirement: int = 5
    data_classification_weights: Mapping[DataClassification, int] = Field(
        default_factory=lambda: MappingProxyType({
            DataClassification.PUBLIC: 0,
            DataClassification.INTERNAL: 10,
            DataClassification.CONFIDENTIAL: 25,
            DataClassification.RESTRICTED: 40,
        })
    )

    # Integration complexity
    integration_base: int = 10
    integration_type_weights: Mapping[IntegrationType, int] = Field(
        default_factory=lambda: MappingProxyType({
            IntegrationType.READ: 10,
            IntegrationType.WRITE: 15,
            IntegrationType.BIDIRECTIONAL: 25,
        })
    )
    unknown_integration_weight: int = 10
    integration_must_bonus: int = 10

    # User scale: (exclusive upper bound on total users, score), ascending
    user_scale_breakpoints: Tuple[Tuple[int, int], ...] = (
        (10, 10),
        (50, 25),
        (200, 50),
        (1000, 75),
    )
    user_scale_max: int = 100

    # Security requirements
    security_base: int = 10
    security_classification_weights: Mapping[DataClassification, int] = Field(
        default_factory=lambda: MappingProxyType({
            DataClassification.PUBLIC: 0,
            DataClassification.INTERNAL: 15,
            DataClassification.CONFIDENTIAL: 40,
            DataClassification.RESTRICTED: 70,
        })
    )
    security_audit_bonus: int = 15

    # Availability requirements
    availability_tier_scores: Mapping[AvailabilityTier, int] = Field(
        default_factory=lambda: MappingProxyType({
            AvailabilityTier.MISSION_CRITICAL: 90,
            AvailabilityTier.HIGH: 60,
            AvailabilityTier.BUSINESS_HOURS: 30,
            AvailabilityTier.UNSPECIFIED: 40,
        })
    )

    # Customization needs
    customization_base: int = 20
    customization_per_must_ux: int = 10
    customization_per_criterion: int = 5
    customization_criteria_cap: int = 30

    @field_validator(*_TABLE_FIELDS)
    @classmethod
    def _read_only_table(cls, v: Mapping[Any, int]) -> Mapping[Any, int]:
        return MappingProxyType(dict(v))

    @field_serializer(*_TABLE_FIELDS)
    def _dump_table(self, v: Mapping[Any, int]) -> Dict[str, int]:
        return {key.value: weight for key, weight in v.items()}

    @field_validator("user_scale_breakpoints")
    @classmethod
    def _ascending_breakpoints(cls, v: Tuple[Tuple[int, int], ...]) -> Tuple[Tuple[int, int], ...]:
        bounds = [bound for bound, _ in v]
        if bounds != sorted(bounds) or len(set(bounds)) != len(bounds):
            raise ValueError("user_scale_breakpoints must be strictly ascending")
        return v

    @model_validator(mode="after")
    def _complete_tables(self) -> "ScoringWeights":
        for name, enum_cls in (
            ("data_classification_weights", DataClassification),
            ("security_classification_weights", DataClassification),
            ("integration_type_weights", IntegrationType),
            ("availability_tier_scores", AvailabilityTier),
        ):
            missing = [m.value for m in enum_cls if m not in getattr(self, name)]
            if missing:
                raise ValueError(f"{name} is missing entries for: {', '.join(missing)}")
        return self


class RoutingThresholds(BaseDomainModel):
    """
    Rule thresholds for the path classifier.

    Names follow the admin policy screen ("AI Disposable Max Score" etc.).
    All comparisons are strict.
    """

    critical_security_score: int = 80  # security > this -> CRITICAL
    critical_availability_score: int = 85  # availability > this -> CRITICAL
    product_grade_min_score: int = 60  # avg > this -> PRODUCT_GRADE
    product_grade_integration_score: int = 70
    product_grade_customization_score: int = 70
    ai_disposable_max_score: int = 35  # avg < this (with the rest) -> AI_DISPOSABLE
    ai_disposable_max_integration: int = 30
    ai_disposable_max_user_scale: int = 30
    ai_disposable_min_time_to_market: int = 70
    buy_max_customization: int = 30
    buy_max_integration: int = 40

    # Score level cut-offs for the explanation table
    level_low_below: int = 30
    level_medium_below: int = 60

    # Approval workflow: BUY results scoring below this are auto-approved
    buy_auto_approve_below: int = 30


class RoutingConfig(BaseDomainModel):
    """Complete, immutable configuration for one routing engine instance."""

    scoring: ScoringWeights = Field(default_factory=ScoringWeights)
    thresholds: RoutingThresholds = Field(default_factory=RoutingThresholds)
    default_time_to_market: int = Field(default=50, ge=0, le=100)
    unknown_classification: UnknownClassificationPolicy = UnknownClassificationPolicy.RESTRICTED


DEFAULT_ROUTING_CONFIG = RoutingConfig()
