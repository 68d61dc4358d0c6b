"""
Factor scorers.

Six independent, pure functions. Each maps part of a StructuredSpec to an
integer sub-score clamped to [0, max_score]; none of them can fall below
its configured base.
"""

from __future__ import annotations

from intake_router.routing.application.availability import classify_availability
from intake_router.routing.application.normalizer import parse_user_count
from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from intake_router.routing.domain.enums import RequirementPriority
from intake_router.routing.domain.models import StructuredSpec


def _clamp(score: int, config: RoutingConfig) -> int:
    return max(0, min(score, config.scoring.max_score))


def data_complexity(spec: StructuredSpec, config: RoutingConfig = DEFAULT_ROUTING_CONFIG) -> int:
    """Base + per distinct data type + classification weight + per privacy requirement."""
    weights = config.scoring
    score = weights.data_base
    score += len(set(spec.data_types)) * weights.data_per_type
    score += weights.data_classification_weights.get(spec.data_classification, 0)
    score += len(spec.privacy_requirements) * weights.data_per_privacy_requirement
    return _clamp(score, config)


def integration_complexity(spec: StructuredSpec, config: RoutingConfig = DEFAULT_ROUTING_CONFIG) -> int:
    """Base + type weight per integration, plus a bonus for each must-have one."""
    weights = config.scoring
    score = weights.integration_base
    for integration in spec.integrations:
        if integration.type is None:
            score += weights.unknown_integration_weight
        else:
            score += weights.integration_type_weights[integration.type]
        if integration.priority == RequirementPriority.MUST:
            score += weights.integration_must_bonus
    return _clamp(score, config)


def user_scale(spec: StructuredSpec, config: RoutingConfig = DEFAULT_ROUTING_CONFIG) -> int:
    """Total user count mapped through ascending strict-less-than breakpoints."""
    total_users = sum(parse_user_count(user.count) for user in spec.users)
    for upper_bound, score in config.scoring.user_scale_breakpoints:
        if total_users < upper_bound:
            return _clamp(score, config)
    return _clamp(config.scoring.user_scale_max, config)


def security_requirements(spec: StructuredSpec, config: RoutingConfig = DEFAULT_ROUTING_CONFIG) -> int:
    weights = config.scoring
    score = weights.security_base
    score += weights.security_classification_weights.get(spec.data_classification, 0)
    if spec.nfrs.auditability:
        score += weights.security_audit_bonus
    return _clamp(score, config)


def availability_requirements(spec: StructuredSpec, config: RoutingConfig = DEFAULT_ROUTING_CONFIG) -> int:
    tier = classify_availability(spec.nfrs.availability)
    return _clamp(config.scoring.availability_tier_scores[tier], config)


def customization_needs(spec: StructuredSpec, config: RoutingConfig = DEFAULT_ROUTING_CONFIG) -> int:
    """Base + per must-have UX need + per acceptance criterion (capped)."""
    weights = config.scoring
    score = weights.customization_base
    must_ux = sum(1 for ux in spec.ux_needs if ux.priority == RequirementPriority.MUST)
    score += must_ux * weights.customization_per_must_ux
    score += min(
        len(spec.acceptance_criteria) * weights.customization_per_criterion,
        weights.customization_criteria_cap,
    )
    return _clamp(score, config)


# Scorer per breakdown field, in explanation-table order
FACTOR_SCORERS = (
    ("data_complexity", data_complexity),
    ("integration_complexity", integration_complexity),
    ("user_scale", user_scale),
    ("security_requirements", security_requirements),
    ("availability_requirements", availability_requirements),
    ("customization_needs", customization_needs),
)
