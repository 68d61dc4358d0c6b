"""
Path classifier.

Ordered rule cascade: the first matching rule decides the path. Rules
overlap, so the order below is part of the behavior:

    1. CRITICAL       restricted data OR security > 80 OR availability > 85
    2. PRODUCT_GRADE  avg > 60 OR integration > 70 OR customization > 70
    3. AI_DISPOSABLE  avg < 35 AND integration < 30 AND users < 30 AND time to market > 70
    4. BUY            customization < 30 AND integration < 40
    5. CONFIG         otherwise
"""

from __future__ import annotations

from typing import Callable, Tuple

from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig, RoutingThresholds
from intake_router.routing.domain.enums import DataClassification, DeliveryPath
from intake_router.routing.domain.models import ScoreBreakdown

Rule = Callable[[ScoreBreakdown, DataClassification, RoutingThresholds], bool]


def _is_critical(b: ScoreBreakdown, classification: DataClassification, t: RoutingThresholds) -> bool:
    return (
        classification == DataClassification.RESTRICTED
        or b.security_requirements > t.critical_security_score
        or b.availability_requirements > t.critical_availability_score
    )


def _is_product_grade(b: ScoreBreakdown, classification: DataClassification, t: RoutingThresholds) -> bool:
    return (
        b.mean > t.product_grade_min_score
        or b.integration_complexity > t.product_grade_integration_score
        or b.customization_needs > t.product_grade_customization_score
    )


def _is_ai_disposable(b: ScoreBreakdown, classification: DataClassification, t: RoutingThresholds) -> bool:
    return (
        b.mean < t.ai_disposable_max_score
        and b.integration_complexity < t.ai_disposable_max_integration
        and b.user_scale < t.ai_disposable_max_user_scale
        and b.time_to_market > t.ai_disposable_min_time_to_market
    )


def _is_buy(b: ScoreBreakdown, classification: DataClassification, t: RoutingThresholds) -> bool:
    return (
        b.customization_needs < t.buy_max_customization
        and b.integration_complexity < t.buy_max_integration
    )


PATH_RULES: Tuple[Tuple[DeliveryPath, Rule], ...] = (
    (DeliveryPath.CRITICAL, _is_critical),
    (DeliveryPath.PRODUCT_GRADE, _is_product_grade),
    (DeliveryPath.AI_DISPOSABLE, _is_ai_disposable),
    (DeliveryPath.BUY, _is_buy),
)

DEFAULT_PATH = DeliveryPath.CONFIG


def classify_path(
    breakdown: ScoreBreakdown,
    data_classification: DataClassification,
    config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
) -> DeliveryPath:
    """
    Classify a score breakdown into exactly one delivery path.

    Args:
        breakdown: Seven-factor breakdown
        data_classification: Classification of the spec (rule 1 reads it directly)
        config: Routing config supplying the thresholds

    Returns:
        The first matching path, CONFIG when no rule matches
    """
    for path, rule in PATH_RULES:
        if rule(breakdown, data_classification, config.thresholds):
            return path
    return DEFAULT_PATH
