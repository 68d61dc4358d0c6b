"""
Routing engine facade.

compute_routing is the single entry point used by every host (API handler,
CLI, batch job). It is pure: no I/O of its own, no shared state, and the
same input always yields an identical RoutingResult.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Mapping, Optional, Union

from intake_router.routing.application.classifier import classify_path
from intake_router.routing.application.explanation import generate_explanation
from intake_router.routing.application.normalizer import normalize_spec
from intake_router.routing.application.scorers import FACTOR_SCORERS
from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from intake_router.routing.domain.models import RoutingResult, ScoreBreakdown, StructuredSpec
from intake_router.shared.domain.exceptions import InvalidSpecError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


def _resolve_time_to_market(value: Any, config: RoutingConfig) -> int:
    if value is None:
        return config.default_time_to_market
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSpecError(
            f"time_to_market must be a number, got {type(value).__name__}",
            context={"time_to_market": value},
        )
    if not 0 <= value <= 100:
        raise InvalidSpecError(
            f"time_to_market must be within [0, 100], got {value}",
            context={"time_to_market": value},
        )
    return round_half_up(float(value))


def compute_breakdown(
    spec: StructuredSpec,
    time_to_market: int,
    config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
) -> ScoreBreakdown:
    """Run the six scorers and add the externally supplied time to market."""
    scores = {name: scorer(spec, config) for name, scorer in FACTOR_SCORERS}
    return ScoreBreakdown(**scores, time_to_market=time_to_market)


def compute_routing(
    spec: Union[StructuredSpec, Mapping[str, Any]],
    time_to_market: Optional[float] = None,
    config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
) -> RoutingResult:
    """
    Route a structured spec to a delivery path.

    Args:
        spec: StructuredSpec or raw camelCase mapping from the extraction step
        time_to_market: Urgency factor in [0, 100]; config default (50) when None
        config: Routing configuration (weights and thresholds)

    Returns:
        Immutable RoutingResult with path, overall score, breakdown and explanation

    Raises:
        InvalidSpecError: If the spec has no data classification, is structurally
            invalid, or time_to_market is out of range
    """
    structured = normalize_spec(spec, config)
    ttm = _resolve_time_to_market(time_to_market, config)

    breakdown = compute_breakdown(structured, ttm, config)
    score = round_half_up(breakdown.mean)
    path = classify_path(breakdown, structured.data_classification, config)
    explanation = generate_explanation(path, breakdown, structured.risks, config)

    return RoutingResult(
        path=path,
        score=score,
        breakdown=breakdown,
        explanation=explanation,
    )
