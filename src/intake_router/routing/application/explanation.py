"""
Explanation generator.

Renders a routing decision as Markdown:

    ## Routing Recommendation: <path label>
    ### Score Summary      (pipe table, six factors in fixed order)
    ### Key Factors        (canned rationale for the path)
    ### Identified Risks   (only when the spec lists risks)

Downstream tooling parses this text, so the layout and factor order must
not change between calls.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from intake_router.routing.domain.enums import DeliveryPath, ScoreLevel
from intake_router.routing.domain.models import FACTOR_LABELS, FACTOR_ORDER, Risk, ScoreBreakdown

PATH_RATIONALES: Dict[DeliveryPath, Tuple[str, ...]] = {
    DeliveryPath.BUY: (
        "Standard requirements that COTS can satisfy",
        "Limited customization needed",
        "Cost-effective for scope",
    ),
    DeliveryPath.CONFIG: (
        "Standard use case suitable for low-code approach",
        "Moderate integration complexity",
        "Reasonable time-to-market expectations",
    ),
    DeliveryPath.AI_DISPOSABLE: (
        "Simple, well-defined scope",
        "Limited lifespan acceptable",
        "Speed to delivery is priority",
    ),
    DeliveryPath.PRODUCT_GRADE: (
        "Complex customization requirements",
        "Multiple integrations needed",
        "Long-term maintainability important",
    ),
    DeliveryPath.CRITICAL: (
        "High security/compliance requirements",
        "Mission-critical availability needed",
        "Requires extensive testing and validation",
    ),
}


def score_level(score: int, config: RoutingConfig = DEFAULT_ROUTING_CONFIG) -> ScoreLevel:
    """Low below 30, Medium below 60, High otherwise."""
    thresholds = config.thresholds
    if score < thresholds.level_low_below:
        return ScoreLevel.LOW
    if score < thresholds.level_medium_below:
        return ScoreLevel.MEDIUM
    return ScoreLevel.HIGH


def generate_explanation(
    path: DeliveryPath,
    breakdown: ScoreBreakdown,
    risks: Sequence[Risk] = (),
    config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
) -> str:
    """Render the Markdown explanation for a routing decision."""
    lines: list[str] = []
    lines.append(f"## Routing Recommendation: {path.label}")
    lines.append("")

    lines.append("### Score Summary")
    lines.append("")
    lines.append("| Factor | Score | Level |")
    lines.append("|--------|-------|-------|")
    for name in FACTOR_ORDER:
        value = getattr(breakdown, name)
        lines.append(f"| {FACTOR_LABELS[name]} | {value} | {score_level(value, config).value} |")
    lines.append("")

    lines.append("### Key Factors")
    lines.append("")
    for reason in PATH_RATIONALES[path]:
        lines.append(f"- {reason}")

    if risks:
        lines.append("")
        lines.append("### Identified Risks")
        lines.append("")
        for risk in risks:
            lines.append(
                f"- **{risk.description}** "
                f"({risk.probability} probability, {risk.impact} impact)"
            )

    return "\n".join(lines) + "\n"
