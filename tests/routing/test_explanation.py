"""
Tests for intake_router.routing.application.explanation

The explanation is parsed by downstream tooling, so the layout is pinned
with a full golden string plus targeted checks.
"""

import pytest

from intake_router.routing.application.explanation import (
    PATH_RATIONALES,
    generate_explanation,
    score_level,
)
from intake_router.routing.domain.enums import DeliveryPath, ScoreLevel
from intake_router.routing.domain.models import Risk, ScoreBreakdown

BUY_BREAKDOWN = ScoreBreakdown(
    data_complexity=30,
    integration_complexity=10,
    user_scale=10,
    security_requirements=25,
    availability_requirements=40,
    customization_needs=20,
    time_to_market=50,
)

EXPECTED_BUY_EXPLANATION = (
    "## Routing Recommendation: Buy (Commercial Off-the-Shelf)\n"
    "\n"
    "### Score Summary\n"
    "\n"
    "| Factor | Score | Level |\n"
    "|--------|-------|-------|\n"
    "| Data Complexity | 30 | Medium |\n"
    "| Integration Complexity | 10 | Low |\n"
    "| User Scale | 10 | Low |\n"
    "| Security Requirements | 25 | Low |\n"
    "| Availability Requirements | 40 | Medium |\n"
    "| Customization Needs | 20 | Low |\n"
    "\n"
    "### Key Factors\n"
    "\n"
    "- Standard requirements that COTS can satisfy\n"
    "- Limited customization needed\n"
    "- Cost-effective for scope\n"
)


class TestScoreLevel:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, ScoreLevel.LOW),
            (29, ScoreLevel.LOW),
            (30, ScoreLevel.MEDIUM),
            (59, ScoreLevel.MEDIUM),
            (60, ScoreLevel.HIGH),
            (100, ScoreLevel.HIGH),
        ],
    )
    def test_levels(self, score, expected):
        assert score_level(score) == expected


class TestGenerateExplanation:
    def test_golden_buy_explanation(self):
        assert generate_explanation(DeliveryPath.BUY, BUY_BREAKDOWN) == EXPECTED_BUY_EXPLANATION

    @pytest.mark.parametrize(
        "path,label",
        [
            (DeliveryPath.BUY, "Buy (Commercial Off-the-Shelf)"),
            (DeliveryPath.CONFIG, "Configure (Low-Code Platform)"),
            (DeliveryPath.AI_DISPOSABLE, "AI Disposable"),
            (DeliveryPath.PRODUCT_GRADE, "Product Grade Development"),
            (DeliveryPath.CRITICAL, "Critical System Development"),
        ],
    )
    def test_heading_uses_path_label(self, path, label):
        text = generate_explanation(path, BUY_BREAKDOWN)
        assert text.splitlines()[0] == f"## Routing Recommendation: {label}"

    @pytest.mark.parametrize("path", list(DeliveryPath))
    def test_rationale_matches_path(self, path):
        text = generate_explanation(path, BUY_BREAKDOWN)
        for reason in PATH_RATIONALES[path]:
            assert f"- {reason}\n" in text
        other_reasons = {
            reason for other, reasons in PATH_RATIONALES.items() if other != path for reason in reasons
        }
        assert not any(reason in text for reason in other_reasons)

    def test_table_lists_six_factors_in_fixed_order(self):
        text = generate_explanation(DeliveryPath.CONFIG, BUY_BREAKDOWN)
        rows = [line for line in text.splitlines() if line.startswith("| ") and "Factor" not in line]
        assert [row.split("|")[1].strip() for row in rows] == [
            "Data Complexity",
            "Integration Complexity",
            "User Scale",
            "Security Requirements",
            "Availability Requirements",
            "Customization Needs",
        ]

    def test_time_to_market_not_in_table(self):
        assert "Time to Market" not in generate_explanation(DeliveryPath.BUY, BUY_BREAKDOWN)

    def test_no_risk_section_without_risks(self):
        assert "Identified Risks" not in generate_explanation(DeliveryPath.BUY, BUY_BREAKDOWN, ())

    def test_risk_section_lists_each_risk(self):
        risks = (
            Risk(description="Vendor lock-in", probability="medium", impact="high"),
            Risk(description="Low adoption", probability="low", impact="medium"),
        )
        text = generate_explanation(DeliveryPath.BUY, BUY_BREAKDOWN, risks)
        assert text.endswith(
            "### Identified Risks\n"
            "\n"
            "- **Vendor lock-in** (medium probability, high impact)\n"
            "- **Low adoption** (low probability, medium impact)\n"
        )
