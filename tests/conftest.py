"""Shared test fixtures for the intake router test suite."""

from typing import Any, Dict

import pytest


def build_spec_data(**overrides: Any) -> Dict[str, Any]:
    """
    Minimal camelCase spec as produced by the extraction step.

    Defaults route to BUY: internal data, one persona of 5 users,
    no integrations, no UX needs, no acceptance criteria.
    """
    data: Dict[str, Any] = {
        "problemStatement": "Track equipment loans across departments",
        "dataTypes": [],
        "dataClassification": "internal",
        "privacyRequirements": [],
        "integrations": [],
        "users": [{"persona": "Office staff", "count": "5", "techLevel": "non-technical"}],
        "nfrs": {"availability": "", "auditability": False},
        "uxNeeds": [],
        "acceptanceCriteria": [],
        "risks": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def spec_data():
    """Factory fixture: spec_data(**overrides) -> camelCase spec dict."""
    return build_spec_data


@pytest.fixture
def minimal_spec_data():
    """Minimal spec that routes to BUY."""
    return build_spec_data()


@pytest.fixture
def restricted_spec_data():
    """Restricted data with otherwise minimal complexity."""
    return build_spec_data(
        dataClassification="restricted",
        users=[{"persona": "Auditor", "count": "1", "techLevel": "technical"}],
    )


@pytest.fixture
def risky_spec_data():
    """Spec with two risks for explanation rendering."""
    return build_spec_data(
        risks=[
            {
                "id": "r1",
                "description": "Vendor lock-in",
                "probability": "medium",
                "impact": "high",
                "mitigation": "Negotiate export clause",
            },
            {"id": "r2", "description": "Low adoption", "probability": "low", "impact": "medium"},
        ]
    )
