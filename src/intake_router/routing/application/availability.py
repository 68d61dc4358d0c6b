"""
Availability adapter.

Turns the free-text availability NFR into a closed AvailabilityTier so the
scorer never touches raw text. Matching is a case-insensitive substring test
over an ordered pattern table; the first tier with a matching pattern wins.
"""

from __future__ import annotations

from typing import Optional, Tuple

from intake_router.routing.domain.enums import AvailabilityTier

# Ordered: earlier tiers take precedence
AVAILABILITY_PATTERNS: Tuple[Tuple[AvailabilityTier, Tuple[str, ...]], ...] = (
    (AvailabilityTier.MISSION_CRITICAL, ("24/7", "99.9")),
    (AvailabilityTier.HIGH, ("99.5",)),
    (AvailabilityTier.BUSINESS_HOURS, ("business hours",)),
)


def classify_availability(text: Optional[str]) -> AvailabilityTier:
    """
    Classify a free-text availability requirement.

    Examples:
        >>> classify_availability("24/7 uptime required")
        <AvailabilityTier.MISSION_CRITICAL: 'mission_critical'>
        >>> classify_availability("Business hours only")
        <AvailabilityTier.BUSINESS_HOURS: 'business_hours'>
        >>> classify_availability("")
        <AvailabilityTier.UNSPECIFIED: 'unspecified'>
    """
    normalized = (text or "").lower()
    for tier, patterns in AVAILABILITY_PATTERNS:
        if any(pattern in normalized for pattern in patterns):
            return tier
    return AvailabilityTier.UNSPECIFIED
