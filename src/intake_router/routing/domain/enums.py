"""
Routing domain enums.

Values match the JSON produced by the spec-extraction step:
    type DeliveryPath = 'BUY' | 'CONFIG' | 'AI_DISPOSABLE' | 'PRODUCT_GRADE' | 'CRITICAL';
    type DataClassification = 'public' | 'internal' | 'confidential' | 'restricted';
"""

from enum import Enum


class DeliveryPath(str, Enum):
    """
    Delivery path an approved intake is built or sourced through.

    Closed set: every routed spec maps to exactly one of these.
    """

    BUY = "BUY"
    CONFIG = "CONFIG"
    AI_DISPOSABLE = "AI_DISPOSABLE"
    PRODUCT_GRADE = "PRODUCT_GRADE"
    CRITICAL = "CRITICAL"

    @property
    def label(self) -> str:
        """Human label used in explanations and CLI output."""
        return PATH_LABELS[self]


PATH_LABELS = {
    DeliveryPath.BUY: "Buy (Commercial Off-the-Shelf)",
    DeliveryPath.CONFIG: "Configure (Low-Code Platform)",
    DeliveryPath.AI_DISPOSABLE: "AI Disposable",
    DeliveryPath.PRODUCT_GRADE: "Product Grade Development",
    DeliveryPath.CRITICAL: "Critical System Development",
}


class DataClassification(str, Enum):
    """Sensitivity class of the data an intake handles, least to most restrictive."""

    PUBLIC = "public"
    INTERNAL = "internal"
    CONFIDENTIAL = "confidential"
    RESTRICTED = "restricted"


class IntegrationType(str, Enum):
    """Direction of data flow for an integration."""

    READ = "read"
    WRITE = "write"
    BIDIRECTIONAL = "bidirectional"


class RequirementPriority(str, Enum):
    """MoSCoW-style priority used by integrations and UX needs."""

    MUST = "must"
    SHOULD = "should"
    COULD = "could"


class AvailabilityTier(str, Enum):
    """
    Closed availability tier derived from the free-text NFR.

    The free text is matched at the boundary (see routing.application.availability);
    scorers only see the tier.
    """

    MISSION_CRITICAL = "mission_critical"  # 24/7, 99.9%
    HIGH = "high"  # 99.5%
    BUSINESS_HOURS = "business_hours"
    UNSPECIFIED = "unspecified"


class ScoreLevel(str, Enum):
    """Qualitative level of a 0-100 factor score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class UnknownClassificationPolicy(str, Enum):
    """What the normalizer does with a classification outside DataClassification."""

    RESTRICTED = "restricted"  # treat as most restrictive, log a warning
    REJECT = "reject"  # raise InvalidSpecError
