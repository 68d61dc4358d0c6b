"""
Approval policy.

Who has to sign off a routed intake before it proceeds, and whether it may
be auto-approved. Mirrors the approval workflow configured by admins:

    Path           Approvers                               Auto-approve if
    BUY            architect                               score < 30 (buyAutoApproveBelow)
    CONFIG         architect                               never
    AI_DISPOSABLE  architect                               public data only
    PRODUCT_GRADE  architect + engineer_lead               never
    CRITICAL       architect + engineer_lead + security    never

Confidential data always adds a security review.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from pydantic import Field

from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from intake_router.routing.domain.enums import DataClassification, DeliveryPath
from intake_router.routing.domain.models import RoutingResult, StructuredSpec
from intake_router.shared.domain.base_model import BaseDomainModel


class ApproverRole(str, Enum):
    """Roles that can approve an intake."""

    ARCHITECT = "architect"
    ENGINEER_LEAD = "engineer_lead"
    SECURITY = "security"


class ApprovalRequirement(BaseDomainModel):
    """Approval needed for one routing result."""

    path: DeliveryPath
    approvers: Tuple[ApproverRole, ...]
    auto_approve: bool = False
    security_review: bool = False
    kill_date_required: bool = False
    reasons: Tuple[str, ...] = Field(default_factory=tuple)


PATH_APPROVERS: Dict[DeliveryPath, Tuple[ApproverRole, ...]] = {
    DeliveryPath.BUY: (ApproverRole.ARCHITECT,),
    DeliveryPath.CONFIG: (ApproverRole.ARCHITECT,),
    DeliveryPath.AI_DISPOSABLE: (ApproverRole.ARCHITECT,),
    DeliveryPath.PRODUCT_GRADE: (ApproverRole.ARCHITECT, ApproverRole.ENGINEER_LEAD),
    DeliveryPath.CRITICAL: (
        ApproverRole.ARCHITECT,
        ApproverRole.ENGINEER_LEAD,
        ApproverRole.SECURITY,
    ),
}


def approval_requirements(
    result: RoutingResult,
    spec: StructuredSpec,
    config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
) -> ApprovalRequirement:
    """
    Determine approvers and auto-approval for a routed spec.

    Args:
        result: Routing result for spec
        spec: The structured spec that was routed
        config: Routing config holding the auto-approval threshold

    Returns:
        ApprovalRequirement for the result's path
    """
    path = result.path
    approvers = list(PATH_APPROVERS[path])
    reasons: list[str] = []
    auto_approve = False
    auto_approve_below = config.thresholds.buy_auto_approve_below

    if path == DeliveryPath.BUY and result.score < auto_approve_below:
        auto_approve = True
        reasons.append(f"Score {result.score} is below {auto_approve_below}")
    elif path == DeliveryPath.AI_DISPOSABLE and spec.data_classification == DataClassification.PUBLIC:
        auto_approve = True
        reasons.append("Disposable app handles public data only")

    security_review = spec.data_classification == DataClassification.CONFIDENTIAL
    if security_review:
        auto_approve = False
        reasons.append("Confidential data requires a security review")
        if ApproverRole.SECURITY not in approvers:
            approvers.append(ApproverRole.SECURITY)

    if path == DeliveryPath.CRITICAL:
        reasons.append("Critical systems need explicit sign-off")

    return ApprovalRequirement(
        path=path,
        approvers=tuple(approvers),
        auto_approve=auto_approve,
        security_review=security_review,
        kill_date_required=path == DeliveryPath.AI_DISPOSABLE,
        reasons=tuple(reasons),
    )
