"""
Tests for intake_router.routing.application.approval
"""

from intake_router.routing import compute_routing, normalize_spec
from intake_router.routing.application.approval import ApproverRole, approval_requirements
from intake_router.routing.domain.config import RoutingConfig, RoutingThresholds
from intake_router.routing.domain.enums import DeliveryPath


def _route(data, **kwargs):
    spec = normalize_spec(data)
    result = compute_routing(spec, **kwargs)
    return result, approval_requirements(result, spec)


class TestApprovalRequirements:
    def test_low_score_buy_auto_approved(self, minimal_spec_data):
        result, approval = _route(minimal_spec_data)

        assert result.path == DeliveryPath.BUY
        assert result.score < 30
        assert approval.approvers == (ApproverRole.ARCHITECT,)
        assert approval.auto_approve is True

    def test_config_needs_architect(self, spec_data):
        result, approval = _route(
            spec_data(
                uxNeeds=[{"type": "mobile", "priority": "must"}],
                acceptanceCriteria=[{"id": "ac-1"}, {"id": "ac-2"}],
            )
        )

        assert result.path == DeliveryPath.CONFIG
        assert approval.approvers == (ApproverRole.ARCHITECT,)
        assert approval.auto_approve is False

    def test_public_ai_disposable_auto_approved_with_kill_date(self, spec_data):
        result, approval = _route(spec_data(dataClassification="public"), time_to_market=90)

        assert result.path == DeliveryPath.AI_DISPOSABLE
        assert approval.auto_approve is True
        assert approval.kill_date_required is True

    def test_internal_ai_disposable_needs_manual_approval(self, spec_data):
        result, approval = _route(spec_data(), time_to_market=90)

        assert result.path == DeliveryPath.AI_DISPOSABLE
        assert approval.auto_approve is False

    def test_product_grade_needs_engineer_lead(self, spec_data):
        integrations = [{"system": str(i), "type": "bidirectional", "priority": "must"} for i in range(3)]
        result, approval = _route(spec_data(integrations=integrations))

        assert result.path == DeliveryPath.PRODUCT_GRADE
        assert approval.approvers == (ApproverRole.ARCHITECT, ApproverRole.ENGINEER_LEAD)
        assert approval.auto_approve is False

    def test_critical_needs_security_and_is_never_auto_approved(self, restricted_spec_data):
        result, approval = _route(restricted_spec_data)

        assert result.path == DeliveryPath.CRITICAL
        assert approval.approvers == (
            ApproverRole.ARCHITECT,
            ApproverRole.ENGINEER_LEAD,
            ApproverRole.SECURITY,
        )
        assert approval.auto_approve is False

    def test_confidential_data_adds_security_review(self, spec_data):
        result, approval = _route(spec_data(dataClassification="confidential"))

        assert result.path == DeliveryPath.BUY
        assert approval.security_review is True
        assert approval.auto_approve is False
        assert ApproverRole.SECURITY in approval.approvers

    def test_buy_auto_approve_threshold_from_config(self, minimal_spec_data):
        spec = normalize_spec(minimal_spec_data)
        result = compute_routing(spec)
        config = RoutingConfig(thresholds=RoutingThresholds(buy_auto_approve_below=20))

        approval = approval_requirements(result, spec, config)

        assert result.path == DeliveryPath.BUY
        assert result.score == 26
        assert approval.auto_approve is False
        assert approval.reasons == ()
