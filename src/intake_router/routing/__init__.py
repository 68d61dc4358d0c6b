"""
Delivery-path routing engine.

Scores a structured spec on six factors plus time to market, classifies it
into one delivery path with an ordered rule cascade, and explains the decision.

Exports:
    - compute_routing: Route a spec (the single entry point for hosts)
    - normalize_spec: Validate and normalize raw spec JSON
    - classify_path: Ordered rule cascade over a breakdown
    - generate_explanation: Markdown report for a decision
    - approval_requirements: Approvers and auto-approval for a decision
    - load_routing_config / save_routing_config: YAML configuration
"""

from intake_router.routing.application.approval import ApprovalRequirement, ApproverRole, approval_requirements
from intake_router.routing.application.classifier import classify_path
from intake_router.routing.application.engine import compute_breakdown, compute_routing
from intake_router.routing.application.explanation import generate_explanation, score_level
from intake_router.routing.application.normalizer import normalize_spec, parse_user_count
from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from intake_router.routing.domain.enums import DataClassification, DeliveryPath
from intake_router.routing.domain.models import RoutingResult, ScoreBreakdown, StructuredSpec
from intake_router.routing.infrastructure.config_loader import load_routing_config, save_routing_config

__all__ = [
    "ApprovalRequirement",
    "ApproverRole",
    "DEFAULT_ROUTING_CONFIG",
    "DataClassification",
    "DeliveryPath",
    "RoutingConfig",
    "RoutingResult",
    "ScoreBreakdown",
    "StructuredSpec",
    "approval_requirements",
    "classify_path",
    "compute_breakdown",
    "compute_routing",
    "generate_explanation",
    "load_routing_config",
    "normalize_spec",
    "parse_user_count",
    "save_routing_config",
    "score_level",
]
