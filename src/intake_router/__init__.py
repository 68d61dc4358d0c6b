"""
Intake Router - delivery-path routing for software intake requests.
"""

from intake_router.routing import (
    DEFAULT_ROUTING_CONFIG,
    DeliveryPath,
    RoutingConfig,
    RoutingResult,
    ScoreBreakdown,
    StructuredSpec,
    compute_routing,
)
from intake_router.shared.domain.exceptions import ConfigurationError, IntakeRouterError, InvalidSpecError

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DEFAULT_ROUTING_CONFIG",
    "DeliveryPath",
    "IntakeRouterError",
    "InvalidSpecError",
    "RoutingConfig",
    "RoutingResult",
    "ScoreBreakdown",
    "StructuredSpec",
    "compute_routing",
]
