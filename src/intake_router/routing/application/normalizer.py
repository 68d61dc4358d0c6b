"""
StructuredSpec validator/normalizer.

The extraction step that produces specs is an LLM, so input is treated as
untrusted but not hostile: missing arrays become empty, nulls fall back to
defaults, odd enum values are tolerated. The one hard contract is that a
data classification is present.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Union

from pydantic import ValidationError

from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from intake_router.routing.domain.enums import DataClassification, UnknownClassificationPolicy
from intake_router.routing.domain.models import StructuredSpec
from intake_router.shared.domain.exceptions import InvalidSpecError
from intake_router.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

_CLASSIFICATION_KEYS = ("dataClassification", "data_classification")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_user_count(count: Any) -> int:
    """
    Parse a user count leniently.

    Reads a leading integer the way interview answers tend to be written
    ("50+", "200 users"); anything without one counts as 0. Negative counts
    are clamped to 0.

    Examples:
        >>> parse_user_count("50+")
        50
        >>> parse_user_count("about 50")
        0
        >>> parse_user_count(12)
        12
    """
    if isinstance(count, bool) or count is None:
        return 0
    if isinstance(count, float) and not math.isfinite(count):
        return 0
    if isinstance(count, (int, float)):
        return max(0, int(count))
    match = _LEADING_INT.match(str(count))
    if not match:
        return 0
    return max(0, int(match.group(1)))


def _resolve_classification(value: Any, config: RoutingConfig) -> DataClassification:
    """Map a raw classification onto the enum, applying the unknown-value policy."""
    if isinstance(value, DataClassification):
        return value

    text = str(value).strip().lower()
    try:
        return DataClassification(text)
    except ValueError:
        pass

    if config.unknown_classification == UnknownClassificationPolicy.REJECT:
        raise InvalidSpecError(
            f"Unrecognized data classification: {value!r}",
            context={
                "data_classification": value,
                "allowed": [c.value for c in DataClassification],
            },
        )

    logger.warning(
        "unknown_data_classification",
        data_classification=str(value),
        treated_as=DataClassification.RESTRICTED.value,
    )
    return DataClassification.RESTRICTED


def normalize_spec(
    raw: Union[StructuredSpec, Mapping[str, Any]],
    config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
) -> StructuredSpec:
    """
    Validate and normalize a structured spec.

    Args:
        raw: StructuredSpec instance or a mapping with camelCase/snake_case keys
        config: Routing config (decides how unknown classifications are handled)

    Returns:
        Immutable StructuredSpec with safe defaults filled in

    Raises:
        InvalidSpecError: If the data classification is absent, rejected by
            policy, or the record is structurally invalid
    """
    if isinstance(raw, StructuredSpec):
        return raw

    if not isinstance(raw, Mapping):
        raise InvalidSpecError(
            "Structured spec must be a mapping",
            context={"type": type(raw).__name__},
        )

    data = dict(raw)
    key = next((k for k in _CLASSIFICATION_KEYS if k in data), None)
    if key is None or data[key] is None:
        raise InvalidSpecError(
            "Structured spec is missing dataClassification",
            context={"field": "dataClassification"},
        )

    data[key] = _resolve_classification(data[key], config)

    try:
        return StructuredSpec.model_validate(data)
    except ValidationError as e:
        raise InvalidSpecError(
            f"Structured spec is invalid: {e.error_count()} validation error(s)",
            context={
                "errors": [
                    {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in e.errors()
                ]
            },
        ) from e
