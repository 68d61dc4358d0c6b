"""
Configuration loader for routing thresholds.

Loads and saves RoutingConfig from a YAML file (e.g. .intake-router/routing.yaml).

Functions:
- load_routing_config: Load configuration from YAML, merged onto defaults
- save_routing_config: Save configuration to YAML (camelCase keys)
- create_default_config: Write the default configuration to a path
"""

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from intake_router.routing.domain.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from intake_router.shared.domain.base_model import convert_keys_to_snake_case
from intake_router.shared.domain.exceptions import ConfigurationError
from intake_router.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override onto base; nested dicts merge, everything else replaces."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_routing_config(config_path: Path | None = None) -> RoutingConfig:
    """
    Load routing configuration from a YAML file.

    Args:
        config_path: Path to the YAML file; None means defaults

    Returns:
        RoutingConfig with file values merged onto the defaults

    Raises:
        ConfigurationError: If the YAML is invalid or values fail validation
    """
    if config_path is None or not config_path.exists():
        return DEFAULT_ROUTING_CONFIG

    try:
        with open(config_path, encoding="utf-8") as f:
            content = f.read()
        data = yaml.safe_load(content) if content.strip() else None
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {config_path}: {e}",
            context={"path": str(config_path)},
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read routing config {config_path}: {e}",
            context={"path": str(config_path)},
        ) from e

    if data is None:
        return DEFAULT_ROUTING_CONFIG

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Routing config must be a mapping, got {type(data).__name__}",
            context={"path": str(config_path)},
        )

    defaults = DEFAULT_ROUTING_CONFIG.model_dump(mode="json")
    merged = _deep_merge(defaults, convert_keys_to_snake_case(data))

    try:
        config = RoutingConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid routing config in {config_path}: {e.error_count()} error(s)",
            context={
                "path": str(config_path),
                "errors": [
                    {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                    for err in e.errors()
                ],
            },
        ) from e

    logger.debug("routing_config_loaded", path=str(config_path))
    return config


def save_routing_config(config: RoutingConfig, config_path: Path) -> None:
    """
    Save routing configuration to a YAML file.

    Args:
        config: Configuration to save
        config_path: Destination path (parent directories are created)
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_json(), f, sort_keys=False, default_flow_style=False)


def create_default_config(config_path: Path) -> RoutingConfig:
    """Write the default routing configuration to config_path and return it."""
    save_routing_config(DEFAULT_ROUTING_CONFIG, config_path)
    return DEFAULT_ROUTING_CONFIG
