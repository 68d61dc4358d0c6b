"""Tests for environment-driven application settings."""

import pytest
from pydantic import ValidationError

from intake_router.shared.infrastructure.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("INTAKE_ROUTER_APP_ENV", raising=False)
    settings = Settings(_env_file=None)

    assert settings.app_name == "intake-router"
    assert settings.is_development
    assert settings.routing_config_path is None


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("INTAKE_ROUTER_APP_ENV", "production")
    monkeypatch.setenv("INTAKE_ROUTER_ROUTING_CONFIG_PATH", "/etc/intake-router/routing.yaml")
    settings = Settings(_env_file=None)

    assert settings.is_production
    assert settings.routing_config_path == "/etc/intake-router/routing.yaml"


def test_log_format_validated(monkeypatch):
    monkeypatch.setenv("INTAKE_ROUTER_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
