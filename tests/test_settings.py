"""Tests for `config/settings.py` and `config/logging_setup.py`."""

from __future__ import annotations

import logging

import pytest

from config.logging_setup import configure_logging
from config.settings import Settings


def test_defaults_with_memory_store() -> None:
    settings = Settings.from_env({"SALE_STORE": "memory"})

    assert settings.vehicle_service_url == "http://localhost:3000/api/v1/vehicles"
    assert settings.webhook_url == "http://localhost:3000/api/v1/vehicles/webhook"
    assert settings.cache_ttl_seconds == 300
    assert settings.http_timeout_seconds == 5
    assert settings.log_level == "info"
    assert settings.sale_store == "memory"


def test_webhook_url_follows_service_url() -> None:
    settings = Settings.from_env(
        {"SALE_STORE": "memory", "VEHICLE_SERVICE_URL": "https://cars.example/api/vehicles/"}
    )

    assert settings.vehicle_service_url == "https://cars.example/api/vehicles"
    assert settings.webhook_url == "https://cars.example/api/vehicles/webhook"


def test_explicit_values() -> None:
    settings = Settings.from_env(
        {
            "SALE_STORE": "supabase",
            "SUPABASE_URL": "https://x.supabase.co",
            "SUPABASE_KEY": "secret",
            "WEBHOOK_URL": "https://hooks.example/vehicles",
            "VEHICLE_CACHE_TTL_SECONDS": "60",
            "HTTP_TIMEOUT_SECONDS": "2.5",
            "LOG_LEVEL": "DEBUG",
        }
    )

    assert settings.webhook_url == "https://hooks.example/vehicles"
    assert settings.cache_ttl_seconds == 60
    assert settings.http_timeout_seconds == 2.5
    assert settings.log_level == "debug"
    assert settings.supabase_key == "secret"


def test_supabase_store_requires_credentials() -> None:
    with pytest.raises(RuntimeError, match="SUPABASE_URL"):
        Settings.from_env({})

    with pytest.raises(RuntimeError, match="SUPABASE_KEY"):
        Settings.from_env({"SUPABASE_URL": "https://x.supabase.co"})


@pytest.mark.parametrize(
    "env, name",
    [
        ({"VEHICLE_CACHE_TTL_SECONDS": "five"}, "VEHICLE_CACHE_TTL_SECONDS"),
        ({"HTTP_TIMEOUT_SECONDS": "0"}, "HTTP_TIMEOUT_SECONDS"),
        ({"LOG_LEVEL": "chatty"}, "LOG_LEVEL"),
        ({"SALE_STORE": "redis"}, "SALE_STORE"),
    ],
)
def test_invalid_values_name_the_variable(env: dict, name: str) -> None:
    with pytest.raises(RuntimeError, match=name):
        Settings.from_env({"SALE_STORE": "memory", **env})


def test_configure_logging_installs_one_handler_and_sets_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        configure_logging("debug")
        configure_logging("warning")

        ours = [h for h in root.handlers if getattr(h, "_sales_backend", False)]
        assert len(ours) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
