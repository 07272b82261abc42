"""
Application settings.

Values come from the process environment, with a `.env` file in the project
root loaded first. Environment variables:

- VEHICLE_SERVICE_URL: base URL of the upstream vehicle inventory service
- WEBHOOK_URL: endpoint notified when a sale changes a vehicle's status
  (default: {VEHICLE_SERVICE_URL}/webhook)
- VEHICLE_CACHE_TTL_SECONDS: availability cache window (default: 300)
- HTTP_TIMEOUT_SECONDS: timeout for upstream and webhook calls (default: 5)
- LOG_LEVEL: debug, info, warning or error (default: info)
- SALE_STORE: supabase or memory (default: supabase)
- SUPABASE_URL / SUPABASE_KEY: required when SALE_STORE=supabase
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_VEHICLE_SERVICE_URL = "http://localhost:3000/api/v1/vehicles"
DEFAULT_CACHE_TTL_SECONDS = 300.0
DEFAULT_HTTP_TIMEOUT_SECONDS = 5.0

_LOG_LEVELS = ("debug", "info", "warning", "error")
_SALE_STORES = ("supabase", "memory")

_ENV_PATH = Path(__file__).parent.parent / ".env"


def _positive_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"Invalid environment variable {name}: expected a number, got '{raw}'") from None
    if value <= 0:
        raise RuntimeError(f"Invalid environment variable {name}: must be greater than zero")
    return value


def _choice(env: Mapping[str, str], name: str, choices: tuple[str, ...], default: str) -> str:
    value = (env.get(name) or default).lower()
    if value not in choices:
        raise RuntimeError(
            f"Invalid environment variable {name}: expected one of {', '.join(choices)}, got '{value}'"
        )
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    vehicle_service_url: str = DEFAULT_VEHICLE_SERVICE_URL
    webhook_url: str = f"{DEFAULT_VEHICLE_SERVICE_URL}/webhook"
    cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    log_level: str = "info"
    sale_store: str = "supabase"
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from `env` (defaults to os.environ after loading `.env`).

        Raises:
            RuntimeError: if a variable is malformed, or if Supabase credentials
                are missing while SALE_STORE=supabase
        """

        if env is None:
            load_dotenv(dotenv_path=_ENV_PATH)
            env = os.environ

        vehicle_service_url = (env.get("VEHICLE_SERVICE_URL") or DEFAULT_VEHICLE_SERVICE_URL).rstrip("/")
        webhook_url = env.get("WEBHOOK_URL") or f"{vehicle_service_url}/webhook"
        sale_store = _choice(env, "SALE_STORE", _SALE_STORES, "supabase")

        supabase_url = env.get("SUPABASE_URL") or None
        supabase_key = env.get("SUPABASE_KEY") or None

        if sale_store == "supabase":
            if not supabase_url:
                raise RuntimeError(
                    "Missing environment variable: SUPABASE_URL. "
                    "Set SUPABASE_URL to your Supabase project URL."
                )
            if not supabase_key:
                raise RuntimeError(
                    "Missing environment variable: SUPABASE_KEY. "
                    "Set SUPABASE_KEY to your Supabase API key."
                )

        return Settings(
            vehicle_service_url=vehicle_service_url,
            webhook_url=webhook_url,
            cache_ttl_seconds=_positive_float(env, "VEHICLE_CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS),
            http_timeout_seconds=_positive_float(env, "HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS),
            log_level=_choice(env, "LOG_LEVEL", _LOG_LEVELS, "info"),
            sale_store=sale_store,
            supabase_url=supabase_url,
            supabase_key=supabase_key,
        )


__all__ = ["Settings"]
