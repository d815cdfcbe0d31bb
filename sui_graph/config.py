"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProviderConfig:
    rpc_endpoints: tuple[str, ...] = ()
    rpc_timeout: int = 30


@dataclass(frozen=True)
class PaginationConfig:
    default_page_size: int = 20
    max_page_size: int = 50


@dataclass(frozen=True)
class AppConfig:
    provider: ProviderConfig = field(default_factory=ProviderConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_provider(raw: dict[str, Any]) -> ProviderConfig:
    endpoints = raw.get("rpc_endpoints", [])
    if isinstance(endpoints, str):
        endpoints = [e.strip() for e in endpoints.split(",")]
    return ProviderConfig(
        rpc_endpoints=tuple(e for e in endpoints if e),
        rpc_timeout=int(raw.get("rpc_timeout", 30)),
    )


def _build_pagination(raw: dict[str, Any]) -> PaginationConfig:
    return PaginationConfig(
        default_page_size=int(raw.get("default_page_size", 20)),
        max_page_size=int(raw.get("max_page_size", 50)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        provider=_build_provider(raw.get("provider") or {}),
        pagination=_build_pagination(raw.get("pagination") or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.provider.rpc_endpoints:
        raise ValueError("At least one RPC endpoint must be configured")
    if cfg.provider.rpc_timeout <= 0:
        raise ValueError("rpc_timeout must be positive")

    pagination = cfg.pagination
    if pagination.default_page_size <= 0 or pagination.max_page_size <= 0:
        raise ValueError("Page sizes must be positive")
    if pagination.default_page_size > pagination.max_page_size:
        raise ValueError(
            f"default_page_size ({pagination.default_page_size}) exceeds "
            f"max_page_size ({pagination.max_page_size})"
        )
