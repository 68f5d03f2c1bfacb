"""
Location: python/payhere_sdk/config.py

Summary:
    Connection settings for the payhere-sdk. GlobalConfig holds where the
    gateway lives (environment, base URL), UserConfig holds the application
    credentials, and Config combines both into the object accepted by
    PayhereClient.

Usage:
    Build a Config directly, or assemble one from environment variables
    and a ``.env`` file with load_config(). Validation is not done here;
    PayhereClient validates the config once when it is constructed.

Example:
    from payhere_sdk.config import Config, Environment

    config = Config(
        app_id="app_123",
        username="merchant",
        password="secret",
        environment=Environment.PRODUCTION,
        base_url="https://api.payhere.africa/api/v1",
    )
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional

__all__ = [
    "Config",
    "Environment",
    "GlobalConfig",
    "SANDBOX_BASE_URL",
    "UserConfig",
    "load_config",
]

SANDBOX_BASE_URL = "https://api-sandbox.payhere.africa/api/v1"

_PARAMETER_TO_ENV_KEY = {
    "app_id": "PAYHERE_APP_ID",
    "username": "PAYHERE_USERNAME",
    "password": "PAYHERE_PASSWORD",
    "base_url": "PAYHERE_BASE_URL",
    "environment": "PAYHERE_ENVIRONMENT",
}


class Environment(str, Enum):
    """Named gateway environments. Other names are accepted as plain strings."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


@dataclass(frozen=True)
class GlobalConfig:
    """
    Where the gateway lives.

    Attributes:
        base_url: Gateway base URL. Required for any environment other
            than sandbox.
        environment: Environment name, defaults to sandbox when unset.
    """
    base_url: Optional[str] = None
    environment: Optional[str] = None

    @property
    def is_sandbox(self) -> bool:
        return not self.environment or self.environment == Environment.SANDBOX

    @property
    def resolved_base_url(self) -> str:
        """
        Base URL requests are sent to.

        An explicit base_url always wins; the sandbox falls back to the
        public sandbox host.
        """
        if self.base_url:
            return self.base_url.rstrip("/")
        if self.is_sandbox:
            return SANDBOX_BASE_URL
        raise ValueError(f"No base URL configured for environment '{self.environment}'")


@dataclass(frozen=True)
class UserConfig:
    """Application credentials issued by the gateway."""
    app_id: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass(frozen=True)
class Config(UserConfig, GlobalConfig):
    """Complete client configuration: credentials plus gateway location."""

    def __repr__(self) -> str:
        return (
            f"Config(app_id={self.app_id!r}, username={self.username!r}, "
            f"password='***', base_url={self.base_url!r}, "
            f"environment={self.environment!r})"
        )


def _parse_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip("\"'")
    return values


def load_config(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
    app_id: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    base_url: Optional[str] = None,
    environment: Optional[str] = None,
) -> Config:
    """
    Assemble a Config from layered sources.

    ``base`` defaults to :data:`os.environ`. Keys from ``env_file`` only fill
    gaps left by ``base``; set it to ``None`` to skip file loading. ``overrides``
    win over both, and explicit keyword arguments win over everything.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _parse_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    explicit = {
        "app_id": app_id,
        "username": username,
        "password": password,
        "base_url": base_url,
        "environment": environment,
    }
    for field_name, value in explicit.items():
        if value is not None:
            merged[_PARAMETER_TO_ENV_KEY[field_name]] = value

    return Config(
        **{
            field_name: merged.get(env_key) or None
            for field_name, env_key in _PARAMETER_TO_ENV_KEY.items()
        }
    )
