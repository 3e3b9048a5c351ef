"""Client configuration using Pydantic models.

Options can be built directly in code or loaded from a YAML file with
overrides. The order of precedence is::

    defaults < YAML < environment variables < explicit overrides

Environment variables follow the ``UK_PARLIAMENT__SECTION__KEY`` naming
pattern where sections and keys are joined by double underscores, e.g.
``UK_PARLIAMENT__BASE_URLS__MEMBERS`` or ``UK_PARLIAMENT__TIMEOUT``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_USER_AGENT = "uk-parliament-python/2.0"
ENV_PREFIX = "UK_PARLIAMENT__"


class BaseUrls(BaseModel):
    """Base URL of every Parliament sub-API."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    petitions: str = "https://petition.parliament.uk/"
    members: str = "https://members-api.parliament.uk/"
    bills: str = "https://bills-api.parliament.uk/"
    committees: str = "https://committees-api.parliament.uk/"
    commons_divisions: str = "https://commonsvotes-api.parliament.uk/"
    lords_divisions: str = "https://lordsvotes-api.parliament.uk/"
    interests: str = "https://interests-api.parliament.uk/"
    questions_statements: str = "https://questions-statements-api.parliament.uk/"
    oral_questions_motions: str = "https://oralquestionsandmotions-api.parliament.uk/"
    treaties: str = "https://treaties-api.parliament.uk/"
    erskine_may: str = "https://erskinemay-api.parliament.uk/"
    now: str = "https://now-api.parliament.uk/"

    @field_validator("*")
    @classmethod
    def require_http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://: {value!r}")
        return value


class RetrySettings(BaseModel):
    """Retry configuration for the owned HTTP session."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=3, ge=0, le=10)
    backoff_factor: float = Field(default=1.0, ge=0)
    status_forcelist: tuple[int, ...] = (429, 500, 502, 503, 504)


class CircuitBreakerSettings(BaseModel):
    """Thresholds for the per-API circuit breaker."""

    model_config = ConfigDict(frozen=True)

    failure_threshold: int = Field(default=5, ge=1)
    recovery_timeout: float = Field(default=60.0, gt=0)
    success_threshold: int = Field(default=1, ge=1)


class ParliamentClientOptions(BaseModel):
    """Shared configuration for every domain client of the facade."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_urls: BaseUrls = Field(default_factory=BaseUrls)
    timeout: float = Field(default=30.0, gt=0, le=600.0, description="Per-request timeout in seconds")
    user_agent: str = DEFAULT_USER_AGENT
    strict_validation: bool = Field(default=False, description="Reject payload fields the models do not map")
    logger: Any = Field(default=None, exclude=True, description="structlog or stdlib logger for HTTP diagnostics")
    verbose_logging: bool = Field(default=False, description="Log request/response headers and bodies")
    retries: RetrySettings | None = Field(default_factory=RetrySettings)
    circuit_breaker: CircuitBreakerSettings | None = None

    @field_validator("user_agent")
    @classmethod
    def validate_user_agent(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("User agent must not be empty")
        return value

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        *,
        overrides: Mapping[str, Any] | None = None,
        env_prefix: str = ENV_PREFIX,
    ) -> ParliamentClientOptions:
        """Load options from a YAML file applying layered overrides."""

        base_data: dict[str, Any] = {}
        if path is not None:
            config_path = Path(path)
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
            with config_path.open("r", encoding="utf-8") as file:
                base_data = yaml.safe_load(file) or {}

        merged = _merge_dicts(base_data, _load_env_overrides(env_prefix))
        merged = _merge_dicts(merged, _normalize_overrides(overrides or {}))
        return cls.model_validate(merged)


def _merge_dicts(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base and return a copy."""

    result = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _assign_path(root: dict[str, Any], path: Iterable[str], value: Any) -> None:
    current = root
    *parents, last = list(path)
    for segment in parents:
        current = current.setdefault(segment, {})
    current[last] = value


def _parse_scalar(value: str) -> Any:
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return value
    return parsed


def _load_env_overrides(prefix: str) -> dict[str, Any]:
    if not prefix:
        return {}
    result: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        path = [segment.lower() for segment in key[len(prefix) :].split("__") if segment]
        if not path:
            continue
        # URLs contain ':' which YAML would happily turn into a mapping
        parsed = value if path[0] == "base_urls" or path[-1] == "user_agent" else _parse_scalar(value)
        _assign_path(result, path, parsed)
    return result


def _normalize_overrides(overrides: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(value, Mapping):
            result[key] = _normalize_overrides(value)
        elif isinstance(key, str) and "." in key:
            path = [segment.strip().lower() for segment in key.split(".") if segment.strip()]
            if path:
                _assign_path(result, path, value)
        else:
            result[key] = value
    return result


__all__ = [
    "BaseUrls",
    "CircuitBreakerSettings",
    "DEFAULT_USER_AGENT",
    "ParliamentClientOptions",
    "RetrySettings",
]
