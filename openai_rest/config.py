from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .secrets import get_secret_from_manager, should_use_secret_manager

logger = logging.getLogger("openai-rest.config")

DEFAULT_API_URL = "https://api.openai.com"


class Settings(BaseSettings):
    # Secret Manager configuration; declared first so the api_key validator can read them
    gcp_project_id: Optional[str] = None
    secret_api_key_name: str = "openai-api-key"

    api_key: str = Field(default="", validate_default=True)
    organization_key: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    http_options: Dict[str, Any] = Field(default_factory=lambda: {"timeout": 90})

    class Config:
        env_prefix = "OPENAI_"
        env_file = ".env"
        extra = "ignore"
        env_ignore_empty = True

    @validator("api_key", pre=True)
    def _load_api_key(cls, value: object, values: Dict[str, Any]) -> str:
        if should_use_secret_manager() and not value:
            logger.info("Loading api_key from Secret Manager")
            project_id = values.get("gcp_project_id")
            secret_name = values.get("secret_api_key_name") or "openai-api-key"
            try:
                return get_secret_from_manager(secret_name, project_id)
            except Exception as e:
                logger.error(f"Failed to load api_key from Secret Manager: {e}")
                raise
        if value is None:
            return ""
        return value

    @validator("organization_key", pre=True)
    def _blank_org_is_absent(cls, value: object) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @validator("http_options", pre=True)
    def _parse_http_options(cls, value: object) -> Dict[str, Any]:
        if value is None:
            return {}
        if isinstance(value, str):
            return json.loads(value) if value.strip() else {}
        return value


def get_settings(**overrides: Any) -> Settings:
    """Read configuration from the environment; evaluated on every call."""
    return Settings(**overrides)


def api_key() -> str:
    return get_settings().api_key


def org_key() -> Optional[str]:
    return get_settings().organization_key


def api_url() -> str:
    return get_settings().api_url


def http_options() -> Dict[str, Any]:
    return get_settings().http_options


def merge_http_options(base: Optional[Mapping[str, Any]], overrides: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Recursively merge per-call transport options over configured ones."""
    merged: Dict[str, Any] = dict(base or {})
    for key, value in (overrides or {}).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_http_options(current, value)
        else:
            merged[key] = value
    return merged
