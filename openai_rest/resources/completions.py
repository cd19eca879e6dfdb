"""Completions endpoint (per engine)."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..client import Client
from ..result import Result
from .engines import Engines


class Completions:
    @staticmethod
    def url(engine_id: str) -> str:
        return f"{Engines.url(engine_id)}/completions"

    @staticmethod
    def fetch(
        client: Client,
        engine_id: str,
        params: Mapping[str, Any],
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        return client.post_json(Completions.url(engine_id), params, http_options)
