"""Engines endpoint."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..client import Client
from ..result import Result


class Engines:
    BASE_URL = "/v1/engines"

    @staticmethod
    def url(engine_id: Optional[str] = None) -> str:
        if engine_id is None:
            return Engines.BASE_URL
        return f"{Engines.BASE_URL}/{engine_id}"

    @staticmethod
    def fetch(
        client: Client,
        engine_id: Optional[str] = None,
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        """List all engines, or retrieve one when ``engine_id`` is given."""
        return client.get(Engines.url(engine_id), http_options)
