"""Classifications endpoint."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..client import Client
from ..result import Result


class Classifications:
    BASE_URL = "/v1/classifications"

    @staticmethod
    def url() -> str:
        return Classifications.BASE_URL

    @staticmethod
    def fetch(client: Client, params: Mapping[str, Any], http_options: Optional[Mapping[str, Any]] = None) -> Result:
        return client.post_json(Classifications.url(), params, http_options)
