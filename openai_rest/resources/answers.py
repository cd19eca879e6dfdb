"""Answers endpoint."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..client import Client
from ..result import Result


class Answers:
    BASE_URL = "/v1/answers"

    @staticmethod
    def url() -> str:
        return Answers.BASE_URL

    @staticmethod
    def fetch(client: Client, params: Mapping[str, Any], http_options: Optional[Mapping[str, Any]] = None) -> Result:
        return client.post_json(Answers.url(), params, http_options)
