"""Fine-tunes endpoint."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..client import Client
from ..result import Result


class Finetunes:
    BASE_URL = "/v1/fine-tunes"

    @staticmethod
    def url(finetune_id: Optional[str] = None) -> str:
        if finetune_id is None:
            return Finetunes.BASE_URL
        return f"{Finetunes.BASE_URL}/{finetune_id}"

    @staticmethod
    def fetch(
        client: Client,
        finetune_id: Optional[str] = None,
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        return client.get(Finetunes.url(finetune_id), http_options)
