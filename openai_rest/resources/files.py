"""Files endpoint."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..client import Client
from ..result import Result


class Files:
    BASE_URL = "/v1/files"

    @staticmethod
    def url(file_id: Optional[str] = None) -> str:
        if file_id is None:
            return Files.BASE_URL
        return f"{Files.BASE_URL}/{file_id}"

    @staticmethod
    def fetch(
        client: Client,
        file_id: Optional[str] = None,
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        return client.get(Files.url(file_id), http_options)

    @staticmethod
    def fetch_content(client: Client, file_id: str, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        """Retrieve the raw file body; the success payload is text, not JSON."""
        return client.get_raw(f"{Files.url(file_id)}/content", http_options)

    @staticmethod
    def delete(client: Client, file_id: str, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        return client.delete(Files.url(file_id), http_options)
