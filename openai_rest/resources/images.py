"""Images endpoint (multipart uploads)."""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional, Union

from ..client import Client
from ..result import Result


class Images:
    BASE_URL = "/v1/images"

    @staticmethod
    def url(operation: str) -> str:
        return f"{Images.BASE_URL}/{operation}"

    @staticmethod
    def variations(
        client: Client,
        file_path: Union[str, os.PathLike],
        params: Optional[Mapping[str, Any]] = None,
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        """Upload an image under the ``image`` field and request variations of it."""
        return client.post_multipart(Images.url("variations"), file_path, params, http_options)
