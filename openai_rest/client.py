"""HTTP transport adapter shared by every endpoint."""

from __future__ import annotations

import json
import logging
import os
from contextlib import ExitStack
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

import httpx
from pydantic import BaseModel, Field

from .config import Settings, get_settings, merge_http_options
from .result import DecodeFailure, Failure, Result, Success, TransportFailure, rekey

logger = logging.getLogger("openai-rest.client")

MULTIPART_FILE_FIELD = "image"
DEFAULT_TIMEOUT_SECONDS = 90
SUPPORTED_HTTP_OPTIONS = ("timeout", "params", "follow_redirects")

Header = Tuple[str, str]


class FilePart(BaseModel):
    name: str = MULTIPART_FILE_FIELD
    path: str
    filename: str


class FieldsPart(BaseModel):
    fields: Dict[str, Any]


MultipartPart = Union[FilePart, FieldsPart]


class RequestDescriptor(BaseModel):
    """Everything needed to perform one call; built per call and discarded."""

    method: Literal["GET", "POST", "DELETE"]
    path: str
    url: str
    headers: List[Header]
    json_body: Optional[Dict[str, Any]] = None
    parts: List[MultipartPart] = Field(default_factory=list)
    options: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_multipart(self) -> bool:
        return len(self.parts) > 0


def build_multipart_parts(file_path: Union[str, os.PathLike], extra_fields: Optional[Mapping[str, Any]] = None) -> List[MultipartPart]:
    path = os.fspath(file_path)
    parts: List[MultipartPart] = [FilePart(path=path, filename=os.path.basename(path))]
    if extra_fields is not None and len(extra_fields) > 0:
        parts.append(FieldsPart(fields=dict(extra_fields)))
    return parts


def _form_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value)


def _build_timeout(value: Any) -> httpx.Timeout:
    if isinstance(value, Mapping):
        phases = {key: value[key] for key in ("connect", "read", "write", "pool") if key in value}
        return httpx.Timeout(value.get("default", DEFAULT_TIMEOUT_SECONDS), **phases)
    return httpx.Timeout(value)


def _request_kwargs(options: Mapping[str, Any]) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    for key, value in options.items():
        if key not in SUPPORTED_HTTP_OPTIONS:
            logger.debug(f"Ignoring unsupported http option: {key}")
            continue
        kwargs[key] = _build_timeout(value) if key == "timeout" else value
    return kwargs


def _transport_reason(exc: httpx.RequestError) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    if isinstance(exc, httpx.ConnectError):
        return "connect_error"
    return "request_error"


class Client:
    """
    Builds requests against the configured API URL and normalizes responses.

    Args:
        settings: Fixed configuration. When omitted, configuration is read
            from the environment on every call.
            With USE_SECRET_MANAGER enabled that means one Secret Manager
            lookup per call; pass a Settings object to avoid it.
        http_client: Pre-built ``httpx.Client`` to send requests with. When
            omitted, each request opens and closes its own client.
    """

    def __init__(self, settings: Optional[Settings] = None, http_client: Optional[httpx.Client] = None):
        self._settings = settings
        self._http_client = http_client

    @property
    def settings(self) -> Settings:
        if self._settings is not None:
            return self._settings
        return get_settings()

    def resolve_url(self, path: str, settings: Optional[Settings] = None) -> str:
        if settings is None:
            settings = self.settings
        return settings.api_url + path

    @staticmethod
    def bearer(settings: Settings) -> Header:
        return ("Authorization", f"Bearer {settings.api_key}")

    def build_headers(self, settings: Optional[Settings] = None) -> List[Header]:
        if settings is None:
            settings = self.settings
        headers = [self.bearer(settings), ("Content-type", "application/json")]
        org_key = settings.organization_key
        if org_key is not None and len(org_key.strip()) > 0:
            headers.insert(0, ("OpenAI-Organization", org_key))
        return headers

    @staticmethod
    def decode_body(raw_text: str, status_code: Optional[int] = None) -> Result:
        try:
            return Success(payload=json.loads(raw_text))
        except json.JSONDecodeError as exc:
            return Failure(detail=DecodeFailure(message=str(exc), body=raw_text, status_code=status_code))

    @classmethod
    def handle_response(cls, response: httpx.Response) -> Result:
        """
        Map a completed HTTP exchange to a result.

        A 200 with a JSON object body becomes ``Success`` with its top-level
        keys converted; any other status becomes ``Failure`` carrying the
        decoded body unchanged. Bodies that are not JSON become
        ``Failure(DecodeFailure)`` whatever the status.
        """
        decoded = cls.decode_body(response.text, response.status_code)
        if isinstance(decoded, Failure):
            logger.warning(f"OpenAI API returned undecodable body: {response.status_code}")
            return decoded

        body = decoded.payload
        if response.status_code == 200:
            if isinstance(body, dict):
                return Success(payload=rekey(body))
            return Success(payload=body)

        logger.warning(f"OpenAI API error: {response.status_code} - {response.text}")
        return Failure(detail=body)

    @classmethod
    def handle_raw_response(cls, response: httpx.Response) -> Result:
        if response.status_code == 200:
            return Success(payload=response.text)
        return cls.handle_response(response)

    @staticmethod
    def transport_failure(exc: httpx.RequestError) -> Failure:
        logger.warning(f"OpenAI API request failed: {exc!r}")
        return Failure(
            detail=TransportFailure(
                reason=_transport_reason(exc),
                message=str(exc) or exc.__class__.__name__,
                exception_type=exc.__class__.__name__,
            )
        )

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        file_path: Optional[Union[str, os.PathLike]] = None,
        extra_fields: Optional[Mapping[str, Any]] = None,
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> RequestDescriptor:
        settings = self.settings
        options = merge_http_options(settings.http_options, http_options)

        if file_path is not None:
            return RequestDescriptor(
                method=method,
                path=path,
                url=self.resolve_url(path, settings),
                headers=[self.bearer(settings)],
                parts=build_multipart_parts(file_path, extra_fields),
                options=options,
            )

        return RequestDescriptor(
            method=method,
            path=path,
            url=self.resolve_url(path, settings),
            headers=self.build_headers(settings),
            json_body=dict(params) if params is not None else None,
            options=options,
        )

    def send(self, request: RequestDescriptor) -> httpx.Response:
        kwargs = _request_kwargs(request.options)
        with ExitStack() as stack:
            if request.is_multipart:
                files = {}
                data = {}
                for part in request.parts:
                    if isinstance(part, FilePart):
                        handle = stack.enter_context(open(part.path, "rb"))
                        files[part.name] = (part.filename, handle)
                    else:
                        data.update({key: _form_value(value) for key, value in part.fields.items()})
                kwargs["files"] = files
                if len(data) > 0:
                    kwargs["data"] = data
            elif request.json_body is not None:
                kwargs["json"] = request.json_body

            logger.debug("sending request", extra={"method": request.method, "path": request.path})

            if self._http_client is not None:
                return self._http_client.request(request.method, request.url, headers=request.headers, **kwargs)
            with httpx.Client() as client:
                return client.request(request.method, request.url, headers=request.headers, **kwargs)

    def request(self, request: RequestDescriptor, raw: bool = False) -> Result:
        try:
            response = self.send(request)
        except httpx.RequestError as exc:
            return self.transport_failure(exc)
        if raw:
            return self.handle_raw_response(response)
        return self.handle_response(response)

    def get(self, path: str, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        return self.request(self.build_request("GET", path, http_options=http_options))

    def get_raw(self, path: str, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        """Like ``get`` but a successful payload is the undecoded body text."""
        return self.request(self.build_request("GET", path, http_options=http_options), raw=True)

    def post_json(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        return self.request(self.build_request("POST", path, params=params or {}, http_options=http_options))

    def post_multipart(
        self,
        path: str,
        file_path: Union[str, os.PathLike],
        extra_fields: Optional[Mapping[str, Any]] = None,
        http_options: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        return self.request(
            self.build_request(
                "POST", path, file_path=file_path, extra_fields=extra_fields, http_options=http_options
            )
        )

    def delete(self, path: str, http_options: Optional[Mapping[str, Any]] = None) -> Result:
        return self.request(self.build_request("DELETE", path, http_options=http_options))
