"""Tagged success/failure values returned by every API call."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from .errors import MissingFieldError, ResultError


class APIObject(dict):
    """Decoded response body whose top-level keys are also attributes."""

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self):
        return list(super().__dir__()) + [key for key in self if isinstance(key, str)]

    def require(self, key: str) -> Any:
        return require_field(self, key)


def rekey(body: Mapping[Any, Any]) -> APIObject:
    """Convert the top-level keys of ``body``; nested values are left alone."""
    return APIObject((str(key), value) for key, value in body.items())


def require_field(mapping: Any, key: str) -> Any:
    if not isinstance(mapping, Mapping) or key not in mapping:
        raise MissingFieldError(key, detail=mapping)
    return mapping[key]


class TransportFailure(BaseModel):
    """The HTTP exchange itself failed (refused connection, timeout, DNS)."""

    model_config = ConfigDict(frozen=True)

    reason: str
    message: str
    exception_type: str


class DecodeFailure(BaseModel):
    """The service answered with a body that is not valid JSON."""

    model_config = ConfigDict(frozen=True)

    message: str
    body: str
    status_code: Optional[int] = None


class Success(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
    __match_args__ = ("payload",)

    payload: Any

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.payload


class Failure(BaseModel):
    """
    Failed call.

    ``detail`` is either the service's decoded error body (passed through
    untouched), a ``TransportFailure`` or a ``DecodeFailure``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
    __match_args__ = ("detail",)

    detail: Any

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_transport_error(self) -> bool:
        return isinstance(self.detail, TransportFailure)

    @property
    def is_decode_error(self) -> bool:
        return isinstance(self.detail, DecodeFailure)

    def unwrap(self) -> Any:
        raise ResultError(f"API call failed: {self.detail!r}", detail=self.detail)


Result = Union[Success, Failure]
