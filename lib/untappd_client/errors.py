from __future__ import annotations

import json
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from .models import ErrorEnvelope


class UntappdClientError(Exception):
    """Base client error."""


class ConfigError(UntappdClientError, ValueError):
    """Client cannot be built from the given configuration."""


class MissingClientIDError(ConfigError):
    def __init__(self) -> None:
        super().__init__("no client ID")


class MissingClientSecretError(ConfigError):
    def __init__(self) -> None:
        super().__init__("no client secret")


class NetworkError(UntappdClientError):
    """Transport/network layer error."""


class ContentTypeError(UntappdClientError):
    def __init__(self, expected: str, actual: str, response: httpx.Response | None = None):
        super().__init__(f"expected {expected} content type, but received {actual}")
        self.expected = expected
        self.actual = actual
        self.response = response


class ApiError(UntappdClientError):
    """Error reported by the API in the response ``meta`` envelope.

    The developer friendly text, when present, is preferred over the plain
    detail when the error is rendered.
    """

    def __init__(
            self,
            code: int,
            error_type: str,
            detail: str = "",
            developer_friendly: str = "",
            duration: timedelta = timedelta(0),
            response: httpx.Response | None = None,
    ):
        self._code = code
        self._error_type = error_type
        self._detail = detail
        self._developer_friendly = developer_friendly
        self._duration = duration
        self._response = response
        super().__init__(str(self))

    @classmethod
    def from_envelope(cls, envelope: ErrorEnvelope, response: httpx.Response | None = None) -> ApiError:
        meta = envelope.meta
        return cls(
            code=meta.code,
            error_type=meta.error_type,
            detail=meta.error_detail,
            developer_friendly=meta.developer_friendly,
            duration=meta.response_time,
            response=response,
        )

    @property
    def code(self) -> int:
        return self._code

    @property
    def error_type(self) -> str:
        return self._error_type

    @property
    def detail(self) -> str:
        return self._detail

    @property
    def developer_friendly(self) -> str:
        return self._developer_friendly

    @property
    def duration(self) -> timedelta:
        """Time the API reports spending on the call; zero when unknown."""
        return self._duration

    @property
    def response(self) -> httpx.Response | None:
        return self._response

    def __str__(self) -> str:
        details = self._developer_friendly or self._detail
        return f"{self._code} [{self._error_type}]: {details}"

    def __repr__(self) -> str:
        return f"ApiError(code={self._code!r}, error_type={self._error_type!r}, duration={self._duration!r})"


class EndOfInputError(json.JSONDecodeError):
    """Body held no JSON value at all."""


class UnexpectedEndOfInputError(json.JSONDecodeError):
    """Body ended before the JSON value was complete."""
