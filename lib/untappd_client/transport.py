from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from .config_types import ClientConfig
from .decoding import decode_into, decode_json
from .errors import (
    ApiError,
    ContentTypeError,
    MissingClientIDError,
    MissingClientSecretError,
    NetworkError,
)
from .models import ErrorEnvelope

JSON_CONTENT_TYPE = "application/json"

log = logging.getLogger(__name__)

QueryParams = Mapping[str, str | Sequence[str]]


class Transport:
    def __init__(self, cfg: ClientConfig, http_client: httpx.Client | None = None):
        if not cfg.client_id:
            raise MissingClientIDError()
        if not cfg.client_secret:
            raise MissingClientSecretError()

        self._cfg = cfg
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=cfg.timeout_s, follow_redirects=True)
        self._headers = {
            "Accept": JSON_CONTENT_TYPE,
            "Content-Type": JSON_CONTENT_TYPE,
            "User-Agent": cfg.user_agent,
        }

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def build_url(self, endpoint: str, query: QueryParams | None = None) -> httpx.URL:
        base = self._cfg.base_url.rstrip("/")
        path = f"{base}/{endpoint.strip('/')}/"

        items: list[tuple[str, str]] = []
        for key, value in (query or {}).items():
            if isinstance(value, str):
                items.append((key, value))
            else:
                items.extend((key, v) for v in value)

        # credentials always win over caller-supplied values
        params = (
            httpx.QueryParams(items)
            .set("client_id", self._cfg.client_id)
            .set("client_secret", self._cfg.client_secret)
        )
        return httpx.URL(path, params=params)

    def request(
            self,
            method: str,
            endpoint: str,
            query: QueryParams | None = None,
            into: Any = None,
    ) -> tuple[httpx.Response, Any]:
        """Send a request and validate the response.

        When ``into`` is given, the body is decoded into it. The response is
        fully read before returning or raising, and errors raised from
        ``check_response`` carry it as ``exc.response``.
        """
        req = self._client.build_request(method, self.build_url(endpoint, query), headers=self._headers)
        log.debug("%s %s", method, endpoint)
        try:
            r = self._client.send(req)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e
        log.debug("%s %s -> %s", method, endpoint, r.status_code)

        check_response(r)

        if into is None:
            return r, None
        return r, decode_into(r.content, into)


def check_response(r: httpx.Response) -> None:
    content_type = r.headers.get("Content-Type", "")
    if content_type != JSON_CONTENT_TYPE:
        raise ContentTypeError(JSON_CONTENT_TYPE, content_type, response=r)

    if 200 <= r.status_code <= 299:
        return

    envelope = ErrorEnvelope.model_validate(decode_json(r.content))
    err = ApiError.from_envelope(envelope, response=r)
    log.debug("api error: %s", err)
    raise err
