from __future__ import annotations

from typing import Any

import httpx

from .config_types import ClientConfig
from .models import Beer, BeerInfoResponse, Brewery, BreweryInfoResponse, User, UserInfoResponse
from .transport import QueryParams, Transport


class UntappdClient:
    def __init__(self, cfg: ClientConfig, http_client: httpx.Client | None = None):
        self._t = Transport(cfg, http_client)

    def __enter__(self) -> UntappdClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._t.close()

    def request(
            self,
            method: str,
            endpoint: str,
            query: QueryParams | None = None,
            into: Any = None,
    ) -> tuple[httpx.Response, Any]:
        return self._t.request(method, endpoint, query, into)

    @staticmethod
    def _compact(compact: bool) -> dict[str, str]:
        return {"compact": "true"} if compact else {}

    # --- API methods ---
    def user_info(self, username: str, *, compact: bool = False) -> User:
        _, data = self._t.request("GET", f"user/info/{username}", self._compact(compact), UserInfoResponse)
        return data.response.user

    def beer_info(self, beer_id: int, *, compact: bool = False) -> Beer:
        _, data = self._t.request("GET", f"beer/info/{int(beer_id)}", self._compact(compact), BeerInfoResponse)
        return data.response.beer

    def brewery_info(self, brewery_id: int, *, compact: bool = False) -> Brewery:
        _, data = self._t.request(
            "GET", f"brewery/info/{int(brewery_id)}", self._compact(compact), BreweryInfoResponse
        )
        return data.response.brewery
