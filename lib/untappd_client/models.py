"""Pydantic models for the Untappd APIv4 payloads used by the client.

Unknown fields are ignored so that additions on the API side do not break
decoding; missing scalars fall back to zero values.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from .duration import ResponseTime


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ErrorMeta(_Model):
    code: int = 0
    error_detail: str = ""
    error_type: str = ""
    developer_friendly: str = ""
    response_time: ResponseTime = timedelta(0)


class ErrorEnvelope(_Model):
    meta: ErrorMeta = Field(default_factory=ErrorMeta)


class Brewery(_Model):
    brewery_id: int = 0
    brewery_name: str = ""
    brewery_slug: str = ""
    brewery_type: str = ""
    brewery_label: str = ""
    country_name: str = ""


class Beer(_Model):
    bid: int = 0
    beer_name: str = ""
    beer_label: str = ""
    beer_abv: float = 0.0
    beer_ibu: float = 0.0
    beer_description: str = ""
    beer_style: str = ""
    rating_score: float = 0.0
    rating_count: int = 0
    brewery: Brewery | None = None


class UserStats(_Model):
    total_badges: int = 0
    total_friends: int = 0
    total_checkins: int = 0
    total_beers: int = 0


class User(_Model):
    uid: int = 0
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    user_avatar: str = ""
    location: str = ""
    bio: str = ""
    url: str = ""
    stats: UserStats = Field(default_factory=UserStats)

    @property
    def display_name(self) -> str:
        full = f"{self.first_name} {self.last_name}".strip()
        return full or self.user_name


class _UserPayload(_Model):
    user: User


class _BeerPayload(_Model):
    beer: Beer


class _BreweryPayload(_Model):
    brewery: Brewery


class UserInfoResponse(_Model):
    response: _UserPayload


class BeerInfoResponse(_Model):
    response: _BeerPayload


class BreweryInfoResponse(_Model):
    response: _BreweryPayload
