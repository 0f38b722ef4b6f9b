from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import typer
from pydantic import BaseModel
from rich.markup import escape
from rich.table import Table
from untappd_client import ApiError, ConfigError, ContentTypeError, NetworkError, UntappdClient

from .. import console
from ..config import load_config
from ..http import make_client

T = TypeVar("T", bound=BaseModel)

ProfileOption = typer.Option(None, "--profile", help="Config profile to use.")
BaseUrlOption = typer.Option(None, "--base-url", help="Override API base URL.")
CompactOption = typer.Option(False, "--compact", help="Ask the API for the compact form.")
JsonOption = typer.Option(False, "--json", help="Print raw JSON.")


def _fetch(what: str, profile: str | None, base_url: str | None, call: Callable[[UntappdClient], T]) -> T:
    try:
        client = make_client(load_config(), profile=profile, base_url_override=base_url)
    except ConfigError as e:
        console.err(f"Missing credentials ({e}). Run `untappd settings set client_id ...` first.")
        raise typer.Exit(code=2)

    try:
        return call(client)
    except ApiError as e:
        console.err(f"Failed to fetch {what}: {e}")
        raise typer.Exit(code=2)
    except ContentTypeError as e:
        console.err(f"Unexpected response for {what}: {e}")
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(f"Network error: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()


def _print_fields(title: str, rows: list[tuple[str, object]]) -> None:
    table = Table(title=title, show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    for name, value in rows:
        table.add_row(name, "-" if value in (None, "") else escape(str(value)))
    console.console.print(table)


def user(
        username: str = typer.Argument(..., help="Untappd username."),
        compact: bool = CompactOption,
        profile: str | None = ProfileOption,
        base_url: str | None = BaseUrlOption,
        json_out: bool = JsonOption,
):
    """Show a user profile."""
    u = _fetch("user", profile, base_url, lambda c: c.user_info(username, compact=compact))
    if json_out:
        console.print_json(u.model_dump(mode="json"))
        return
    _print_fields(
        u.user_name or username,
        [
            ("uid", u.uid),
            ("name", u.display_name),
            ("location", u.location),
            ("checkins", u.stats.total_checkins),
            ("unique beers", u.stats.total_beers),
            ("badges", u.stats.total_badges),
            ("friends", u.stats.total_friends),
        ],
    )


def beer(
        beer_id: int = typer.Argument(..., help="Beer ID (bid)."),
        compact: bool = CompactOption,
        profile: str | None = ProfileOption,
        base_url: str | None = BaseUrlOption,
        json_out: bool = JsonOption,
):
    """Show a beer."""
    b = _fetch("beer", profile, base_url, lambda c: c.beer_info(beer_id, compact=compact))
    if json_out:
        console.print_json(b.model_dump(mode="json"))
        return
    _print_fields(
        b.beer_name or str(beer_id),
        [
            ("bid", b.bid),
            ("style", b.beer_style),
            ("abv", b.beer_abv),
            ("ibu", b.beer_ibu),
            ("rating", f"{b.rating_score:.2f} ({b.rating_count})"),
            ("brewery", b.brewery.brewery_name if b.brewery else None),
        ],
    )


def brewery(
        brewery_id: int = typer.Argument(..., help="Brewery ID."),
        compact: bool = CompactOption,
        profile: str | None = ProfileOption,
        base_url: str | None = BaseUrlOption,
        json_out: bool = JsonOption,
):
    """Show a brewery."""
    br = _fetch("brewery", profile, base_url, lambda c: c.brewery_info(brewery_id, compact=compact))
    if json_out:
        console.print_json(br.model_dump(mode="json"))
        return
    _print_fields(
        br.brewery_name or str(brewery_id),
        [
            ("brewery_id", br.brewery_id),
            ("type", br.brewery_type),
            ("country", br.country_name),
        ],
    )
