from __future__ import annotations

import typer

from .commands import lookup_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="untappd",
        help="Untappd APIv4 CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.command("user")(lookup_cmd.user)
    app.command("beer")(lookup_cmd.beer)
    app.command("brewery")(lookup_cmd.brewery)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
