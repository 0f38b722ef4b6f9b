from __future__ import annotations

import typer

from .. import console
from ..config import SETTING_KEYS, config_path, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/untappd/config.toml).")


def _mask(secret: str) -> str:
    if not secret:
        return "(empty)"
    return "(set)"


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"base_url={cfg.base_url} client_id={cfg.client_id or '(empty)'} client_secret={_mask(cfg.client_secret)}"
    )
    for name in sorted(cfg.profiles):
        prof = cfg.profiles[name]
        console.console.print(
            f"[{name}] base_url={prof.base_url or '-'} client_id={prof.client_id or '-'} "
            f"client_secret={_mask(prof.client_secret)}",
            markup=False,
        )


@app.command("set")
def set_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, client_id, client_secret)."),
        value: str = typer.Argument(..., help="New value."),
):
    k = key.strip().lower()
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)

    cfg = load_config()
    if k == "base_url":
        cfg.base_url = normalize_base_url(value, warn=True)
        if not cfg.base_url:
            console.err("Base URL cannot be empty.")
            raise typer.Exit(code=2)
    else:
        setattr(cfg, k, value.strip())
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")


@app.command("path")
def show_path():
    console.console.print(config_path(), markup=False)
