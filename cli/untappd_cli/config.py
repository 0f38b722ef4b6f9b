from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from untappd_client.config_types import API_ROOT

from . import console

APP_NAME = "untappd"
CONFIG_FILENAME = "config.toml"
ENV_CLIENT_ID = "UNTAPPD_CLIENT_ID"
ENV_CLIENT_SECRET = "UNTAPPD_CLIENT_SECRET"
ENV_BASE_URL = "UNTAPPD_BASE_URL"

SETTING_KEYS = ("base_url", "client_id", "client_secret")

_WARNED_BASE_URL_SCHEME = False


@dataclass
class ProfileConfig:
    base_url: str = ""
    client_id: str = ""
    client_secret: str = ""


@dataclass
class AppConfig:
    base_url: str = API_ROOT
    client_id: str = ""
    client_secret: str = ""
    profiles: dict[str, ProfileConfig] = field(default_factory=dict)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "base_url": cfg.base_url,
        "client_id": cfg.client_id,
        "client_secret": cfg.client_secret,
    }
    if cfg.profiles:
        data["profiles"] = {
            name: {k: v for k, v in vars(p).items() if v}
            for name, p in cfg.profiles.items()
        }
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True) or API_ROOT
    cfg.client_id = str(data.get("client_id") or "").strip()
    cfg.client_secret = str(data.get("client_secret") or "").strip()

    profiles_raw = data.get("profiles") or {}
    if isinstance(profiles_raw, dict):
        for name, v in profiles_raw.items():
            if not isinstance(v, dict):
                continue
            cfg.profiles[str(name)] = ProfileConfig(
                base_url=normalize_base_url(str(v.get("base_url") or ""), warn=True),
                client_id=str(v.get("client_id") or "").strip(),
                client_secret=str(v.get("client_secret") or "").strip(),
            )
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    prof = cfg.profiles.get(profile)
    if prof is None:
        return cfg
    return replace(
        cfg,
        base_url=prof.base_url or cfg.base_url,
        client_id=prof.client_id or cfg.client_id,
        client_secret=prof.client_secret or cfg.client_secret,
    )


def apply_env(cfg: AppConfig) -> AppConfig:
    base_url = os.getenv(ENV_BASE_URL, "").strip()
    client_id = os.getenv(ENV_CLIENT_ID, "").strip()
    client_secret = os.getenv(ENV_CLIENT_SECRET, "").strip()
    return replace(
        cfg,
        base_url=normalize_base_url(base_url) if base_url else cfg.base_url,
        client_id=client_id or cfg.client_id,
        client_secret=client_secret or cfg.client_secret,
    )
