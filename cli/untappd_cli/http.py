from __future__ import annotations

from untappd_client import UntappdClient
from untappd_client.config_types import ClientConfig

from .config import AppConfig, apply_env, apply_profile, normalize_base_url


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    base_url_override: str | None,
) -> UntappdClient:
    effective_cfg = apply_env(apply_profile(cfg, profile))
    base_url = normalize_base_url(base_url_override or effective_cfg.base_url, warn=True)
    return UntappdClient(
        ClientConfig(
            client_id=effective_cfg.client_id,
            client_secret=effective_cfg.client_secret,
            base_url=base_url,
        )
    )
