from __future__ import annotations

from untappd_cli import config
from untappd_client.config_types import API_ROOT


def _use_tmp_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_missing_file_returns_defaults(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    cfg = config.load_config()
    assert cfg.base_url == API_ROOT
    assert cfg.client_id == ""
    assert cfg.client_secret == ""


def test_save_and_load_round_trip(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    cfg = config.AppConfig(
        base_url="https://api.untappd.com/v4",
        client_id="id",
        client_secret="secret",
        profiles={"dev": config.ProfileConfig(base_url="http://localhost:9000/v4", client_id="dev-id")},
    )

    path = config.save_config(cfg)
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")
    loaded = config.load_config()

    assert path.endswith("config.toml")
    assert 'client_secret = "secret"' in contents
    assert loaded.client_id == "id"
    assert loaded.profiles["dev"].base_url == "http://localhost:9000/v4"
    assert loaded.profiles["dev"].client_secret == ""


def test_apply_profile_overrides_only_set_fields() -> None:
    cfg = config.AppConfig(
        client_id="id",
        client_secret="secret",
        profiles={"dev": config.ProfileConfig(client_id="dev-id")},
    )

    eff = config.apply_profile(cfg, "dev")

    assert eff.client_id == "dev-id"
    assert eff.client_secret == "secret"
    assert eff.base_url == API_ROOT
    assert cfg.client_id == "id"


def test_apply_profile_unknown_profile_keeps_config() -> None:
    cfg = config.AppConfig(client_id="id", client_secret="secret")
    assert config.apply_profile(cfg, "nope") is cfg


def test_apply_env_overrides(monkeypatch) -> None:
    cfg = config.AppConfig(client_id="id", client_secret="secret")
    monkeypatch.setenv(config.ENV_CLIENT_ID, "env-id")
    monkeypatch.delenv(config.ENV_CLIENT_SECRET, raising=False)
    monkeypatch.setenv(config.ENV_BASE_URL, "localhost:8080/v4/")

    eff = config.apply_env(cfg)

    assert eff.client_id == "env-id"
    assert eff.client_secret == "secret"
    assert eff.base_url == "http://localhost:8080/v4"


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("api.untappd.com/v4") == "https://api.untappd.com/v4"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("127.0.0.1:8010") == "http://127.0.0.1:8010"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://api.untappd.com/v4/") == "https://api.untappd.com/v4"
