from __future__ import annotations
from dataclasses import dataclass

API_ROOT = "https://api.untappd.com/v4"
USER_AGENT = "untappd-client/0.1.0"


@dataclass(frozen=True)
class ClientConfig:
    client_id: str
    client_secret: str
    base_url: str = API_ROOT
    user_agent: str = USER_AGENT
    timeout_s: float = 15.0
