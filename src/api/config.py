# src/api/config.py
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.clashofclans.com/v1"


@dataclass(frozen=True)
class Settings:
    bearer_token: str
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Loads .env first when reading the real process environment. Pass
    `env` to read from a plain mapping instead (tests do this).

    Raises:
        RuntimeError if COC_API_KEY is not set.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    token = env.get("COC_API_KEY")
    if not token:
        raise RuntimeError(
            "COC_API_KEY is not set. Please add it to your .env file."
        )

    return Settings(
        bearer_token=token,
        base_url=(env.get("COC_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )
