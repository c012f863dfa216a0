import os
from dataclasses import dataclass

from dotenv import load_dotenv

from api.handle_requests import DEFAULT_API_URL, MAX_RETRIES


@dataclass
class Settings:
    agent_token: str | None = None
    api_url: str = DEFAULT_API_URL
    log_level: str = "INFO"
    max_retries: int = MAX_RETRIES


def load_settings(env_file: str | None = None) -> Settings:
    """Read settings from the environment, after loading a .env file if present."""
    load_dotenv(env_file)
    return Settings(
        agent_token=os.getenv("AGENT_TOKEN") or None,
        api_url=os.getenv("SPACETRADERS_API_URL", DEFAULT_API_URL),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        max_retries=int(os.getenv("SPACETRADERS_MAX_RETRIES", str(MAX_RETRIES))),
    )
