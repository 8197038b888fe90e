"""Settings for the GitHub service, read from the environment."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, model_validator

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_RAW_BASE_URL = "https://raw.githubusercontent.com"

TRUTHY = {"1", "true", "yes", "on"}


class GitHubSettings(BaseModel):
    """GitHub API access settings."""

    authentication: bool = False
    username: str | None = None
    password: str | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    raw_base_url: str = DEFAULT_RAW_BASE_URL
    timeout: float = 30.0
    max_retries: int = 1

    @model_validator(mode="after")
    def check_credentials(self) -> "GitHubSettings":
        if self.authentication and not (self.username and self.password):
            raise ValueError("GitHub authentication enabled but username or password is missing")
        return self


def load_settings(env_file: str | Path | None = None) -> GitHubSettings:
    """
    Load settings from a .env file and the environment.

    Variables already set in the environment win over the .env file.

    Args:
        env_file: Path to a .env file (None searches from the working directory)

    Returns:
        GitHubSettings
    """
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    env = os.environ
    settings = GitHubSettings(
        authentication=env.get("GITHUB_API_AUTHENTICATION", "").strip().lower() in TRUTHY,
        username=env.get("GITHUB_API_USERNAME") or None,
        password=env.get("GITHUB_API_PASSWORD") or None,
        api_base_url=env.get("GITHUB_API_BASE_URL") or DEFAULT_API_BASE_URL,
        raw_base_url=env.get("GITHUB_RAW_BASE_URL") or DEFAULT_RAW_BASE_URL,
        timeout=float(env.get("GITHUB_API_TIMEOUT") or 30.0),
        max_retries=int(env.get("GITHUB_API_MAX_RETRIES") or 1),
    )
    logger.debug(
        "Loaded settings: authentication=%s api_base_url=%s raw_base_url=%s",
        settings.authentication, settings.api_base_url, settings.raw_base_url,
    )
    return settings
