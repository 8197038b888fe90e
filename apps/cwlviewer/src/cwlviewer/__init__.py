"""GitHub service for the workflow viewer."""

from .config import GitHubSettings, load_settings
from .models import GithubDetails
from .service import GITHUB_DIR_REGEX, GitHubService

__all__ = [
    "GitHubService",
    "GithubDetails",
    "GitHubSettings",
    "GITHUB_DIR_REGEX",
    "load_settings",
]
