"""GitHub REST API client."""

from .client import GitHubClient
from .models import GitHubContent, GitHubUser

__all__ = ["GitHubClient", "GitHubContent", "GitHubUser"]
