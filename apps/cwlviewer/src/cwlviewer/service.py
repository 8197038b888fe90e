"""GitHub access for the workflow viewer."""

import logging
import re

import httpx

from ghcore import GitHubClient, GitHubContent, GitHubUser

from .config import DEFAULT_RAW_BASE_URL, GitHubSettings
from .models import GithubDetails

logger = logging.getLogger(__name__)

# owner, repo, then an optional tree/<branch>/<path>
GITHUB_DIR_REGEX = r"^https://github\.com/([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)/?(?:tree/([^/]+)/(.*))?$"
GITHUB_DIR_PATTERN = re.compile(GITHUB_DIR_REGEX)


class GitHubService:
    """Parses GitHub directory URLs and fetches contents, users and files."""

    def __init__(
        self,
        auth_enabled: bool,
        username: str | None,
        password: str | None,
        *,
        raw_base_url: str = DEFAULT_RAW_BASE_URL,
        api_base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = 1,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the service.

        Args:
            auth_enabled: Send the credentials with every API request
            username: GitHub login
            password: Password or personal access token
            raw_base_url: Host serving raw files as /owner/repo/branch/path
            api_base_url: Custom GitHub API URL
            timeout: Request timeout in seconds
            max_retries: Attempts per request (1 means no retry)
            transport: Optional httpx transport, mostly for tests
        """
        self.client = GitHubClient(
            username=username if auth_enabled else None,
            password=password if auth_enabled else None,
            base_url=api_base_url,
            timeout=timeout,
            max_retries=max_retries,
            transport=transport,
        )
        self.raw_base_url = raw_base_url.rstrip("/")

    @classmethod
    def from_settings(
        cls, settings: GitHubSettings, transport: httpx.BaseTransport | None = None
    ) -> "GitHubService":
        return cls(
            settings.authentication,
            settings.username,
            settings.password,
            raw_base_url=settings.raw_base_url,
            api_base_url=settings.api_base_url,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            transport=transport,
        )

    def details_from_dir_url(self, url: str) -> GithubDetails | None:
        """
        Extract the details of a GitHub directory URL.

        Args:
            url: The GitHub directory URL

        Returns:
            GithubDetails with owner, repo, branch and path, or None when the
            URL is not a GitHub directory URL
        """
        match = GITHUB_DIR_PATTERN.match(url)
        if match is None:
            logger.debug("Not a GitHub directory URL: %s", url)
            return None
        owner, repo_name, branch, path = match.groups()
        return GithubDetails(owner=owner, repo_name=repo_name, branch=branch, path=path)

    def get_contents(self, details: GithubDetails) -> list[GitHubContent]:
        """Get the contents of a GitHub path, a single entry for a file."""
        return self.client.get_contents(
            details.owner, details.repo_name, details.path or "", details.branch
        )

    def get_user(self, username: str) -> GitHubUser:
        return self.client.get_user(username)

    def download_file(self, details: GithubDetails) -> str:
        """
        Download a single file from a GitHub repository.

        Args:
            details: Location of the file, branch and path required

        Returns:
            The file contents
        """
        if not details.branch or not details.path:
            raise ValueError(
                f"Branch and path are required to download from {details.repo_id}, "
                "use a tree/<branch>/<path> URL"
            )
        url = f"{self.raw_base_url}/{details.owner}/{details.repo_name}/{details.branch}/{details.path}"
        return self.client.download(url)
