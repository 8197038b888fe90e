"""GitHub API client."""

import logging
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
)

from .models import GitHubContent, GitHubUser

logger = logging.getLogger(__name__)

# Retry configuration
DEFAULT_MAX_RETRIES = 3
DEFAULT_MIN_WAIT = 1  # seconds
DEFAULT_MAX_WAIT = 10  # seconds

USER_AGENT = "cwlviewer-github-client"


def is_retryable(exc: BaseException) -> bool:
    """Network failures and 5xx responses are worth another attempt."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return isinstance(exc, httpx.TransportError)


def create_retry_decorator(max_retries: int = DEFAULT_MAX_RETRIES):
    """Create a retry decorator with specified max retries."""
    return retry(
        retry=retry_if_exception(is_retryable),
        stop=stop_after_attempt(max(1, max_retries)),
        wait=wait_exponential(multiplier=1, min=DEFAULT_MIN_WAIT, max=DEFAULT_MAX_WAIT),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


class GitHubClient:
    """GitHub REST API client covering repository contents and users."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        token: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        max_retries: int = DEFAULT_MAX_RETRIES,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            username: Login for basic auth
            password: Password or personal access token for basic auth
            token: Token sent as an Authorization header when no basic
                auth credentials are given
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts per request (1 disables retry)
            transport: Optional httpx transport, mostly for tests
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.transport = transport
        self.auth: httpx.BasicAuth | None = None
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }

        if username and password:
            self.auth = httpx.BasicAuth(username, password)
            logger.debug("GitHub client initialized with basic auth for %s", username)
        elif token:
            self.headers["Authorization"] = f"token {token}"
            logger.debug("GitHub client initialized with token")
        else:
            logger.warning("GitHub client initialized without credentials (rate limited)")
        logger.info("GitHub client ready, base_url=%s, max_retries=%d", self.base_url, max_retries)

    @property
    def authenticated(self) -> bool:
        return self.auth is not None or "Authorization" in self.headers

    def _send(
        self, method: str, url: str, authenticated: bool = True, **kwargs: Any
    ) -> httpx.Response:
        """
        Send one request with retry, raising on error statuses.

        With authenticated=False neither credentials nor the API Accept
        header are sent.
        """
        if authenticated:
            headers, auth = self.headers, self.auth
        else:
            headers, auth = {"User-Agent": USER_AGENT}, None

        @create_retry_decorator(self.max_retries)
        def do_send() -> httpx.Response:
            logger.debug("Request: %s %s", method, url)
            with httpx.Client(
                timeout=self.timeout,
                headers=headers,
                auth=auth,
                transport=self.transport,
            ) as client:
                response = client.request(method, url, **kwargs)
            logger.debug("Response: %s %s (status=%d)", method, url, response.status_code)
            if response.status_code >= 500:
                logger.warning("Server error %d from %s", response.status_code, url)
            response.raise_for_status()
            return response

        return do_send()

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        """Make HTTP request to the GitHub API."""
        return self._send(method, f"{self.base_url}{endpoint}", **kwargs)

    def download(self, url: str) -> str:
        """
        Download an absolute URL and return its text.

        The raw host is not the GitHub API, so no credentials are sent.
        """
        logger.info("Downloading: %s", url)
        text = self._send("GET", url, authenticated=False).text
        logger.debug("Downloaded %s (%d chars)", url, len(text))
        return text

    def get_contents(
        self, owner: str, repo: str, path: str = "", ref: str | None = None
    ) -> list[GitHubContent]:
        """
        Get repository contents.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path in repository (empty for root)
            ref: Branch/tag/commit (None for the default branch)

        Returns:
            List of GitHubContent items, a single item when path is a file
        """
        path = path.strip("/")
        endpoint = f"/repos/{owner}/{repo}/contents"
        if path:
            endpoint = f"{endpoint}/{path}"
        params = {"ref": ref} if ref else {}
        logger.info("Fetching contents: %s/%s path=%s ref=%s", owner, repo, path, ref)
        data = self._request("GET", endpoint, params=params).json()

        if isinstance(data, dict):
            logger.debug("Single file response: %s", data.get("name"))
            return [GitHubContent(**data)]

        logger.debug("Directory listing: %d items", len(data))
        return [GitHubContent(**item) for item in data]

    def get_user(self, username: str) -> GitHubUser:
        """
        Get a user's public profile.

        Args:
            username: Login of the user

        Returns:
            GitHubUser
        """
        logger.info("Fetching user: %s", username)
        data = self._request("GET", f"/users/{username}").json()
        return GitHubUser(**data)
