"""Shared fixtures: a recording httpx mock transport and a clean environment."""

import httpx
import pytest

import ghcore.client

SETTINGS_ENV = [
    "GITHUB_API_AUTHENTICATION",
    "GITHUB_API_USERNAME",
    "GITHUB_API_PASSWORD",
    "GITHUB_API_BASE_URL",
    "GITHUB_RAW_BASE_URL",
    "GITHUB_API_TIMEOUT",
    "GITHUB_API_MAX_RETRIES",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset settings variables and undo anything a .env file sets."""
    for name in SETTINGS_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(ghcore.client, "DEFAULT_MIN_WAIT", 0)
    monkeypatch.setattr(ghcore.client, "DEFAULT_MAX_WAIT", 0)


class Recorder:
    """Serves queued responses and remembers every request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        # Fresh copy, a response object can only be sent once
        return httpx.Response(
            response.status_code, headers=response.headers, content=response.content
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def recorder():
    return Recorder


def content_item(path: str, type_: str = "file", **extra) -> dict:
    name = path.rsplit("/", 1)[-1]
    item = {
        "name": name,
        "path": path,
        "sha": "3f786850e387550fdab836ed7e6dc881de23001b",
        "size": 120 if type_ == "file" else 0,
        "url": f"https://api.github.com/repos/common-workflow-language/workflows/contents/{path}?ref=master",
        "html_url": f"https://github.com/common-workflow-language/workflows/blob/master/{path}",
        "git_url": "https://api.github.com/repos/common-workflow-language/workflows/git/blobs/3f78685",
        "download_url": (
            f"https://raw.githubusercontent.com/common-workflow-language/workflows/master/{path}"
            if type_ == "file" else None
        ),
        "type": type_,
        "_links": {"self": "https://api.github.com/..."},
    }
    item.update(extra)
    return item


USER = {
    "login": "octocat",
    "id": 583231,
    "name": "The Octocat",
    "company": "@github",
    "blog": "https://github.blog",
    "location": "San Francisco",
    "email": None,
    "bio": None,
    "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
    "html_url": "https://github.com/octocat",
    "type": "User",
    "public_repos": 8,
    "followers": 9000,
    "following": 9,
    "created_at": "2011-01-25T18:44:36Z",
}
