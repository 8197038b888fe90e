"""GitHub REST API response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class GitHubContent(BaseModel):
    """Repository content entry (file, directory, symlink or submodule)."""

    name: str
    path: str
    sha: str
    size: int
    url: str
    html_url: str | None = None
    git_url: str | None = None
    download_url: str | None = None
    type: Literal["file", "dir", "symlink", "submodule"]
    content: str | None = None  # Base64, only on single file responses
    encoding: str | None = None
    target: str | None = None  # symlink target
    submodule_git_url: str | None = None


class GitHubUser(BaseModel):
    """GitHub user profile."""

    login: str
    id: int
    name: str | None = None
    email: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    type: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: datetime | None = None
