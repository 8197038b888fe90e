"""cwlviewer data models."""

from pydantic import BaseModel, ConfigDict


class GithubDetails(BaseModel):
    """Location inside a GitHub repository, parsed from a directory URL."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo_name: str
    branch: str | None = None  # None when the URL has no tree/<branch>/ suffix
    path: str | None = None

    @property
    def repo_id(self) -> str:
        return f"{self.owner}/{self.repo_name}"
