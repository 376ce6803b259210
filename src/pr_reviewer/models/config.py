from pydantic import BaseModel, ConfigDict


class RepoTarget(BaseModel):
    """Bitbucket repository a pull request belongs to."""

    model_config = ConfigDict(frozen=True)

    workspace: str
    repo_slug: str

    def __str__(self) -> str:
        return f"{self.workspace}/{self.repo_slug}"
