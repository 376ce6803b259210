from typing import Any
from pydantic import BaseModel, ValidationError

from pr_reviewer.errors import TransportError
from .review import PullRequestInfo


class BitbucketAccount(BaseModel):
    display_name: str
    nickname: str | None = None


class BitbucketPullRequest(BaseModel):
    id: int | None = None
    title: str
    description: str | None = None
    state: str | None = None
    author: BitbucketAccount


def to_pull_request_info(pr_id: int, data: dict[str, Any]) -> PullRequestInfo:
    """Map a Bitbucket pull request payload to PullRequestInfo."""
    try:
        pr = BitbucketPullRequest.model_validate(data)
    except ValidationError as e:
        raise TransportError(f"Malformed pull request payload for #{pr_id}: {e}") from e

    description = pr.description if pr.description and pr.description.strip() else None
    return PullRequestInfo(
        id=pr.id if pr.id is not None else pr_id,
        title=pr.title,
        author_display_name=pr.author.display_name,
        description=description,
    )
