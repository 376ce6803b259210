from .config import RepoTarget
from .review import (
    Decision,
    FileDiff,
    PullRequestInfo,
    ReviewDecision,
    ReviewReport,
    ReviewRequest,
    ReviewSubmission,
    UNKNOWN_FILENAME,
)
from .bitbucket import BitbucketAccount, BitbucketPullRequest, to_pull_request_info

__all__ = [
    "RepoTarget",
    "Decision",
    "FileDiff",
    "PullRequestInfo",
    "ReviewDecision",
    "ReviewReport",
    "ReviewRequest",
    "ReviewSubmission",
    "UNKNOWN_FILENAME",
    "BitbucketAccount",
    "BitbucketPullRequest",
    "to_pull_request_info",
]
