from enum import Enum
from pydantic import BaseModel, ConfigDict


UNKNOWN_FILENAME = "unknown"


class Decision(str, Enum):
    APPROVE = "APPROVE"
    APPROVE_WITH_COMMENTS = "APPROVE_WITH_COMMENTS"
    DECLINE = "DECLINE"


class FileDiff(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    patch: str
    additions: int = 0
    deletions: int = 0
    is_new: bool = False
    is_deleted: bool = False


class ReviewRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    files: tuple[FileDiff, ...]
    rules_guide: str


class ReviewSubmission(BaseModel):
    """Arguments of the submitCodeReview function call, decoded strictly."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    review: str
    decision: Decision
    reason: str


class ReviewDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    review_text: str
    decision: Decision
    reason: str

    @classmethod
    def from_submission(cls, submission: ReviewSubmission) -> "ReviewDecision":
        review_text = (
            f"{submission.review}\n\n"
            f"DECISION: {submission.decision.value}\n"
            f"REASON: {submission.reason}"
        )
        return cls(
            review_text=review_text,
            decision=submission.decision,
            reason=submission.reason,
        )


class PullRequestInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    author_display_name: str
    description: str | None = None


class ReviewReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    pull_request: PullRequestInfo
    review: ReviewDecision
