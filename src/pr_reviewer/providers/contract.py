# src/pr_reviewer/providers/contract.py
"""Structured-output contract shared by all model providers.

The model has to answer by calling ``submitCodeReview``. Whatever comes back is
decoded strictly into a ReviewDecision: a missing call, malformed JSON, unknown
fields or a decision outside the enum are all protocol errors.
"""
from typing import Any

from pydantic import ValidationError

from pr_reviewer.errors import ProtocolError
from pr_reviewer.models.review import Decision, ReviewDecision, ReviewSubmission


FUNCTION_NAME = "submitCodeReview"

SUBMIT_REVIEW_FUNCTION: dict[str, Any] = {
    "name": FUNCTION_NAME,
    "description": "Submit a code review with comments and a decision",
    "parameters": {
        "type": "object",
        "properties": {
            "review": {
                "type": "string",
                "description": "Detailed review comments about the code changes",
            },
            "decision": {
                "type": "string",
                "enum": [d.value for d in Decision],
                "description": "The final decision on the pull request",
            },
            "reason": {
                "type": "string",
                "description": "Brief explanation for the decision",
            },
        },
        "required": ["review", "decision", "reason"],
        "additionalProperties": False,
    },
}

DECISION_CRITERIA = """After reviewing the code, you must submit a code review with comments and a decision. Base your decision on the following criteria:
- APPROVE: No significant issues found, code is ready to merge
- APPROVE_WITH_COMMENTS: Minor issues that should be addressed but are not blocking
- DECLINE: Critical issues or multiple moderate issues that must be fixed before merging"""

USER_PROMPT = "Please review the following code changes from a pull request:\n\n{prompt}"


def build_messages(prompt: str, rules_guide: str) -> list[dict[str, str]]:
    """System message (rules guide + decision criteria) and user message (diff prompt)."""
    return [
        {"role": "system", "content": f"{rules_guide}\n\n{DECISION_CRITERIA}"},
        {"role": "user", "content": USER_PROMPT.format(prompt=prompt)},
    ]


def decode_submission(name: str | None, arguments: str | None) -> ReviewDecision:
    """Decode the function call arguments returned by the model."""
    if name != FUNCTION_NAME:
        raise ProtocolError(
            f"Model did not call {FUNCTION_NAME} (got {name!r})"
        )
    if not arguments:
        raise ProtocolError(f"Model called {FUNCTION_NAME} without arguments")

    try:
        submission = ReviewSubmission.model_validate_json(arguments)
    except ValidationError as e:
        raise ProtocolError(f"Invalid {FUNCTION_NAME} arguments: {e}") from e

    return ReviewDecision.from_submission(submission)
