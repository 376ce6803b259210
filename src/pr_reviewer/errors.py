# src/pr_reviewer/errors.py


class ReviewError(Exception):
    """Base error for a review run."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportError(ReviewError):
    """Host or model endpoint could not be reached or answered badly."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(ReviewError):
    """Model response does not match the submitCodeReview contract."""


class ConfigurationError(ReviewError):
    """Required settings or the rules guide are missing."""
