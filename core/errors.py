"""
Domain exceptions shared by the swipe pipeline, the stores and the web layer.
"""


class JobSwipeError(Exception):
    """Base exception for all domain errors."""
    pass


# Input / validation errors - rejected locally, no state is mutated

class InvalidInputError(JobSwipeError, ValueError):
    """Raised when a caller passes malformed input."""
    pass


class InvalidScoreError(InvalidInputError):
    """Raised when a match score is not a number in [0, 100]."""
    pass


class InvalidDirectionError(InvalidInputError):
    """Raised when a swipe direction is neither 'left' nor 'right'."""
    pass


class DocumentNotFoundError(JobSwipeError):
    """Raised when a stored document does not exist."""
    pass


class JobNotFoundError(DocumentNotFoundError):
    """Raised when a job does not exist."""
    pass


class ApplicationNotFoundError(DocumentNotFoundError):
    """Raised when an application does not exist."""
    pass


class SessionNotFoundError(JobSwipeError):
    """Raised when a swipe session id is unknown."""
    pass


# Session precondition errors

class SessionStateError(JobSwipeError):
    """Raised when a session operation is not allowed in the current state."""
    pass


# Transient I/O errors - retried, then surfaced as events

class StoreUnavailableError(JobSwipeError):
    """Raised when the document store cannot be reached."""
    pass


class CompletionError(JobSwipeError):
    """Raised when the text-completion backend fails or returns unusable output."""
    pass


# Conflicts resolved by callers

class DuplicateApplicationError(JobSwipeError):
    """Raised when an application already exists for a (candidate, job) pair."""

    def __init__(self, candidate_id: str, job_id: str):
        super().__init__(f"Application already exists for candidate {candidate_id} and job {job_id}")
        self.candidate_id = candidate_id
        self.job_id = job_id
