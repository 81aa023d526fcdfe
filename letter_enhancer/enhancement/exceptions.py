class SubmissionError(Exception):
    """Raised when an enhancement submission fails."""


class MalformedResponseError(SubmissionError):
    """Raised when the service response does not match the expected shape."""
