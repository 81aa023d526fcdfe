from abc import ABC, abstractmethod

from letter_enhancer.domain.models import SubmissionOutcome


class BaseSubmissionClient(ABC):
    """Contract for clients that send text to an enhancement service."""

    @abstractmethod
    async def submit(self, text: str, endpoint: str, timeout_ms: int) -> SubmissionOutcome:
        """Send ``text`` to ``endpoint`` and return the enhanced text.

        Failures are returned as a failed SubmissionOutcome, never raised.

        Raises:
            ValueError: if ``text`` is blank.
        """
