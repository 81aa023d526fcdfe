import sys
from abc import ABC, abstractmethod
from typing import TextIO

from letter_enhancer.domain.models import NotificationKind
from letter_enhancer.session.diff import unified_line_diff, word_diff_summary


class BasePresenter(ABC):
    """Contract for whatever draws the letter and notifications."""

    @abstractmethod
    def render_original(self, text: str) -> None: ...

    @abstractmethod
    def render_enhanced(self, text: str) -> None:
        """Show the enhanced text. An empty string clears the view."""

    @abstractmethod
    def render_diff(self, original: str, enhanced: str) -> None: ...

    @abstractmethod
    def notify(self, kind: NotificationKind, title: str, message: str) -> None: ...

    @abstractmethod
    def set_busy(self, busy: bool) -> None: ...


class ConsolePresenter(BasePresenter):
    """Writes results and notifications to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def render_original(self, text: str) -> None:
        count = len(text)
        self._section(f"Original ({count} character{'' if count == 1 else 's'})", text)

    def render_enhanced(self, text: str) -> None:
        if text:
            self._section("Enhanced", text)

    def render_diff(self, original: str, enhanced: str) -> None:
        diff = unified_line_diff(original, enhanced)
        summary = word_diff_summary(original, enhanced).to_summary()
        self._section(f"Diff ({summary})", diff or "(identical)")

    def notify(self, kind: NotificationKind, title: str, message: str) -> None:
        self._write(f"[{kind.value.upper()}] {title}: {message}")

    def set_busy(self, busy: bool) -> None:
        if busy:
            self._write("Analyzing...")

    def _section(self, title: str, body: str) -> None:
        self._write(f"===== {title} =====")
        self._write(body)

    def _write(self, line: str) -> None:
        print(line, file=self._stream)
