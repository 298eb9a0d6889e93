"""Fake UserFeedback that records messages instead of printing them."""

from yamlrun.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Records (level, message) tuples for test assertions."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def texts(self, level: str | None = None) -> list[str]:
        """Messages, optionally filtered by level."""
        return [message for lvl, message in self.messages if level is None or lvl == level]
