"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from yamlrun.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress and diagnostic output.

    Components call ctx.feedback methods instead of printing, so tests can
    swap in a recording fake and assert on what the user was told.

    Usage:
        feedback.info("Building c-libyaml")
        feedback.success("ok, built c-libyaml 0.2.5")
        feedback.error("failed")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr with color."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
