"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from yamlrun.cli.output import user_output
from yamlrun.core.errors import ConfigError, MissingFieldError, NotFoundError


T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - ConfigError: Registry missing, malformed or inconsistent
        - NotFoundError: Unknown library id
        - MissingFieldError: Library entry lacks a required field
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or file content
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (
            ConfigError,
            NotFoundError,
            MissingFieldError,
            FileNotFoundError,
            ValueError,
            PermissionError,
        ) as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
