"""Error boundary handling for CLI commands.

This module provides a decorator that catches well-known exceptions at CLI
entry points and displays clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

import click

from aicraft.errors import AicraftError

logger = logging.getLogger(__name__)


def _debug_enabled() -> bool:
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is None:
        return False
    obj = click_ctx.find_root().obj
    return bool(getattr(obj, "debug", False))


def _report(message: str, hint: str | None = None) -> None:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    if hint is not None:
        click.echo(click.style(hint, dim=True), err=True)


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    This decorator should be applied to CLI command callbacks to provide
    user-friendly error messages without stack traces for predictable error
    conditions. With --debug the exception propagates with its full traceback.

    Catches:
        - AicraftError: Not-found items, missing catalog files, uninitialized projects
        - FileNotFoundError: Missing files/directories
        - PermissionError: Permission denied errors
        - ValueError: Invalid input or configuration

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except AicraftError as e:
            if _debug_enabled():
                raise
            _report(e.message, e.hint)
            raise SystemExit(1) from None
        except (FileNotFoundError, PermissionError, ValueError) as e:
            if _debug_enabled():
                raise
            logger.debug("Command failed", exc_info=True)
            _report(str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
