"""Error handling decorator for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from cpx.core.errors import ConfigError, FileSystemError, PathNotFoundError
from cpx.core.logging import get_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_logger(__name__)

# Verbosity flags accepted by the copy command
VERBOSE_FLAGS = ("-v", "-vv", "--verbose")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Log known cpx errors and exit with status 1.

    Args:
        func: The command function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            logger.error("configuration_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except PathNotFoundError as e:
            logger.error("file_not_found", error=str(e), path=str(e.path))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except FileSystemError as e:
            logger.error(
                "file_operation_failed",
                error=str(e),
                path=str(e.path),
                operation=e.operation,
            )
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in VERBOSE_FLAGS):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
