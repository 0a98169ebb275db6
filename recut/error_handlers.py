#!/usr/bin/env python3
"""
Error reporting for the recut command line.

Maps the recut exception taxonomy onto process exit codes and renders
errors, with their details, for stderr.
"""
import sys
import traceback
import logging
from functools import wraps
from typing import Any, Callable, Dict, List

from .exceptions import RecutError, ValidationError

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_UNEXPECTED = 3
EXIT_INTERRUPTED = 130  # SIGINT


def exit_code_for(error: BaseException) -> int:
    """Exit code reported for an exception escaping a command

    Bad input (out of range cuts, inverted bounds, malformed cut
    specifications) is a usage error; configuration and cut resolution
    failures are general errors.
    """
    if isinstance(error, KeyboardInterrupt):
        return EXIT_INTERRUPTED
    if isinstance(error, ValidationError):
        return EXIT_USAGE
    if isinstance(error, RecutError):
        return EXIT_ERROR
    return EXIT_UNEXPECTED


def _format_details(details: Dict[str, Any]) -> List[str]:
    inline = []
    listed = []
    for key, value in details.items():
        if isinstance(value, (list, tuple)):
            listed.extend(f"  - {item}" for item in value)
        else:
            inline.append(f"{key}={value}")

    lines = [f"[{', '.join(inline)}]"] if inline else []
    return lines + listed


def format_error(error: Exception, verbose: bool = False) -> str:
    """Format an error message for display

    Details of recut errors are always shown, e.g.::

        CutOutOfRangeError: p_cut_left (9) is outside the sequence range 0-5
        [p_cut_left=9, left=0, right=5]

    Args:
        error: Exception object
        verbose: Include the traceback of unexpected errors

    Returns:
        Formatted error message
    """
    if isinstance(error, RecutError):
        return '\n'.join([f"{error.__class__.__name__}: {error.message}"] + _format_details(error.details))

    if verbose:
        return f"Unexpected Error ({error.__class__.__name__}): {error}\n{traceback.format_exc()}"
    return f"Unexpected Error: {error}"


def handle_exceptions(func: Callable[..., int]) -> Callable[..., int]:
    """Decorator turning exceptions raised by a command into exit codes

    Args:
        func: Command returning an exit code

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> int:
        logger = logging.getLogger(func.__module__)
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt as e:
            logger.info("Operation cancelled by user")
            print("\nOperation cancelled by user", file=sys.stderr)
            return exit_code_for(e)
        except RecutError as e:
            logger.debug(f"{e.__class__.__name__} details: {e.details}")
            print(format_error(e), file=sys.stderr)
            return exit_code_for(e)
        except Exception as e:
            logger.error(f"Unexpected error: {e}", exc_info=True)
            print(format_error(e), file=sys.stderr)
            print("Run with -vv for more information.", file=sys.stderr)
            return exit_code_for(e)
    return wrapper
