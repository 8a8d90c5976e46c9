#!/usr/bin/env python3



from typing import Callable
import functools
import logging


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging for command line use.

    The library itself never installs handlers; only entry points call this.
    WARNING by default, DEBUG when verbose.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def log_exceptions(func: Callable) -> Callable:
    """
    Decorator that logs exceptions and re-raises them.

    Example:
    >>> from magviz.tools import log_exceptions
    >>>
    >>> @log_exceptions
    ... def run(args):
    ...     ...

    What happens:
    - Exception is caught
    - Logged as an error; the traceback is attached when DEBUG is enabled
    - Re-raised so the caller decides the exit status
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger = logging.getLogger(func.__module__)
            logger.error(
                f"{func.__name__} failed: {e}",
                exc_info=logger.isEnabledFor(logging.DEBUG)
            )
            raise

    return wrapper
