"""Rich-backed diagnostics logging bound to standard error.

Stdout carries the report and nothing else, so the handler installed here
always renders through a Rich console attached to stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "arg_reporter"


def configure_logging(level: int | str = logging.WARNING, *, console: Console | None = None) -> RichHandler:
    """Install a single :class:`RichHandler` on the package logger.

    Parameters
    ----------
    level:
        Numeric or named stdlib level applied to the package logger.
    console:
        Optional Rich console; defaults to one writing to ``sys.stderr``.

    Returns
    -------
    RichHandler
        The active handler. Calling again replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
