"""Public package surface for the argument reporter.

``import arg_reporter`` exposes the value object and the ``report`` operation;
``python -m arg_reporter`` and the ``arg-reporter`` console script run the
same function through :mod:`arg_reporter.cli`.
"""

from __future__ import annotations

from .arg_reporter import current_arguments, report
from .domain import GREETING, InvocationArguments, render_report

__all__ = [
    "GREETING",
    "InvocationArguments",
    "current_arguments",
    "render_report",
    "report",
]
