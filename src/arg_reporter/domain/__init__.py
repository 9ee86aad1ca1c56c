"""Domain value objects and pure rendering for the argument report."""

from __future__ import annotations

from .arguments import InvocationArguments
from .report import GREETING, render_report, report_lines

__all__ = [
    "GREETING",
    "InvocationArguments",
    "render_report",
    "report_lines",
]
