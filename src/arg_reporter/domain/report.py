"""Plain-text rendering of the argument report.

The layout is fixed: a count line, one line per argument in original order,
then the greeting. Rendering is a pure function of its input so repeated calls
with equal arguments produce identical text.
"""

from __future__ import annotations

from .arguments import InvocationArguments

GREETING = "Hello, world!"
COUNT_TEMPLATE = "Debug: {count} argument(s)"
ENTRY_TEMPLATE = "  [{index}]: {token}"


def format_count(count: int) -> str:
    """Return the header line announcing ``count`` arguments.

    >>> format_count(2)
    'Debug: 2 argument(s)'
    """

    return COUNT_TEMPLATE.format(count=count)


def format_entry(index: int, token: str) -> str:
    """Return the listing line for ``token`` at zero-based ``index``.

    The token is inserted verbatim: no quoting, escaping or splitting.

    >>> format_entry(1, "hello world")
    '  [1]: hello world'
    """

    return ENTRY_TEMPLATE.format(index=index, token=token)


def report_lines(arguments: InvocationArguments) -> list[str]:
    """Return the report as a list of lines without terminators.

    >>> report_lines(InvocationArguments.of("prog", "foo"))
    ['Debug: 2 argument(s)', '  [0]: prog', '  [1]: foo', 'Hello, world!']
    """

    lines = [format_count(len(arguments))]
    lines.extend(format_entry(index, token) for index, token in enumerate(arguments))
    lines.append(GREETING)
    return lines


def render_report(arguments: InvocationArguments) -> str:
    """Return the full report text, every line newline-terminated."""

    return "".join(f"{line}\n" for line in report_lines(arguments))


__all__ = [
    "COUNT_TEMPLATE",
    "ENTRY_TEMPLATE",
    "GREETING",
    "format_count",
    "format_entry",
    "render_report",
    "report_lines",
]
