"""Reporter façade that connects the pure domain to the process edge.

Purpose
-------
Expose the public ``report`` operation: render the listing for a given
:class:`~arg_reporter.domain.InvocationArguments` and write it to standard
output. The arguments are always passed in explicitly; only
:func:`current_arguments` reads ``sys.argv``.

Contents
--------
* :func:`current_arguments` - snapshot the host argument vector.
* :func:`report` - render and emit the report.
* :func:`write_stdout` - default writer preserving undecodable argv bytes.

System Role
-----------
Sits between the domain (:mod:`arg_reporter.domain`) and the CLI adapter
(:mod:`arg_reporter.cli`). It defines no recovery: failures from the host or
the output stream propagate to the caller.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

import click

from .domain import InvocationArguments, render_report

logger = logging.getLogger(__name__)

Writer = Callable[[str], object]


def current_arguments() -> InvocationArguments:
    """Return a snapshot of the host's ``sys.argv``.

    Raises
    ------
    AttributeError
        When the interpreter was started without an argument vector (for
        example when embedded). The error is deliberately not translated.
    ValueError
        When the host supplies an empty argument vector.
    """

    return InvocationArguments.from_sequence(sys.argv)


def write_stdout(text: str) -> None:
    """Write ``text`` to standard output without altering any token.

    Why
    ---
    ``click.echo`` strips ANSI sequences from ``str`` payloads when stdout is
    not a terminal, and strict encoders reject the surrogate escapes Python
    uses for undecodable argv bytes. Encoding up front with
    ``surrogateescape`` and handing bytes to ``click.echo`` sidesteps both, so
    each token reaches the stream exactly as the host delivered it. Streams
    without a binary buffer (``StringIO`` redirects) receive the text with
    colour stripping disabled.

    Examples
    --------
    >>> write_stdout("Hello, world!\\n")
    Hello, world!
    """

    stream = sys.stdout
    if getattr(stream, "buffer", None) is None:
        click.echo(text, nl=False, file=stream, color=True)
        return
    encoding = getattr(stream, "encoding", None) or "utf-8"
    click.echo(text.encode(encoding, errors="surrogateescape"), nl=False, file=stream)


def report(arguments: InvocationArguments, *, writer: Optional[Writer] = None) -> None:
    """Write the argument listing followed by ``Hello, world!``.

    Parameters
    ----------
    arguments:
        Snapshot of the invocation tokens; never modified.
    writer:
        Optional sink receiving the full report text in one call. Defaults to
        :func:`write_stdout`.

    Examples
    --------
    >>> report(InvocationArguments.of("prog", "foo", "bar"))
    Debug: 3 argument(s)
      [0]: prog
      [1]: foo
      [2]: bar
    Hello, world!
    """

    emit = writer or write_stdout
    logger.debug("reporting %d invocation argument(s)", len(arguments))
    emit(render_report(arguments))


__all__ = ["Writer", "current_arguments", "report", "write_stdout"]
