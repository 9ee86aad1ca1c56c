"""Click adapter exposing the reporter as the ``arg-reporter`` command.

Purpose
-------
Turn a process invocation into an :class:`~arg_reporter.domain.InvocationArguments`
snapshot and hand it to :func:`arg_reporter.arg_reporter.report`.

Contents
--------
* :class:`VerbatimCommand` - click command that skips option parsing.
* :func:`cli` - the command itself.
* :func:`main` - entry point wiring configuration, logging and
  ``lib_cli_exit_tools`` exit-code handling around :func:`cli`.

System Role
-----------
Presentation layer. Every token after the program name is reported as given,
including ``--help``, ``--version`` and the ``--`` separator, so the command
defines no options of its own. Diagnostics are tuned through the environment
variables described in :mod:`arg_reporter.config`.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__, config
from .arg_reporter import current_arguments, report
from .domain import InvocationArguments
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)

TRACEBACK_SUMMARY_LIMIT = 500
TRACEBACK_VERBOSE_LIMIT = 10_000


class VerbatimCommand(click.Command):
    """Click command that forwards every token to the callback untouched.

    Click's parser drops the ``--`` separator and reacts to ``--help``; the
    reporter must see both as ordinary tokens, so parsing is bypassed and the
    raw list lands in :attr:`click.Context.args`.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args


@click.command(cls=VerbatimCommand, add_help_option=False)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Print every invocation argument, then greet the world."""

    info_name = ctx.find_root().info_name
    invocation_name = __init__conf__.shell_command if info_name is None else info_name
    report(InvocationArguments.of(invocation_name, *ctx.args))


def _apply_environment() -> config.RuntimeSettings:
    """Load ``.env`` when requested and configure logging and tracebacks."""

    if config.should_use_dotenv(env_value=os.getenv(config.DOTENV_ENV_VAR)):
        config.enable_dotenv()
    settings = config.load_settings()
    configure_logging(settings.numeric_level)
    lib_cli_exit_tools.config.traceback = settings.traceback
    lib_cli_exit_tools.config.traceback_force_color = settings.traceback
    logger.debug("%s %s starting (log_level=%s)", __init__conf__.name, __init__conf__.version, settings.log_level)
    return settings


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Run :func:`cli` and return its exit code.

    Parameters
    ----------
    argv:
        User tokens to report. ``None`` snapshots ``sys.argv`` so element ``0``
        is the host's invocation path; otherwise the console-script name
        stands in for it.
    restore_traceback:
        Put the previous ``lib_cli_exit_tools`` traceback preferences back
        once the command finishes.

    Returns
    -------
    int
        ``0`` on success, otherwise the code chosen by
        ``lib_cli_exit_tools`` for the raised exception.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            _apply_environment()
            if argv is None:
                host = current_arguments()
                prog_name, forwarded = host.invocation_name, list(host.user_tokens)
            else:
                prog_name, forwarded = __init__conf__.shell_command, list(argv)
            return lib_cli_exit_tools.run_cli(cli, argv=forwarded, prog_name=prog_name)
        except BaseException as exc:  # noqa: BLE001
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else TRACEBACK_SUMMARY_LIMIT,
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["VerbatimCommand", "cli", "main"]
