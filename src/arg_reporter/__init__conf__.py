"""Static package metadata shared by the CLI, packaging and tests.

Hatchling reads :data:`version` from this file, so it stays the single source
for the release number.
"""

from __future__ import annotations

name = "arg_reporter"
title = "Report invocation arguments and greet the world"
version = "1.0.0"
shell_command = "arg-reporter"

__all__ = [
    "name",
    "shell_command",
    "title",
    "version",
]
