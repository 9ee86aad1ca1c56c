"""Module entry point so ``python -m arg_reporter`` matches the console script.

The host's ``sys.argv[0]`` (the path of this file under ``-m``) becomes
element ``0`` of the report, as it would for any other invocation.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
