"""Environment-driven configuration for the ambient CLI concerns.

Purpose
-------
Collect the knobs that shape diagnostics around the reporter: ``.env``
loading, the log level for the stderr handler and traceback verbosity. None of
these influence the report written to stdout.

Contents
--------
* :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`, :func:`enable_dotenv` -
  opt-in ``.env`` support backed by ``python-dotenv``.
* :class:`RuntimeSettings` and :func:`load_settings` - typed view over the
  ``ARG_REPORTER_*`` environment variables.

System Role
-----------
Read once by :func:`arg_reporter.cli.main` before the command runs.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "ARG_REPORTER_USE_DOTENV"
LOG_LEVEL_ENV_VAR = "ARG_REPORTER_LOG_LEVEL"
TRACEBACK_ENV_VAR = "ARG_REPORTER_TRACEBACK"

DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    """Interpret ``raw`` as a boolean flag, raising for unrecognised values.

    >>> _parse_bool("FLAG", "Yes", False)
    True
    >>> _parse_bool("FLAG", None, True)
    True
    """
    if raw is None:
        return default
    candidate = raw.strip().lower()
    if candidate in _TRUTHY:
        return True
    if candidate in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUTHY | _FALSY - {''})}, got {raw!r}")


def _coerce_level(name: str, raw: str | None) -> str:
    """Return the canonical upper-case level name for ``raw``.

    >>> _coerce_level("LEVEL", " info ")
    'INFO'
    """
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL
    candidate = raw.strip().upper()
    if candidate not in _LEVEL_NAMES:
        raise ValueError(f"Unknown log level for {name}: {raw!r}")
    return candidate


def should_use_dotenv(*, explicit: Optional[bool] = None, env_value: Optional[str] = None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit caller choice wins; otherwise a truthy ``env_value`` (usually
    the content of :data:`DOTENV_ENV_VAR`) enables loading.

    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="on")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` file into ``os.environ``.

    The search walks upward from the current working directory. Variables
    that already exist keep their values. The file is loaded at most once per
    process; later calls return the cached path.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_LOADED, _DOTENV_PATH
    if _DOTENV_LOADED:
        return _DOTENV_PATH

    found = find_dotenv(usecwd=True)
    located = Path(found).resolve() if found else None

    if located is not None:
        load_dotenv(located, override=False)
        logging.getLogger(__name__).debug("loaded environment from %s", located)

    _DOTENV_LOADED = True
    _DOTENV_PATH = located
    return located


def _reset_dotenv_state_for_testing() -> None:
    """Forget any previously loaded ``.env`` so tests start from scratch."""
    global _DOTENV_LOADED, _DOTENV_PATH
    _DOTENV_LOADED = False
    _DOTENV_PATH = None


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Resolved diagnostics settings.

    Attributes
    ----------
    log_level:
        Upper-case stdlib level name applied to the ``arg_reporter`` logger.
    traceback:
        ``True`` to print full tracebacks for unexpected failures.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    traceback: bool = False

    @property
    def numeric_level(self) -> int:
        """Return the stdlib numeric value of :attr:`log_level`."""

        return int(logging.getLevelName(self.log_level))


def load_settings(environ: Optional[Mapping[str, str]] = None) -> RuntimeSettings:
    """Build :class:`RuntimeSettings` from ``environ`` (default ``os.environ``).

    Raises
    ------
    ValueError
        When a variable carries an unrecognised value.

    Examples
    --------
    >>> load_settings({"ARG_REPORTER_LOG_LEVEL": "debug", "ARG_REPORTER_TRACEBACK": "1"})
    RuntimeSettings(log_level='DEBUG', traceback=True)
    >>> load_settings({})
    RuntimeSettings(log_level='WARNING', traceback=False)
    """
    source = os.environ if environ is None else environ
    return RuntimeSettings(
        log_level=_coerce_level(LOG_LEVEL_ENV_VAR, source.get(LOG_LEVEL_ENV_VAR)),
        traceback=_parse_bool(TRACEBACK_ENV_VAR, source.get(TRACEBACK_ENV_VAR), False),
    )


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DOTENV_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "RuntimeSettings",
    "TRACEBACK_ENV_VAR",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
