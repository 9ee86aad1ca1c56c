from __future__ import annotations

import os
from pathlib import Path

import pytest

from arg_reporter import cli as cli_module
from arg_reporter import config as reporter_config


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values found in a parent directory."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("ARG_REPORTER_LOG_LEVEL=info\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("ARG_REPORTER_LOG_LEVEL", raising=False)

    loaded = reporter_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["ARG_REPORTER_LOG_LEVEL"] == "info"

    os.environ.pop("ARG_REPORTER_LOG_LEVEL", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("ARG_REPORTER_LOG_LEVEL=debug\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ARG_REPORTER_LOG_LEVEL", "error")

    result = reporter_config.enable_dotenv()

    assert result is not None
    assert os.environ["ARG_REPORTER_LOG_LEVEL"] == "error"


def test_enable_dotenv_returns_none_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(reporter_config, "find_dotenv", lambda **_: "")

    assert reporter_config.enable_dotenv() is None


def test_enable_dotenv_loads_only_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / ".env").write_text("ARG_REPORTER_TRACEBACK=0\n")
    (second / ".env").write_text("ARG_REPORTER_TRACEBACK=1\n")

    monkeypatch.chdir(first)
    loaded = reporter_config.enable_dotenv()
    monkeypatch.chdir(second)

    assert reporter_config.enable_dotenv() == loaded
    os.environ.pop("ARG_REPORTER_TRACEBACK", None)


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (None, None, False),
        (None, "1", True),
        (None, " Yes ", True),
        (None, "off", False),
        (True, None, True),
        (False, "1", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert reporter_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_main_loads_dotenv_only_when_toggled(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """The environment toggle decides whether ``main`` looks for a .env file."""

    calls: list[int] = []

    def record_enable() -> None:
        calls.append(1)

    monkeypatch.setattr(reporter_config, "enable_dotenv", record_enable)

    assert cli_module.main(["x"]) == 0
    assert calls == []

    monkeypatch.setenv(reporter_config.DOTENV_ENV_VAR, "1")
    assert cli_module.main(["x"]) == 0
    assert calls == [1]
    capsys.readouterr()


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({}, reporter_config.RuntimeSettings("WARNING", False)),
        ({"ARG_REPORTER_LOG_LEVEL": "Debug"}, reporter_config.RuntimeSettings("DEBUG", False)),
        ({"ARG_REPORTER_LOG_LEVEL": "  "}, reporter_config.RuntimeSettings("WARNING", False)),
        ({"ARG_REPORTER_TRACEBACK": "TRUE"}, reporter_config.RuntimeSettings("WARNING", True)),
        ({"ARG_REPORTER_TRACEBACK": "no"}, reporter_config.RuntimeSettings("WARNING", False)),
    ],
)
def test_load_settings_reads_mapping(environ: dict[str, str], expected: reporter_config.RuntimeSettings) -> None:
    assert reporter_config.load_settings(environ) == expected


def test_load_settings_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARG_REPORTER_LOG_LEVEL", "error")

    assert reporter_config.load_settings().log_level == "ERROR"


@pytest.mark.parametrize(
    "environ, error_match",
    [
        ({"ARG_REPORTER_LOG_LEVEL": "verbose"}, "Unknown log level"),
        ({"ARG_REPORTER_TRACEBACK": "maybe"}, "ARG_REPORTER_TRACEBACK must be one of"),
    ],
)
def test_load_settings_rejects_invalid_values(environ: dict[str, str], error_match: str) -> None:
    with pytest.raises(ValueError, match=error_match):
        reporter_config.load_settings(environ)


def test_numeric_level_matches_stdlib() -> None:
    assert reporter_config.RuntimeSettings("INFO").numeric_level == 20
