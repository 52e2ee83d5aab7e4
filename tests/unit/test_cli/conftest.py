"""Shared fixtures for CLI command tests."""

import pytest
from click.testing import CliRunner

from runtime_metrics.config import set_config


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and env overrides out of CLI runs."""
    for var in (
        "RUNTIME_METRICS_CONFIG_FILE",
        "RUNTIME_METRICS_LOG_LEVEL",
        "RUNTIME_METRICS_STRUCTURED_LOGGING",
        "RUNTIME_METRICS_DOCS_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield
    set_config(None)
