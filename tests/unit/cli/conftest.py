import pytest

from httpadapter.logging import logging_manager

ENV_VARS = [
    "HTTPADAPTER_TRANSPORT",
    "HTTPADAPTER_TIMEOUT",
    "HTTPADAPTER_MAX_REDIRECTS",
    "HTTPADAPTER_STRICT",
    "HTTPADAPTER_THROW_EXCEPTION",
    "HTTPADAPTER_LOG_LEVEL",
    "HTTPADAPTER_LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch, tmp_path):
    """Keep environment overrides and CLI-installed handlers out of other tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logging_manager.reset()


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.toml"
