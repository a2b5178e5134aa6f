import pytest

from httpadapter.config import ConfigManager, TransportName
from httpadapter.exceptions import ConfigurationValidationError

ENV_VARS = [
    "HTTPADAPTER_TRANSPORT",
    "HTTPADAPTER_TIMEOUT",
    "HTTPADAPTER_PROTOCOL_VERSION",
    "HTTPADAPTER_MAX_REDIRECTS",
    "HTTPADAPTER_STRICT",
    "HTTPADAPTER_THROW_EXCEPTION",
    "HTTPADAPTER_LOG_LEVEL",
    "HTTPADAPTER_LOG_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the working directory out of the settings
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "config.toml"


@pytest.mark.unit
class TestConfigManager:
    def test_missing_file_gives_defaults(self, config_file):
        config = ConfigManager(config_file).load_config()

        assert config.transport.name == TransportName.REQUESTS
        assert config.redirect.max_redirects == 5

    def test_load_toml(self, config_file):
        config_file.write_text(
            '[transport]\nname = "httpx"\ntimeout = 10.0\n\n'
            "[redirect]\nmax_redirects = 3\nstrict = true\n"
        )

        config = ConfigManager(config_file).load_config()

        assert config.transport.name == TransportName.HTTPX
        assert config.transport.timeout == 10.0
        assert config.redirect.max_redirects == 3
        assert config.redirect.strict is True

    def test_config_is_cached(self, config_file):
        manager = ConfigManager(config_file)

        assert manager.load_config() is manager.load_config()

    def test_env_overrides_file(self, config_file, monkeypatch):
        config_file.write_text("[redirect]\nmax_redirects = 3\n")
        monkeypatch.setenv("HTTPADAPTER_MAX_REDIRECTS", "9")
        monkeypatch.setenv("HTTPADAPTER_THROW_EXCEPTION", "false")
        monkeypatch.setenv("HTTPADAPTER_TRANSPORT", "http_client")
        monkeypatch.setenv("HTTPADAPTER_LOG_LEVEL", "debug")

        config = ConfigManager(config_file).load_config()

        assert config.redirect.max_redirects == 9
        assert config.redirect.throw_exception is False
        assert config.transport.name == TransportName.HTTP_CLIENT
        assert config.logging.level.value == "DEBUG"

    def test_invalid_values(self, config_file):
        config_file.write_text("[redirect]\nmax_redirects = -1\n")

        with pytest.raises(ConfigurationValidationError) as exc_info:
            ConfigManager(config_file).load_config()

        assert "redirect.max_redirects" in exc_info.value.message

    def test_invalid_toml(self, config_file):
        config_file.write_text("[redirect\nmax_redirects = ")

        with pytest.raises(ConfigurationValidationError, match="Invalid TOML syntax"):
            ConfigManager(config_file).load_config()

    def test_save_and_reload(self, tmp_path):
        config_file = tmp_path / "nested" / "config.toml"
        manager = ConfigManager(config_file)
        config = manager.load_config().model_copy(deep=True)
        config.redirect.max_redirects = 7

        saved = manager.save_config(config)

        assert saved == config_file
        assert "max_redirects = 7" in config_file.read_text()
        assert ConfigManager(config_file).load_config().redirect.max_redirects == 7

    def test_logging_config(self, config_file):
        config_file.write_text('[logging]\nlevel = "WARNING"\nformat = "json"\n')

        logging_config = ConfigManager(config_file).logging_config()

        assert logging_config.level == "WARNING"
        assert logging_config.format_type == "json"
        assert logging_config.output == ["console"]
