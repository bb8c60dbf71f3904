import logging

import pytest

from translate_json.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_SOURCE_LANG,
    DEFAULT_TIMEOUT,
    load_settings,
    setup_logging,
)
from translate_json.errors import ConfigError

ENV_VARS = (
    "TRANSLATION_EMAIL",
    "TRANSLATION_ENDPOINT",
    "TRANSLATION_SOURCE_LANG",
    "TRANSLATION_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(tmp_path):
    settings = load_settings(tmp_path / "missing.env")
    assert settings.email == ""
    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.source_lang == DEFAULT_SOURCE_LANG
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.log_level == "INFO"


def test_reads_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "TRANSLATION_EMAIL=dev@example.test\n"
        "TRANSLATION_SOURCE_LANG=cs\n"
        "TRANSLATION_TIMEOUT=12\n"
        "LOG_LEVEL=debug\n",
        encoding="utf-8",
    )
    # load_dotenv writes into os.environ; register the keys so monkeypatch restores them.
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    settings = load_settings(env_file)
    assert settings.email == "dev@example.test"
    assert settings.source_lang == "cs"
    assert settings.timeout == 12.0
    assert settings.log_level == "DEBUG"


def test_process_environment_wins_over_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("TRANSLATION_EMAIL=file@example.test\n", encoding="utf-8")
    monkeypatch.setenv("TRANSLATION_EMAIL", "shell@example.test")
    assert load_settings(env_file).email == "shell@example.test"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_timeout(monkeypatch, raw):
    monkeypatch.setenv("TRANSLATION_TIMEOUT", raw)
    with pytest.raises(ConfigError):
        load_settings()


def test_setup_logging_quiets_http_libraries():
    setup_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.WARNING
    setup_logging("not-a-level")
    assert logging.getLogger().level == logging.INFO
