"""config のテスト"""

import pytest

from summary_bot.config import DEFAULT_COMMAND_PREFIX, Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in [
        "DISCORD_TOKEN", "YOUTUBE_API_KEY", "OPENAI_API_KEY", "OPENAI_MODEL",
        "COMMAND_PREFIX", "MAX_CORPUS_CHARS", "LOG_LEVEL",
    ]:
        monkeypatch.delenv(var, raising=False)
    # .env ファイルを読み込まない
    monkeypatch.setattr("summary_bot.config.load_dotenv", lambda: False)


def test_from_env_reads_credentials(monkeypatch) -> None:
    monkeypatch.setenv("DISCORD_TOKEN", "d")
    monkeypatch.setenv("YOUTUBE_API_KEY", "y")
    monkeypatch.setenv("OPENAI_API_KEY", "o")
    monkeypatch.setenv("MAX_CORPUS_CHARS", "500")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.discord_token == "d"
    assert config.youtube_api_key == "y"
    assert config.openai_api_key == "o"
    assert config.max_corpus_chars == 500
    assert config.log_level == "DEBUG"
    assert config.command_prefix == DEFAULT_COMMAND_PREFIX
    config.validate()


def test_validate_lists_missing_vars(monkeypatch) -> None:
    monkeypatch.setenv("DISCORD_TOKEN", "d")

    config = Config.from_env()

    assert config.missing_vars() == ["YOUTUBE_API_KEY", "OPENAI_API_KEY"]
    with pytest.raises(ValueError, match="YOUTUBE_API_KEY, OPENAI_API_KEY"):
        config.validate()


def test_invalid_integer_raises(monkeypatch) -> None:
    monkeypatch.setenv("MAX_CORPUS_CHARS", "lots")

    with pytest.raises(ValueError, match="MAX_CORPUS_CHARS"):
        Config.from_env()


def test_non_positive_limit_fails_validation() -> None:
    config = Config(discord_token="d", youtube_api_key="y", openai_api_key="o", max_corpus_chars=0)

    with pytest.raises(ValueError):
        config.validate()


def test_invalid_integer_error_has_no_chained_cause(monkeypatch) -> None:
    monkeypatch.setenv("MAX_CORPUS_CHARS", "lots")

    with pytest.raises(ValueError) as exc_info:
        Config.from_env()

    assert exc_info.value.__cause__ is None
    assert exc_info.value.__suppress_context__ is True
