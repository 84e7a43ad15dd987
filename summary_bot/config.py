"""
設定管理モジュール
"""
import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

DEFAULT_COMMAND_PREFIX = "!summarize"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_MAX_CORPUS_CHARS = 12000


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    """設定管理クラス

    起動時に一度だけ生成し、必要なコンポーネントへ明示的に渡す。
    """

    # API Keys
    discord_token: str = ""
    youtube_api_key: str = ""
    openai_api_key: str = ""

    # Bot Settings
    command_prefix: str = DEFAULT_COMMAND_PREFIX
    openai_model: str = DEFAULT_OPENAI_MODEL
    max_corpus_chars: int = DEFAULT_MAX_CORPUS_CHARS
    log_level: str = "INFO"

    REQUIRED_VARS = {
        "DISCORD_TOKEN": "discord_token",
        "YOUTUBE_API_KEY": "youtube_api_key",
        "OPENAI_API_KEY": "openai_api_key",
    }

    @classmethod
    def from_env(cls) -> "Config":
        """
        環境変数から設定を読み込む

        Returns:
            Config: 設定オブジェクト
        """
        # 環境変数の読み込み
        load_dotenv()

        return cls(
            discord_token=os.getenv("DISCORD_TOKEN", ""),
            youtube_api_key=os.getenv("YOUTUBE_API_KEY", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            command_prefix=os.getenv("COMMAND_PREFIX") or DEFAULT_COMMAND_PREFIX,
            openai_model=os.getenv("OPENAI_MODEL") or DEFAULT_OPENAI_MODEL,
            max_corpus_chars=_int_env("MAX_CORPUS_CHARS", DEFAULT_MAX_CORPUS_CHARS),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )

    def missing_vars(self) -> List[str]:
        """未設定の必須環境変数名を返す"""
        return [var for var, attr in self.REQUIRED_VARS.items() if not getattr(self, attr)]

    def validate(self) -> None:
        """設定の検証"""
        missing_vars = self.missing_vars()
        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

        if self.max_corpus_chars <= 0:
            raise ValueError("MAX_CORPUS_CHARS must be a positive integer")
