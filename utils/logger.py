"""
ロギングユーティリティモジュール
"""
import logging
import os
from typing import Dict, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# get_logger で設定済みのロガー
_loggers: Dict[str, logging.Logger] = {}


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    ロガーを取得する

    Args:
        name: ロガー名

    Returns:
        logging.Logger: 設定済みのロガー
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(_resolve_level(None))

        # コンソールハンドラ
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: str) -> None:
    """
    取得済みの全ロガーのレベルを変更する

    Args:
        level: ログレベル名（"DEBUG", "INFO" など）
    """
    resolved = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(resolved)
