"""
コメント要約ボット起動スクリプト
"""
import sys

from summary_bot.bot import SummaryBot
from summary_bot.comment_fetcher import CommentFetcher
from summary_bot.config import Config
from summary_bot.dispatcher import CommandDispatcher
from summary_bot.prompt_builder import PromptBuilder
from summary_bot.summarizer import Summarizer
from utils.logger import get_logger, set_log_level


def create_bot(config: Config) -> SummaryBot:
    """設定からボットを組み立てる"""
    fetcher = CommentFetcher(config.youtube_api_key)
    summarizer = Summarizer(
        api_key=config.openai_api_key,
        model=config.openai_model,
        prompt_builder=PromptBuilder(config.max_corpus_chars),
    )
    dispatcher = CommandDispatcher(fetcher, summarizer, command_prefix=config.command_prefix)
    return SummaryBot(config, dispatcher)


def main():
    """メイン関数"""
    config = Config.from_env()
    logger = get_logger("summary_bot")
    # discord.py のログも同じ形式で出力する
    get_logger("discord")
    set_log_level(config.log_level)

    try:
        config.validate()
    except ValueError as e:
        logger.error(f"設定エラー: {e}")
        sys.exit(1)

    bot = create_bot(config)
    logger.info(f"ボットを起動します (command: {config.command_prefix})")
    bot.start_bot()


if __name__ == "__main__":
    main()
