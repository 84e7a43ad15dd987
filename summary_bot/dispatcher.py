"""
コマンドディスパッチャーモジュール
"""
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from .comment_fetcher import CommentFetcher
from .link_parser import extract_video_id
from .models import CommandInvocation, CommentFetchError
from .summarizer import Summarizer
from utils.logger import get_logger

logger = get_logger(__name__)

USAGE_MESSAGE = "⚠️ Please provide a YouTube URL."
INVALID_LINK_MESSAGE = "⚠️ Invalid YouTube link."
ACK_MESSAGE = "⏳ Fetching and summarizing comments..."
SUMMARY_HEADER = "📊 **Summary:**"

ReplyFunc = Callable[[str], Awaitable[Any]]


class DispatchState(Enum):
    """1回のコマンド処理の終了状態"""

    IGNORED = "ignored"
    REPLIED = "replied"
    ABORTED = "aborted"


def format_summary(summary: str) -> str:
    return f"{SUMMARY_HEADER}\n{summary}"


class CommandDispatcher:
    """コマンドディスパッチャー"""

    def __init__(self, fetcher: CommentFetcher, summarizer: Summarizer,
                 command_prefix: str = "!summarize"):
        """
        初期化

        Args:
            fetcher: コメント取得
            summarizer: 要約
            command_prefix: トリガーとなるコマンド
        """
        self.fetcher = fetcher
        self.summarizer = summarizer
        self.command_prefix = command_prefix

    def matches(self, invocation: CommandInvocation) -> bool:
        """処理対象のメッセージかどうか"""
        if invocation.author_is_bot:
            return False
        tokens = invocation.content.split()
        return bool(tokens) and tokens[0] == self.command_prefix

    def parse_url_arg(self, content: str) -> Optional[str]:
        """コマンドの後ろの最初の引数を返す"""
        tokens = content.split()
        return tokens[1] if len(tokens) > 1 else None

    async def handle(self, invocation: CommandInvocation, reply: ReplyFunc) -> DispatchState:
        """
        コマンドを処理する（引数検証 → コメント取得 → 要約 → 返信）

        Args:
            invocation: 受信したコマンド
            reply: 元メッセージへの返信関数

        Returns:
            DispatchState: 終了時の状態
        """
        if not self.matches(invocation):
            return DispatchState.IGNORED

        url = self.parse_url_arg(invocation.content)
        if not url:
            await reply(USAGE_MESSAGE)
            return DispatchState.ABORTED

        video_id = extract_video_id(url)
        if not video_id:
            await reply(INVALID_LINK_MESSAGE)
            return DispatchState.ABORTED

        logger.info(f"Summarize requested by {invocation.author}: {video_id}")
        await reply(ACK_MESSAGE)

        try:
            comments = await self.fetcher.fetch_corpus(video_id)
        except CommentFetchError as e:
            logger.info(f"Aborted summarize for {video_id}: comments unavailable")
            await reply(f"❌ {e}")
            return DispatchState.ABORTED

        result = await self.summarizer.summarize(comments)
        if result.is_fallback:
            logger.warning(f"Replying with fallback summary for {video_id}")

        await reply(format_summary(result.text))
        logger.info(f"Summary sent for {video_id}")
        return DispatchState.REPLIED
