"""
データモデルモジュール
"""
from dataclasses import dataclass
from typing import Optional

FETCH_ERROR_MESSAGE = "Could not fetch comments. Check the video link or API key."
NO_COMMENTS_REASON = "No comments found for this video."
SUMMARY_FALLBACK_TEXT = "⚠️ Could not summarize comments."


@dataclass
class CommandInvocation:
    """チャットから受け取ったコマンド"""
    content: str
    author: str
    author_is_bot: bool = False


@dataclass
class Comment:
    """コメントデータクラス"""
    id: str
    author: str
    text: str
    like_count: int = 0
    published_at: Optional[str] = None


@dataclass
class SummaryResult:
    """要約結果（is_fallback=True の場合は固定の代替テキスト）"""
    text: str
    is_fallback: bool = False

    @classmethod
    def fallback(cls) -> "SummaryResult":
        return cls(text=SUMMARY_FALLBACK_TEXT, is_fallback=True)


class CommentFetchError(Exception):
    """コメント取得の失敗。メッセージはそのままユーザーに返す"""

    def __init__(self, reason: str = ""):
        super().__init__(FETCH_ERROR_MESSAGE)
        self.reason = reason


class NoCommentsError(CommentFetchError):
    """コメントが1件も無い"""

    def __init__(self):
        super().__init__(NO_COMMENTS_REASON)
