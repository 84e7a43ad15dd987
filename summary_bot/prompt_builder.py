"""
プロンプトビルダーモジュール
"""
from utils.helpers import truncate_lines
from utils.logger import get_logger

logger = get_logger(__name__)

SUMMARY_INSTRUCTION = "Summarize these YouTube comments in a few bullet points:"


class PromptBuilder:
    """プロンプトビルダー"""

    def __init__(self, max_corpus_chars: int):
        self.max_corpus_chars = max_corpus_chars

    def build(self, comments: str) -> str:
        """
        要約用のプロンプトを構築する

        Args:
            comments: 改行区切りのコメント本文

        Returns:
            str: 構築されたプロンプト
        """
        corpus = truncate_lines(comments, self.max_corpus_chars)
        if len(corpus) < len(comments):
            logger.warning(
                f"Comment corpus truncated from {len(comments)} to {len(corpus)} characters"
            )

        return f"{SUMMARY_INSTRUCTION}\n\n{corpus}"
