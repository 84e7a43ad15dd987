"""
要約モジュール
"""
from typing import Optional

from openai import AsyncOpenAI

from .models import SummaryResult
from .prompt_builder import PromptBuilder
from utils.logger import get_logger

logger = get_logger(__name__)


class Summarizer:
    """コメント要約クラス"""

    def __init__(self, api_key: str, model: str, prompt_builder: PromptBuilder,
                 client: Optional[AsyncOpenAI] = None):
        """初期化"""
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.model = model
        self.prompt_builder = prompt_builder

    async def summarize(self, comments: str) -> SummaryResult:
        """
        コメントを要約する

        失敗しても例外は送出せず、固定の代替テキストを返す。

        Args:
            comments: 改行区切りのコメント本文

        Returns:
            SummaryResult: 要約結果
        """
        try:
            prompt = self.prompt_builder.build(comments)
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "user", "content": prompt}
                ],
            )

            text = response.choices[0].message.content
            if not text:
                logger.error("Error summarizing: empty response from model")
                return SummaryResult.fallback()

            return SummaryResult(text=text)

        except Exception as e:
            logger.error(f"Error summarizing: {e}")
            return SummaryResult.fallback()
