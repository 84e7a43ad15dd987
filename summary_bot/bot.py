"""
Discordボットモジュール
"""
import discord

from .config import Config
from .dispatcher import CommandDispatcher
from .models import CommandInvocation
from utils.helpers import split_message
from utils.logger import get_logger

logger = get_logger(__name__)


def build_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    return intents


class SummaryBot(discord.Client):
    """コメント要約ボット"""

    def __init__(self, config: Config, dispatcher: CommandDispatcher):
        """
        初期化

        Args:
            config: 設定
            dispatcher: コマンドディスパッチャー
        """
        super().__init__(intents=build_intents())
        self.config = config
        self.dispatcher = dispatcher

    async def on_ready(self) -> None:
        logger.info(f"Logged in as {self.user}")

    async def on_message(self, message: discord.Message) -> None:
        """メッセージ受信時の処理"""
        invocation = CommandInvocation(
            content=message.content,
            author=str(message.author),
            author_is_bot=message.author.bot,
        )
        if not self.dispatcher.matches(invocation):
            return

        async def reply(text: str) -> None:
            for chunk in split_message(text):
                await message.reply(chunk)

        try:
            await self.dispatcher.handle(invocation, reply)
        except discord.HTTPException as e:
            logger.error(f"Error sending reply to {invocation.author}: {e}")

    def start_bot(self) -> None:
        """接続が閉じるまでボットを実行する"""
        self.run(self.config.discord_token, log_handler=None)
