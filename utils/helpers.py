"""
ヘルパー関数モジュール
"""
from typing import List

DISCORD_MESSAGE_LIMIT = 2000


def truncate_lines(text: str, max_chars: int) -> str:
    """
    行単位でテキストを切り詰める

    先頭の行から順に、合計が max_chars を超えない範囲で残す。
    先頭行だけで上限を超える場合はその行を途中で切る。

    Args:
        text: 改行区切りのテキスト
        max_chars: 最大文字数

    Returns:
        str: 切り詰めたテキスト
    """
    if len(text) <= max_chars:
        return text

    kept: List[str] = []
    total = 0
    for line in text.split("\n"):
        added = len(line) + (1 if kept else 0)
        if total + added > max_chars:
            break
        kept.append(line)
        total += added

    if not kept:
        return text[:max_chars]
    return "\n".join(kept)


def split_message(text: str, limit: int = DISCORD_MESSAGE_LIMIT) -> List[str]:
    """
    メッセージを文字数上限ごとに分割する

    なるべく改行位置で区切り、1行が上限を超える場合のみ行の途中で区切る。
    Discordは空メッセージを送れないため、区切り位置に当たる空行は捨てる。
    区切り位置以外の空行はそのまま残す。

    Args:
        text: 送信するテキスト
        limit: 1メッセージあたりの最大文字数

    Returns:
        List[str]: 分割されたメッセージ
    """
    if len(text) <= limit:
        return [text]

    chunks: List[str] = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]

        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate

    if current:
        chunks.append(current)
    return chunks
