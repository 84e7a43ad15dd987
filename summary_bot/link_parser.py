"""
YouTubeリンク解析モジュール
"""
from typing import Optional
from urllib.parse import parse_qs, urlparse

SHORT_LINK_HOST = "youtu.be"
PATH_ID_PREFIXES = ("shorts", "embed", "live")


def extract_video_id(url: str) -> Optional[str]:
    """
    URLから動画IDを取り出す

    Args:
        url: YouTubeのURL（短縮形式・通常形式）

    Returns:
        Optional[str]: 動画ID。解析できない場合はNone
    """
    if not isinstance(url, str):
        return None

    try:
        parsed = urlparse(url.strip())
        host = (parsed.hostname or "").lower()
    except ValueError:
        return None

    if not parsed.scheme or not host:
        return None

    segments = [s for s in parsed.path.split("/") if s]

    # youtu.be/{id}
    if SHORT_LINK_HOST in host:
        return segments[0] if segments else None

    # watch?v={id}
    video_ids = parse_qs(parsed.query).get("v")
    if video_ids and video_ids[0]:
        return video_ids[0]

    # youtube.com/shorts/{id} など
    is_youtube_host = host == "youtube.com" or host.endswith(".youtube.com")
    if is_youtube_host and len(segments) >= 2 and segments[0] in PATH_ID_PREFIXES:
        return segments[1]

    return None
