"""
YouTubeコメント取得モジュール
"""
import asyncio
from typing import Any, Dict, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .models import Comment, CommentFetchError, NoCommentsError
from utils.logger import get_logger

logger = get_logger(__name__)

COMMENT_PAGE_SIZE = 20


def parse_comment_thread(item: Dict[str, Any]) -> Comment:
    """
    commentThreads のアイテムからトップレベルコメントを取り出す

    Args:
        item: APIレスポンスのアイテム

    Returns:
        Comment: コメント
    """
    top = item["snippet"]["topLevelComment"]
    snippet = top["snippet"]
    return Comment(
        id=top.get("id", item.get("id", "")),
        author=snippet.get("authorDisplayName", ""),
        text=snippet["textDisplay"],
        like_count=snippet.get("likeCount", 0),
        published_at=snippet.get("publishedAt"),
    )


class CommentFetcher:
    """YouTubeコメント取得クラス"""

    def __init__(self, api_key: str, service: Optional[Any] = None):
        """
        初期化

        Args:
            api_key: YouTube Data API キー
            service: 生成済みの YouTube API クライアント（省略時はリクエストごとに build で生成）
        """
        self._api_key = api_key
        self._service = service

    def _get_service(self):
        # httplib2.Http はスレッド間で共有できないため呼び出しごとに生成する
        if self._service is not None:
            return self._service
        return build("youtube", "v3", developerKey=self._api_key, cache_discovery=False)

    def _request_threads(self, video_id: str) -> Dict[str, Any]:
        youtube = self._get_service()
        request = youtube.commentThreads().list(
            part="snippet",
            videoId=video_id,
            maxResults=COMMENT_PAGE_SIZE,
        )
        return request.execute()

    async def fetch_comments(self, video_id: str) -> List[Comment]:
        """
        トップレベルコメントをAPIの返却順で取得する

        Args:
            video_id: 動画ID

        Returns:
            List[Comment]: コメントのリスト

        Raises:
            CommentFetchError: 取得失敗、またはコメントが0件の場合
        """
        try:
            response = await asyncio.to_thread(self._request_threads, video_id)
            items = (response or {}).get("items") or []
            if not items:
                raise NoCommentsError()
            return [parse_comment_thread(item) for item in items]

        except CommentFetchError as e:
            logger.error(f"Error fetching comments for {video_id}: {e.reason}")
            raise
        except HttpError as e:
            detail = e.content.decode("utf-8", errors="replace") if isinstance(e.content, bytes) else e.content
            logger.error(f"Error fetching comments for {video_id}: HTTP {e.resp.status} {detail}")
            raise CommentFetchError(f"HTTP {e.resp.status}") from e
        except Exception as e:
            logger.error(f"Error fetching comments for {video_id}: {e!r}")
            raise CommentFetchError(str(e)) from e

    async def fetch_corpus(self, video_id: str) -> str:
        """
        コメント本文を1行1件で連結して返す

        Args:
            video_id: 動画ID

        Returns:
            str: 改行区切りのコメント本文
        """
        comments = await self.fetch_comments(video_id)
        logger.info(f"Fetched {len(comments)} comments for {video_id}")
        return "\n".join(comment.text for comment in comments)
