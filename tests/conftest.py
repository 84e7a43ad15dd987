"""pytest設定とテスト用フェイク"""

import logging
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# リポジトリのルートを PYTHONPATH に追加
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))


def make_thread_item(text: str, author: str = "viewer", comment_id: str = "c1") -> dict:
    """commentThreads の1アイテムを組み立てる"""
    return {
        "id": f"thread-{comment_id}",
        "snippet": {
            "topLevelComment": {
                "id": comment_id,
                "snippet": {
                    "authorDisplayName": author,
                    "textDisplay": text,
                    "likeCount": 0,
                    "publishedAt": "2024-01-01T00:00:00Z",
                },
            },
        },
    }


class FakeRequest:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error

    def execute(self):
        if self._error is not None:
            raise self._error
        return self._response


class FakeCommentThreads:
    def __init__(self, service):
        self._service = service

    def list(self, **kwargs):
        self._service.calls.append(kwargs)
        return FakeRequest(self._service.response, self._service.error)


class FakeYouTubeService:
    """googleapiclient の YouTube リソースのフェイク"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def commentThreads(self):
        return FakeCommentThreads(self)


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAIClient:
    """AsyncOpenAI のフェイク"""

    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)


class ReplyRecorder:
    """返信内容を記録する"""

    def __init__(self):
        self.messages = []

    async def __call__(self, text: str) -> None:
        self.messages.append(text)


@pytest.fixture
def reply() -> ReplyRecorder:
    return ReplyRecorder()


@pytest.fixture
def capture_logs(caplog):
    """propagate=False のロガーも caplog で受け取る"""

    def attach(name: str):
        logger = logging.getLogger(name)
        logger.addHandler(caplog.handler)
        attached.append(logger)
        return caplog

    attached = []
    yield attach
    for logger in attached:
        logger.removeHandler(caplog.handler)
