"""Brain API 响应的类型化视图。

Brain 各端点返回的 JSON 结构不同：

- /search、/thread: {"results": [{"content": ..., "score": ...}]}
- /priority: {"allThreads": [{"thread": ..., "count": ..., "topic": ...}]}
- /thread（无结果时）: {"message": ...}
- /health: {"totalDocuments": ..., "totalQueries": ...}

parse_response 按固定优先级识别结构，返回唯一的 ResponseShape 变体；
格式化由结构而不是由意图决定，因此任一端点的实际响应都能被正确渲染。
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from brain_chat.domain.exceptions import MalformedResponseError


@dataclass(frozen=True)
class SearchHit:
    content: str
    score: Optional[float] = None


@dataclass(frozen=True)
class ThreadSummary:
    thread: str
    count: int = 0
    topic: Optional[str] = None


@dataclass(frozen=True)
class HealthStats:
    total_documents: int = 0
    total_queries: int = 0


@dataclass(frozen=True)
class SearchResults:
    hits: List[SearchHit]


@dataclass(frozen=True)
class ThreadListing:
    threads: List[ThreadSummary] = field(default_factory=list)


@dataclass(frozen=True)
class PlainMessage:
    message: str


@dataclass(frozen=True)
class EmptyResponse:
    pass


ResponseShape = Union[SearchResults, ThreadListing, PlainMessage, EmptyResponse]


def parse_response(raw: Any) -> ResponseShape:
    """按 results > allThreads > message > 空 的顺序识别响应结构。

    results / allThreads 不是数组时视为该分支不适用，继续判断后续分支。

    Raises:
        MalformedResponseError: 列表中的条目不是对象。
    """

    if not isinstance(raw, dict):
        return EmptyResponse()

    results = raw.get("results")
    if isinstance(results, list) and results:
        return SearchResults(hits=[_parse_hit(item) for item in results])

    if isinstance(raw.get("allThreads"), list):
        return ThreadListing(threads=parse_thread_list(raw))

    message = raw.get("message")
    if message:
        return PlainMessage(message=str(message))

    return EmptyResponse()


def parse_thread_list(raw: Any, limit: Optional[int] = None) -> List[ThreadSummary]:
    """解析 allThreads 列表；limit 给定时只保留前 limit 项。"""

    if not isinstance(raw, dict) or raw.get("allThreads") is None:
        return []
    threads = raw["allThreads"]
    if not isinstance(threads, list):
        raise MalformedResponseError(code="MALFORMED_THREADS", message="'allThreads' is not a list")
    if limit is not None:
        threads = threads[:limit]
    return [_parse_thread(item) for item in threads]


def parse_health(raw: Any) -> HealthStats:
    if not isinstance(raw, dict):
        return HealthStats()
    return HealthStats(
        total_documents=_as_int(raw.get("totalDocuments")),
        total_queries=_as_int(raw.get("totalQueries")),
    )


def _parse_hit(item: Any) -> SearchHit:
    if not isinstance(item, dict):
        raise MalformedResponseError(code="MALFORMED_RESULT_ITEM", message="result item is not an object")
    content = item.get("content")
    score = item.get("score")
    return SearchHit(
        content="" if content is None else str(content),
        score=float(score) if isinstance(score, (int, float)) else None,
    )


def _parse_thread(item: Any) -> ThreadSummary:
    if not isinstance(item, dict):
        raise MalformedResponseError(code="MALFORMED_THREAD_ITEM", message="thread item is not an object")
    topic = item.get("topic")
    return ThreadSummary(
        thread=str(item.get("thread", "")),
        count=_as_int(item.get("count")),
        topic=str(topic) if topic else None,
    )


def _as_int(value: Any) -> int:
    # 缺失、null、非数字统一视为 0；"3" 这类数字字符串按数字处理
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdecimal():
            return int(text)
    return 0
