"""后台计数器刷新。

页脚展示的活跃 thread 数、文档数、查询数只用于装饰，
由独立的周期任务写入 DisplayCounters，与会话记录完全隔离。
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from brain_chat.config.settings import settings
from brain_chat.domain.exceptions import BusinessError
from brain_chat.domain.models import ThreadSummary, parse_health, parse_thread_list
from brain_chat.flows.normalizer import THREAD_DISPLAY_LIMIT
from brain_chat.infrastructure.logging.logger import logger
from brain_chat.providers.base import BrainClient


@dataclass
class DisplayCounters:
    total_documents: int = 0
    total_queries: int = 0
    active_threads: List[ThreadSummary] = field(default_factory=list)

    @property
    def active_thread_count(self) -> int:
        return len(self.active_threads)


class StatsRefresher:
    """周期性拉取 /priority 与 /health，刷新 DisplayCounters。

    单次刷新失败只记录日志并保留旧值，不影响下一轮。
    """

    def __init__(
        self,
        client: BrainClient,
        interval: Optional[float] = None,
        counters: Optional[DisplayCounters] = None,
    ):
        self._client = client
        self._interval = interval if interval is not None else settings.stats_refresh_interval
        self.counters = counters or DisplayCounters()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh_priorities(self) -> None:
        try:
            data = await self._client.fetch_priorities()
            if isinstance(data, dict) and data.get("allThreads") is not None:
                self.counters.active_threads = parse_thread_list(data, limit=THREAD_DISPLAY_LIMIT)
        except Exception as exc:
            logger.warning(
                "stats.load_priorities_failed",
                exc_info=True,
                extra={"extra": _error_fields(exc)},
            )

    async def refresh_stats(self) -> None:
        try:
            stats = parse_health(await self._client.fetch_health())
        except Exception as exc:
            logger.warning(
                "stats.load_stats_failed",
                exc_info=True,
                extra={"extra": _error_fields(exc)},
            )
            return
        self.counters.total_documents = stats.total_documents
        self.counters.total_queries = stats.total_queries

    async def refresh_once(self) -> DisplayCounters:
        await self.refresh_priorities()
        await self.refresh_stats()
        return self.counters

    async def run_forever(self) -> None:
        while True:
            await self.refresh_once()
            await asyncio.sleep(self._interval)

    def start(self) -> asyncio.Task:
        """在当前事件循环中启动周期任务（重复调用返回同一任务）。"""
        if not self.running:
            self._task = asyncio.get_running_loop().create_task(self.run_forever())
        return self._task

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None


def _error_fields(exc: Exception) -> Dict[str, Any]:
    fields: Dict[str, Any] = {"error": str(exc), "error_type": type(exc).__name__}
    if isinstance(exc, BusinessError):
        fields["code"] = exc.code
    return fields
