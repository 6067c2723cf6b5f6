"""Brain 客户端抽象接口。

上层 ConversationAgent 与 StatsRefresher 不直接依赖 httpx，而是依赖此协议，
测试中可以用内存中的假客户端替换。
"""

from typing import Any, Protocol

from brain_chat.domain.intents import Intent


class BrainClient(Protocol):
    """Brain API 客户端协议。

    实现者需要提供：
    - name: 客户端名称，用于日志。
    - dispatch(intent): 按意图发出且仅发出一次请求，返回解码后的 JSON。
    - fetch_priorities / fetch_health: 后台计数器刷新使用的只读请求。
    """

    name: str

    async def dispatch(self, intent: Intent) -> Any:
        ...

    async def fetch_priorities(self) -> Any:
        ...

    async def fetch_health(self) -> Any:
        ...
