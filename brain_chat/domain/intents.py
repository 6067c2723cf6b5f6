"""用户意图（Intent）模型。

一条用户输入恰好被分类为以下三种意图之一：

- Command: 固定指令（priority / health / status）。
- ThreadLookup: 按 thread 编号查询。
- SemanticSearch: 语义检索，兜底意图。

意图决定向哪个 Brain 端点发什么请求，见 providers.registry。
"""

from dataclasses import dataclass
from typing import Literal, Union


CommandKind = Literal["priority", "health", "status"]
IntentType = Literal["command", "thread", "search"]

DEFAULT_SEARCH_LIMIT = 10


@dataclass(frozen=True)
class Command:
    kind: CommandKind

    @property
    def type(self) -> IntentType:
        return "command"


@dataclass(frozen=True)
class ThreadLookup:
    thread_id: str

    @property
    def type(self) -> IntentType:
        return "thread"


@dataclass(frozen=True)
class SemanticSearch:
    """语义检索。text 保留用户原始输入（仅去掉首尾空白）。"""

    text: str
    limit: int = DEFAULT_SEARCH_LIMIT

    @property
    def type(self) -> IntentType:
        return "search"


Intent = Union[Command, ThreadLookup, SemanticSearch]
