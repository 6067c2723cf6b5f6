from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional

from .intents import Intent


Role = Literal["user", "assistant"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ConversationEntry:
    """对话记录中的一条消息，创建后不可修改，只追加不删除。"""

    role: Role
    content: str
    timestamp: datetime = field(default_factory=_utcnow)
    is_error: bool = False
    source_intent: Optional[Intent] = None


@dataclass
class ConversationState:
    """会话状态，仅由 ConversationAgent 写入。

    - entries: 按插入顺序（即显示顺序）排列的记录。
    - pending: True 表示有一次请求在途（Busy），拒绝新的提交。
    - show_suggestions: 首次提交后永久置为 False。
    - draft: 输入框缓冲区。
    """

    entries: List[ConversationEntry] = field(default_factory=list)
    pending: bool = False
    show_suggestions: bool = True
    draft: str = ""


@dataclass(frozen=True)
class QuickAction:
    id: int
    title: str
    description: str
    query: str
    auto_submit: bool = False


QUICK_ACTIONS: List[QuickAction] = [
    QuickAction(
        id=1,
        title="Weekly Summary",
        description="What did I work on this week?",
        query="Give me a summary of what I worked on this week",
    ),
    QuickAction(
        id=2,
        title="Project Status",
        description="Check on active projects",
        query="priority",
        auto_submit=True,
    ),
    QuickAction(
        id=3,
        title="Key Insights",
        description="Discover patterns and connections",
        query="What patterns or insights can you find in my recent work?",
    ),
]
