"""对外 API 服务模块。

提供简化的函数接口供上层应用（GUI、脚本）调用。
"""

from typing import Optional, Dict, Any

from brain_chat.agents.conversation_agent import ConversationAgent
from brain_chat.agents.stats_refresher import StatsRefresher
from brain_chat.domain.conversation import ConversationEntry
from brain_chat.infrastructure.logging.logger import logger
from brain_chat.providers import create_client
from brain_chat.providers.base import BrainClient


_client: Optional[BrainClient] = None
_agent: Optional[ConversationAgent] = None
_refresher: Optional[StatsRefresher] = None


def get_default_client() -> BrainClient:
    global _client
    if _client is None:
        _client = create_client()
    return _client


def get_default_agent() -> ConversationAgent:
    """获取默认的会话状态机实例（单例）。"""
    global _agent
    if _agent is None:
        _agent = ConversationAgent(client=get_default_client())
    return _agent


def get_default_refresher() -> StatsRefresher:
    global _refresher
    if _refresher is None:
        _refresher = StatsRefresher(client=get_default_client())
    return _refresher


def reset_default_agent() -> None:
    """丢弃当前会话（记录仅在内存中，不持久化）。"""
    global _client, _agent, _refresher
    _client = None
    _agent = None
    _refresher = None


async def ask(text: str) -> Optional[Dict[str, Any]]:
    """提交一条用户输入。

    Args:
        text: 用户输入内容

    Returns:
        助手消息字典；输入为空或上一条请求仍在进行时返回 None
    """
    try:
        entry = await get_default_agent().submit(text)
    except Exception as e:
        logger.error(f"Ask failed: {e}", extra={"extra": {"error": str(e)}})
        raise
    if entry is None:
        return None
    return entry_to_dict(entry)


def get_transcript() -> list[Dict[str, Any]]:
    """按显示顺序返回对话记录。"""
    return [entry_to_dict(e) for e in get_default_agent().transcript]


def get_display_counters() -> Dict[str, Any]:
    counters = get_default_refresher().counters
    return {
        "total_documents": counters.total_documents,
        "total_queries": counters.total_queries,
        "active_threads": counters.active_thread_count,
    }


def entry_to_dict(entry: ConversationEntry) -> Dict[str, Any]:
    intent = entry.source_intent
    return {
        "role": entry.role,
        "content": entry.content,
        "timestamp": entry.timestamp.isoformat(),
        "is_error": entry.is_error,
        "type": intent.type if intent is not None else None,
    }
