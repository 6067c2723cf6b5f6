"""会话状态机。

ConversationAgent 是唯一有状态的组件：持有对话记录、pending 标志与输入缓冲，
每次提交依次执行 classify → dispatch → normalize，并把结果追加到记录中。

状态只有两个：Idle（pending=False）与 Busy（pending=True）。Busy 时拒绝新的提交，
这是系统中唯一的准入控制。
"""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple
from uuid import uuid4
import logging
import time

from langgraph.graph.state import CompiledStateGraph

from brain_chat.domain.conversation import ConversationEntry, ConversationState, QuickAction
from brain_chat.domain.exceptions import BusinessError
from brain_chat.flows.graph import build_pipeline, run_pipeline
from brain_chat.infrastructure.logging.logger import logger
from brain_chat.providers.base import BrainClient


ERROR_MESSAGE = "Sorry, I encountered an error processing your request. Please try again."

AgentStateName = Literal["idle", "busy"]


@dataclass
class AgentConfig:
    agent_type: str = "brain-chat"
    error_message: str = ERROR_MESSAGE


class ConversationAgent:
    def __init__(
        self,
        client: BrainClient,
        config: Optional[AgentConfig] = None,
        pipeline: Optional[CompiledStateGraph] = None,
    ):
        self._client = client
        self._config = config or AgentConfig()
        self._pipeline = pipeline or build_pipeline(client)
        self._state = ConversationState()

    # ---- 只读视图 ----

    @property
    def transcript(self) -> Tuple[ConversationEntry, ...]:
        return tuple(self._state.entries)

    @property
    def pending(self) -> bool:
        return self._state.pending

    @property
    def state_name(self) -> AgentStateName:
        return "busy" if self._state.pending else "idle"

    @property
    def draft(self) -> str:
        return self._state.draft

    @property
    def suggestions_visible(self) -> bool:
        """首次提交前且记录为空时展示快捷操作。"""
        return self._state.show_suggestions and not self._state.entries

    # ---- 状态迁移 ----

    def set_draft(self, text: str) -> None:
        self._state.draft = text

    async def submit(self, text: Optional[str] = None) -> Optional[ConversationEntry]:
        """提交一条用户输入。

        Args:
            text: 用户输入；省略时提交输入缓冲区中的内容。

        Returns:
            本次追加的助手记录；输入为空或当前处于 Busy 时返回 None（不做任何修改）。
        """
        if text is None:
            text = self._state.draft
        if not text.strip() or self._state.pending:
            return None

        # 第一个挂起点之前完成所有同步状态修改，保证并发提交被拒绝
        self._state.pending = True
        self._state.show_suggestions = False
        self._state.draft = ""
        self._append(ConversationEntry(role="user", content=text))

        start_time = time.time()
        log_ctx: Dict[str, Any] = {
            "trace_id": f"tr-{uuid4().hex}",
            "agent_type": self._config.agent_type,
        }
        self._log(logging.INFO, "agent.submit.start", log_ctx, chars=len(text))
        try:
            intent, content = await run_pipeline(self._pipeline, text)
            entry = ConversationEntry(role="assistant", content=content, source_intent=intent)
            self._log(
                logging.INFO,
                "agent.submit.end",
                log_ctx,
                intent=intent.type,
                elapsed_ms=int((time.time() - start_time) * 1000),
            )
        except Exception as exc:
            error_fields: Dict[str, Any] = {"error": str(exc), "error_type": type(exc).__name__}
            if isinstance(exc, BusinessError):
                error_fields["code"] = exc.code
                error_fields["http_status"] = exc.http_status
            logger.error("agent.submit.failed", exc_info=True, extra={"extra": {**log_ctx, **error_fields}})
            entry = ConversationEntry(role="assistant", content=self._config.error_message, is_error=True)
        finally:
            self._state.pending = False
        self._append(entry)
        return entry

    async def apply_quick_action(self, action: QuickAction) -> Optional[ConversationEntry]:
        """把快捷操作的查询填入输入框；auto_submit 的操作直接提交。"""
        self._state.draft = action.query
        self._state.show_suggestions = False
        if action.auto_submit:
            return await self.submit()
        return None

    def _append(self, entry: ConversationEntry) -> None:
        self._state.entries.append(entry)

    @staticmethod
    def _log(level: int, message: str, log_ctx: Dict[str, Any], **fields: Any) -> None:
        payload = dict(log_ctx)
        payload.update(fields)
        logger.log(level, message, extra={"extra": payload})
