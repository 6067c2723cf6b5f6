"""Brain Chat 顶层包。

自然语言对话前端：把用户输入分类为意图，向 Brain 检索 API
发出对应请求，并把各端点不同结构的响应统一渲染到对话记录中。
"""

from brain_chat.agents.conversation_agent import ConversationAgent
from brain_chat.flows import classify, normalize

__all__ = ["ConversationAgent", "classify", "normalize"]
