"""Brain API 集成层（请求分发器）。

该包下的模块负责：
- 定义客户端抽象接口 (base)。
- 维护意图到端点的路由表 (registry)。
- 提供基于 httpx 的具体实现 (brain_client)。
"""

from typing import Any, Optional

from brain_chat.config.settings import settings
from brain_chat.providers.base import BrainClient
from brain_chat.providers.brain_client import BrainApiClient


def create_client(cfg: Optional[Any] = None) -> BrainClient:
    """创建 Brain 客户端，默认取全局配置。"""

    return BrainApiClient(cfg or settings)
