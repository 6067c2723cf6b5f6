"""Brain API 客户端（请求分发器）。

本模块负责：

1. 接收分类后的 Intent，经 registry 得到端点、方法与请求体。
2. 通过 httpx.AsyncClient 发出恰好一次请求（不重试，超时交给传输层）。
3. 将网络错误、非 2xx 状态、非 JSON 响应统一包装为 TransportError 子类，
   原样抛给调用方，本层不吞异常。
"""

from typing import Any, Dict

import httpx

from brain_chat.config.settings import settings
from brain_chat.domain.exceptions import (
    ApiError,
    ConfigError,
    NetworkError,
    RateLimitError,
    ResponseDecodeError,
)
from brain_chat.domain.intents import Intent
from brain_chat.infrastructure.logging.logger import logger
from brain_chat.providers.registry import HEALTH_ROUTE, PRIORITY_ROUTE, EndpointRoute, route_for


class BrainApiClient:
    """Brain API 的 httpx 实现。"""

    name = "brain-api"

    def __init__(self, cfg=settings):
        # cfg 需要提供 brain_api_url 与 http_timeout
        base = getattr(cfg, "brain_api_url", None)
        if not base:
            raise ConfigError(code="MISSING_API_URL", message="BRAIN_API_URL not set")
        self._settings = cfg
        self._base_url = str(base).rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    async def dispatch(self, intent: Intent) -> Any:
        """按意图发出一次请求，返回解码后的 JSON。"""

        route = route_for(intent)
        logger.info(
            "client.dispatch",
            extra={"extra": {"intent": intent.type, "method": route.method, "path": route.path}},
        )
        return await self.request(route)

    async def fetch_priorities(self) -> Any:
        return await self.request(PRIORITY_ROUTE)

    async def fetch_health(self) -> Any:
        return await self.request(HEALTH_ROUTE)

    async def request(self, route: EndpointRoute) -> Any:
        url = f"{self._base_url}{route.path}"
        kwargs: Dict[str, Any] = {}
        if route.body is not None:
            kwargs["json"] = route.body
            kwargs["headers"] = {"Content-Type": "application/json"}
        try:
            async with httpx.AsyncClient(timeout=self._settings.http_timeout, trust_env=False) as client:
                resp = await client.request(route.method, url, **kwargs)
        except httpx.RequestError as e:
            # 网络错误：DNS 失败、连接超时等
            raise NetworkError(code="NETWORK_ERROR", message=str(e) or type(e).__name__, endpoint=route.path)
        if resp.status_code == 429:
            raise RateLimitError(
                code="RATE_LIMIT", message="Brain API rate limit", http_status=429, endpoint=route.path
            )
        if not 200 <= resp.status_code < 300:
            raise ApiError(
                code="API_ERROR", message=resp.text, http_status=resp.status_code, endpoint=route.path
            )
        return self._decode(resp, route)

    @staticmethod
    def _decode(resp: Any, route: EndpointRoute) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise ResponseDecodeError(code="DECODE_ERROR", message=str(e), endpoint=route.path)

