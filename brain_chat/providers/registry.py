"""意图 → Brain 端点的路由表。

本模块把“用户意图”与“具体 HTTP 请求”解耦：上层只持有 Intent，
用哪个端点、什么方法、什么请求体由这里集中配置。"""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional

from brain_chat.domain.intents import Command, Intent, SemanticSearch, ThreadLookup


HttpMethod = Literal["GET", "POST"]

# status 指令没有专门端点，改用固定检索词走 /search
STATUS_QUERY = "project status current active"


@dataclass(frozen=True)
class EndpointRoute:
    """一次出站请求的描述。body 为 None 时不携带请求体。"""

    method: HttpMethod
    path: str
    body: Optional[Dict[str, Any]] = None


PRIORITY_ROUTE = EndpointRoute(method="GET", path="/priority")
HEALTH_ROUTE = EndpointRoute(method="GET", path="/health")

COMMAND_ROUTES: Mapping[str, EndpointRoute] = {
    "priority": PRIORITY_ROUTE,
    "health": HEALTH_ROUTE,
    "status": EndpointRoute(method="POST", path="/search", body={"query": STATUS_QUERY}),
}


def route_for(intent: Intent) -> EndpointRoute:
    """根据意图返回需要发出的请求。"""

    if isinstance(intent, Command):
        try:
            return COMMAND_ROUTES[intent.kind]
        except KeyError:
            raise KeyError(f"Unknown command: {intent.kind!r}") from None
    if isinstance(intent, ThreadLookup):
        return EndpointRoute(method="POST", path="/thread", body={"thread": intent.thread_id})
    if isinstance(intent, SemanticSearch):
        return EndpointRoute(
            method="POST",
            path="/search",
            body={"query": intent.text, "limit": intent.limit},
        )
    raise TypeError(f"Unsupported intent: {intent!r}")
