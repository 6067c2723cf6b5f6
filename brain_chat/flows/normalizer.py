"""把 Brain 的原始响应渲染为对话中展示的文本。"""

from __future__ import annotations

from typing import Any, Optional

from brain_chat.domain.exceptions import MalformedResponseError
from brain_chat.domain.intents import Intent
from brain_chat.domain.models import (
    EmptyResponse,
    PlainMessage,
    SearchResults,
    ThreadListing,
    parse_response,
)
from brain_chat.infrastructure.logging.logger import logger

NO_RESULTS = "No results found."
THREAD_DISPLAY_LIMIT = 5


def normalize(raw: Any, intent: Optional[Intent] = None) -> str:
    """Render a raw response as display text.

    The response shape decides the format, ``intent`` is only used for
    logging, so an endpoint that answers with an unexpected shape is still
    rendered correctly.
    """

    try:
        shape = parse_response(raw)
    except MalformedResponseError as exc:
        logger.warning(
            "normalizer.malformed_response",
            extra={"extra": {"code": exc.code, "intent": getattr(intent, "type", None)}},
        )
        return NO_RESULTS

    if isinstance(shape, SearchResults):
        content = f"Found {len(shape.hits)} relevant thoughts:\n\n"
        for idx, hit in enumerate(shape.hits, start=1):
            content += f"{idx}. {hit.content}\n\n"
        return content
    if isinstance(shape, ThreadListing):
        content = "Active threads:\n\n"
        for thread in shape.threads[:THREAD_DISPLAY_LIMIT]:
            content += f"#{thread.thread} - {thread.count} items ({thread.topic or 'No topic'})\n"
        return content
    if isinstance(shape, PlainMessage):
        return shape.message
    if isinstance(shape, EmptyResponse):
        return NO_RESULTS
    raise TypeError(f"Unhandled response shape: {shape!r}")
