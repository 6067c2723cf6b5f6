"""State definition for the query pipeline graph."""

from __future__ import annotations

from typing import Any, Optional, TypedDict

from brain_chat.domain.intents import Intent


class PipelineState(TypedDict, total=False):
    """State shared across classify / dispatch / normalize nodes."""

    text: str
    intent: Optional[Intent]
    raw: Any
    content: Optional[str]
