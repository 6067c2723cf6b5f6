import dataclasses
from datetime import timezone

import pytest

from brain_chat.domain.conversation import QUICK_ACTIONS, ConversationEntry, ConversationState
from brain_chat.domain.intents import Command


def test_entry_is_immutable():
    entry = ConversationEntry(role="assistant", content="x", source_intent=Command("health"))
    assert entry.timestamp.tzinfo == timezone.utc
    assert entry.is_error is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.content = "y"  # type: ignore[misc]


def test_state_defaults():
    state = ConversationState()
    assert state.entries == []
    assert state.pending is False
    assert state.show_suggestions is True
    assert state.draft == ""


def test_quick_actions_catalogue():
    assert [a.title for a in QUICK_ACTIONS] == ["Weekly Summary", "Project Status", "Key Insights"]
    assert [a.query for a in QUICK_ACTIONS if a.auto_submit] == ["priority"]
