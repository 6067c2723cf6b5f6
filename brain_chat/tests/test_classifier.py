import pytest

from brain_chat.domain.exceptions import ClassificationError
from brain_chat.domain.intents import Command, SemanticSearch, ThreadLookup
from brain_chat.flows.classifier import classify


@pytest.mark.parametrize("text", ["priority", "Priorities", "  PRIORITY  "])
def test_priority_command(text):
    assert classify(text) == Command("priority")


@pytest.mark.parametrize("text", ["status", "Status", "what is the Project Status today"])
def test_status_command(text):
    assert classify(text) == Command("status")


@pytest.mark.parametrize("text", ["health", "System Health"])
def test_health_command(text):
    assert classify(text) == Command("health")


def test_health_requires_exact_match():
    assert classify("health of my garden") == SemanticSearch("health of my garden", 10)


def test_command_precedence():
    # "project status" 优先于 thread:
    assert classify("project status thread:abc") == Command("status")


def test_thread_lookup():
    assert classify("thread:abc123 please") == ThreadLookup("abc123")


def test_thread_lookup_keeps_token_case_and_skips_space():
    assert classify("Show THREAD: AbC-9") == ThreadLookup("AbC-9")


def test_bare_thread_marker_falls_through():
    intent = classify("thread:")
    assert intent == SemanticSearch("thread:", 10)


def test_default_semantic_search():
    intent = classify("what did I ship")
    assert intent == SemanticSearch("what did I ship", 10)
    assert intent.type == "search"


def test_search_text_is_trimmed_input():
    assert classify("  What Did I Ship  \n").text == "What Did I Ship"


def test_classification_is_total():
    for text in ["", "   ", "?", "status?", "priority list", "thread:\t", "健康"]:
        intent = classify(text)
        assert intent.type in {"command", "thread", "search"}


def test_non_string_input():
    with pytest.raises(ClassificationError):
        classify(None)  # type: ignore[arg-type]
