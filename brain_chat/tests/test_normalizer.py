from brain_chat.domain.intents import Command, SemanticSearch, ThreadLookup
from brain_chat.flows.normalizer import NO_RESULTS, normalize


def test_search_results_numbered_list():
    raw = {"results": [{"content": "a"}, {"content": "b"}]}
    assert normalize(raw, SemanticSearch("x")) == "Found 2 relevant thoughts:\n\n1. a\n\n2. b\n\n"


def test_thread_listing_default_topic():
    raw = {"allThreads": [{"thread": "x", "count": 3}]}
    content = normalize(raw, Command("priority"))
    assert content.startswith("Active threads:\n\n")
    assert "#x - 3 items (No topic)" in content


def test_thread_listing_capped_at_five():
    raw = {"allThreads": [{"thread": str(i), "count": i, "topic": "t"} for i in range(8)]}
    lines = [line for line in normalize(raw, Command("priority")).splitlines() if line.startswith("#")]
    assert lines == [f"#{i} - {i} items (t)" for i in range(5)]


def test_empty_thread_listing_still_listing():
    assert normalize({"allThreads": []}, Command("priority")) == "Active threads:\n\n"


def test_message_verbatim():
    assert normalize({"message": "Thread 7 not found"}, ThreadLookup("7")) == "Thread 7 not found"


def test_shape_not_intent_drives_format():
    # /thread 返回了 results，依然渲染为检索列表
    content = normalize({"results": [{"content": "hit"}], "message": "ignored"}, ThreadLookup("7"))
    assert content.startswith("Found 1 relevant thoughts:")


def test_empty_results_fall_through():
    assert normalize({"results": [], "message": "nothing here"}, SemanticSearch("x")) == "nothing here"
    assert normalize({"results": []}, SemanticSearch("x")) == NO_RESULTS


def test_unrecognised_shapes():
    assert normalize({}, Command("health")) == "No results found."
    assert normalize({"totalDocuments": 3}, Command("health")) == NO_RESULTS
    assert normalize(None, None) == NO_RESULTS
    assert normalize(["a"], None) == NO_RESULTS


def test_malformed_results_render_fallback():
    assert normalize({"results": "oops"}, SemanticSearch("x")) == NO_RESULTS
    assert normalize({"allThreads": {"thread": "x"}}, Command("priority")) == NO_RESULTS
    assert normalize({"results": ["plain string"]}, SemanticSearch("x")) == NO_RESULTS


def test_non_list_results_fall_through_to_message():
    raw = {"results": {}, "message": "Thread 7 has no entries"}
    assert normalize(raw, ThreadLookup("7")) == "Thread 7 has no entries"


def test_non_list_results_fall_through_to_threads():
    raw = {"results": "n/a", "allThreads": [{"thread": "p", "count": 1}]}
    assert normalize(raw, Command("priority")) == "Active threads:\n\n#p - 1 items (No topic)\n"


def test_numeric_string_count():
    raw = {"allThreads": [{"thread": "p", "count": "3", "topic": "launch"}]}
    assert "#p - 3 items (launch)" in normalize(raw, Command("priority"))
