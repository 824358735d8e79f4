import pytest
from prometheus_client import REGISTRY

from extraction.pattern_extractor import PatternExtractor
from extraction.remote_extractor import RemoteExtractor
from extraction.task_extractor import TaskExtractor
from llm.errors import MalformedResponse, NetworkFailure
from llm.llm_client import LLMClient

SENTENCE = "Meeting in AB1-324 at 9pm"


def _with_remote(provider) -> TaskExtractor:
    return TaskExtractor(remote=RemoteExtractor(LLMClient(provider=provider)))


def _fallbacks(reason: str) -> float:
    return REGISTRY.get_sample_value("smart_todo_fallbacks_total", {"reason": reason}) or 0.0


def test_uc3_local_only_when_no_remote():
    extractor = TaskExtractor()
    assert extractor.strategy_for() == "local"
    assert extractor.process(SENTENCE) == PatternExtractor().extract(SENTENCE)


def test_uc3_remote_result_is_used(fake_provider_factory):
    provider = fake_provider_factory(
        '{"title":"Python deps meeting","time":"9pm","venue":"AB1-324","category":"work"}'
    )
    extractor = _with_remote(provider)
    r = extractor.process(SENTENCE)
    assert extractor.strategy_for() == "remote"
    assert r.title == "Python deps meeting"
    assert len(provider.calls) == 1


@pytest.mark.parametrize(
    "error",
    [NetworkFailure("down"), MalformedResponse("bad"), RuntimeError("boom")],
)
def test_uc3_fallback_law_on_provider_failure(failing_provider_factory, error):
    provider = failing_provider_factory(error)
    r = _with_remote(provider).process(SENTENCE)
    assert r == PatternExtractor().extract(SENTENCE)
    assert provider.calls == 1


def test_uc3_fallback_law_on_garbage_payload(fake_provider_factory):
    r = _with_remote(fake_provider_factory("INVALID OUTPUT")).process(SENTENCE)
    assert r == PatternExtractor().extract(SENTENCE)


def test_uc3_out_of_set_category_falls_back(fake_provider_factory):
    provider = fake_provider_factory(
        '{"title":"Fix the server","time":null,"venue":null,"category":"urgent"}'
    )
    before = _fallbacks("InvalidCategory")

    r = _with_remote(provider).process("Fix the server code tonight")

    assert r.category != "urgent"
    assert r == PatternExtractor().extract("Fix the server code tonight")
    assert _fallbacks("InvalidCategory") == before + 1


def test_uc3_remote_disabled_per_call(fake_provider_factory):
    provider = fake_provider_factory('{"title":"x","time":null,"venue":null,"category":"work"}')
    extractor = _with_remote(provider)
    assert extractor.strategy_for(remote_enabled=False) == "local"
    r = extractor.process("Buy groceries at the store", remote_enabled=False)
    assert provider.calls == []
    assert r.venue == "the store"


def test_uc3_remote_requested_but_not_configured():
    r = TaskExtractor().process("Buy groceries at the store", remote_enabled=True)
    assert r == PatternExtractor().extract("Buy groceries at the store")


def test_uc3_empty_input_never_fails(failing_provider_factory):
    r = _with_remote(failing_provider_factory(NetworkFailure("down"))).process("")
    assert r.title == "New Task"
    assert r.category == "chores"
