import pytest

from api import state


class FakeProvider:
    name = "fake"

    def __init__(self, response_text: str):
        self._response_text = response_text
        self.calls = []

    def generate(self, *, system: str, user: str) -> str:
        self.calls.append({"system": system, "user": user})
        return self._response_text


class FailingProvider:
    name = "failing"

    def __init__(self, error: Exception):
        self._error = error
        self.calls = 0

    def generate(self, *, system: str, user: str) -> str:
        self.calls += 1
        raise self._error


@pytest.fixture
def fake_provider_factory():
    def _make(response_text: str):
        return FakeProvider(response_text)
    return _make


@pytest.fixture
def failing_provider_factory():
    def _make(error: Exception):
        return FailingProvider(error)
    return _make


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    monkeypatch.delenv("LLM_PROVIDER", raising=False)
    state.reset()
    yield
    state.reset()
