import json
import logging
import re
from typing import Any

from llm.errors import MalformedResponse
from llm.providers.base import LLMProvider

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^\s*```[a-zA-Z]*\s*\n?|\n?\s*```\s*$")


def strip_fences(text: str) -> str:
    """Remove a markdown code fence the model may wrap around its payload."""
    return _FENCE_RE.sub("", text).strip()


class LLMClient:
    """Thin wrapper around one LLMProvider.

    Sends exactly one request per call and decodes the text payload as a
    JSON object. Provider errors (NetworkFailure, MalformedResponse) propagate.
    """

    def __init__(self, provider: LLMProvider):
        self.provider = provider

    @property
    def provider_name(self) -> str:
        return getattr(self.provider, "name", type(self.provider).__name__)

    def complete(self, *, system: str, user: str) -> str:
        text = self.provider.generate(system=system, user=user)
        if not isinstance(text, str):
            raise MalformedResponse(f"{self.provider_name} returned no text payload")
        return text

    def complete_json(self, *, system: str, user: str) -> dict[str, Any]:
        raw = self.complete(system=system, user=user)
        cleaned = strip_fences(raw)
        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.debug("Undecodable payload from %s: %r", self.provider_name, raw[:200])
            raise MalformedResponse("payload is not valid JSON") from e

        if not isinstance(data, dict):
            raise MalformedResponse("payload is not a JSON object")
        return data
