from __future__ import annotations
from typing import Optional

import httpx

from llm.errors import MalformedResponse
from .base import DEFAULT_TIMEOUT_S, LLMProvider

class GeminiProvider(LLMProvider):
    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(timeout_s=timeout_s, transport=transport)
        self.api_key = api_key.strip()
        self.model = model.strip()
        self.base_url = base_url.strip().rstrip("/")

        if not self.api_key:
            raise ValueError("Gemini API key is missing")

    def generate(self, *, system: str, user: str) -> str:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        # generateContent takes one prompt: instruction followed by the sentence
        payload = {
            "contents": [{"parts": [{"text": f"{system}\n\n{user}"}]}],
            "generationConfig": {"temperature": 0.2},
        }

        data = self._post_json(
            url,
            payload,
            headers={"Content-Type": "application/json"},
            params={"key": self.api_key},
        )

        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponse("gemini response has no candidate text") from e
