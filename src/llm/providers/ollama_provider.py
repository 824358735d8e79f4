from __future__ import annotations
from typing import Optional

import httpx

from llm.errors import MalformedResponse
from .base import DEFAULT_TIMEOUT_S, LLMProvider

class OllamaProvider(LLMProvider):
    name = "ollama"

    def __init__(
        self,
        model: str = "llama3.1",
        base_url: str = "http://localhost:11434",
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(timeout_s=timeout_s, transport=transport)
        self.model = model.strip()
        self.base_url = base_url.strip().rstrip("/")

    def generate(self, *, system: str, user: str) -> str:
        url = f"{self.base_url}/api/chat"
        payload = {
            "model": self.model,
            "stream": False,
            "format": "json",
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "options": {"temperature": 0.2},
        }

        data = self._post_json(url, payload)

        try:
            return data["message"]["content"]
        except (KeyError, TypeError) as e:
            raise MalformedResponse("ollama response has no message content") from e
