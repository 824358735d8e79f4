from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from llm.errors import MalformedResponse, NetworkFailure

DEFAULT_TIMEOUT_S = 10.0

class LLMProvider(ABC):
    name: str = "provider"

    def __init__(
        self,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout_s = timeout_s
        self._transport = transport

    @abstractmethod
    def generate(self, *, system: str, user: str) -> str:
        """
        Must return the model output as TEXT (the JSON is parsed/validated in LLMClient).
        Raises NetworkFailure or MalformedResponse.
        """
        raise NotImplementedError

    def _post_json(
        self,
        url: str,
        payload: dict,
        headers: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Single POST, no retries. httpx errors become ServiceError subclasses."""
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self._transport) as client:
                r = client.post(url, headers=headers, params=params, json=payload)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as e:
            raise NetworkFailure(
                f"{self.name} returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkFailure(f"{self.name} request failed: {e}") from e
        except ValueError as e:
            raise MalformedResponse(f"{self.name} returned a non-JSON body") from e
