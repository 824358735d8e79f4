import logging

from pydantic import ValidationError

from extraction.base import ExtractionStrategy
from llm.errors import InvalidCategory, MalformedResponse
from llm.llm_client import LLMClient
from llm.prompts import EXTRACTION_INSTRUCTION, extraction_user_prompt
from llm.schemas import RemoteExtractionPayload
from smart_todo.models import CATEGORIES, ExtractionResult

logger = logging.getLogger(__name__)


class RemoteExtractor(ExtractionStrategy):
    """Generative-text backed extraction; the remote strategy.

    One request per call, no retries. Raises a ServiceError subclass on any
    failure so the caller can decide how to fall back.
    """

    name = "remote"

    def __init__(self, llm_client: LLMClient):
        self.llm_client = llm_client

    def extract(self, text: str) -> ExtractionResult:
        data = self.llm_client.complete_json(
            system=EXTRACTION_INSTRUCTION,
            user=extraction_user_prompt(text),
        )

        try:
            payload = RemoteExtractionPayload.model_validate(data)
        except ValidationError as e:
            raise MalformedResponse(f"unexpected payload shape: {e.error_count()} error(s)") from e

        # out-of-set categories are rejected, never coerced
        if payload.category not in CATEGORIES:
            raise InvalidCategory(f"category {payload.category!r} is not one of {CATEGORIES}")

        try:
            result = ExtractionResult(
                title=payload.title,
                time=payload.time,
                venue=payload.venue,
                category=payload.category,
            )
        except ValidationError as e:
            raise MalformedResponse("payload title is blank") from e

        logger.debug(f"Remote extraction via {self.llm_client.provider_name}: {result}")
        return result
