import logging
import os
from typing import Optional

from api import state
from api.backend import BackendAPI
from extraction.remote_extractor import RemoteExtractor
from extraction.task_extractor import TaskExtractor
from llm.errors import ServiceUnavailable
from llm.llm_client import LLMClient
from llm.providers.base import DEFAULT_TIMEOUT_S, LLMProvider
from llm.providers.gemini_provider import GeminiProvider
from llm.providers.ollama_provider import OllamaProvider
from llm.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)


def build_provider(name: str) -> LLMProvider:
    """Create the configured provider from the environment.

    Raises ServiceUnavailable when the provider is unknown or its credential
    is missing.
    """
    timeout_s = float(os.getenv("LLM_TIMEOUT_S", str(DEFAULT_TIMEOUT_S)))

    try:
        if name == "gemini":
            return GeminiProvider(
                api_key=os.getenv("GEMINI_API_KEY", ""),
                model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
                base_url=os.getenv(
                    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
                ),
                timeout_s=timeout_s,
            )
        if name == "openai":
            return OpenAIProvider(
                api_key=os.getenv("OPENAI_API_KEY", ""),
                model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
                base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
                timeout_s=timeout_s,
            )
        if name == "ollama":
            return OllamaProvider(
                model=os.getenv("OLLAMA_MODEL", "llama3.1"),
                base_url=os.getenv("OLLAMA_BASE_URL", "http://localhost:11434"),
                timeout_s=timeout_s,
            )
    except ValueError as e:
        raise ServiceUnavailable(str(e)) from e

    raise ServiceUnavailable(f"unknown LLM provider {name!r}")


def build_task_extractor(provider_name: Optional[str] = None) -> TaskExtractor:
    if provider_name is None:
        provider_name = os.getenv("LLM_PROVIDER", "")
    provider_name = provider_name.strip().lower()

    if not provider_name:
        logger.info("No LLM provider configured; using pattern extraction only")
        return TaskExtractor()

    try:
        provider = build_provider(provider_name)
    except ServiceUnavailable as e:
        logger.warning(f"LLM provider unavailable ({e}); using pattern extraction only")
        return TaskExtractor()

    logger.info(f"Remote extraction enabled via {provider.name}")
    return TaskExtractor(remote=RemoteExtractor(LLMClient(provider)))


def get_task_extractor() -> TaskExtractor:
    if state.task_extractor is None:
        state.task_extractor = build_task_extractor()
    return state.task_extractor


def get_backend() -> BackendAPI:
    return BackendAPI(extractor=get_task_extractor())
