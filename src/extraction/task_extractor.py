import logging
from typing import Optional

from extraction.pattern_extractor import PatternExtractor
from extraction.remote_extractor import RemoteExtractor
from llm.errors import ServiceError
from smart_todo.metrics import EXTRACTIONS_TOTAL, FALLBACKS_TOTAL
from smart_todo.models import ExtractionResult

logger = logging.getLogger(__name__)


class TaskExtractor:
    """Entry point for turning a sentence into an ExtractionResult.

    Tries the remote strategy once when one is configured and enabled for the
    call, otherwise (or on any failure) returns the local strategy's result.
    Results are never merged across strategies. Never raises.
    """

    def __init__(
        self,
        remote: Optional[RemoteExtractor] = None,
        local: Optional[PatternExtractor] = None,
    ):
        self.remote = remote
        self.local = local or PatternExtractor()

    @property
    def remote_configured(self) -> bool:
        return self.remote is not None

    def strategy_for(self, remote_enabled: Optional[bool] = None) -> str:
        if self.remote is not None and remote_enabled is not False:
            return self.remote.name
        return self.local.name

    def process(self, text: str, remote_enabled: Optional[bool] = None) -> ExtractionResult:
        text = text or ""

        if self.strategy_for(remote_enabled) == self.local.name:
            if remote_enabled and self.remote is None:
                logger.debug("Remote extraction requested but no service is configured")
            return self._local(text)

        try:
            result = self.remote.extract(text)
        except ServiceError as e:
            logger.warning(f"Remote extraction failed ({type(e).__name__}: {e}); using pattern extractor")
            return self._local(text, fallback_reason=type(e).__name__)
        except Exception:
            logger.exception("Unexpected error in remote extraction; using pattern extractor")
            return self._local(text, fallback_reason="unexpected")

        EXTRACTIONS_TOTAL.labels(strategy=self.remote.name).inc()
        return result

    def _local(self, text: str, fallback_reason: Optional[str] = None) -> ExtractionResult:
        if fallback_reason is not None:
            FALLBACKS_TOTAL.labels(reason=fallback_reason).inc()
        result = self.local.extract(text)
        EXTRACTIONS_TOTAL.labels(strategy=self.local.name).inc()
        return result
