from __future__ import annotations
from abc import ABC, abstractmethod

from smart_todo.models import ExtractionResult

class ExtractionStrategy(ABC):
    name: str = "strategy"

    @abstractmethod
    def extract(self, text: str) -> ExtractionResult:
        """
        Turn a free-form sentence into the canonical ExtractionResult.
        """
        raise NotImplementedError
