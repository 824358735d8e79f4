from typing import Optional

from extraction.task_extractor import TaskExtractor
from smart_todo.models import ExtractionResult, Task
from smart_todo.records import TaskRecordBuilder


class BackendAPI:
    """Central orchestration component: sentence in, task record out."""

    def __init__(
        self,
        extractor: Optional[TaskExtractor] = None,
        builder: Optional[TaskRecordBuilder] = None,
    ):
        self.extractor = extractor or TaskExtractor()
        self.builder = builder or TaskRecordBuilder()

    def extract(self, text: str, remote_enabled: Optional[bool] = None) -> ExtractionResult:
        return self.extractor.process(text, remote_enabled=remote_enabled)

    def submit_task(self, text: str, remote_enabled: Optional[bool] = None) -> Task:
        """Extract the sentence and wrap the result into a new Task."""
        result = self.extract(text, remote_enabled=remote_enabled)
        return self.builder.build(result)
