from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from smart_todo.models import ExtractionResult, Task


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class TaskRecordBuilder:
    """Wrap an ExtractionResult into a Task with identity and creation time.

    Ids are random tokens rather than timestamps, so two tasks built in the
    same millisecond never collide. Both sources are injectable for tests.
    """

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.id_factory = id_factory or _new_id
        self.clock = clock or _utcnow

    def build(self, result: ExtractionResult) -> Task:
        return Task(
            id=self.id_factory(),
            title=result.title,
            time=result.time,
            venue=result.venue,
            category=result.category,
            completed=False,
            created_at=self.clock().isoformat(),
        )
