from collections import OrderedDict
from typing import Optional, Set

from extraction.task_extractor import TaskExtractor
from smart_todo.models import Task

# Oldest submission ids are forgotten past this many
MAX_SUBMISSIONS = 1000

# In-memory task collection, insertion ordered (keyed by task id)
tasks: "OrderedDict[str, Task]" = OrderedDict()

# submission id -> id of the task it created, oldest first
submissions: "OrderedDict[str, str]" = OrderedDict()

# submission ids whose extraction is still running
pending_submissions: Set[str] = set()

# Built lazily from the environment by api.dependencies
task_extractor: Optional[TaskExtractor] = None


def remember_submission(submission_id: str, task_id: str) -> None:
    submissions[submission_id] = task_id
    submissions.move_to_end(submission_id)
    while len(submissions) > MAX_SUBMISSIONS:
        submissions.popitem(last=False)


def reset() -> None:
    global task_extractor
    tasks.clear()
    submissions.clear()
    pending_submissions.clear()
    task_extractor = None
