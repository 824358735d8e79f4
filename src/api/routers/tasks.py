import asyncio
import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field, field_validator

from api import state
from api.backend import BackendAPI
from api.dependencies import get_backend
from smart_todo.metrics import REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS, TASKS_GAUGE
from smart_todo.models import CATEGORIES, Category, Task

router = APIRouter()
logger = logging.getLogger(__name__)


MAX_TEXT_LENGTH = 1000


class SentenceIn(BaseModel):
    text: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    # None = use the remote service when one is configured
    remote: Optional[bool] = None

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("text must not be blank")
        return v2


class CreateTaskIn(SentenceIn):
    submission_id: Optional[str] = None


def _serialize(task: Task) -> dict:
    return task.model_dump(by_alias=True)


def _get_task_or_404(task_id: str) -> Task:
    task = state.tasks.get(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.post("/extract")
async def extract(payload: SentenceIn, backend: BackendAPI = Depends(get_backend)) -> dict:
    """Extract structured fields without creating a task."""
    start = time.time()
    result = await asyncio.to_thread(backend.extract, payload.text, payload.remote)

    REQUESTS_TOTAL.labels(endpoint="/extract", status="ok").inc()
    REQUEST_LATENCY_SECONDS.labels(endpoint="/extract").observe(time.time() - start)
    return result.model_dump()


@router.post("/tasks", status_code=201)
async def create_task(
    payload: CreateTaskIn,
    response: Response,
    backend: BackendAPI = Depends(get_backend),
) -> dict:
    """
    Create one task from a sentence.

    A submission_id makes the call at-most-once: a repeat of a finished
    submission returns the original task, a repeat of one still in flight
    is rejected with 409.
    """
    start = time.time()
    sid = payload.submission_id
    logger.info(f"Received task submission: {payload.text[:50]}...")

    if sid is not None:
        existing_id = state.submissions.get(sid)
        if existing_id is not None:
            if existing_id not in state.tasks:
                # created once already, then deleted
                raise HTTPException(status_code=409, detail="Submission already processed")
            REQUESTS_TOTAL.labels(endpoint="/tasks", status="duplicate").inc()
            response.status_code = 200
            return _serialize(state.tasks[existing_id])
        if sid in state.pending_submissions:
            REQUESTS_TOTAL.labels(endpoint="/tasks", status="conflict").inc()
            raise HTTPException(status_code=409, detail="Submission already in progress")
        state.pending_submissions.add(sid)

    try:
        task = await asyncio.to_thread(backend.submit_task, payload.text, payload.remote)
    finally:
        if sid is not None:
            state.pending_submissions.discard(sid)

    state.tasks[task.id] = task
    if sid is not None:
        state.remember_submission(sid, task.id)
    logger.info(f"Created task {task.id} ({task.category}): {task.title}")

    REQUESTS_TOTAL.labels(endpoint="/tasks", status="created").inc()
    REQUEST_LATENCY_SECONDS.labels(endpoint="/tasks").observe(time.time() - start)
    TASKS_GAUGE.set(len(state.tasks))
    return _serialize(task)


@router.get("/tasks")
async def list_tasks(category: Optional[Category] = None) -> dict:
    """List tasks, optionally for one category, with per-category counts."""
    all_tasks = list(state.tasks.values())
    selected = [t for t in all_tasks if category is None or t.category == category]

    counts = {"all": len(all_tasks)}
    for c in CATEGORIES:
        counts[c] = sum(1 for t in all_tasks if t.category == c)

    return {
        "tasks": [_serialize(t) for t in selected],
        "total": len(selected),
        "pending": sum(1 for t in selected if not t.completed),
        "counts": counts,
    }


@router.post("/tasks/{task_id}/toggle")
async def toggle_task(task_id: str) -> dict:
    task = _get_task_or_404(task_id)
    updated = task.model_copy(update={"completed": not task.completed})
    state.tasks[task_id] = updated
    return _serialize(updated)


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: str) -> dict:
    _get_task_or_404(task_id)
    del state.tasks[task_id]
    TASKS_GAUGE.set(len(state.tasks))
    return {"status": "deleted", "id": task_id}
