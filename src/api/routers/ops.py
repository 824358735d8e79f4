import logging
from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api import state
from api.dependencies import get_task_extractor
from extraction.task_extractor import TaskExtractor
from smart_todo.metrics import TASKS_GAUGE

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    extractor: TaskExtractor = Depends(get_task_extractor),
) -> dict:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "strategy": extractor.strategy_for(),
        "remote_configured": extractor.remote_configured,
        "tasks": len(state.tasks),
    }


@router.get("/metrics")
async def metrics() -> Response:
    """
    Prometheus scrape endpoint.
    """
    TASKS_GAUGE.set(len(state.tasks))
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
