import logging

import psutil
from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasktracker.crud import tasks as task_store
from tasktracker.database import get_db, ping
from tasktracker.responses import envelope
from tasktracker.schemas.ping import Ping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ping"])


def memory_usage_mb() -> int:
    """Current resident set size of this process, in whole megabytes."""
    return psutil.Process().memory_info().rss // (1024 * 1024)


@router.get("/")
def ping_route(request: Request, db: Session = Depends(get_db)):
    db_status = ping(request.app.state.engine)
    tasks_total = 0
    if db_status:
        try:
            tasks_total = task_store.count(db)
        except SQLAlchemyError:
            logger.warning("Could not count tasks", exc_info=True)
    data = Ping(db_status=db_status, tasks_total=tasks_total, memory_usage=f"{memory_usage_mb()} Mb")
    return envelope(data)
