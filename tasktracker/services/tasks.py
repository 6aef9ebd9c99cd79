import logging
from math import ceil
from typing import Optional

from sqlalchemy.orm import Session

from tasktracker.crud import tasks as task_store
from tasktracker.crud.tasks import Pagination, TaskFilter
from tasktracker.errors import NotFound, ValidationError
from tasktracker.models.task import Task
from tasktracker.schemas.task import TaskCreate, TaskPage, TaskWithOwner
from tasktracker.services import persistence, validate

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
TASK_NOT_FOUND = "Task not found."


class TaskService:
    """Task operations scoped to the requesting user.

    A task owned by someone else is reported exactly like a missing one, so
    callers cannot probe for other users' task ids.
    """

    def __init__(self, db: Session):
        self.db = db

    def _owned(self, uid: int, task_id: int) -> Task:
        with persistence(self.db, "Failed to load task", logger):
            task = task_store.find_by_id(self.db, task_id)
        if task is None or task.owner_id != uid:
            logger.info("Task %s not found for user %s", task_id, uid)
            raise NotFound(TASK_NOT_FOUND)
        return task

    def create(self, uid: int, name: str, description: str, is_active: bool = False) -> Task:
        data = validate(TaskCreate, name=name, description=description, is_active=is_active)
        with persistence(self.db, "Failed to create task", logger):
            task = task_store.insert(self.db, uid, data.name, data.description, data.is_active)
        logger.info("User %s created task %s", uid, task.id)
        return task

    def update(self, uid: int, task_id: int, name: str, description: str, is_active: bool = False) -> Task:
        data = validate(TaskCreate, name=name, description=description, is_active=is_active)
        task = self._owned(uid, task_id)
        with persistence(self.db, "Failed to update task", logger):
            return task_store.update(self.db, task, data.name, data.description, data.is_active)

    def delete(self, uid: int, task_id: int) -> int:
        self._owned(uid, task_id)
        with persistence(self.db, "Failed to delete the task", logger):
            rows = task_store.delete(self.db, task_id, uid)
        logger.info("User %s deleted task %s (%s row(s))", uid, task_id, rows)
        return rows

    def get_by_id(self, uid: int, task_id: int) -> TaskWithOwner:
        return TaskWithOwner.model_validate(self._owned(uid, task_id))

    def list(
        self,
        uid: int,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
        name_filter: Optional[str] = None,
    ) -> TaskPage:
        if page < 1:
            raise ValidationError("The page number must be greater than 0.")
        if page_size < 1:
            raise ValidationError("The size number must be greater than 0.")

        with persistence(self.db, "Failed to fetch tasks", logger):
            items, total = task_store.find_matching(
                self.db,
                TaskFilter(owner_id=uid, name_contains=name_filter),
                Pagination(page=page, size=page_size),
            )
        return TaskPage(
            items=[TaskWithOwner.model_validate(task) for task in items],
            page=page,
            page_size=page_size,
            total_pages=ceil(total / page_size),
        )
