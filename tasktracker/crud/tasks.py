from dataclasses import dataclass
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from tasktracker.models.task import Task

# Task.id is a 32-bit INTEGER column; anything outside it cannot name a row.
MAX_TASK_ID = 2**31 - 1


@dataclass(frozen=True)
class TaskFilter:
    owner_id: int
    name_contains: Optional[str] = None


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    size: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


def insert(db: Session, owner_id: int, name: str, description: str, is_active: bool) -> Task:
    task = Task(name=name, description=description, is_active=is_active, owner_id=owner_id)
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def find_by_id(db: Session, task_id: int) -> Optional[Task]:
    if not 1 <= task_id <= MAX_TASK_ID:
        return None
    return db.query(Task).options(joinedload(Task.owner)).filter(Task.id == task_id).first()


def find_matching(db: Session, task_filter: TaskFilter, pagination: Pagination) -> Tuple[List[Task], int]:
    """Return one page of the owner's tasks and the total number of matches."""
    query = db.query(Task).filter(Task.owner_id == task_filter.owner_id)
    if task_filter.name_contains:
        query = query.filter(Task.name.contains(task_filter.name_contains, autoescape=True))
    total = query.count()
    if pagination.offset >= total:
        return [], total
    items = (
        query.options(joinedload(Task.owner))
        .order_by(Task.id)
        .limit(min(pagination.size, total))
        .offset(pagination.offset)
        .all()
    )
    return items, total


def update(db: Session, task: Task, name: str, description: str, is_active: bool) -> Task:
    task.name = name
    task.description = description
    task.is_active = is_active
    db.commit()
    db.refresh(task)
    return task


def delete(db: Session, task_id: int, owner_id: int) -> int:
    rows = (
        db.query(Task)
        .filter(Task.id == task_id, Task.owner_id == owner_id)
        .delete(synchronize_session="fetch")
    )
    db.commit()
    return rows


def delete_all(db: Session) -> int:
    rows = db.query(Task).delete(synchronize_session="fetch")
    db.commit()
    return rows


def count(db: Session) -> int:
    return db.query(Task).count()
