from fastapi import APIRouter, Depends, Form, Query
from typing import Optional

from tasktracker.dependencies import get_current_user, get_task_service
from tasktracker.responses import envelope
from tasktracker.schemas.task import TaskOut
from tasktracker.services.tasks import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, TaskService

router = APIRouter(prefix="/task", tags=["tasks"])


@router.post("/create")
def create_task(
    name: str = Form(...),
    description: str = Form(...),
    is_active: bool = Form(False),
    uid: int = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    task = tasks.create(uid, name, description, is_active)
    return envelope(TaskOut.model_validate(task), message="Task created successfully")


@router.patch("/update/{task_id}")
def update_task(
    task_id: int,
    name: str = Form(...),
    description: str = Form(...),
    is_active: bool = Form(False),
    uid: int = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    task = tasks.update(uid, task_id, name, description, is_active)
    return envelope(TaskOut.model_validate(task), message="Task updated successfully")


@router.delete("/delete/{task_id}")
def delete_task(
    task_id: int,
    uid: int = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    return envelope(tasks.delete(uid, task_id), message="Task deleted successfully")


@router.get("")
def list_tasks(
    page: int = Query(DEFAULT_PAGE),
    size: int = Query(DEFAULT_PAGE_SIZE),
    query: Optional[str] = Query(None, description="Search by name (case-sensitive)"),
    uid: int = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    return envelope(tasks.list(uid, page=page, page_size=size, name_filter=query))


@router.get("/{task_id}")
def get_task(
    task_id: int,
    uid: int = Depends(get_current_user),
    tasks: TaskService = Depends(get_task_service),
):
    return envelope(tasks.get_by_id(uid, task_id))
