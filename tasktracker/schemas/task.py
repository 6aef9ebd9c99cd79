from pydantic import BaseModel, validator
from typing import List, Optional

from tasktracker.models.task import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)


class TaskCreate(BaseModel):
    """Task fields as submitted for create and update; whitespace is trimmed first."""

    name: str
    description: str
    is_active: bool = False

    @validator("name")
    def name_length(cls, v):
        v = v.strip()
        if not NAME_MIN_LENGTH <= len(v) <= NAME_MAX_LENGTH:
            raise ValueError(
                f"The name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters long."
            )
        return v

    @validator("description")
    def description_length(cls, v):
        v = v.strip()
        if not DESCRIPTION_MIN_LENGTH <= len(v) <= DESCRIPTION_MAX_LENGTH:
            raise ValueError(
                f"The description must be between {DESCRIPTION_MIN_LENGTH} and "
                f"{DESCRIPTION_MAX_LENGTH} characters long."
            )
        return v


class TaskOut(BaseModel):
    id: int
    name: str
    description: str
    is_active: bool
    owner_id: int

    class Config:
        from_attributes = True


class OwnerOut(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class TaskWithOwner(TaskOut):
    owner: Optional[OwnerOut] = None


class TaskPage(BaseModel):
    items: List[TaskWithOwner]
    page: int
    page_size: int
    total_pages: int
