from pydantic import BaseModel, validator
from typing import List

from tasktracker.schemas.task import TaskOut

USERNAME_MIN_LENGTH = 5
PASSWORD_MIN_LENGTH = 5


class UserCreate(BaseModel):
    username: str
    password: str

    @validator("username")
    def username_length(cls, v: str) -> str:
        if len(v) < USERNAME_MIN_LENGTH:
            raise ValueError(f"The username must be at least {USERNAME_MIN_LENGTH} characters long.")
        return v

    @validator("password")
    def password_length(cls, v: str) -> str:
        """Passwords need a minimum length and must fit in bcrypt's input."""
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"The password must be at least {PASSWORD_MIN_LENGTH} characters long.")
        if len(v.encode("utf-8")) > 72:
            raise ValueError("The password is too long: bcrypt accepts at most 72 bytes.")
        return v


class UserOut(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class UserWithTasks(UserOut):
    tasks: List[TaskOut] = []


class SignIn(BaseModel):
    token: str
    token_type: str = "Bearer"
    user_id: int
    username: str
