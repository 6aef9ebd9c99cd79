from tasktracker.models.user import User
from tasktracker.models.task import Task

__all__ = ["User", "Task"]
