from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from tasktracker.database import get_db
from tasktracker.services.guard import AuthGuard
from tasktracker.services.tasks import TaskService
from tasktracker.services.tokens import TokenService
from tasktracker.services.users import UserService


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_user(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """Id of the user the request's bearer token was issued to."""
    return AuthGuard(tokens).authenticate(authorization)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


def get_user_service(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> UserService:
    return UserService(db, tokens)
