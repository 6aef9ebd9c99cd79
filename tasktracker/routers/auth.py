from fastapi import APIRouter, Depends, Form

from tasktracker.dependencies import get_current_user, get_user_service
from tasktracker.responses import envelope
from tasktracker.schemas.user import UserOut, UserWithTasks
from tasktracker.services.users import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-up")
def sign_up(
    username: str = Form(..., min_length=5),
    password: str = Form(..., min_length=5),
    users: UserService = Depends(get_user_service),
):
    user = users.sign_up(username, password)
    return envelope(UserOut.model_validate(user), message="Sign up successful")


@router.post("/sign-in")
def sign_in(
    username: str = Form(..., min_length=5),
    password: str = Form(..., min_length=5),
    users: UserService = Depends(get_user_service),
):
    return envelope(users.sign_in(username, password), message="Sign in successful")


@router.get("/me")
def me(uid: int = Depends(get_current_user), users: UserService = Depends(get_user_service)):
    return envelope(UserWithTasks.model_validate(users.me(uid)))
