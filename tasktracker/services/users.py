import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tasktracker.crud import users as user_store
from tasktracker.errors import Conflict, Unauthenticated
from tasktracker.models.user import User
from tasktracker.schemas.user import SignIn, UserCreate
from tasktracker.services import persistence, validate
from tasktracker.services.tokens import TokenService
from tasktracker.utils.auth import hash_password, verify_password

logger = logging.getLogger(__name__)

BAD_CREDENTIALS = "Cannot find a user with these credentials."


class UserService:
    def __init__(self, db: Session, tokens: TokenService):
        self.db = db
        self.tokens = tokens

    def sign_up(self, username: str, password: str) -> User:
        data = validate(UserCreate, username=username, password=password)
        duplicate = Conflict(f"A user with the username {data.username} already exists.")

        with persistence(self.db, "Failed to create user", logger):
            if user_store.find_by_username(self.db, data.username) is not None:
                logger.info("Sign up rejected, username %r is taken", data.username)
                raise duplicate
            try:
                user = user_store.insert(self.db, data.username, hash_password(data.password))
            except IntegrityError:
                # lost a race against a concurrent sign up with the same name
                self.db.rollback()
                raise duplicate
        logger.info("User %r signed up with id %s", user.username, user.id)
        return user

    def sign_in(self, username: str, password: str) -> SignIn:
        with persistence(self.db, "Failed to sign in", logger):
            user = user_store.find_by_username(self.db, username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Sign in failed for %r", username)
            raise Unauthenticated(BAD_CREDENTIALS)

        token = self.tokens.issue(user.id)
        logger.info("User %r signed in", user.username)
        return SignIn(token=token, token_type="Bearer", user_id=user.id, username=user.username)

    def me(self, uid: int) -> User:
        with persistence(self.db, "Failed to load user", logger):
            user = user_store.find_by_id(self.db, uid)
        if user is None:
            raise Unauthenticated("Cannot find the authenticated user.")
        return user
