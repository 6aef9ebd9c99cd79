from typing import Optional

from sqlalchemy.orm import Session

from tasktracker.models.user import User


def insert(db: Session, username: str, password_hash: str) -> User:
    user = User(username=username, password_hash=password_hash)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def find_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def find_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()
