from sqlalchemy import Boolean, Column, Integer, String, ForeignKey, false
from sqlalchemy.orm import relationship
from tasktracker.database import Base

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 20
DESCRIPTION_MIN_LENGTH = 5
DESCRIPTION_MAX_LENGTH = 200


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=False)
    is_active = Column(Boolean, nullable=False, default=False, server_default=false())
    owner_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    owner = relationship("User", back_populates="tasks")
