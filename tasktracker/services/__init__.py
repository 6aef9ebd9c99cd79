from contextlib import contextmanager
import logging

import pydantic
from sqlalchemy.exc import SQLAlchemyError

from tasktracker.errors import InternalError, ValidationError, describe_errors


def validate(schema, **fields):
    """Build ``schema`` from ``fields`` or raise the API's ValidationError."""
    try:
        return schema(**fields)
    except pydantic.ValidationError as exc:
        raise ValidationError(describe_errors(exc.errors()))


@contextmanager
def persistence(db, message: str, logger: logging.Logger):
    """Roll back and report a generic InternalError on any database failure."""
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception(message)
        raise InternalError(message)
