"""Error taxonomy shared by services and the HTTP layer.

Services raise these; only the exception handlers in ``tasktracker.main``
turn them into status codes and response envelopes.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 422
    default_message = "Invalid input"


class Unauthenticated(AppError):
    status_code = 401
    default_message = "Authentication error"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    # Duplicate usernames have always been reported as 401 by this API.
    status_code = 401
    default_message = "Resource already exists"


class InternalError(AppError):
    status_code = 500
    default_message = "Internal server error"


def describe_errors(errors) -> str:
    """Flatten pydantic/FastAPI error dicts into one human-readable message."""
    messages = []
    for error in errors:
        msg = str(error.get("msg", "invalid value"))
        if error.get("type") == "value_error":
            # our own validators already phrase the whole sentence
            messages.append(msg.removeprefix("Value error, "))
            continue
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(messages) or ValidationError.default_message
