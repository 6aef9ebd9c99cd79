from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(data: Any = None, status_code: int = 200, message: Optional[str] = None) -> JSONResponse:
    """Wrap a payload in the ``{message, status, data}`` body every route returns."""
    body = {"message": message, "status": status_code, "data": jsonable_encoder(data)}
    return JSONResponse(status_code=status_code, content=body)
