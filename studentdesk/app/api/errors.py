"""Map record-layer errors to JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from studentdesk.app.core.exceptions import RecordError


async def record_error_handler(request: Request, exc: RecordError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordError, record_error_handler)
