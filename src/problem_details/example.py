# This project was developed with assistance from AI tools.
"""Example application showing each way an error becomes a problem document.

Run with ``uvicorn problem_details.example:app``.
"""

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Query, Request, Response, status
from pydantic import BaseModel

from .app import add_problem_details, log_problem_details_status
from .core.config import settings
from .middleware.problem_details import ProblemDetailsOptions
from .schemas.problem import ProblemDocument
from .services.factory import ProblemFactory


class Model(BaseModel):
    id: str | None = None
    name: str


def add_trace_extensions(request: Request, document: ProblemDocument) -> None:
    """Stamp every document with a correlation id and timestamp."""
    document.extensions["traceId"] = request.headers.get("x-request-id", str(uuid.uuid4()))
    document.extensions["timestamp"] = datetime.now(timezone.utc).isoformat()


def create_app(options: ProblemDetailsOptions | None = None) -> FastAPI:
    logging.getLogger("problem_details").setLevel(settings.LOG_LEVEL.upper())

    if options is None:
        options = ProblemDetailsOptions.from_settings(
            factory=ProblemFactory(on_created=add_trace_extensions),
        )

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        log_problem_details_status(options)
        yield

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)
    add_problem_details(app, options)

    @app.get("/example/")
    @app.get("/example/requires-auth")
    async def unauthorized() -> Response:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    @app.get("/example/not-found")
    async def not_found() -> Response:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.get("/example/bad-request")
    async def bad_request():
        raise HTTPException(status_code=400, detail="You don't have enough credits!")

    @app.get("/example/error")
    async def error():
        raise Exception("An error occurred!")

    @app.get("/example/http-error")
    async def http_error():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)

    @app.get("/example/model-validation")
    async def model_validation(id: str | None = Query(default=None), name: str = Query()):
        return Model(id=id, name=name)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
