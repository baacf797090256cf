"""
Error taxonomy for the matching engine.

Every error carries a short message that is safe to show to the user and,
where one exists, a remedy. The API layer renders them as
``{"error": message, "remedy": remedy}`` with the error's status code.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CareerGraphError(Exception):
    status_code = 500
    message = "Something went wrong."
    remedy: str | None = "Please try again."

    def __init__(self, message: str | None = None, remedy: str | None = None):
        if message is not None:
            self.message = message
        if remedy is not None:
            self.remedy = remedy
        super().__init__(self.message)


class ProfileNotFound(CareerGraphError):
    status_code = 404
    message = "Profile not found. Please complete your profile first."
    remedy = "Complete your profile to get job matches."


class EmbeddingsMissing(CareerGraphError):
    status_code = 400
    message = "Embeddings not generated. Please update your profile."
    remedy = "Save your profile again to regenerate embeddings."


class UpstreamServiceError(CareerGraphError):
    """The AI gateway was unreachable, not configured or answered non-2xx."""
    status_code = 502
    message = "The AI service is unavailable right now."
    remedy = "Please try again in a moment."


class AlreadyExists(CareerGraphError):
    status_code = 409
    message = "This item already exists."
    remedy = None


class NotFound(CareerGraphError):
    status_code = 404
    message = "Not found."
    remedy = None


class VectorFormatError(ValueError):
    """A stored vector literal could not be decoded or has the wrong shape."""


async def _career_graph_error_handler(request: Request, exc: CareerGraphError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "remedy": exc.remedy},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CareerGraphError, _career_graph_error_handler)
