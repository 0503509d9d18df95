"""
main.py
-------
Entry point for the Customer API.

Responsibilities:
    - Build the FastAPI application and register the routers.
    - Map the error taxonomy onto `{"error": ...}` JSON responses.
    - Open the database connection pool and schema on startup, close it on shutdown.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config import API_HOST, API_PORT
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from handlers.customer_handler import router as customer_router
from models.customer import REQUIRED_FIELDS
from services.customer_service import REQUIRED_MISSING_MESSAGE
from utils.errors import CustomerAPIError
from utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def _store_lifespan(app: FastAPI):
    logger.info("Initializing database...")
    init_pool()
    try:
        create_tables()
        yield
    finally:
        close_pool()


async def handle_api_error(request: Request, exc: CustomerAPIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


async def handle_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": describe_validation_errors(request.method, exc.errors())},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} failed unexpectedly")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def describe_validation_errors(method: str, errors) -> str:
    """
    Collapse pydantic body errors into the single message the API answers with.

    Unknown columns are listed; an absent body or an absent/empty required
    column reads as "Required fields missing" (or "No fields to update" for
    PATCH); anything else reports each offending field.
    """
    unknown = [str(err["loc"][-1]) for err in errors if err.get("type") == "extra_forbidden"]
    if unknown:
        return f"Unknown fields: {', '.join(unknown)}"

    for err in errors:
        loc = tuple(err.get("loc", ()))
        if loc == ("body",):
            if method == "PATCH":
                return "No fields to update" if err.get("type") == "missing" else "Request body must be a JSON object"
            return REQUIRED_MISSING_MESSAGE
        if len(loc) == 2 and loc[0] == "body" and loc[1] in REQUIRED_FIELDS:
            if err.get("type") in ("missing", "string_too_short") or err.get("input") is None:
                return REQUIRED_MISSING_MESSAGE

    details = []
    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", ())[1:])
        details.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(details) or "Invalid request"


def create_app(manage_store: bool = True) -> FastAPI:
    """
    Build the application.

    Args:
        manage_store: Open the pool and create the schema on startup
            (and close the pool on shutdown). Tests turn this off.
    """
    app = FastAPI(
        title="Customer API",
        version="1.0.0",
        description="API to manage customers",
        docs_url="/api-docs",
        lifespan=_store_lifespan if manage_store else None,
    )
    app.add_exception_handler(CustomerAPIError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_bad_request)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.include_router(customer_router)
    return app


def main() -> None:
    """Run the API server."""
    logger.info(f"Server running on http://{API_HOST}:{API_PORT}")
    uvicorn.run(create_app(), host=API_HOST, port=API_PORT, log_config=None)


if __name__ == "__main__":
    main()
