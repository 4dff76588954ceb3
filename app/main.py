from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging
import json
import os

from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.openapi.utils import get_openapi

from app.api.endpoints import (
    catalog,
    contact,
)
from app.core.config import settings
from app.core.exceptions import ContactAPIError, GENERIC_ERROR_MESSAGE
from app.core.logging import setup_logging
from app.models.contact import ContactErrorResponse
from app.utils.request_logging import RequestLoggingMiddleware

setup_logging()

logger = logging.getLogger(__name__)

with open(os.path.join(os.path.dirname(__file__), "log_config.json"), "r") as file:
    LOGGING_CONFIG = json.load(file)


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="API behind the Mero Tech website: contact form submissions and site content",
        routes=app.routes,
    )

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API behind the Mero Tech website",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
    debug=settings.DEBUG,
)


@app.get("/docs", include_in_schema=False)
async def custom_swagger_ui_html():
    return get_swagger_ui_html(
        openapi_url="/openapi.json",
        title=f"{settings.PROJECT_NAME} - Swagger UI",
    )


app.openapi = custom_openapi

app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    contact.router,
    prefix=f"{settings.API_STR}/contact",
    tags=["contact"],
)

app.include_router(
    catalog.router,
    prefix=settings.API_STR,
    tags=["catalog"],
)


@app.get("/", tags=["status"])
async def root():
    return {"status": "online", "service": settings.PROJECT_NAME}


@app.exception_handler(ContactAPIError)
async def contact_api_exception_handler(request: Request, exc: ContactAPIError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ContactErrorResponse(error=exc.error).model_dump(exclude_none=True),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content=ContactErrorResponse(error=GENERIC_ERROR_MESSAGE).model_dump(exclude_none=True),
    )


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=settings.DEBUG,
        log_config=LOGGING_CONFIG,
    )
