"""FastAPI application entry point for MedSky.

This is the main application file that sets up:
- FastAPI app with middleware
- Exception handlers
- API routes
- The HTML front end
"""

import logging
from typing import Any, Dict, Optional
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, HTMLResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.templating import Jinja2Templates

from medsky import __version__
from medsky.core.config_helper import config
from medsky.core.errors import (
    AuthError,
    CaseStudyNotFoundError,
    GenerationInProgressError,
    MedSkyError,
    PersistenceError,
    UnknownCategoryError,
)
from medsky.core.logging_config import setup_logging
from medsky.models.responses import ErrorResponse
from medsky.api.routes import auth, categories, cases
from medsky.api.startup import get_lifespan

setup_logging()
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

# Most specific class first
ERROR_STATUS_CODES = (
    (UnknownCategoryError, status.HTTP_400_BAD_REQUEST),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (CaseStudyNotFoundError, status.HTTP_404_NOT_FOUND),
    (GenerationInProgressError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_code_for(exc: MedSkyError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


app = FastAPI(
    title="MedSky API",
    description="Medical case-study quizzes grounded in PubMed literature",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=get_lifespan()
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


# Exception handlers
def error_response(status_code: int, error: str, error_code: str,
                   details: Optional[Dict[str, Any]] = None) -> JSONResponse:
    body = ErrorResponse(error=error, error_code=error_code, details=details or None)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Request body or query failed validation."""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Invalid request data",
        "VALIDATION_ERROR",
        {"errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(MedSkyError)
async def medsky_error_handler(request: Request, exc: MedSkyError):
    """Map MedSky errors to their HTTP status codes."""
    status_code = status_code_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return error_response(status_code, exc.message, exc.error_code, exc.details)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    logger.warning(f"ValueError on {request.url.path}: {exc}")
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc), "VALUE_ERROR")


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "INTERNAL_ERROR")


# Include routers
app.include_router(auth.router, prefix="/api/v1")
app.include_router(categories.router, prefix="/api/v1")
app.include_router(cases.router, prefix="/api/v1")


# Root endpoints
@app.get("/", response_class=HTMLResponse)
async def root(request: Request):
    """Serve the main frontend application."""
    return templates.TemplateResponse(request, "index.html", {"app_name": config.APP_NAME})


@app.get("/api")
async def api_root():
    """API information endpoint."""
    return {
        "name": "MedSky API",
        "version": __version__,
        "status": "operational",
        "docs": "/api/docs",
        "redoc": "/api/redoc"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "medsky",
        "version": __version__
    }


@app.get("/api/v1/info")
async def api_info():
    """API information endpoint."""
    return {
        "name": "MedSky API",
        "version": __version__,
        "description": "Medical case-study quizzes grounded in PubMed literature",
        "features": {
            "database": config.USE_DATABASE,
            "audit_logs": config.FILE_LOGGING
        },
        "endpoints": {
            "categories": "GET /api/v1/categories",
            "signup": "POST /api/v1/auth/signup",
            "signin": "POST /api/v1/auth/signin",
            "provider_signin": "POST /api/v1/auth/provider",
            "signout": "POST /api/v1/auth/signout",
            "generate_case": "POST /api/v1/cases/generate",
            "list_cases": "GET /api/v1/cases",
            "get_case": "GET /api/v1/cases/{case_id}",
            "answer_case": "POST /api/v1/cases/{case_id}/answer",
            "delete_case": "DELETE /api/v1/cases/{case_id}",
            "health": "GET /health",
            "docs": "GET /api/docs"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "medsky.api.app:app",
        host="0.0.0.0",
        port=5001,
        reload=True,
        log_level="info"
    )
