"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from gohome.config import settings
from gohome.database import Database, get_database
from gohome.routers import bookings_router, houses_router, users_router
from gohome.utils.exceptions import APIException, ServiceUnavailableError
from gohome.services.error_handler import ErrorHandlerService
from gohome.middleware import RequestLoggingMiddleware

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Creates the shared database handle on startup and closes it on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        logger.info(f"Connecting to {settings.redacted_mongo_uri}, database {settings.database_name}")
        app.state.database = Database.from_settings(settings)

    if not await app.state.database.ping():
        # Keep serving; requests fail individually until the store is reachable
        logger.error("Failed to connect to database on startup")

    yield

    logger.info("Shutting down application")
    if owns_database:
        await app.state.database.close()
        app.state.database = None


# Create FastAPI application instance
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Backend for a rental listing and booking application.

    * **Users**: registration, login with bearer tokens, lookup and deletion
    * **Houses**: listing CRUD with name and city filters
    * **Bookings**: room bookings capped per booker
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Users", "description": "Registration, login and user lookup"},
        {"name": "Houses", "description": "House listing management"},
        {"name": "Bookings", "description": "Room bookings"},
        {"name": "Health", "description": "Liveness and health checks"},
    ],
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware, slow_request_threshold=2.0)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time"],
)

app.include_router(users_router)
app.include_router(houses_router)
app.include_router(bookings_router)


# Global exception handlers using ErrorHandlerService
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions with the body each exception defines."""
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors with detailed field information."""
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(PyMongoError)
async def database_exception_handler(request: Request, exc: PyMongoError):
    """Handle document store errors."""
    return ErrorHandlerService.handle_database_error(exc, request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle routing errors such as unknown paths and wrong methods."""
    return ErrorHandlerService.handle_http_exception(exc, request)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with secure error responses."""
    return ErrorHandlerService.handle_unexpected_error(exc, request)


@app.get("/", tags=["Health"], response_class=PlainTextResponse)
async def root() -> str:
    """Liveness check."""
    return f"{settings.app_name} server is running"


@app.get("/health", tags=["Health"])
async def health_check(database: Database = Depends(get_database)):
    """
    Health check endpoint with database connectivity test.
    Used by container health checks and load balancers.
    """
    if not await database.ping():
        raise ServiceUnavailableError("Database connection failed")

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "database": "connected"
    }


def run() -> None:
    """Run the API under uvicorn with the configured host and port."""
    import uvicorn

    uvicorn.run(
        "gohome.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
