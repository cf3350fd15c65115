"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from exrates.core.config import settings
from exrates.core.exceptions import ErrorCode, ExchangeRateServiceError
from exrates.api.routes import exchange_rates, weekends
from exrates.db.session import AsyncSessionLocal, create_tables

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_RANGE: HTTPStatus.BAD_REQUEST,
    ErrorCode.UNKNOWN_CURRENCY: HTTPStatus.BAD_REQUEST,
    ErrorCode.DUPLICATE: HTTPStatus.CONFLICT,
    ErrorCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCode.SOURCE_UNAVAILABLE: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorCode.NO_DATA: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def error_response(http_status: HTTPStatus, message: str) -> JSONResponse:
    """Build the {status, message} error body."""
    return JSONResponse(
        status_code=http_status.value,
        content={"status": http_status.name, "message": message}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for startup and shutdown events."""
    # Startup
    logger.info("Starting Exchange Rates API...")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    if settings.database_create_tables:
        logger.info(f"Creating missing tables in schema '{settings.database_schema}'")
        await create_tables()
    yield
    # Shutdown
    logger.info("Shutting down Exchange Rates API...")


# Create FastAPI app
app = FastAPI(
    title="Exchange Rates API",
    description="NB RB exchange rate ingestion and monthly averages",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ExchangeRateServiceError)
async def service_exception_handler(request: Request, exc: ExchangeRateServiceError):
    http_status = ERROR_STATUS.get(exc.error_code, HTTPStatus.INTERNAL_SERVER_ERROR)
    if http_status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(http_status, exc.message)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, f"Internal server error: {str(exc)}")

# Include routers
app.include_router(exchange_rates.router)
app.include_router(weekends.router)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - basic service info."""
    return {
        "status": "healthy",
        "service": "Exchange Rates API",
        "version": "0.1.0"
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Verifies database connectivity (executes SELECT 1).

    Returns 200 if the database answers, 503 otherwise.
    """
    health_status = {
        "status": "healthy",
        "service": "Exchange Rates API",
        "version": "0.1.0",
        "checks": {}
    }

    try:
        async with AsyncSessionLocal() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
            health_status["checks"]["database"] = {
                "status": "healthy",
                "message": "Connected"
            }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Connection failed: {str(e)}"
        }

    status_code = status.HTTP_200_OK if health_status["status"] == "healthy" else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(content=health_status, status_code=status_code)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "exrates.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )
