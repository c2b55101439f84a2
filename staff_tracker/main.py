"""
Staff Tracker - Main Application Entry Point
Field employee locations and availability for the map dashboard
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging
import structlog

from staff_tracker import __version__
from staff_tracker.core.config import Settings, get_settings
from staff_tracker.api import employees, locations, users
from staff_tracker.services.sample_data import generate_sample_employees
from staff_tracker.services.store import EmployeeStore

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(ensure_ascii=False)
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger(__name__)


def build_store(settings: Settings) -> EmployeeStore:
    """Create the process store, seeded with the sample roster if enabled"""
    store = EmployeeStore()
    if settings.SEED_SAMPLE_DATA:
        store.seed(generate_sample_employees(seed=settings.SAMPLE_DATA_SEED))
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("Initializing Staff Tracker backend")
    logger.info(f"Store holds {len(app.state.store.get_all_employees())} employees")

    yield

    # Shutdown
    logger.info("Shutting down Staff Tracker backend")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Message reported with schema violations, by route
VALIDATION_MESSAGES = {
    employees.create_employee: "Invalid employee data",
    employees.update_employee: "Invalid employee data",
    employees.update_employee_location: "Invalid location data",
    employees.assign_employee: "Invalid assignment data",
    employees.update_employee_status: "Invalid status",
    users.create_user: "Invalid user data",
}


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report schema violations as 400 with one entry per failing field"""
    errors = [
        {
            "path": [str(part) for part in error["loc"]],
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]
    endpoint = request.scope.get("endpoint")
    message = VALIDATION_MESSAGES.get(endpoint, "Invalid request data")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message, "errors": errors},
    )


def create_app(store: Optional[EmployeeStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around a single store instance"""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(message)s")

    app = FastAPI(
        title="Staff Tracker API",
        description="Field employee locations, availability and customer assignments",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else build_store(settings)

    # Configure middleware stack
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(employees.router, prefix=f"{settings.API_PREFIX}/employees", tags=["employees"])
    app.include_router(locations.router, prefix=f"{settings.API_PREFIX}/locations", tags=["locations"])
    app.include_router(users.router, prefix=f"{settings.API_PREFIX}/users", tags=["users"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "staff-tracker-api"}

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "Staff Tracker API",
            "version": __version__,
            "docs": "/docs",
        }

    return app


app = create_app()


def run():
    """Console entry point"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "staff_tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
