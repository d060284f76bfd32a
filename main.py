# main.py
"""
GetUs.Fit API - Main Application.

FastAPI app with SQLAlchemy storage (SQLite or PostgreSQL).
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from settings import settings
from app.database import init_db
from app.utils.errors import GetUsFitException

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")

# Import routers
from app.routes import (
    auth,
    profile,
    user,
    workout,
    weight,
    calorie,
    plan,
    food,
    admin,
    trainer,
)
from app.services.food_service import close_food_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting GetUs.Fit API...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    await close_food_service()
    logger.info("GetUs.Fit API shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="GetUs.Fit API",
    version="1.0.0",
    description="Fitness tracking with trainer and admin roles",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GetUsFitException)
async def getusfit_exception_handler(request: Request, exc: GetUsFitException):
    """Render application errors as {"error", "kind"} with the class's status."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies and parameters as validation errors."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request."
    return JSONResponse(status_code=400, content={"error": message, "kind": "validation"})


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint - fast response without database dependency."""
    return {
        "status": "ok",
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0"
    }


# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(profile.router, prefix="/api/profile", tags=["Profile"])
app.include_router(user.router, prefix="/api/user", tags=["User"])
app.include_router(workout.router, prefix="/api/workouts", tags=["Workouts"])
app.include_router(weight.router, prefix="/api/weights", tags=["Weights"])
app.include_router(calorie.router, prefix="/api/calories", tags=["Calories"])
app.include_router(plan.router, prefix="/api/plans", tags=["Plans"])
app.include_router(food.router, prefix="/api/food", tags=["Food"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
app.include_router(trainer.router, prefix="/api/trainer", tags=["Trainer"])


# Root endpoint
@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": "GetUs.Fit API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
