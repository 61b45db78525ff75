"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from warranty_tracker.config import settings
from warranty_tracker.database import Base, engine
from warranty_tracker.errors import ValidationError, WarrantyTrackerError
from warranty_tracker.logging_config import setup_logging

# Import routers
from warranty_tracker.routers import auth, warranties

# Import all models so Base.metadata knows about them
from warranty_tracker.models.user import User          # noqa: F401
from warranty_tracker.models.warranty import Warranty  # noqa: F401

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Warranty Tracker",
    description="Track product warranties and see which are active, expiring soon or expired",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(warranties.router, prefix="/api/warranties", tags=["Warranties"])


@app.exception_handler(WarrantyTrackerError)
async def handle_service_error(_: Request, exc: WarrantyTrackerError):
    payload = {"message": exc.message}
    if isinstance(exc, ValidationError):
        payload["errors"] = {to_camel(field): message for field, message in exc.fields.items()}
    return JSONResponse(status_code=exc.status_code, content=payload)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(_: Request, exc: RequestValidationError):
    """Malformed bodies get the same ``{message, errors}`` shape as service validation."""
    errors = {}
    for error in exc.errors():
        # loc looks like ("body", "purchaseDate"); invalid JSON gives ("body",) or ("body", <char offset>)
        loc = error["loc"]
        field = loc[-1] if len(loc) > 1 and isinstance(loc[-1], str) else "body"
        errors.setdefault(field, error["msg"])
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"message": ValidationError.message, "errors": errors},
    )


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    logger.info("Warranty Tracker API started")


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
