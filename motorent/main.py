# motorent/main.py
"""
FastAPI application entry point.
Includes request logging, business/global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from motorent import __version__
from motorent.routers import motorcycles, drivers, rentals, notifications, health
from motorent.database import create_tables
from motorent.config import settings
from motorent.services.errors import RentalServiceError
from motorent.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Motorent API",
    description="Motorcycle rental management — fleet, delivery drivers, rentals and fleet notifications.",
    version=__version__,
    docs_url="/docs" if settings.API_DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.API_DOCS_ENABLED else None,
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Business Error Handler ───────────────────────────────────────────────────
@app.exception_handler(RentalServiceError)
async def rental_service_error_handler(request: Request, exc: RentalServiceError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.code} ({exc.message})")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(motorcycles.router,   prefix="/api/v1", tags=["🏍️ Motorcycles"])
app.include_router(drivers.router,       prefix="/api/v1", tags=["🧑 Drivers"])
app.include_router(rentals.router,       prefix="/api/v1", tags=["📄 Rentals"])
app.include_router(notifications.router, prefix="/api/v1", tags=["🔔 Notifications"])
app.include_router(health.router,        prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Motorent Backend starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    if settings.is_in_memory:
        logger.info("💾 Using in-memory SQLite — data is lost on restart")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_IP}:{settings.BACKEND_PORT}")
    if settings.API_DOCS_ENABLED:
        logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Motorent Backend shutting down...")
