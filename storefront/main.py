"""
FastAPI Application Entry Point - Storefront Service
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import SQLAlchemyError

from storefront.config import settings
from storefront.database import init_db
from storefront.exceptions import StorefrontError
from storefront.logging_config import configure_logging
from storefront.api import ai, analytics, auth, health, orders, products, stores

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Storefront Service",
    description="Multi-tenant storefront backend: stores, catalog, orders and sales analytics",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(stores.router)
app.include_router(products.router)
app.include_router(orders.router)
app.include_router(analytics.router)
app.include_router(ai.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)


@app.exception_handler(StorefrontError)
def storefront_error_handler(request: Request, exc: StorefrontError):
    """Translate service errors into structured JSON responses"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code}
    )


@app.exception_handler(SQLAlchemyError)
def database_error_handler(request: Request, exc: SQLAlchemyError):
    # Driver messages stay in the log
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal storage error", "code": "INTERNAL"}
    )


@app.on_event("startup")
def startup_event():
    """Initialize database on startup"""
    logger.info("Starting %s...", settings.SERVICE_NAME)
    init_db()
    logger.info("Database initialized")
    logger.info("Text generation: %s", "Gemini" if settings.GEMINI_API_KEY else "fallback templates")
    logger.info("Order events: %s", settings.RABBITMQ_URL if settings.EVENTS_ENABLED else "disabled")
    logger.info("Order status policy: %s", settings.ORDER_STATUS_POLICY)
    logger.info("%s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down %s...", settings.SERVICE_NAME)
