"""
Payment Capture Simulator — FastAPI Application Entry Point

Aggregates all routers, configures middleware, and builds the ledger,
gateway and submission guard on startup.
"""
import logging
import random
import time
from datetime import datetime

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from paysim.config import get_settings
from paysim.database import SessionLocal, get_db, init_db
from paysim.logging_config import configure_logging
from paysim.routes import payment_router, history_router, admin_router
from paysim.schemas.schemas import HealthResponse
from paysim.services.blob_store import BlobStore
from paysim.services.gateway import GatewaySimulator
from paysim.services.ledger import PaymentLedger
from paysim.utils.submission_guard import SubmissionGuard

settings = get_settings()
logger = logging.getLogger(__name__)

# ─── Application Instance ───────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Simulated payment capture: per-method form validation for Credit Card, "
        "PayPal, RazorPay and Net Banking, a mock gateway with randomized "
        "approvals, and a persisted, paginated payment history."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# ─── Startup / Shutdown ──────────────────────────────────────────────
BOOT_TIME = time.time()


@app.on_event("startup")
def on_startup():
    """Create tables, then build the process-wide ledger and gateway."""
    configure_logging(settings)
    init_db()

    ledger = PaymentLedger(BlobStore(SessionLocal), settings.LEDGER_STORAGE_KEY)
    ledger.load()

    rng = random.Random(settings.GATEWAY_SEED)
    app.state.ledger = ledger
    app.state.gateway = GatewaySimulator(
        rng=rng,
        success_rate=settings.GATEWAY_SUCCESS_RATE,
        latency_seconds=settings.GATEWAY_LATENCY_SECONDS,
    )
    app.state.submission_guard = SubmissionGuard()

    logger.info(
        "\n%s\n  %s v%s\n  TIME: %s\n  DATABASE: %s\n  LEDGER: %d payment(s) under '%s'\n"
        "  GATEWAY: success_rate=%.2f latency=%.1fs seed=%s\n  DEBUG: %s\n%s",
        "=" * 60,
        settings.APP_NAME, settings.APP_VERSION,
        datetime.now().isoformat(),
        settings.DATABASE_URL,
        len(ledger), settings.LEDGER_STORAGE_KEY,
        settings.GATEWAY_SUCCESS_RATE, settings.GATEWAY_LATENCY_SECONDS, settings.GATEWAY_SEED,
        settings.DEBUG,
        "=" * 60,
    )


@app.on_event("shutdown")
def on_shutdown():
    """Release ledger subscribers."""
    ledger = getattr(app.state, "ledger", None)
    if ledger is not None:
        ledger.close()
    logger.info("%s shutting down", settings.APP_NAME)


# ─── Middleware ──────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with timing."""
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 1)

    if request.url.path.startswith("/api"):
        logger.info("%s %s -> %s (%sms)", request.method, request.url.path, response.status_code, duration)

    return response


# ─── API Routers ─────────────────────────────────────────────────────
app.include_router(payment_router)
app.include_router(history_router)
app.include_router(admin_router)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
def deep_health(request: Request, db: Session = Depends(get_db)):
    """Detailed health check including storage reachability."""
    storage_ok = False
    try:
        db.execute(text("SELECT 1"))
        storage_ok = True
    except SQLAlchemyError:
        logger.exception("Health check could not reach storage")

    ledger = getattr(request.app.state, "ledger", None)
    return HealthResponse(
        status="healthy" if storage_ok else "degraded",
        storage="connected" if storage_ok else "disconnected",
        ledger_size=len(ledger) if ledger is not None else 0,
        uptime_seconds=round(time.time() - BOOT_TIME, 1),
        version=settings.APP_VERSION,
    )
