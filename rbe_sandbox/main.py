"""FastAPI application entry point."""

from contextlib import asynccontextmanager
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from rbe_sandbox import __version__
from rbe_sandbox.config import get_settings
from rbe_sandbox.logging_config import setup_logging, get_logger
from rbe_sandbox.routers import observability, presets, simulate, visitors
from rbe_sandbox.services.visitor_counter import get_counter_store

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info("Starting RBE Sandbox API...")
    store = get_counter_store()
    await store.init()
    logger.info(f"Visit counter ready ({settings.counter_backend})")
    yield
    # Shutdown
    logger.info("Shutting down RBE Sandbox API...")
    await store.close()


settings = get_settings()

app = FastAPI(
    title="RBE Sandbox",
    description="Explore how profit, commons, automation and ecological limits shape the next 30 years",
    version=__version__,
    lifespan=lifespan,
)

# Request timing middleware
@app.middleware("http")
async def log_request_timing(request: Request, call_next):
    """Log the time taken for each API request."""
    start_time = time.time()

    logger.info(f"→ API_REQUEST | {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time

    status_emoji = "✓" if response.status_code < 400 else "✗"
    logger.info(
        f"{status_emoji} API_RESPONSE | {request.method} {request.url.path} | "
        f"status={response.status_code} | duration={duration:.3f}s"
    )

    return response

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(observability.router, prefix="/v1", tags=["Observability"])
app.include_router(presets.router, prefix="/v1", tags=["Presets"])
app.include_router(simulate.router, prefix="/v1", tags=["Simulation"])
app.include_router(visitors.router, prefix="/v1", tags=["Visitors"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "RBE Sandbox",
        "version": __version__,
        "description": "What happens when we change the rules?",
    }
