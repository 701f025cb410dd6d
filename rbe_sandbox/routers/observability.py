"""Observability endpoints for health checks and catalog listings."""

from fastapi import APIRouter

from rbe_sandbox import __version__
from rbe_sandbox.config import get_settings
from rbe_sandbox.engine.metrics import DIALS, METRICS

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "rbe-sandbox",
        "version": __version__,
        "counter_backend": settings.counter_backend,
    }


@router.get("/metrics")
async def list_metrics():
    """List all outcome metric definitions."""
    return {
        "metrics": [
            {
                "key": m.key,
                "name": m.name,
                "description": m.description,
                "min_value": m.min_value,
                "max_value": m.max_value,
                "unit": m.unit,
                "higher_is_better": m.higher_is_better,
            }
            for m in METRICS.values()
        ]
    }


@router.get("/dials")
async def list_dials():
    """List all policy dial definitions."""
    return {
        "dials": [
            {
                "key": d.key,
                "name": d.name,
                "description": d.description,
                "tooltip": d.tooltip,
                "min_value": d.min_value,
                "max_value": d.max_value,
            }
            for d in DIALS.values()
        ]
    }
