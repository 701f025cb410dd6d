"""Simulation endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from rbe_sandbox.config import get_settings
from rbe_sandbox.engine.presets import DEFAULT_INPUTS, get_preset
from rbe_sandbox.engine.seeding import seed_inputs
from rbe_sandbox.schemas.simulation import (
    CompareRequest,
    CompareResponse,
    SimulateRequest,
    SimulateResponse,
)
from rbe_sandbox.services.scenario_runner import compare_scenarios, run_scenario

logger = logging.getLogger(__name__)

router = APIRouter()


def resolve_horizon(horizon: Optional[int]) -> int:
    """Fill in the default horizon and enforce the configured maximum."""
    settings = get_settings()
    if horizon is None:
        return settings.default_horizon
    if horizon > settings.max_horizon:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"horizon must be at most {settings.max_horizon}",
        )
    return horizon


@router.get("/simulate", response_model=SimulateResponse)
async def simulate_from_query(
    request: Request,
    preset: Optional[str] = Query(None, description="Preset to start from instead of the defaults"),
    horizon: Optional[int] = Query(None, ge=0, description="Years to project"),
):
    """
    Run a simulation seeded from query parameters.

    Accepts ``profitPriority``, ``commonsLevel``, ``automationLevel`` and
    ``ecoConstraint`` (snake_case works too). Values are clamped into
    [0, 100]; anything that isn't a number is ignored and the starting
    value is kept.
    """
    start = DEFAULT_INPUTS
    if preset is not None:
        try:
            start = get_preset(preset).inputs
        except KeyError:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Preset {preset} not found",
            )

    inputs = seed_inputs(start, request.query_params)
    return run_scenario(inputs, resolve_horizon(horizon))


@router.post("/simulate", response_model=SimulateResponse)
async def simulate(request: SimulateRequest):
    """Run a simulation for explicit policy inputs."""
    return run_scenario(request.inputs.to_engine(), resolve_horizon(request.horizon))


@router.post("/simulate/compare", response_model=CompareResponse)
async def compare(request: CompareRequest):
    """
    Compare two scenarios.

    Deltas are reported as b minus a, both for the base year and for the
    last projected year.
    """
    horizon = resolve_horizon(request.horizon)
    result = compare_scenarios(request.a.to_engine(), request.b.to_engine(), horizon)
    logger.info(
        f"[COMPARE] a={result.result_a.classification.label} "
        f"b={result.result_b.classification.label} horizon={horizon}"
    )
    return result
