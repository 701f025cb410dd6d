"""Runs the scenario model and packages the results for the API."""

import logging
from dataclasses import asdict

from rbe_sandbox.engine.classification import classify
from rbe_sandbox.engine.model import PolicyInputs, evaluate, project
from rbe_sandbox.schemas.simulation import (
    ClassificationResponse,
    CompareResponse,
    OutcomesResponse,
    PolicyInputsSchema,
    ProjectionPoint,
    SimulateResponse,
)

logger = logging.getLogger(__name__)


def run_scenario(inputs: PolicyInputs, horizon: int) -> SimulateResponse:
    """
    Evaluate a scenario and project it over ``horizon`` years.

    Args:
        inputs: Policy dials (already clamped)
        horizon: Last projected year

    Returns:
        Outcomes, classification and the full trajectory
    """
    outcomes = evaluate(inputs)
    trajectory = project(inputs, horizon)
    classification = classify(inputs, outcomes)

    logger.debug(
        f"[SIM] inputs={asdict(inputs)} | label={classification.label} | horizon={horizon}"
    )

    return SimulateResponse(
        inputs=PolicyInputsSchema.from_engine(inputs),
        outcomes=OutcomesResponse.from_engine(outcomes),
        classification=ClassificationResponse.from_engine(classification),
        horizon=horizon,
        trajectory=[ProjectionPoint.from_engine(p) for p in trajectory],
    )


def compare_scenarios(a: PolicyInputs, b: PolicyInputs, horizon: int) -> CompareResponse:
    """Run two scenarios side by side and report how b differs from a."""
    result_a = run_scenario(a, horizon)
    result_b = run_scenario(b, horizon)

    outcome_deltas = {
        key: getattr(result_b.outcomes, key) - getattr(result_a.outcomes, key)
        for key in ("inequality", "avg_work_hours", "emissions_index", "security_index")
    }

    final_a = result_a.trajectory[-1]
    final_b = result_b.trajectory[-1]
    final_year_deltas = {
        key: getattr(final_b, key) - getattr(final_a, key)
        for key in ("inequality", "emissions", "security")
    }

    return CompareResponse(
        result_a=result_a,
        result_b=result_b,
        outcome_deltas=outcome_deltas,
        final_year_deltas=final_year_deltas,
    )
