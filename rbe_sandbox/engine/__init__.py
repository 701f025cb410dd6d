"""Simulation engine components."""

from rbe_sandbox.engine.model import (
    PolicyInputs,
    OutcomeMetrics,
    YearlyProjection,
    clamp01,
    evaluate,
    project,
    is_rbe_leaning,
)
from rbe_sandbox.engine.classification import ScenarioClassification, classify
from rbe_sandbox.engine.metrics import DIALS, METRICS, DialDefinition, MetricDefinition
from rbe_sandbox.engine.presets import DEFAULT_INPUTS, PRESETS, Preset, get_preset
from rbe_sandbox.engine.seeding import seed_inputs

__all__ = [
    "PolicyInputs",
    "OutcomeMetrics",
    "YearlyProjection",
    "clamp01",
    "evaluate",
    "project",
    "is_rbe_leaning",
    "ScenarioClassification",
    "classify",
    "DIALS",
    "METRICS",
    "DialDefinition",
    "MetricDefinition",
    "DEFAULT_INPUTS",
    "PRESETS",
    "Preset",
    "get_preset",
    "seed_inputs",
]
