"""Pydantic schemas for API validation."""

from rbe_sandbox.schemas.simulation import (
    PolicyInputsSchema,
    OutcomesResponse,
    ProjectionPoint,
    ClassificationResponse,
    SimulateRequest,
    SimulateResponse,
    CompareRequest,
    CompareResponse,
    PresetResponse,
    PresetDetailResponse,
)
from rbe_sandbox.schemas.visitors import VisitorCount

__all__ = [
    "PolicyInputsSchema",
    "OutcomesResponse",
    "ProjectionPoint",
    "ClassificationResponse",
    "SimulateRequest",
    "SimulateResponse",
    "CompareRequest",
    "CompareResponse",
    "PresetResponse",
    "PresetDetailResponse",
    "VisitorCount",
]
