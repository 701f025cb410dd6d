"""Pydantic schemas for simulation requests and responses."""

import math
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from rbe_sandbox.engine.model import (
    OutcomeMetrics,
    PolicyInputs,
    YearlyProjection,
    clamp_dial,
)
from rbe_sandbox.engine.classification import ScenarioClassification
from rbe_sandbox.engine.metrics import normalize_metric
from rbe_sandbox.engine.seeding import parse_dial


# =============================================================================
# Simulation Components
# =============================================================================

class PolicyInputsSchema(BaseModel):
    """The four policy dials. Out-of-range values are clamped into [0, 100]."""

    profit_priority: int = Field(
        ...,
        validation_alias=AliasChoices("profitPriority", "profit_priority"),
        description="How much the system optimizes for owner returns (0-100)",
    )
    commons_level: int = Field(
        ...,
        validation_alias=AliasChoices("commonsLevel", "commons_level"),
        description="How much infrastructure and AI is publicly owned (0-100)",
    )
    automation_level: int = Field(
        ...,
        validation_alias=AliasChoices("automationLevel", "automation_level"),
        description="How far AI is pushed into production (0-100)",
    )
    eco_constraint: int = Field(
        ...,
        validation_alias=AliasChoices("ecoConstraint", "eco_constraint"),
        description="How strictly planetary boundaries are enforced (0-100)",
    )

    @field_validator(
        "profit_priority", "commons_level", "automation_level", "eco_constraint",
        mode="before",
    )
    @classmethod
    def clamp_to_dial_range(cls, value):
        if isinstance(value, str):
            parsed = parse_dial(value)
            return value if parsed is None else parsed
        if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
            return clamp_dial(value)
        return value

    def to_engine(self) -> PolicyInputs:
        return PolicyInputs(
            profit_priority=self.profit_priority,
            commons_level=self.commons_level,
            automation_level=self.automation_level,
            eco_constraint=self.eco_constraint,
        )

    @classmethod
    def from_engine(cls, inputs: PolicyInputs) -> "PolicyInputsSchema":
        return cls(
            profit_priority=inputs.profit_priority,
            commons_level=inputs.commons_level,
            automation_level=inputs.automation_level,
            eco_constraint=inputs.eco_constraint,
        )


class OutcomesResponse(BaseModel):
    """Single-year outcome metrics."""

    inequality: float = Field(..., ge=0, le=1)
    avg_work_hours: int = Field(..., ge=10, le=50, description="Hours per week")
    emissions_index: float = Field(..., ge=0, le=1)
    security_index: float = Field(..., ge=0, le=1)
    normalized: dict[str, float] = Field(
        default_factory=dict, description="Each metric mapped onto [0, 1] for display"
    )

    @classmethod
    def from_engine(cls, outcomes: OutcomeMetrics) -> "OutcomesResponse":
        values = {
            "inequality": outcomes.inequality,
            "avg_work_hours": outcomes.avg_work_hours,
            "emissions_index": outcomes.emissions_index,
            "security_index": outcomes.security_index,
        }
        return cls(
            **values,
            normalized={key: normalize_metric(key, v) for key, v in values.items()},
        )


class ProjectionPoint(BaseModel):
    """One year of the trajectory."""

    year: int
    inequality: float
    emissions: float
    security: float

    @classmethod
    def from_engine(cls, point: YearlyProjection) -> "ProjectionPoint":
        return cls(
            year=point.year,
            inequality=point.inequality,
            emissions=point.emissions,
            security=point.security,
        )


class ClassificationResponse(BaseModel):
    """Interpretation of the scenario."""

    rbe_leaning: bool
    label: str
    headline: str
    summary: str

    @classmethod
    def from_engine(cls, classification: ScenarioClassification) -> "ClassificationResponse":
        return cls(
            rbe_leaning=classification.rbe_leaning,
            label=classification.label,
            headline=classification.headline,
            summary=classification.summary,
        )


# =============================================================================
# Request/Response Schemas
# =============================================================================

class SimulateRequest(BaseModel):
    """Request to run a simulation."""

    inputs: PolicyInputsSchema = Field(..., description="Policy dial positions")
    horizon: Optional[int] = Field(None, ge=0, description="Years to project (default from settings)")


class SimulateResponse(BaseModel):
    """Response from a simulation."""

    inputs: PolicyInputsSchema
    outcomes: OutcomesResponse
    classification: ClassificationResponse
    horizon: int
    trajectory: list[ProjectionPoint] = Field(default_factory=list)


class CompareRequest(BaseModel):
    """Request to compare two sets of policy inputs."""

    a: PolicyInputsSchema = Field(..., description="First scenario")
    b: PolicyInputsSchema = Field(..., description="Second scenario")
    horizon: Optional[int] = Field(None, ge=0)


class CompareResponse(BaseModel):
    """Both simulations plus outcome deltas (b minus a)."""

    result_a: SimulateResponse
    result_b: SimulateResponse
    outcome_deltas: dict[str, float] = Field(default_factory=dict)
    final_year_deltas: dict[str, float] = Field(default_factory=dict)


class PresetResponse(BaseModel):
    """A named preset scenario."""

    key: str
    name: str
    description: str
    inputs: PolicyInputsSchema


class PresetDetailResponse(PresetResponse):
    """A preset together with its simulation."""

    result: SimulateResponse
