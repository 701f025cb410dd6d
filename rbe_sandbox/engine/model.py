"""Scenario model: maps policy dials to outcome metrics and a yearly trajectory.

A deliberately legible toy model. Raising profit priority pushes inequality
and emissions up and security down; commons ownership and ecological limits
push the other way. Every function here is pure.
"""

import math
from dataclasses import dataclass


DIAL_MIN = 0
DIAL_MAX = 100


def clamp01(x: float) -> float:
    """Clamp a value into [0, 1]."""
    return max(0.0, min(1.0, x))


def clamp_dial(value: float) -> int:
    """Clamp a raw dial value into [0, 100] and round it to an integer."""
    return round_half_up(max(DIAL_MIN, min(DIAL_MAX, value)))


def round_half_up(x: float) -> int:
    """Round halves upward (2.5 -> 3), unlike Python's banker's rounding."""
    return math.floor(x + 0.5)


@dataclass
class PolicyInputs:
    """The four policy dials, each an integer in [0, 100]."""

    profit_priority: int
    commons_level: int
    automation_level: int
    eco_constraint: int

    def __post_init__(self):
        self.profit_priority = clamp_dial(self.profit_priority)
        self.commons_level = clamp_dial(self.commons_level)
        self.automation_level = clamp_dial(self.automation_level)
        self.eco_constraint = clamp_dial(self.eco_constraint)

    def fractions(self) -> tuple[float, float, float, float]:
        """Return (p, c, a, e) normalized to [0, 1]."""
        return (
            self.profit_priority / 100,
            self.commons_level / 100,
            self.automation_level / 100,
            self.eco_constraint / 100,
        )


@dataclass
class OutcomeMetrics:
    """Single-year outcomes for a set of policy inputs."""

    inequality: float  # 0-1
    avg_work_hours: int  # hours/week, 10-50
    emissions_index: float  # 0-1
    security_index: float  # 0-1


@dataclass
class YearlyProjection:
    """One point of the trajectory."""

    year: int
    inequality: float
    emissions: float
    security: float


def evaluate(inputs: PolicyInputs) -> OutcomeMetrics:
    """Compute the single-year outcome metrics."""
    p, c, a, e = inputs.fractions()

    inequality = clamp01(0.3 + 0.9 * p - 0.7 * c)

    # Automation only shortens the week when its gains are shared
    automation_effect = -15 * a * (0.3 + 0.7 * c)
    # Profit without commons means overtime
    profit_penalty = 8 * p * (1 - c)
    raw_hours = 40 + automation_effect + profit_penalty
    avg_work_hours = round_half_up(clamp01(raw_hours / 60) * 40 + 10)

    throughput = 0.5 + 0.4 * a + 0.3 * p
    emissions_index = clamp01(throughput * (1 - 0.8 * e))

    security_index = clamp01(0.2 + 0.6 * c + 0.4 * e - 0.4 * inequality)

    return OutcomeMetrics(
        inequality=inequality,
        avg_work_hours=avg_work_hours,
        emissions_index=emissions_index,
        security_index=security_index,
    )


def project(inputs: PolicyInputs, horizon: int = 30) -> list[YearlyProjection]:
    """
    Project the base-year metrics forward year by year.

    Each metric drifts linearly from its base value; the drift is zero at
    year 0 and reaches its full size at ``horizon``.

    Args:
        inputs: Policy dials
        horizon: Last year of the projection (inclusive)

    Returns:
        ``horizon + 1`` records ordered by year
    """
    if horizon < 0:
        raise ValueError(f"horizon must be non-negative, got {horizon}")

    base = evaluate(inputs)
    p, c, _, e = inputs.fractions()

    inequality_rate = 0.4 * p * (1 - c) - 0.25 * c
    emissions_rate = 0.6 * (p + 0.3) * (1 - e) - 0.5 * e
    security_rate = 0.5 * c + 0.5 * e - 0.5 * p * (1 - c)

    trajectory = []
    for t in range(horizon + 1):
        t_norm = t / horizon if horizon else 0.0
        trajectory.append(YearlyProjection(
            year=t,
            inequality=clamp01(base.inequality + inequality_rate * t_norm),
            emissions=clamp01(base.emissions_index + emissions_rate * (t_norm * 0.8)),
            security=clamp01(base.security_index + security_rate * t_norm),
        ))

    return trajectory


def is_rbe_leaning(inputs: PolicyInputs, outcomes: OutcomeMetrics) -> bool:
    """True when a scenario is balanced enough to count as RBE-leaning."""
    return (
        outcomes.security_index > 0.6
        and outcomes.inequality < 0.4
        and outcomes.emissions_index < 0.5
        and inputs.commons_level > 50
    )
