"""Dial and metric definitions for RBE Sandbox."""

from dataclasses import dataclass


@dataclass
class DialDefinition:
    """Definition of a policy dial (an input slider)."""

    key: str
    name: str
    description: str
    tooltip: str
    min_value: int = 0
    max_value: int = 100


@dataclass
class MetricDefinition:
    """Definition of an outcome metric."""

    key: str
    name: str
    description: str
    min_value: float = 0.0
    max_value: float = 1.0
    unit: str = "fraction"
    higher_is_better: bool = True


# Policy dials, in display order
DIALS: dict[str, DialDefinition] = {
    "profit_priority": DialDefinition(
        key="profit_priority",
        name="Profit priority",
        description="How much does the system optimize for owner returns?",
        tooltip=(
            "High values mean shareholder returns trump worker welfare, "
            "environmental costs, and long-term stability."
        ),
    ),
    "commons_level": DialDefinition(
        key="commons_level",
        name="Commons ownership",
        description="How much infrastructure & AI is publicly owned?",
        tooltip=(
            "Think public utilities, open-source AI, community land trusts. "
            "High commons means automation gains are shared."
        ),
    ),
    "automation_level": DialDefinition(
        key="automation_level",
        name="Automation level",
        description="How far is AI pushed into production?",
        tooltip=(
            "This isn't good or bad, it's an amplifier. High automation + high "
            "commons = liberation. High automation + profit priority = precarity."
        ),
    ),
    "eco_constraint": DialDefinition(
        key="eco_constraint",
        name="Ecological limits",
        description="How strictly are planetary boundaries enforced?",
        tooltip=(
            "High values mean hard limits on carbon, extraction, and waste. "
            "Low values treat the planet as an externality."
        ),
    ),
}


# Outcome metrics
METRICS: dict[str, MetricDefinition] = {
    "inequality": MetricDefinition(
        key="inequality",
        name="Inequality",
        description="How unevenly income and wealth are distributed",
        higher_is_better=False,
    ),
    "avg_work_hours": MetricDefinition(
        key="avg_work_hours",
        name="Work week",
        description="Average hours worked per week",
        min_value=10,
        max_value=50,
        unit="hours/week",
        higher_is_better=False,
    ),
    "emissions_index": MetricDefinition(
        key="emissions_index",
        name="Emissions",
        description="Pressure on planetary boundaries from economic throughput",
        higher_is_better=False,
    ),
    "security_index": MetricDefinition(
        key="security_index",
        name="Security",
        description="How secure people's access to housing, food and care is",
        higher_is_better=True,
    ),
}


def get_metric(key: str) -> MetricDefinition:
    """Get a metric definition by key."""
    if key not in METRICS:
        raise KeyError(f"Unknown metric: {key}")
    return METRICS[key]


def normalize_metric(key: str, value: float) -> float:
    """Map a metric value onto [0, 1] using its documented range."""
    metric = get_metric(key)
    span = metric.max_value - metric.min_value
    return max(0.0, min(1.0, (value - metric.min_value) / span))
