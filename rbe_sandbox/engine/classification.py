"""Caller-side interpretation of a scenario's outcomes."""

from dataclasses import dataclass

from rbe_sandbox.engine.model import OutcomeMetrics, PolicyInputs, is_rbe_leaning


@dataclass
class ScenarioClassification:
    """Label and long-game interpretation for a scenario."""

    rbe_leaning: bool
    label: str
    headline: str
    summary: str


RBE_LEANING = ScenarioClassification(
    rbe_leaning=True,
    label="RBE-leaning",
    headline="Long game: Stability",
    summary=(
        "High commons and ecological constraints keep inequality and emissions "
        "from spiraling. Automation shows up as time freedom, not precarity."
    ),
)

PROFIT_MAX = ScenarioClassification(
    rbe_leaning=False,
    label="Profit-max",
    headline="Long game: Familiar cliff",
    summary=(
        "Profit-heavy rules with weak commons gradually push inequality and "
        "emissions up. Even with automation, most stay locked in long work weeks."
    ),
)


def classify(inputs: PolicyInputs, outcomes: OutcomeMetrics) -> ScenarioClassification:
    """Classify a scenario as RBE-leaning or profit-maximizing."""
    return RBE_LEANING if is_rbe_leaning(inputs, outcomes) else PROFIT_MAX
