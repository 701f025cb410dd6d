"""Named preset scenarios and the default starting point."""

from dataclasses import dataclass

from rbe_sandbox.engine.model import PolicyInputs


@dataclass
class Preset:
    """A named, fixed set of policy inputs."""

    key: str
    name: str
    description: str
    inputs: PolicyInputs


# Initial dial positions before the user touches anything
DEFAULT_INPUTS = PolicyInputs(
    profit_priority=70,
    commons_level=20,
    automation_level=60,
    eco_constraint=25,
)


PRESETS: dict[str, Preset] = {
    "late_capitalism": Preset(
        key="late_capitalism",
        name="Default late-capitalism",
        description="High profit, low commons, weak eco limits.",
        inputs=PolicyInputs(
            profit_priority=80,
            commons_level=20,
            automation_level=70,
            eco_constraint=25,
        ),
    ),
    "fresco_rbe": Preset(
        key="fresco_rbe",
        name="Fresco-leaning RBE",
        description="High commons, strong eco limits, automation for liberation.",
        inputs=PolicyInputs(
            profit_priority=20,
            commons_level=80,
            automation_level=70,
            eco_constraint=80,
        ),
    ),
    "greenwashed": Preset(
        key="greenwashed",
        name="Greenwashed status quo",
        description="High profit, medium eco rhetoric, weak commons.",
        inputs=PolicyInputs(
            profit_priority=75,
            commons_level=35,
            automation_level=60,
            eco_constraint=55,
        ),
    ),
}


def get_preset(key: str) -> Preset:
    """Get a preset by key."""
    if key not in PRESETS:
        raise KeyError(f"Unknown preset: {key}")
    return PRESETS[key]
