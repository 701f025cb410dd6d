#!/usr/bin/env python3
"""
Demo script showing the scenario model in action.

Usage:
    python scripts/demo.py [horizon]

Runs every preset scenario and prints its outcomes, its classification
and a few points of its trajectory.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rbe_sandbox.engine.classification import classify
from rbe_sandbox.engine.model import evaluate, project
from rbe_sandbox.engine.presets import DEFAULT_INPUTS, PRESETS


def print_header(title: str):
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_scenario(inputs, horizon: int):
    """Print outcomes and trajectory in a readable format."""
    outcomes = evaluate(inputs)
    classification = classify(inputs, outcomes)

    print(
        f"\n🎛️  profit={inputs.profit_priority} commons={inputs.commons_level} "
        f"automation={inputs.automation_level} eco={inputs.eco_constraint}"
    )
    print(f"\n📊 Inequality: {outcomes.inequality:.0%}")
    print(f"   Work week:  {outcomes.avg_work_hours}h")
    print(f"   Emissions:  {outcomes.emissions_index:.0%}")
    print(f"   Security:   {outcomes.security_index:.0%}")

    emoji = "🌿" if classification.rbe_leaning else "📉"
    print(f"\n{emoji} {classification.label}: {classification.headline}")

    print("\n📈 Trajectory:")
    trajectory = project(inputs, horizon)
    step = max(1, horizon // 5)
    for point in trajectory[::step]:
        print(
            f"   year {point.year:>3}: inequality={point.inequality:.2f} "
            f"emissions={point.emissions:.2f} security={point.security:.2f}"
        )


def main():
    horizon = int(sys.argv[1]) if len(sys.argv) > 1 else 30

    print_header("Default starting point")
    print_scenario(DEFAULT_INPUTS, horizon)

    for preset in PRESETS.values():
        print_header(f"{preset.name} - {preset.description}")
        print_scenario(preset.inputs, horizon)


if __name__ == "__main__":
    main()
