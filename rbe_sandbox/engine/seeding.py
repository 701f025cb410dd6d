"""Seed policy inputs from raw query-string values."""

import math
from dataclasses import fields, replace
from typing import Mapping, Optional

from rbe_sandbox.engine.model import PolicyInputs, clamp_dial


# snake_case field -> camelCase query parameter
QUERY_KEYS: dict[str, str] = {
    "profit_priority": "profitPriority",
    "commons_level": "commonsLevel",
    "automation_level": "automationLevel",
    "eco_constraint": "ecoConstraint",
}


def parse_dial(raw: Optional[str]) -> Optional[int]:
    """
    Parse a raw dial value.

    Returns the value clamped into [0, 100], or None if it is missing,
    blank or not a finite number.
    """
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return clamp_dial(value)


def seed_inputs(prior: PolicyInputs, params: Mapping[str, Optional[str]]) -> PolicyInputs:
    """
    Overlay query parameters on top of prior inputs.

    Each dial is looked up by its camelCase name first, then snake_case.
    Values that don't parse leave the prior value untouched.
    """
    overrides = {}
    for f in fields(PolicyInputs):
        raw = params.get(QUERY_KEYS[f.name])
        if raw is None:
            raw = params.get(f.name)
        value = parse_dial(raw)
        if value is not None:
            overrides[f.name] = value

    return replace(prior, **overrides)
