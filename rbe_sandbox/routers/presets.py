"""Preset scenario endpoints."""

from fastapi import APIRouter, HTTPException, status

from rbe_sandbox.config import get_settings
from rbe_sandbox.engine.presets import PRESETS, Preset, get_preset
from rbe_sandbox.schemas.simulation import (
    PolicyInputsSchema,
    PresetDetailResponse,
    PresetResponse,
)
from rbe_sandbox.services.scenario_runner import run_scenario

router = APIRouter(prefix="/presets")


def _to_response(preset: Preset) -> PresetResponse:
    return PresetResponse(
        key=preset.key,
        name=preset.name,
        description=preset.description,
        inputs=PolicyInputsSchema.from_engine(preset.inputs),
    )


@router.get("", response_model=list[PresetResponse])
async def list_presets():
    """List all preset scenarios."""
    return [_to_response(p) for p in PRESETS.values()]


@router.get("/{preset_key}", response_model=PresetDetailResponse)
async def get_preset_detail(preset_key: str):
    """Get a preset together with its simulation over the default horizon."""
    try:
        preset = get_preset(preset_key)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Preset {preset_key} not found",
        )

    return PresetDetailResponse(
        **_to_response(preset).model_dump(),
        result=run_scenario(preset.inputs, get_settings().default_horizon),
    )
