"""API routers for RBE Sandbox."""

from rbe_sandbox.routers import observability, presets, simulate, visitors

__all__ = [
    "observability",
    "presets",
    "simulate",
    "visitors",
]
