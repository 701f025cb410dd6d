"""SQLAlchemy models for RBE Sandbox."""

from rbe_sandbox.models.visitor import VisitorCounter

__all__ = [
    "VisitorCounter",
]
