"""RBE Sandbox - explore how economic rules play out over time."""

__version__ = "0.1.0"
