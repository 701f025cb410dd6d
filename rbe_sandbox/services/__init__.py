"""Services sitting between the routers and the engine/storage."""

from rbe_sandbox.services.scenario_runner import run_scenario, compare_scenarios
from rbe_sandbox.services.visitor_counter import (
    CounterStore,
    InMemoryCounterStore,
    JsonFileCounterStore,
    DatabaseCounterStore,
    get_counter_store,
)

__all__ = [
    "run_scenario",
    "compare_scenarios",
    "CounterStore",
    "InMemoryCounterStore",
    "JsonFileCounterStore",
    "DatabaseCounterStore",
    "get_counter_store",
]
