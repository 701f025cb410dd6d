"""Visit counter endpoints."""

from fastapi import APIRouter, Depends

from rbe_sandbox.schemas.visitors import VisitorCount
from rbe_sandbox.services.visitor_counter import CounterStore, get_counter_store

router = APIRouter(prefix="/visitors")


@router.get("", response_model=VisitorCount)
async def get_visitors(store: CounterStore = Depends(get_counter_store)):
    """Return the current visit count."""
    return VisitorCount(count=await store.get())


@router.post("", response_model=VisitorCount)
async def record_visit(store: CounterStore = Depends(get_counter_store)):
    """Record one visit and return the new count."""
    return VisitorCount(count=await store.increment())
