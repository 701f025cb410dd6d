"""Pydantic schemas for the visit counter."""

from pydantic import BaseModel, Field


class VisitorCount(BaseModel):
    """Current number of recorded visits."""

    count: int = Field(..., ge=0, description="Number of recorded visits")
