from __future__ import annotations

from pydantic import Field

from core.models.common import CamelModel


class BMIRecordIn(CamelModel):
    height: float = Field(..., ge=50, le=300, description="Height in cm")
    weight: float = Field(..., ge=20, le=500, description="Weight in kg")
    # accepted for compatibility with older clients; recomputed server-side
    bmi: float | None = None
    category: str | None = None
    notes: str | None = None
