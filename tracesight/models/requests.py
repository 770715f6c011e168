"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code of the board layout")
    tolerance: float | None = Field(
        default=None,
        gt=0,
        allow_inf_nan=False,
        description="Max endpoint distance treated as the same point (server default when omitted)",
    )
    label_nets: bool = Field(default=True, description="Group connected traces into nets")


class NormalizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code of the board layout")
