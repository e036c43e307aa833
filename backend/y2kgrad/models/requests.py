"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from y2kgrad.models.gradient import GradientConfig


class GenerateRequest(GradientConfig):
    """GradientConfig with the ranges the API accepts."""

    width: float = Field(default=400, gt=0, le=10000, allow_inf_nan=False)
    height: float = Field(default=80, gt=0, le=10000, allow_inf_nan=False)
    square_size: float = Field(default=8, gt=0, le=1024, alias="squareSize", allow_inf_nan=False)
    size_step: float = Field(default=1, ge=0, alias="sizeStep", allow_inf_nan=False)
    angle: float = Field(default=0, allow_inf_nan=False)


class SnippetRequest(BaseModel):
    config: GenerateRequest = Field(default_factory=GenerateRequest)
    selector: str | None = Field(
        default=None,
        description="CSS selector of the target element (defaults to settings.default_selector)",
    )
