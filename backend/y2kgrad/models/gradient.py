"""Gradient parameter models: color stops and the persisted configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Stop(BaseModel):
    """A gradient checkpoint. ``color`` is an opaque token, never parsed."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    position: float = Field(..., description="Position along the axis, 0-100")
    color: str = Field(..., description="Color token, e.g. #1a1a6e")
    is_large_end: bool = Field(
        default=False,
        alias="isLargeEnd",
        description="Full-size foreground squares at this stop",
    )


DEFAULT_STOPS: tuple[Stop, ...] = (
    Stop(position=0, color="#1a1a6e", is_large_end=True),
    Stop(position=50, color="#c0c0c0", is_large_end=False),
    Stop(position=50, color="#c0c0c0", is_large_end=False),
    Stop(position=100, color="#6e1a1a", is_large_end=True),
)


def default_stops() -> list[Stop]:
    return list(DEFAULT_STOPS)


class GradientConfig(BaseModel):
    """Everything needed to regenerate a gradient; round-trips through the codec."""

    model_config = ConfigDict(populate_by_name=True)

    width: float = 400
    height: float = 80
    square_size: float = Field(default=8, alias="squareSize")
    size_step: float = Field(default=1, alias="sizeStep")
    stops: list[Stop] = Field(default_factory=default_stops)
    bg_color: str = Field(default="#c0c0c0", alias="bgColor")
    angle: float = 0
    merge_rects: bool = Field(default=True, alias="mergeRects")
