"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class GenerateResponse(BaseModel):
    svg: str
    rect_count: int = 0
    raw_rect_count: int = 0
    cols: int = 0
    rows: int = 0
    processing_time_ms: float = 0.0


class EncodedStateResponse(BaseModel):
    state: str


class SnippetResponse(BaseModel):
    code: str
    selector: str
