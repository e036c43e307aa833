"""Shareable state endpoints: encode a config to a URL-safe string and back."""

from __future__ import annotations

from fastapi import APIRouter, Query

from y2kgrad.models.gradient import GradientConfig
from y2kgrad.models.responses import EncodedStateResponse
from y2kgrad.utils.codec import decode_config, encode_config

router = APIRouter(prefix="/config")


@router.post("/encode", response_model=EncodedStateResponse)
async def encode(config: GradientConfig) -> EncodedStateResponse:
    return EncodedStateResponse(state=encode_config(config))


@router.get("/decode", response_model=GradientConfig, response_model_by_alias=True)
async def decode(state: str = Query("", description="Encoded state string")) -> GradientConfig:
    # Never fails: unreadable state decodes to the defaults
    return decode_config(state)
