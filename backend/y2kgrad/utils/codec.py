"""Configuration codec: GradientConfig to a URL-safe state string and back.

Format: compact JSON with camelCase keys, UTF-8, URL-safe base64 without
``=`` padding.

Decoding never raises. A blob that cannot be decoded at all yields the full
default configuration; within a readable blob, each field that is missing or
has the wrong type falls back to its own default while the rest are kept.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from y2kgrad.models.gradient import GradientConfig, Stop

logger = logging.getLogger(__name__)

StateNumber = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class _StoredStop(BaseModel):
    """A stop as persisted; every key is required, no coercion."""

    model_config = ConfigDict(strict=True)

    position: StateNumber
    color: str
    isLargeEnd: bool

    def to_stop(self) -> Stop:
        return Stop(position=self.position, color=self.color, is_large_end=self.isLargeEnd)


_NUMBER = TypeAdapter(StateNumber)
_STRING = TypeAdapter(Annotated[str, Field(strict=True)])
_BOOL = TypeAdapter(Annotated[bool, Field(strict=True)])
_STOPS = TypeAdapter(list[_StoredStop])

# JSON key -> (model field, validator)
_SCALAR_FIELDS: dict[str, tuple[str, TypeAdapter]] = {
    "width": ("width", _NUMBER),
    "height": ("height", _NUMBER),
    "squareSize": ("square_size", _NUMBER),
    "sizeStep": ("size_step", _NUMBER),
    "bgColor": ("bg_color", _STRING),
    "angle": ("angle", _NUMBER),
    "mergeRects": ("merge_rects", _BOOL),
}


def encode_config(config: GradientConfig) -> str:
    payload = json.dumps(config.model_dump(by_alias=True), separators=(",", ":"))
    encoded = base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def _decode_payload(blob: str) -> dict[str, Any]:
    padded = blob.strip() + "=" * (-len(blob.strip()) % 4)
    raw = base64.urlsafe_b64decode(padded.encode("ascii"))
    data = json.loads(raw.decode("utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"state must be a JSON object, got {type(data).__name__}")
    return data


def decode_config(blob: str) -> GradientConfig:
    """Decode a state string; see the module docstring for the fallback rules."""
    try:
        data = _decode_payload(blob)
    except Exception as e:
        logger.warning("Unreadable gradient state, using defaults: %s", e)
        return GradientConfig()

    values: dict[str, Any] = {}
    for key, (field_name, adapter) in _SCALAR_FIELDS.items():
        if key not in data:
            continue
        try:
            values[field_name] = adapter.validate_python(data[key])
        except ValidationError:
            logger.debug("Field %s has bad value %r, using default", key, data[key])

    if "stops" in data:
        try:
            values["stops"] = [s.to_stop() for s in _STOPS.validate_python(data["stops"])]
        except ValidationError as e:
            logger.debug("Field stops rejected, using default: %s", e)

    return GradientConfig(**values)
