"""POST /api/generate: render a gradient to SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from y2kgrad.config import Settings
from y2kgrad.dependencies import get_settings
from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.errors import GridTooLargeError, check_grid_size
from y2kgrad.engine.pipeline import GradientResult, generate_from_config
from y2kgrad.engine.validation import validate_generated_svg
from y2kgrad.models.requests import GenerateRequest
from y2kgrad.models.responses import GenerateResponse
from y2kgrad.svg.export import SVG_MEDIA_TYPE, content_disposition

router = APIRouter()
logger = logging.getLogger(__name__)


def render(req: GenerateRequest, settings: Settings) -> GradientResult:
    """Bound the grid, run the generator, optionally read the output back."""
    try:
        check_grid_size(req.width, req.height, req.square_size, settings.max_cells)
    except GridTooLargeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    result = generate_from_config(req, GeneratorConfig(verify_merge=settings.verify_merge))

    if settings.validate_output:
        report = validate_generated_svg(result.svg)
        for issue in report["issues"]:
            logger.warning("Generated SVG issue: %s", issue)

    return result


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest, settings: Settings = Depends(get_settings)) -> GenerateResponse:
    start = time.perf_counter()
    result = render(req, settings)
    elapsed = (time.perf_counter() - start) * 1000

    return GenerateResponse(
        svg=result.svg,
        rect_count=result.rect_count,
        raw_rect_count=result.raw_rect_count,
        cols=result.cols,
        rows=result.rows,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/generate/download")
def download(req: GenerateRequest, settings: Settings = Depends(get_settings)) -> Response:
    result = render(req, settings)
    return Response(
        content=result.svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(settings.download_filename)},
    )
