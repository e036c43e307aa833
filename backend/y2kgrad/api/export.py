"""POST /api/export/snippet: JavaScript that applies the gradient to an element."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from y2kgrad.api.generate import render
from y2kgrad.config import Settings
from y2kgrad.dependencies import get_settings
from y2kgrad.models.requests import SnippetRequest
from y2kgrad.models.responses import SnippetResponse
from y2kgrad.svg.export import build_apply_snippet

router = APIRouter(prefix="/export")


@router.post("/snippet", response_model=SnippetResponse)
def snippet(req: SnippetRequest, settings: Settings = Depends(get_settings)) -> SnippetResponse:
    selector = settings.default_selector if req.selector is None else req.selector
    result = render(req.config, settings)
    code = build_apply_snippet(result.svg, selector, req.config.width, req.config.height)
    return SnippetResponse(code=code, selector=selector)
