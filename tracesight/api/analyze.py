"""POST /api/analyze — full trace analysis; POST /api/normalize — absolute path data."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from tracesight.config import Settings
from tracesight.dependencies import get_settings
from tracesight.engine.config import AnalysisConfig
from tracesight.engine.pipeline import create_pipeline
from tracesight.models.requests import AnalyzeRequest, NormalizeRequest
from tracesight.models.responses import AnalyzeResponse, NormalizeResponse, context_to_response
from tracesight.svg.parser import extract_traces, parse_svg
from tracesight.svg.serializer import normalize_trace, update_svg_with_traces

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest, settings: Settings = Depends(get_settings)) -> AnalyzeResponse:
    start = time.perf_counter()

    config = AnalysisConfig(
        tolerance=req.tolerance if req.tolerance is not None else settings.default_tolerance,
        label_nets=req.label_nets,
    )

    # Extract traces, then run the full pipeline
    ctx = parse_svg(req.svg, config)
    ctx = create_pipeline().run(ctx)

    elapsed = (time.perf_counter() - start) * 1000
    return context_to_response(ctx, processing_time_ms=round(elapsed, 1))


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(req: NormalizeRequest) -> NormalizeResponse:
    traces = extract_traces(req.svg)
    normalized = [normalize_trace(t) for t in traces]
    rewritten = [n.id for n, t in zip(normalized, traces) if n.path_data != t.path_data]
    return NormalizeResponse(svg=update_svg_with_traces(req.svg, normalized), traces_rewritten=rewritten)
