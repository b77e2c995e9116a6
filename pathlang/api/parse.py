"""POST /api/parse and /api/validate — path data to geometry."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from pathlang.dependencies import get_parser_config
from pathlang.engine.config import ParserConfig
from pathlang.engine.document import parse_path_data
from pathlang.engine.emitter import emit_geometry
from pathlang.engine.errors import PathParseError
from pathlang.models.requests import ParseRequest, ValidateRequest
from pathlang.models.responses import (
    ParseErrorDetail,
    ParseResponse,
    SubPathModel,
    ValidateResponse,
)
from pathlang.svg.serializer import serialize_path_data

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest, config: ParserConfig = Depends(get_parser_config)) -> ParseResponse:
    start = time.perf_counter()

    try:
        document = parse_path_data(req.path_data, config)
    except PathParseError as e:
        logger.warning("Parse failed (%s at %s): %s", e.kind.value, e.offset, e.message)
        raise HTTPException(status_code=400, detail=ParseErrorDetail.from_error(e).model_dump()) from e

    geometry, trace = emit_geometry(document, trace=req.trace)

    elapsed = (time.perf_counter() - start) * 1000

    return ParseResponse(
        fill_rule=geometry.fill_rule.value,
        subpaths=[SubPathModel.from_subpath(sp) for sp in geometry.subpaths],
        svg_path_data=serialize_path_data(geometry),
        element_count=len(document.elements),
        validation_count=document.validation_count,
        trace=trace,
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate(req: ValidateRequest, config: ParserConfig = Depends(get_parser_config)) -> ValidateResponse:
    try:
        parse_path_data(req.path_data, config)
    except PathParseError as e:
        logger.warning("Validation failed (%s at %s): %s", e.kind.value, e.offset, e.message)
        return ValidateResponse(valid=False, error=ParseErrorDetail.from_error(e))
    return ValidateResponse(valid=True)
