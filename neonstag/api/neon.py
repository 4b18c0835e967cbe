"""Neon glow endpoints - process, upload and export SVG documents."""

import base64
import binascii
import json
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from neonstag.config import settings
from neonstag.exceptions import NeonError, UnsupportedFileError
from neonstag.export import package_export
from neonstag.ingest import SVG_MIME_TYPE, decode_svg_upload
from neonstag.options import (
    DEFAULT_OPTIONS,
    NEON_PRESETS,
    OPTION_RANGES,
    ExportOptions,
    NeonOptions,
)
from neonstag.processor import process

logger = logging.getLogger(__name__)

router = APIRouter(tags=["neon"])


class ProcessRequest(BaseModel):
    """SVG text plus options."""
    svg: str
    options: NeonOptions = Field(default=DEFAULT_OPTIONS)


class ProcessResponse(BaseModel):
    svg: str
    warnings: list[str] = Field(default_factory=list)


class ExportRequest(BaseModel):
    """Processed SVG plus export size, background color and optional base64 raster background."""

    model_config = ConfigDict(populate_by_name=True)

    svg: str
    export_options: ExportOptions = Field(alias='exportOptions')
    background: Optional[str] = None


def _check_size(size: int) -> None:
    if size > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"Document too large ({size} bytes, max {settings.MAX_UPLOAD_SIZE})",
        )


def _run(svg_text: str, options: NeonOptions) -> ProcessResponse:
    try:
        result = process(svg_text, options)
    except NeonError as e:
        logger.info(f"Rejected document: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return ProcessResponse(svg=result.svg, warnings=result.warnings)


@router.get("/presets")
async def list_presets():
    """List the named glow colors."""
    return {"presets": [{"name": p.name, "color": p.color} for p in NEON_PRESETS]}


@router.get("/options")
async def get_options():
    """Default options and slider ranges."""
    return {
        "defaults": DEFAULT_OPTIONS.to_dict(),
        "ranges": {
            name: {"min": low, "max": high, "step": step}
            for name, (low, high, step) in OPTION_RANGES.items()
        },
    }


@router.post("/process", response_model=ProcessResponse)
async def process_svg(request: ProcessRequest) -> ProcessResponse:
    """Add the neon glow to an SVG document.

    Returns the processed document and warnings. Malformed SVG or a missing
    <svg> element is answered with 400.
    """
    _check_size(len(request.svg.encode("utf-8")))
    return _run(request.svg, request.options)


@router.post("/upload", response_model=ProcessResponse)
async def upload_svg(request: Request) -> ProcessResponse:
    """Process a raw SVG upload.

    Request body is the SVG file.
    Headers:
        Content-Type: image/svg+xml
        X-Filename: Original file name (accepted instead of the MIME type if it ends in .svg)
        X-Neon-Options: Options as JSON (defaults if omitted)
    """
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Empty body")
    _check_size(len(body))

    try:
        svg_text = decode_svg_upload(
            body,
            content_type=request.headers.get("content-type"),
            filename=request.headers.get("x-filename"),
        )
    except UnsupportedFileError as e:
        raise HTTPException(status_code=415, detail=str(e))

    options = DEFAULT_OPTIONS
    raw_options = request.headers.get("x-neon-options")
    if raw_options:
        try:
            options = NeonOptions.from_dict(json.loads(raw_options))
        except (ValueError, ValidationError) as e:
            raise HTTPException(status_code=400, detail=f"Invalid X-Neon-Options: {e}")

    return _run(svg_text, options)


@router.post("/export")
async def export_svg(request: ExportRequest) -> Response:
    """Wrap a processed document for download as neonified.svg."""
    _check_size(len(request.svg.encode("utf-8")))

    background = None
    if request.background:
        try:
            background = base64.b64decode(request.background, validate=True)
        except (binascii.Error, ValueError):
            raise HTTPException(status_code=400, detail="Background is not valid base64")
        _check_size(len(background))

    try:
        content = package_export(request.svg, request.export_options, background)
    except NeonError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return Response(
        content=content,
        media_type=SVG_MIME_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{settings.DOWNLOAD_FILENAME}"'},
    )
