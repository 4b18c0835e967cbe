"""Sample documents API."""
from fastapi import APIRouter, Response

from neonstag.ingest import SVG_MIME_TYPE
from neonstag.samples import list_samples, sample_svg

router = APIRouter(tags=["samples"])


@router.get("/samples")
async def get_samples():
    """List all bundled SVG samples."""
    return {"svgs": list_samples()}


@router.get("/samples/{name}.svg")
async def get_sample(name: str):
    """Get a sample SVG."""
    if name not in list_samples():
        return Response(status_code=404, content=f"SVG not found: {name}.svg")
    return Response(content=sample_svg(name), media_type=SVG_MIME_TYPE)
