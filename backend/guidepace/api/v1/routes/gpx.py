"""
GPX Routes

Turn an uploaded GPX track into a route summary for estimation.
"""

from fastapi import APIRouter, UploadFile, File, HTTPException

from guidepace.config import settings
from guidepace.features.gpx import GPXParserService, GPXRouteSummary

router = APIRouter()


@router.post("/summary", response_model=GPXRouteSummary)
async def summarize_gpx(file: UploadFile = File(...)):
    """
    Upload and summarize a GPX file.

    Returns distance, elevation gain/loss and the start point. Nothing is
    stored; pass the totals to /estimate/analyze.
    """
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_gpx_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_gpx_size_mb}MB)"
        )

    try:
        return GPXParserService.parse(content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
