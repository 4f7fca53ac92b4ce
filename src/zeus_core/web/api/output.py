"""Read-only endpoint serving the persisted snapshot verbatim."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["output"])


@router.get("/output.json")
async def get_output(request: Request):
    path = request.app.state.config.output_path
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.debug("Snapshot not available at %s: %s", path, e)
        return JSONResponse(
            status_code=404,
            content={"error": "output.json not found"},
        )
    return Response(content=raw, media_type="application/json")
