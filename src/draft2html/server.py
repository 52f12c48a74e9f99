"""FastAPI web service for Draft.js to HTML conversion.

Endpoints::

    POST /convert      Upload a raw content .json file and receive .html back.
    POST /convert/raw  Send raw content as a JSON body, receive HTML.
    GET  /block-tags   Block type to HTML tag table.
    GET  /health       Health check.

Run::

    uvicorn draft2html.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

from fastapi import Body, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from draft2html import __version__
from draft2html.converter import Converter
from draft2html.errors import DraftConversionError
from draft2html.markup import BLOCK_TYPE_TAGS, DEFAULT_BLOCK_TAG

app = FastAPI(
    title="draft2html",
    description="Draft.js raw content to HTML conversion service",
    version=__version__,
)


def _content_disposition(filename: str) -> str:
    """Build Content-Disposition header, RFC 5987 for non-ASCII names."""
    try:
        filename.encode("ascii")
        return f'attachment; filename="{filename}"'
    except UnicodeEncodeError:
        encoded = quote(filename)
        return f"attachment; filename*=UTF-8''{encoded}"


def _convert(raw: Any) -> str:
    try:
        return Converter().convert(raw)
    except DraftConversionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/block-tags")
async def block_tags() -> dict[str, Any]:
    """Block type to HTML tag mapping."""
    return {"tags": BLOCK_TYPE_TAGS, "default": DEFAULT_BLOCK_TAG}


@app.post("/convert")
async def convert_file(
    file: UploadFile = File(...),
    encoding: str = Form("utf-8"),
) -> HTMLResponse:
    """Upload a raw content JSON file and receive HTML back.

    - **file**: Draft.js raw content (.json)
    - **encoding**: Source file encoding
    """
    raw = await file.read()
    try:
        content = json.loads(raw.decode(encoding))
    except LookupError as exc:
        raise HTTPException(status_code=422, detail=f"unknown encoding: {encoding}") from exc
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise HTTPException(status_code=422, detail=f"invalid JSON: {exc}") from exc

    html = _convert(content)
    filename = (file.filename or "content.json").rsplit(".", 1)[0] + ".html"

    return HTMLResponse(
        content=html,
        headers={"Content-Disposition": _content_disposition(filename)},
    )


@app.post("/convert/raw", response_class=HTMLResponse)
async def convert_raw(raw: dict[str, Any] = Body(...)) -> HTMLResponse:
    """Send raw content (``{"blocks": [...], "entityMap": {...}}``) and receive HTML."""
    return HTMLResponse(content=_convert(raw))
