"""API routes: upload with grammar check, render to HTML, list uploads."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from ..models import ErrorResponse, FileListResponse, InvalidFileTypeResponse, UploadResponse
from ..services.grammar_checker import GrammarCheckError, check_grammar
from ..services.markdown_renderer import markdown_to_html
from ..services.sniff import PLAIN_TEXT_UTF8, SNIFF_LEN, detect_content_type
from ..services.storage import (
    InvalidFilenameError,
    decode_text,
    list_uploads,
    read_upload,
    save_upload,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notes"])

ALLOWED_MIME_TYPE = PLAIN_TEXT_UTF8


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@router.post("/uploadFile", response_model=UploadResponse)
async def upload_file(request: Request):
    """Store a plain-text Markdown upload (multipart field `file`) and return grammar suggestions for it."""
    form = await request.form()
    file = form.get("file")
    if not isinstance(file, UploadFile):
        logger.error("error while getting file from request: no file in 'file' field")
        return _error(400, "invalid file format")

    logger.info("File name received: %s", file.filename)
    try:
        head = await file.read(SNIFF_LEN)
        await file.seek(0)
        content = await file.read()
    except OSError as e:
        logger.error("error while reading file: %s", e)
        return _error(400, "invalid file format")
    if not head:
        logger.error("error while reading file: empty upload")
        return _error(400, "invalid file format")

    file_type = detect_content_type(head)
    logger.info("Detected file type: %s", file_type)
    if file_type != ALLOWED_MIME_TYPE:
        return JSONResponse(
            status_code=400,
            content=InvalidFileTypeResponse(
                error="Invalid file type. Only Markdown (.md) files are allowed"
            ).model_dump(),
        )

    filename = file.filename or ""
    try:
        await run_in_threadpool(save_upload, filename, content)
    except InvalidFilenameError as e:
        logger.error("rejected upload filename: %s", e)
        return _error(400, "invalid file name")
    except OSError as e:
        logger.error("error while saving file: %s", e)
        return _error(400, "cannot save file")

    try:
        saved = await run_in_threadpool(read_upload, filename)
    except OSError as e:
        logger.error("Error while reading saved file: %s", e)
        return _error(500, "Cannot read saved file")

    try:
        suggestions = await run_in_threadpool(check_grammar, decode_text(saved))
    except GrammarCheckError as e:
        logger.error("Error while checking grammar: %s", e)
        return _error(500, "Error checking grammar")

    return UploadResponse(grammar_suggestions=suggestions)


@router.get("/render", response_class=HTMLResponse)
def render_markdown(file: str = ""):
    """Render a stored upload as HTML."""
    if not file:
        return _error(400, "File name is required")
    try:
        raw = read_upload(file)
    except InvalidFilenameError as e:
        logger.error("rejected render filename: %s", e)
        return _error(400, "Invalid file name")
    except OSError as e:
        logger.error("Error reading file: %s", e)
        return _error(500, "Unable to read the file")

    try:
        html = markdown_to_html(decode_text(raw))
    except Exception as e:
        logger.error("Error converting markdown to HTML: %s", e)
        return _error(500, "Error converting file to HTML")

    return HTMLResponse(content=html, media_type="text/html; charset=utf-8")


@router.get("/list", response_model=FileListResponse)
def list_files():
    """List uploaded file names."""
    try:
        files = list_uploads()
    except OSError as e:
        logger.error("Error while reading the directory: %s", e)
        return _error(500, "Unable to list files")
    return FileListResponse(files=files)
