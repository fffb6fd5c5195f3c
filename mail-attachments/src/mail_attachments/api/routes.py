"""
API routes for the mail attachments service.

Both attachment endpoints take the raw RFC822 message as the request body.
"""

import base64
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from loguru import logger
from pydantic import BaseModel, Field

from mail_attachments.application import extract, extract_and_store
from mail_attachments.domain import (
    Attachment,
    AttachmentWriteError,
    MessageParseError,
    StoreOptions,
)
from mail_attachments.infrastructure import get_settings

router = APIRouter()


def _confine_directory(directory: str) -> Path:
    """Resolve directory below the configured attachments root, or raise 422."""
    root = get_settings().attachments_root.resolve()
    target = (root / directory).resolve()
    if not target.is_relative_to(root):
        logger.warning(f"Rejected directory outside {root}: {directory}")
        raise HTTPException(status_code=422, detail=f"Directory must stay inside the attachments root: {directory}")
    return target


# ============================================================================
# Request/Response Models
# ============================================================================


class AttachmentPayload(BaseModel):
    """A single extracted attachment."""

    name: str = Field(..., description="Display filename")
    content_type: str | None = Field(None, description="Declared content type, if any")
    size_bytes: int
    content_base64: str = Field(..., description="Attachment body, base64 encoded")

    @classmethod
    def from_attachment(cls, att: Attachment) -> "AttachmentPayload":
        return cls(
            name=att.name,
            content_type=att.content_type,
            size_bytes=att.size_bytes,
            content_base64=base64.b64encode(att.content_bytes).decode("ascii"),
        )


class ExtractResponse(BaseModel):
    """Response from the extract endpoint."""

    attachments: list[AttachmentPayload]


class StoreResponse(BaseModel):
    """Response from the store endpoint."""

    filenames: list[str] = Field(..., description="Filenames written, in order")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str


# ============================================================================
# Health Endpoints
# ============================================================================


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
    )


# ============================================================================
# Attachment Endpoints
# ============================================================================


@router.post("/attachments/extract", response_model=ExtractResponse, tags=["attachments"])
async def extract_endpoint(request: Request) -> ExtractResponse:
    """Extract every attachment from the posted message."""
    raw = await request.body()
    try:
        attachments = await run_in_threadpool(extract, raw)
    except MessageParseError as e:
        logger.warning(f"Rejected message: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return ExtractResponse(attachments=[AttachmentPayload.from_attachment(a) for a in attachments])


@router.post("/attachments/store", response_model=StoreResponse, tags=["attachments"])
async def store_endpoint(
    request: Request,
    mime_types: list[str] = Query(default=[], description="Exact content types to keep"),
    directory: str = Query(".", description="Destination directory, relative to the attachments root"),
    prefix: str = Query("", description="Prepended to every filename"),
) -> StoreResponse:
    """Extract attachments from the posted message and write them to disk."""
    target = _confine_directory(directory)
    raw = await request.body()
    options = StoreOptions(mime_types=mime_types, directory=target, prefix=prefix)
    try:
        filenames = await run_in_threadpool(extract_and_store, raw, options)
    except MessageParseError as e:
        logger.warning(f"Rejected message: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except AttachmentWriteError as e:
        logger.exception(f"Storing attachments failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return StoreResponse(filenames=filenames)
