from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from datescan import __version__
from datescan.api.deps import get_settings
from datescan.config import Settings
from datescan.core import DateParseError, DateRecord, parse_record

# -------------------------
# FastAPI setup
# -------------------------
app = FastAPI(title="Datescan API", version=__version__)
LOGGER = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------
# Pydantic request/response models
# -------------------------
class ParseIn(BaseModel):
    text: str


class ParseOut(BaseModel):
    input: str
    record: DateRecord
    iso: str


class BatchIn(BaseModel):
    items: List[str]


class BatchItemOut(BaseModel):
    input: str
    ok: bool
    record: Optional[DateRecord] = None
    iso: Optional[str] = None
    kind: Optional[str] = None
    error: Optional[str] = None


class BatchOut(BaseModel):
    items: List[BatchItemOut]
    parsed: int
    failed: int


# -------------------------
# Helpers
# -------------------------
def _check_length(text: str, settings: Settings) -> None:
    if len(text) > settings.max_input_length:
        raise HTTPException(
            status_code=413,
            detail=f"input longer than {settings.max_input_length} characters",
        )


def _parse_or_422(text: str) -> ParseOut:
    try:
        record = parse_record(text)
    except DateParseError as e:
        LOGGER.debug("parse-failed kind=%s input=%r", e.kind, text)
        raise HTTPException(status_code=422, detail={"kind": e.kind, "message": e.message})
    return ParseOut(input=text, record=record, iso=record.isoformat())


# -------------------------
# Routes
# -------------------------
@app.get("/", tags=["meta"])
async def root():
    return {"message": "Datescan API is running"}


@app.get("/healthz", tags=["meta"])
async def healthz():
    return {"status": "ok"}


@app.get("/parse", response_model=ParseOut, tags=["parse"])
async def parse_query(
    q: str = Query(..., description="Date string, e.g. 'Jan 5 2020 3:15 PM EST'"),
    settings: Settings = Depends(get_settings),
):
    _check_length(q, settings)
    return _parse_or_422(q)


@app.post("/parse", response_model=ParseOut, tags=["parse"])
async def parse_body(body: ParseIn, settings: Settings = Depends(get_settings)):
    _check_length(body.text, settings)
    return _parse_or_422(body.text)


@app.post("/parse/batch", response_model=BatchOut, tags=["parse"])
async def parse_batch(body: BatchIn, settings: Settings = Depends(get_settings)):
    """Parse many strings at once; failures are reported per item, not as errors."""
    if len(body.items) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"batch larger than {settings.max_batch_size} items",
        )

    items: list[BatchItemOut] = []
    for text in body.items:
        if len(text) > settings.max_input_length:
            items.append(BatchItemOut(input=text, ok=False, kind="length", error="input too long"))
            continue
        try:
            record = parse_record(text)
        except DateParseError as e:
            items.append(BatchItemOut(input=text, ok=False, kind=e.kind, error=e.message))
            continue
        items.append(BatchItemOut(input=text, ok=True, record=record, iso=record.isoformat()))

    parsed = sum(1 for item in items if item.ok)
    LOGGER.info("parse-batch parsed=%s failed=%s total=%s", parsed, len(items) - parsed, len(items))
    return BatchOut(items=items, parsed=parsed, failed=len(items) - parsed)
