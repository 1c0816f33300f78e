"""
VN Speller — FastAPI Server
===========================

HTTP access to the Vietnamese number speller.

Endpoints:
    POST /spell            Spell a single number
    POST /spell/batch      Spell many numbers, with an optional fallback text
    GET  /health           Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

The service Lexicon is built from VN_SPELLER_* environment variables
(a .env file is honoured) at start-up; requests may layer overrides on top.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from vn_speller import __version__
from vn_speller.exceptions import SpellingError
from vn_speller.lexicon import Lexicon, lexicon_from_env
from vn_speller.speller import spell_or_default, spell_with_config

logger = logging.getLogger(__name__)


# ─── Application Lifespan (build the service Lexicon) ───────────────

_lexicon: Lexicon | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load .env and build the Lexicon once on startup."""
    global _lexicon  # noqa: PLW0603
    load_dotenv()
    _lexicon = lexicon_from_env()
    logger.info("Speller ready (separator=%r, point=%r)", _lexicon.separator, _lexicon.point_text)
    yield
    _lexicon = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="VN Speller API",
    description=(
        "Spell integers and decimals of any length in Vietnamese, with "
        "tone-shift rules, magnitude groups and configurable wording."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────

NumberIn = Union[int, float, str]


class SpellRequest(BaseModel):
    """Request body for the /spell endpoint."""

    value: NumberIn = Field(
        ...,
        description="Number to spell: JSON number or numeric text.",
        json_schema_extra={"example": "1,234.5"},
    )
    overrides: Optional[dict[str, Any]] = Field(
        default=None,
        description="Lexicon fields to override for this request only.",
        json_schema_extra={"example": {"separator": "-", "point_text": "phẩy"}},
    )


class BatchSpellRequest(BaseModel):
    """Request body for the /spell/batch endpoint."""

    values: list[NumberIn] = Field(..., min_length=1, max_length=1000)
    overrides: Optional[dict[str, Any]] = None
    fallback: Optional[str] = Field(
        default=None,
        description="Text returned for inputs that cannot be spelled. "
        "Without it, the first bad input fails the whole batch.",
    )


class SpellResponse(BaseModel):
    input: NumberIn
    text: str

    model_config = {"json_schema_extra": {"example": {
        "input": "1,234.5",
        "text": "một nghìn hai trăm ba mươi bốn chấm năm",
    }}}


class BatchSpellResponse(BaseModel):
    results: list[SpellResponse]


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_lexicon(overrides: dict[str, Any] | None = None) -> Lexicon:
    if _lexicon is None:
        raise HTTPException(status_code=503, detail="Speller not initialised")
    try:
        return _lexicon.with_overrides(overrides)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"code": "INVALID_OVERRIDES", "message": str(e)},
        ) from e


def _spelling_error(e: SpellingError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"code": e.code, "message": e.message, "details": e.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/spell",
    summary="Spell one number",
    tags=["Spelling"],
    responses={
        422: {"description": "Input is not a valid number, or overrides are invalid"},
        503: {"description": "Speller not yet initialised"},
    },
)
def spell_number(request: SpellRequest) -> SpellResponse:
    """Return the Vietnamese reading of `value`.

    Errors come back as 422 with a machine-readable **code**:
    - `INVALID_FORMAT`: not a finite number
    - `INVALID_NUMBER`: malformed numeric text
    """
    lexicon = _get_lexicon(request.overrides)
    try:
        text = spell_with_config(lexicon, request.value)
    except SpellingError as e:
        raise _spelling_error(e) from e
    return SpellResponse(input=request.value, text=text)


@app.post(
    "/spell/batch",
    summary="Spell many numbers",
    tags=["Spelling"],
    responses={
        422: {"description": "An input failed and no fallback was given"},
        503: {"description": "Speller not yet initialised"},
    },
)
def spell_batch(request: BatchSpellRequest) -> BatchSpellResponse:
    """Spell every value in order, substituting `fallback` for bad inputs."""
    lexicon = _get_lexicon(request.overrides)
    results: list[SpellResponse] = []
    for value in request.values:
        try:
            text = spell_or_default(value, lexicon, request.fallback)
        except SpellingError as e:
            raise _spelling_error(e) from e
        results.append(SpellResponse(input=value, text=text))
    return BatchSpellResponse(results=results)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Speller not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    _get_lexicon()
    return HealthResponse(status="healthy", version=__version__)
