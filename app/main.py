import math
from typing import Optional

from fastapi import FastAPI, UploadFile, File, HTTPException

from .config import AppSettings, say_hi
from .log import setup_logging
from .models import (
    GreetingResponse,
    HealthResponse,
    Profile,
    ProfileRequest,
    TimecodeTally,
    TotalRequest,
    TotalResponse,
)
from .profile import build_profile
from .rules import HTML_EXTENSIONS
from .timecodes import decode_document, select_entries, tally

settings = AppSettings()
logger = setup_logging(settings.resolved_log_level())
logger.info("Starting in %s mode", settings.mode)

app = FastAPI(
    title="timecode-tally",
    description="Sum M:SS timecodes from tagged elements and build user profiles",
    version="0.1.0",
)


def _finite_or_none(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def _to_response(result: TimecodeTally) -> TotalResponse:
    return TotalResponse(
        match=result.match,
        matched=len(result.entries),
        time_strings=result.time_strings,
        seconds=[_finite_or_none(s) for s in result.seconds],
        total=_finite_or_none(result.total),
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/timecodes/total", response_model=TotalResponse)
def total_from_entries(body: TotalRequest):
    match = body.match if body.match is not None else settings.default_match
    return _to_response(tally(body.entries, match))


@app.post("/timecodes/total/html", response_model=TotalResponse)
async def total_from_document(match: Optional[str] = None, file: UploadFile = File(...)):
    if not file.filename.lower().endswith(HTML_EXTENSIONS):
        raise HTTPException(status_code=422, detail="Only HTML files are supported")

    raw = await file.read()
    entries = select_entries(decode_document(raw))
    return _to_response(tally(entries, match if match is not None else settings.default_match))


@app.post("/profiles", response_model=Profile)
def create_profile(body: ProfileRequest):
    return build_profile(body.name, body.email, body.site)


@app.get("/greeting/{name}", response_model=GreetingResponse)
def greeting(name: str):
    return {"greeting": say_hi(name, settings)}
