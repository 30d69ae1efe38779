"""
FastAPI server for the Mobile Provider Checker.

Builds the prefix table once on startup, then answers checks synchronously.
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from provider_check.checker import ProviderChecker
from provider_check.config import Config
from provider_check.messages import reason_label

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("api")

# ---------------------------------------------------------------------------
# Global checker (built once at startup)
# ---------------------------------------------------------------------------
checker: Optional[ProviderChecker] = None


def _load_env_file(env_path: Path):
    if not env_path.exists():
        return
    for line in env_path.read_text().splitlines():
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            key, val = line.split("=", 1)
            os.environ.setdefault(key.strip(), val.strip())


def config_from_env() -> Config:
    config = Config()
    prefix_file = os.environ.get("PROVIDER_PREFIX_FILE", "")
    if prefix_file:
        config.prefix_file = Path(prefix_file)
    locale = os.environ.get("PROVIDER_CHECK_LOCALE", "")
    if locale:
        config.locale = locale
    min_digits = os.environ.get("PROVIDER_MIN_LOCAL_DIGITS", "")
    if min_digits:
        try:
            config.min_local_digits = int(min_digits)
        except ValueError:
            logger.warning(f"Ignoring PROVIDER_MIN_LOCAL_DIGITS={min_digits!r}: not an integer")
    return config


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the checker on startup."""
    global checker
    t0 = time.time()
    _load_env_file(Path(__file__).parent / ".env")

    checker = ProviderChecker(config_from_env())

    elapsed = time.time() - t0
    logger.info(f"Checker ready in {elapsed * 1000:.0f}ms")

    yield

    checker = None
    logger.info("Shutdown complete.")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Mobile Provider Checker API",
    description="Look up the mobile operator of an Indonesian phone number by its prefix.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------
class MatchResponse(BaseModel):
    prefix: str
    provider: str
    partial: bool = False


class CheckResponse(BaseModel):
    normalized: str
    matches: List[MatchResponse] = Field(default_factory=list)
    reason: str
    label: str
    check_time_ms: float


class HealthResponse(BaseModel):
    status: str
    checker_loaded: bool
    providers: int
    prefixes: int
    uptime_seconds: float


class ProvidersResponse(BaseModel):
    providers: Dict[str, List[str]]
    examples: Dict[str, str]


_start_time = time.time()


def _require_checker() -> ProviderChecker:
    if not checker:
        raise HTTPException(status_code=503, detail="Checker is not loaded yet.")
    return checker


def _check_payload(c: ProviderChecker, number: str) -> dict:
    t0 = time.time()
    result = c.check(number)
    payload = result.to_dict()
    payload["label"] = reason_label(result.reason, c.config.locale)
    payload["check_time_ms"] = round((time.time() - t0) * 1000, 3)
    return payload


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return HealthResponse(
        status="ok" if checker else "loading",
        checker_loaded=checker is not None,
        providers=len(checker.table.providers) if checker else 0,
        prefixes=len(checker.table) if checker else 0,
        uptime_seconds=round(time.time() - _start_time, 1),
    )


@app.get("/check", response_model=CheckResponse)
async def check(
    number: str = Query("", description="Phone number in any format, e.g. +62 852-0098-3740"),
):
    """
    Check which mobile provider a phone number belongs to.

    Invalid or empty numbers are not errors: they come back with no
    matches and a reason explaining why.
    """
    c = _require_checker()
    return JSONResponse(content=_check_payload(c, number))


@app.post("/check", response_model=CheckResponse)
async def check_post(
    number: str = Query("", description="Phone number in any format"),
):
    """POST variant of check (same behavior, for clients that prefer POST)."""
    return await check(number=number)


class BatchRequest(BaseModel):
    numbers: List[str] = Field(..., description="Phone numbers to check", max_length=100)


class BatchResponse(BaseModel):
    results: List[CheckResponse]
    total: int
    check_time_ms: float


@app.post("/check/batch", response_model=BatchResponse)
async def check_batch(req: BatchRequest):
    """Batch check — up to 100 numbers at once, results in input order."""
    c = _require_checker()

    if not req.numbers:
        raise HTTPException(status_code=400, detail="No numbers provided.")

    t0 = time.time()
    results = [_check_payload(c, n) for n in req.numbers]
    total_ms = round((time.time() - t0) * 1000, 3)
    logger.info(f"Batch check: {len(results)} numbers in {total_ms}ms")
    return JSONResponse(content={
        "results": results,
        "total": len(results),
        "check_time_ms": total_ms,
    })


@app.get("/providers", response_model=ProvidersResponse)
async def providers():
    """Prefix table plus one example prefix per provider."""
    c = _require_checker()
    return ProvidersResponse(
        providers=c.table.to_dict(),
        examples=c.table.examples(),
    )
