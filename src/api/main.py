"""FastAPI main application."""
import logging
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

import httpx
from fastapi import FastAPI, HTTPException, Depends, Query
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from src.config import config, Config
from src.fetch.client import FetchClient
from src.jobs.trigger import KattehjemTrigger, TriggerHelpers
from src.parse.models import AgedCat, FilterOptions

logger = logging.getLogger(__name__)

app = FastAPI(title="Inges Kattehjem API", version="0.1.0")

# API Key security (if configured)
API_KEY_HEADER = APIKeyHeader(name="X-API-KEY", auto_error=False)


def verify_api_key(api_key: str = Depends(API_KEY_HEADER)) -> bool:
    """Verify API key if configured."""
    expected_key = config.API_KEY
    if expected_key:
        if not api_key or api_key != expected_key:
            raise HTTPException(status_code=403, detail="Invalid API key")
    return True


async def get_http() -> AsyncIterator[FetchClient]:
    """One HTTP client per request."""
    async with FetchClient() as client:
        yield client


class CatOut(AgedCat):
    """Cat with its identity key."""

    key: str


class CatsResponse(BaseModel):
    """Response model for the cat listing."""

    count: int
    cats: list[CatOut]


@app.get("/health")
async def health():
    """Health check endpoint (no auth required)."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "listing_url": config.LISTING_URL,
    }


@app.get("/cats", response_model=CatsResponse)
async def list_cats(
    tag: Optional[list[str]] = Query(default=None),
    min_age: Optional[float] = None,
    max_age: Optional[float] = None,
    include_sold: Optional[bool] = None,
    strict_max_age: Optional[bool] = None,
    http: FetchClient = Depends(get_http),
    _: bool = Depends(verify_api_key),
):
    """
    List the cats up for adoption.
    Query parameters override the filters configured through the environment.
    """
    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    defaults = Config.default_filter_options()
    options = FilterOptions(
        tags=tag if tag is not None else defaults.tags,
        min_age_in_months=min_age if min_age is not None else defaults.min_age_in_months,
        max_age_in_months=max_age if max_age is not None else defaults.max_age_in_months,
        only_available=(not include_sold) if include_sold is not None else defaults.only_available,
        strict_max_age=strict_max_age if strict_max_age is not None else defaults.strict_max_age,
    )
    trigger = KattehjemTrigger(TriggerHelpers(http=http), options)

    try:
        cats = await trigger.run()
    except (httpx.HTTPStatusError, httpx.RequestError) as e:
        logger.error(f"Failed to fetch listing: {e}")
        raise HTTPException(status_code=502, detail=f"Upstream error: {e}")
    except Exception as e:
        logger.error(f"Error listing cats: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal error: {str(e)}")

    return CatsResponse(
        count=len(cats),
        cats=[CatOut(**cat.model_dump(), key=trigger.get_item_key(cat)) for cat in cats],
    )


if __name__ == "__main__":
    import uvicorn
    Config.validate()
    uvicorn.run(app, host="0.0.0.0", port=8000)
