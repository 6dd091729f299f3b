"""FastAPI endpoints exposing Zoom meetings and recordings.

Responses are served through a shared ZoomClient so repeated requests are
answered from the configured cache.
"""

import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Query
from pydantic import BaseModel

from zoom_meetings import Config, ZoomClient
from zoom_meetings.exceptions import InvalidArgumentError, ZoomApiError
from zoom_meetings.gcp import SecretManagerClient

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Zoom Meetings API",
    description="Cached read access to Zoom upcoming meetings and cloud recordings",
    version="1.0.0",
)


class ItemsResponse(BaseModel):
    """List of Zoom records."""

    count: int
    items: List[Dict[str, Any]]


@lru_cache(maxsize=1)
def get_zoom_client() -> ZoomClient:
    """Build the process-wide Zoom client from configuration."""
    if Config.USE_SECRET_MANAGER:
        Config.load_secrets(SecretManagerClient(Config.GCP_PROJECT_ID))
    return ZoomClient.from_config(Config)


def verify_api_secret(
    x_api_secret: str = Header(..., description="API secret for authentication"),
) -> None:
    if not Config.API_SECRET:
        raise HTTPException(500, "API_SECRET not configured on server")
    if x_api_secret != Config.API_SECRET:
        raise HTTPException(401, "Invalid API secret")


def _call_zoom(action: str, func, *args, **kwargs) -> ItemsResponse:
    try:
        items = func(*args, **kwargs)
    except InvalidArgumentError as e:
        raise HTTPException(400, str(e))
    except ZoomApiError as e:
        logger.exception(f"Could not get {action}: {e}")
        raise HTTPException(502, f"Could not get {action}: {e}")
    return ItemsResponse(count=len(items), items=items)


@app.get("/meetings/upcoming", response_model=ItemsResponse, dependencies=[Depends(verify_api_secret)])
def upcoming_meetings(
    skip_cache: bool = False,
    client: ZoomClient = Depends(get_zoom_client),
) -> ItemsResponse:
    """Upcoming meetings of the configured Zoom user."""
    return _call_zoom("upcoming meetings", client.get_upcoming_meetings, skip_cache=skip_cache)


@app.get("/recordings", response_model=ItemsResponse, dependencies=[Depends(verify_api_secret)])
def recordings(
    from_date: str = Query(..., alias="from", description="First day, YYYY-MM-DD"),
    to_date: Optional[str] = Query(None, alias="to", description="Last day, defaults to today"),
    skip_cache: bool = False,
    client: ZoomClient = Depends(get_zoom_client),
) -> ItemsResponse:
    """Cloud recordings in a date range."""
    to_value = to_date or datetime.now().date()
    return _call_zoom("recordings", client.get_recordings, from_date, to_value, skip_cache=skip_cache)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "timestamp": datetime.now().isoformat()}
