import logging

from fastapi import APIRouter, HTTPException

from winewithpete.logic.metadata.opengraph import fetch_og_metadata, validate_url
from winewithpete.utilities.errors import MetadataFetchError
from winewithpete.utilities.validators import OGMetadataRequest

router = APIRouter(prefix="/api", tags=["metadata"])
logger = logging.getLogger(__name__)


@router.post("/og-metadata")
async def og_metadata(payload: OGMetadataRequest):
    """Open Graph preview (title/description/image/url) for an essay link."""
    try:
        url = validate_url(payload.url)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid URL format")
    try:
        metadata = await fetch_og_metadata(url)
    except MetadataFetchError as e:
        logger.warning("OG metadata fetch failed for %s: %s", url, e)
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return {"success": True, "metadata": metadata.model_dump(exclude_none=True)}
