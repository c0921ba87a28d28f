import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from stylist_api.services.image_search_service import search_images

logger = logging.getLogger(__name__)

router = APIRouter(tags=["images"])

DEFAULT_LIMIT = 6


@router.get("/image-search")
def get_image_search(query: str | None = Query(None), limit: str | None = Query(None)):
    if not query:
        return JSONResponse({"error": "Query parameter is required"}, status_code=400)

    try:
        max_results = int(limit) if limit else DEFAULT_LIMIT
    except ValueError:
        return JSONResponse({"error": "Limit parameter must be an integer"}, status_code=400)

    logger.info("Searching for images matching %r", query)
    try:
        return {"images": search_images(query, max_results)}
    except Exception:
        logger.exception("Error in image search")
        return JSONResponse({"error": "Failed to process image search"}, status_code=500)
