import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

from .custom import GooglePlacesError, PlaceDetailsError, RateLimitError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred while fetching hotel data."


async def google_places_error_handler(_request: Request, exc: GooglePlacesError) -> PlainTextResponse:
    logger.error("Google Places error: %s (status=%s)", exc.message, exc.status_code)
    return PlainTextResponse(
        "Error fetching data from Google Places API",
        status_code=500,
    )


async def place_details_error_handler(_request: Request, exc: PlaceDetailsError) -> PlainTextResponse:
    logger.error("Place details error: %s (status=%s)", exc.message, exc.status_code)
    return PlainTextResponse(GENERIC_ERROR, status_code=500)


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> PlainTextResponse:
    logger.warning("API call limit reached for %s", exc.service)
    return PlainTextResponse("API call limit reached", status_code=429)


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return PlainTextResponse(GENERIC_ERROR, status_code=500)
