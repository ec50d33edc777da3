import logging

import httpx

from app.exceptions.custom import GooglePlacesError, PlaceDetailsError
from app.schemas.google_places import (
    PlaceCandidate,
    PlaceDetails,
    PlaceDetailsResponse,
    TextSearchResponse,
)

logger = logging.getLogger(__name__)

SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"
PHOTO_URL = "https://maps.googleapis.com/maps/api/place/photo"

PHOTO_MAX_WIDTH = 400


def build_search_query(city: str, country: str | None = None) -> str:
    parts = [p for p in ("hotels hostels in", city, country) if p]
    return " ".join(parts)


def build_photo_url(details: PlaceDetails, api_key: str) -> str:
    """URL of the first photo of a place, or "" when it has none."""
    if not details.photos:
        return ""
    reference = details.photos[0].photo_reference
    return str(
        httpx.URL(
            PHOTO_URL,
            params={
                "maxwidth": PHOTO_MAX_WIDTH,
                "photoreference": reference,
                "key": api_key,
            },
        )
    )


class GooglePlacesService:
    def __init__(self, client: httpx.AsyncClient, api_key: str):
        self._client = client
        self._api_key = api_key

    @property
    def api_key(self) -> str:
        return self._api_key

    async def _get(
        self,
        url: str,
        params: dict,
        error_cls: type[GooglePlacesError] = GooglePlacesError,
    ) -> dict:
        resp = await self._client.get(url, params={**params, "key": self._api_key})

        # A 429 from Google is an upstream failure like any other.
        if resp.status_code >= 400:
            raise error_cls(resp.text, status_code=resp.status_code)

        return resp.json()

    async def text_search(self, query: str) -> list[PlaceCandidate]:
        data = TextSearchResponse(**await self._get(SEARCH_URL, {"query": query}))
        if data.status != "OK":
            raise GooglePlacesError(data.error_message or data.status)

        logger.info("Text search for %r returned %d results", query, len(data.results))
        return data.results

    async def get_place_details(self, place_id: str) -> PlaceDetails:
        data = PlaceDetailsResponse(
            **await self._get(DETAILS_URL, {"place_id": place_id}, PlaceDetailsError)
        )
        if data.status != "OK" or data.result is None:
            raise PlaceDetailsError(data.error_message or data.status)

        return data.result
