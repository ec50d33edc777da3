import asyncio
import logging
import time

from app.budget import ApiCallBudget
from app.exceptions.custom import RateLimitError
from app.repositories.hotels import HotelRepository
from app.schemas.google_places import PlaceCandidate
from app.schemas.hotel import EMAIL_SENTINEL, HotelRecord
from app.services.email_scraper import EmailScraperService
from app.services.google_places import (
    GooglePlacesService,
    build_photo_url,
    build_search_query,
)

logger = logging.getLogger(__name__)


class HotelSearchService:
    """Search a city, enrich each hotel found, and persist the results."""

    def __init__(
        self,
        google_places: GooglePlacesService,
        email_scraper: EmailScraperService,
        repository: HotelRepository,
        budget: ApiCallBudget,
        country: str | None = "France",
        max_candidates: int = 10,
    ):
        self._google = google_places
        self._scraper = email_scraper
        self._repo = repository
        self._budget = budget
        self._country = country
        self._max_candidates = max_candidates

    async def run(self, city: str) -> list[HotelRecord]:
        """Return the enriched records for ``city``.

        Raises RateLimitError if the budget is spent before the search call.
        Candidates that cannot get a budget slot for their detail call are
        dropped from the result.
        """
        if not self._budget.try_acquire():
            logger.info("API call limit reached")
            raise RateLimitError("Google Places")

        started = time.perf_counter()
        query = build_search_query(city, self._country)
        logger.info("Searching Google Places: %s", query)
        candidates = await self._google.text_search(query)
        logger.info("Initial API call complete. API call count: %d", self._budget.count)

        candidates = candidates[: self._max_candidates]
        logger.info("Processing %d places", len(candidates))

        results = await asyncio.gather(*(self._enrich(c) for c in candidates))
        hotels = [h for h in results if h is not None]

        logger.info(
            "Fetched %d/%d hotels for %s in %.2fs",
            len(hotels), len(candidates), city, time.perf_counter() - started,
        )
        return hotels

    async def _enrich(self, candidate: PlaceCandidate) -> HotelRecord | None:
        if not self._budget.try_acquire():
            logger.info(
                "API call limit reached during details fetching, skipping %s",
                candidate.place_id,
            )
            return None

        logger.debug("Fetching details for place_id: %s", candidate.place_id)
        details = await self._google.get_place_details(candidate.place_id)
        logger.debug(
            "Fetched details for place_id: %s. API call count: %d",
            candidate.place_id, self._budget.count,
        )

        hotel = HotelRecord(
            name=details.name or candidate.name or "",
            address=details.formatted_address or "",
            website_url=details.website or "",
            rating=details.rating or 0,
            place_id=details.place_id or candidate.place_id,
            photo_url=build_photo_url(details, self._google.api_key),
        )

        email = await self._scraper.fetch_email(details.website)
        logger.info("Scraped email for %s: %s", hotel.name, email)
        hotel.email = email if email is not None else EMAIL_SENTINEL

        await self._repo.save(hotel)
        return hotel
