import logging
import sys
from contextlib import asynccontextmanager

import asyncpg
import httpx
from fastapi import FastAPI

from app.budget import ApiCallBudget
from app.config import Settings
from app.exceptions.custom import GooglePlacesError, PlaceDetailsError, RateLimitError
from app.exceptions.handlers import (
    google_places_error_handler,
    place_details_error_handler,
    rate_limit_error_handler,
    unhandled_error_handler,
)
from app.repositories.hotels import HotelRepository
from app.routers.hotels import router as hotels_router
from app.services.email_scraper import EmailScraperService
from app.services.google_places import GooglePlacesService
from app.services.hotel_search import HotelSearchService
from app.services.spreadsheet import SpreadsheetExporter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    pool = await asyncpg.create_pool(settings.database_url, min_size=1, max_size=10)
    logger.info("Connected to database")
    try:
        repository = HotelRepository(pool)
        await repository.ensure_schema()

        async with httpx.AsyncClient(timeout=30.0) as client:
            google_places = GooglePlacesService(client, settings.google_places_api_key)
            email_scraper = EmailScraperService(
                headless=settings.browser_headless,
                timeout_ms=settings.scrape_timeout_ms,
                concurrency=settings.scrape_concurrency,
            )

            # Shared by every request for the lifetime of the process.
            app.state.budget = ApiCallBudget(settings.max_api_calls)
            app.state.hotel_search_service = HotelSearchService(
                google_places,
                email_scraper,
                repository,
                app.state.budget,
                country=settings.search_country,
                max_candidates=settings.max_candidates,
            )
            app.state.exporter = SpreadsheetExporter(settings.export_dir)

            yield
    finally:
        await pool.close()


app = FastAPI(title="Hotel Finder", lifespan=lifespan)

app.add_exception_handler(GooglePlacesError, google_places_error_handler)
app.add_exception_handler(PlaceDetailsError, place_details_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(hotels_router)
