"""Storage of enriched hotel records in Postgres."""

import logging

import asyncpg

from app.schemas.hotel import HotelRecord

logger = logging.getLogger(__name__)

CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS hotels (
    id SERIAL PRIMARY KEY,
    name TEXT,
    address TEXT,
    website_url TEXT,
    rating DOUBLE PRECISION,
    place_id TEXT,
    photo_url TEXT,
    email TEXT,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""

INSERT_HOTEL = """
INSERT INTO hotels (name, address, website_url, rating, place_id, photo_url, email)
VALUES ($1, $2, $3, $4, $5, $6, $7)
RETURNING id
"""

COUNT_BY_PLACE_ID = "SELECT count(*) FROM hotels WHERE place_id = $1"


class HotelRepository:
    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def ensure_schema(self) -> None:
        await self._pool.execute(CREATE_TABLE)

    async def save(self, record: HotelRecord) -> int:
        """Insert a record and return its row id.

        There is no unique constraint on place_id, so the same hotel fetched
        twice is stored twice.
        """
        hotel_id = await self._pool.fetchval(
            INSERT_HOTEL,
            record.name,
            record.address,
            record.website_url,
            record.rating,
            record.place_id,
            record.photo_url,
            record.email,
        )
        logger.info("Saved hotel %s (id=%s)", record.name, hotel_id)
        return hotel_id

    async def count_by_place_id(self, place_id: str) -> int:
        return await self._pool.fetchval(COUNT_BY_PLACE_ID, place_id)
