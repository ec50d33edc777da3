from pydantic import BaseModel

# Stored in place of an email when none could be scraped.
EMAIL_SENTINEL = "null"


class HotelRecord(BaseModel):
    name: str = ""
    address: str = ""
    website_url: str = ""
    rating: float = 0
    place_id: str = ""
    photo_url: str = ""
    email: str = EMAIL_SENTINEL
