from pydantic import BaseModel


class PlacePhoto(BaseModel):
    photo_reference: str
    height: int | None = None
    width: int | None = None


class PlaceCandidate(BaseModel):
    place_id: str
    name: str | None = None
    formatted_address: str | None = None
    rating: float | None = None


class PlaceDetails(BaseModel):
    place_id: str | None = None
    name: str | None = None
    formatted_address: str | None = None
    website: str | None = None
    rating: float | None = None
    photos: list[PlacePhoto] = []


class TextSearchResponse(BaseModel):
    status: str
    results: list[PlaceCandidate] = []
    error_message: str | None = None


class PlaceDetailsResponse(BaseModel):
    status: str
    result: PlaceDetails | None = None
    error_message: str | None = None
