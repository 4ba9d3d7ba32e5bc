"""
Mock hotel dataset.

Static reference data for the hotel tools. Passed into the tools at
construction; never mutated.
"""

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Hotel(BaseModel):
    """A bookable hotel."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Hotel identifier")
    name: str = Field(description="Hotel name")
    location: str = Field(description="Area of the city")
    price: float = Field(ge=0, description="Nightly rate in USD")
    rating: float = Field(ge=0, le=5, description="Rating out of 5")
    amenities: Tuple[str, ...] = Field(default=(), description="Amenities offered")
    room_types: Tuple[str, ...] = Field(
        default=(), alias="roomTypes", description="Room types offered"
    )
    availability: bool = Field(default=True, description="Whether rooms are free")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


MOCK_HOTELS: Tuple[Hotel, ...] = (
    Hotel(
        id="h1",
        name="Luxury Palace Hotel",
        location="Downtown",
        price=300,
        rating=4.8,
        amenities=("Pool", "Spa", "Restaurant", "Gym"),
        room_types=("Standard", "Deluxe", "Suite"),
        availability=True,
    ),
    Hotel(
        id="h2",
        name="Seaside Resort",
        location="Beach Front",
        price=250,
        rating=4.5,
        amenities=("Beach Access", "Pool", "Restaurant"),
        room_types=("Standard", "Ocean View"),
        availability=True,
    ),
)


def find_hotel(hotels: Sequence[Hotel], hotel_id: str) -> Optional[Hotel]:
    """Return the hotel with ``hotel_id`` or None."""
    return next((hotel for hotel in hotels if hotel.id == hotel_id), None)
