"""
Hotel agent tools.

Both tools work over an injected, read-only hotel dataset.
"""

from typing import Any, Dict, Optional, Sequence

from booking_agents.hotel.mock_data import MOCK_HOTELS, Hotel, find_hotel
from booking_agents.shared.tools.base import BookingTool, ToolRegistry


class SearchHotelsTool(BookingTool):
    """Search hotels, optionally filtered by location, price or amenity."""

    name = "search_hotels"
    description = (
        "Search for hotels based on criteria like location, price range, and amenities"
    )
    parameters = {
        "type": "object",
        "properties": {
            "location": {
                "type": "string",
                "description": "Area to search in, e.g. 'Downtown'",
            },
            "max_price": {
                "type": "number",
                "description": "Maximum nightly rate in USD",
            },
            "amenity": {
                "type": "string",
                "description": "Amenity the hotel must offer, e.g. 'Pool'",
            },
        },
    }

    def __init__(self, hotels: Sequence[Hotel] = MOCK_HOTELS):
        self._hotels = tuple(hotels)

    def _run(self, args: Dict[str, Any]) -> Any:
        location = (args.get("location") or "").strip().lower()
        amenity = (args.get("amenity") or "").strip().lower()
        max_price: Optional[float] = args.get("max_price")

        matches = []
        for hotel in self._hotels:
            if location and location not in hotel.location.lower():
                continue
            if max_price is not None and hotel.price > float(max_price):
                continue
            if amenity and amenity not in (a.lower() for a in hotel.amenities):
                continue
            matches.append(hotel.to_payload())
        return matches


class CheckHotelAvailabilityTool(BookingTool):
    """Report whether a hotel has rooms available."""

    name = "check_hotel_availability"
    description = "Check if a specific hotel has rooms available for given dates"
    parameters = {
        "type": "object",
        "properties": {
            "hotelId": {"type": "string", "description": "Hotel identifier, e.g. 'h1'"},
            "checkIn": {"type": "string", "description": "Check-in date (YYYY-MM-DD)"},
            "checkOut": {"type": "string", "description": "Check-out date (YYYY-MM-DD)"},
        },
        "required": ["hotelId"],
    }

    def __init__(self, hotels: Sequence[Hotel] = MOCK_HOTELS):
        self._hotels = tuple(hotels)

    def _run(self, args: Dict[str, Any]) -> Any:
        hotel = find_hotel(self._hotels, args.get("hotelId", ""))
        return {"available": hotel.availability if hotel else False}


def create_hotel_tools(hotels: Sequence[Hotel] = MOCK_HOTELS) -> ToolRegistry:
    """Tool set bound to the hotel agent."""
    return ToolRegistry([SearchHotelsTool(hotels), CheckHotelAvailabilityTool(hotels)])
