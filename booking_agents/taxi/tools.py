"""
Taxi agent tools.

Both tools work over an injected, read-only taxi service dataset.
"""

from typing import Any, Dict, Sequence

from booking_agents.shared.tools.base import BookingTool, ToolRegistry
from booking_agents.taxi.mock_data import MOCK_TAXI_SERVICES, TaxiService, find_service


class SearchTaxiServicesTool(BookingTool):
    """List taxi services, optionally filtered by tier."""

    name = "search_taxi_services"
    description = "Search for available taxi services based on type and requirements"
    parameters = {
        "type": "object",
        "properties": {
            "type": {
                "type": "string",
                "description": "Service tier, e.g. 'Standard' or 'Premium'",
            },
        },
    }

    def __init__(self, services: Sequence[TaxiService] = MOCK_TAXI_SERVICES):
        self._services = tuple(services)

    def _run(self, args: Dict[str, Any]) -> Any:
        tier = (args.get("type") or "").strip().lower()
        return [
            service.to_payload()
            for service in self._services
            if not tier or service.type.lower() == tier
        ]


class CalculateTaxiFareTool(BookingTool):
    """Estimate a fare from the base rate plus hourly and distance charges."""

    name = "calculate_taxi_fare"
    description = "Calculate estimated taxi fare based on distance or duration"
    parameters = {
        "type": "object",
        "properties": {
            "serviceId": {"type": "string", "description": "Service identifier, e.g. 't1'"},
            "hours": {"type": "number", "description": "Hours of hire"},
            "distance": {"type": "number", "description": "Distance in km"},
        },
        "required": ["serviceId"],
    }

    def __init__(self, services: Sequence[TaxiService] = MOCK_TAXI_SERVICES):
        self._services = tuple(services)

    def _run(self, args: Dict[str, Any]) -> Any:
        service = find_service(self._services, args.get("serviceId", ""))
        if service is None:
            return {"error": "Service not found"}

        hours = float(args.get("hours") or 0)
        distance = float(args.get("distance") or 0)
        hourly_charge = hours * service.per_hour_rate
        distance_charge = distance * service.per_km_rate

        return {
            "baseRate": service.base_rate,
            "hourlyCharge": hourly_charge,
            "distanceCharge": distance_charge,
            "totalFare": service.base_rate + hourly_charge + distance_charge,
        }


def create_taxi_tools(services: Sequence[TaxiService] = MOCK_TAXI_SERVICES) -> ToolRegistry:
    """Tool set bound to the taxi agent."""
    return ToolRegistry([SearchTaxiServicesTool(services), CalculateTaxiFareTool(services)])
