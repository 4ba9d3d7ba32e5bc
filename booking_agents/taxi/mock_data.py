"""
Mock taxi dataset.

Static reference data for the taxi tools. Passed into the tools at
construction; never mutated.
"""

from typing import Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field


class TaxiService(BaseModel):
    """A taxi service tier and its rates (USD)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Service identifier")
    type: str = Field(description="Service tier, e.g. 'Standard'")
    base_rate: float = Field(ge=0, alias="baseRate")
    per_hour_rate: float = Field(ge=0, alias="perHourRate")
    per_km_rate: float = Field(ge=0, alias="perKmRate")
    availability: bool = True

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


MOCK_TAXI_SERVICES: Tuple[TaxiService, ...] = (
    TaxiService(
        id="t1",
        type="Standard",
        base_rate=10,
        per_hour_rate=30,
        per_km_rate=2,
        availability=True,
    ),
    TaxiService(
        id="t2",
        type="Premium",
        base_rate=15,
        per_hour_rate=45,
        per_km_rate=3,
        availability=True,
    ),
)


def find_service(
    services: Sequence[TaxiService], service_id: str
) -> Optional[TaxiService]:
    """Return the taxi service with ``service_id`` or None."""
    return next((service for service in services if service.id == service_id), None)
