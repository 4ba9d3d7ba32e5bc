"""
Taxi agent: mock taxi services and the tools bound to the taxi sub-graph.
"""

from booking_agents.taxi.mock_data import MOCK_TAXI_SERVICES, TaxiService
from booking_agents.taxi.tools import create_taxi_tools

__all__ = ["MOCK_TAXI_SERVICES", "TaxiService", "create_taxi_tools"]
