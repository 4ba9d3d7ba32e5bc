"""
Hotel agent: mock hotel dataset and the tools bound to the hotel sub-graph.
"""

from booking_agents.hotel.mock_data import MOCK_HOTELS, Hotel
from booking_agents.hotel.tools import create_hotel_tools

__all__ = ["MOCK_HOTELS", "Hotel", "create_hotel_tools"]
