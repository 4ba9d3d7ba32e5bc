"""Tool base class and registry."""

from booking_agents.shared.tools.base import BookingTool, ToolRegistry, error_payload

__all__ = ["BookingTool", "ToolRegistry", "error_payload"]
