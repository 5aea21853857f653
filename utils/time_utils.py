"""Time formatting utilities."""

import math


def format_hour_of_day(hour: int) -> str:
    """
    Format an hour of day as a clock label.

    Args:
        hour: Hour of day (0-23)

    Returns:
        Formatted string (e.g., "07:00")
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour of day must be in 0-23, got {hour}")
    return f"{hour:02d}:00"


def format_travel_time(minutes: float) -> str:
    """
    Format a travel time for display.

    Args:
        minutes: Travel time in minutes (math.inf when unreachable)

    Returns:
        Formatted string (e.g., "12.5 min"), or "No path"
    """
    if minutes is None or math.isinf(minutes) or math.isnan(minutes):
        return "No path"
    return f"{minutes:.1f} min"
