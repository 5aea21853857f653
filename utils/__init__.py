"""Utility modules for the route mapper."""

from .logging import setup_logging, get_logger
from .time_utils import format_hour_of_day, format_travel_time

__all__ = [
    'setup_logging',
    'get_logger',
    'format_hour_of_day',
    'format_travel_time'
]
