"""Configuration modules for the route mapper."""

from .traffic import TrafficConfig, TrafficLevel, TRAFFIC_MULTIPLIERS, parse_traffic_level
from .visualization import VisualizationConfig, TimeBucket, UNUSED_EDGE_COLOR
from .settings import Settings, get_settings

__all__ = [
    'TrafficConfig',
    'TrafficLevel',
    'TRAFFIC_MULTIPLIERS',
    'parse_traffic_level',
    'VisualizationConfig',
    'TimeBucket',
    'UNUSED_EDGE_COLOR',
    'Settings',
    'get_settings'
]
