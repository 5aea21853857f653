"""Traffic condition configuration."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Union


class TrafficLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Multipliers applied uniformly to every edge weight
TRAFFIC_MULTIPLIERS: Dict[TrafficLevel, float] = {
    TrafficLevel.LOW: 0.8,     # Faster than normal
    TrafficLevel.MEDIUM: 1.0,  # Normal speed
    TrafficLevel.HIGH: 1.5,    # Congested
}


def parse_traffic_level(level: Union[TrafficLevel, str]) -> TrafficLevel:
    """
    Resolve a traffic level given as enum member or string.

    Accepts values ("high") and member names ("HIGH"), case-insensitive.

    Raises:
        ValueError: If the level is not recognized
    """
    if isinstance(level, TrafficLevel):
        return level

    text = str(level).strip().lower()
    try:
        return TrafficLevel(text)
    except ValueError:
        raise ValueError(f"Unknown traffic level: {level!r}") from None


@dataclass
class TrafficConfig:
    """Configuration for traffic scaling and time-of-day adjustment."""

    multipliers: Dict[TrafficLevel, float] = field(
        default_factory=lambda: dict(TRAFFIC_MULTIPLIERS)
    )

    # Rush hour windows as inclusive (start_hour, end_hour) pairs
    rush_hour_windows: Tuple[Tuple[int, int], ...] = ((7, 9), (16, 18))
    rush_hour_factor: float = 1.2  # Extra 20% on travel times during rush hour

    def get_multiplier(self, level: Union[TrafficLevel, str]) -> float:
        """Return the edge weight multiplier for a traffic level."""
        return self.multipliers[parse_traffic_level(level)]

    def describe(self, level: Union[TrafficLevel, str]) -> str:
        """Human readable label, e.g. 'High Traffic (1.5x)'."""
        resolved = parse_traffic_level(level)
        return f"{resolved.value.capitalize()} Traffic ({self.multipliers[resolved]:.1f}x)"

    def is_rush_hour(self, hour: int) -> bool:
        """Check whether an hour of day (0-23) falls in a rush hour window."""
        return any(start <= hour <= end for start, end in self.rush_hour_windows)
