"""Visualization color configuration."""

import math
from dataclasses import dataclass
from typing import List, Tuple

# Neutral color for edges that carry no arrival time
UNUSED_EDGE_COLOR = "#d1d5db"


@dataclass(frozen=True)
class TimeBucket:
    """Travel times up to max_time (inclusive) map to color."""

    max_time: float
    color: str


DEFAULT_TIME_BUCKETS: Tuple[TimeBucket, ...] = (
    TimeBucket(5, "#4ade80"),         # Green: 0-5 minutes
    TimeBucket(10, "#facc15"),        # Yellow: 5-10 minutes
    TimeBucket(15, "#fb923c"),        # Orange: 10-15 minutes
    TimeBucket(math.inf, "#ef4444"),  # Red: more than 15 minutes
)


@dataclass(frozen=True)
class VisualizationConfig:
    """
    Color policy for annotated edges.

    Passed explicitly to whoever needs it; the annotator only sees
    color_for_time and unused_edge_color.
    """

    time_buckets: Tuple[TimeBucket, ...] = DEFAULT_TIME_BUCKETS
    unused_edge_color: str = UNUSED_EDGE_COLOR
    unused_edge_label: str = "Not on shortest path"

    def __post_init__(self):
        if not self.time_buckets:
            raise ValueError("time_buckets must not be empty")

    def color_for_time(self, time: float) -> str:
        """
        Map an arrival time to the color of the first bucket containing it.

        Args:
            time: Arrival time in minutes

        Returns:
            Color token of the matching bucket (last bucket if none match)
        """
        for bucket in self.time_buckets:
            if time <= bucket.max_time:
                return bucket.color
        return self.time_buckets[-1].color

    def legend_entries(self) -> List[Tuple[str, str]]:
        """
        Build (label, color) pairs for a travel time legend.

        Returns:
            One entry per bucket followed by the unused edge entry
        """
        entries = []
        lower = 0.0
        for index, bucket in enumerate(self.time_buckets):
            is_last = index == len(self.time_buckets) - 1
            if is_last or math.isinf(bucket.max_time):
                label = f"{lower:g}+ minutes"
            else:
                label = f"{lower:g}-{bucket.max_time:g} minutes"
            entries.append((label, bucket.color))
            lower = bucket.max_time

        entries.append((self.unused_edge_label, self.unused_edge_color))
        return entries
