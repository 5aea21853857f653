"""Travel time summary from one source, as shown in the results panel."""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from config.traffic import TrafficConfig, TrafficLevel, parse_traffic_level
from utils.time_utils import format_hour_of_day, format_travel_time

from .graph_model import RouteGraph
from .shortest_paths import compute_shortest_paths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DestinationResult:
    """Travel time and route to one location."""

    node_id: str
    name: str
    travel_time: float
    path: List[str] = field(default_factory=list)
    is_selected: bool = False

    @property
    def has_path(self) -> bool:
        return len(self.path) > 0

    @property
    def travel_time_label(self) -> str:
        return format_travel_time(self.travel_time)


@dataclass
class RouteSummary:
    """Everything the results panel shows for one source/traffic/hour choice."""

    source_id: str
    source_name: str
    traffic_level: TrafficLevel
    traffic_description: str
    hour: int
    hour_label: str
    is_rush_hour: bool
    distances: Dict[str, float]
    paths: Dict[str, List[str]]
    results: List[DestinationResult]
    destination_id: Optional[str] = None
    destination_name: str = ""

    @property
    def destination(self) -> Optional[DestinationResult]:
        """Row of the selected destination, if any."""
        for result in self.results:
            if result.is_selected:
                return result
        return None


def apply_time_of_day(distances: Dict[str, float], hour: int,
                      traffic_config: Optional[TrafficConfig] = None) -> Dict[str, float]:
    """
    Scale finite travel times by the rush hour factor when hour is in rush hour.

    Args:
        distances: Distance map from the shortest path engine
        hour: Hour of day (0-23)
        traffic_config: Rush hour windows and factor

    Returns:
        New distance map (input is left untouched)
    """
    config = traffic_config or TrafficConfig()
    if not config.is_rush_hour(hour):
        return dict(distances)

    return {
        node_id: distance if math.isinf(distance) else distance * config.rush_hour_factor
        for node_id, distance in distances.items()
    }


def summarize_routes(graph: RouteGraph,
                     source_id: str,
                     traffic_level: Union[TrafficLevel, str] = TrafficLevel.MEDIUM,
                     hour: int = 12,
                     destination_id: Optional[str] = None,
                     traffic_config: Optional[TrafficConfig] = None) -> RouteSummary:
    """
    Build the travel time summary for every location reachable from source_id.

    Rows exclude the source and are ordered by travel time, unreachable
    locations last, ties in graph order.

    Raises:
        InvalidInputError: If source_id is not a node of the graph
        ValueError: If traffic_level or hour is invalid
    """
    config = traffic_config or TrafficConfig()
    level = parse_traffic_level(traffic_level)
    multiplier = config.get_multiplier(level)
    hour_label = format_hour_of_day(hour)

    result = compute_shortest_paths(graph, source_id, multiplier)
    distances = apply_time_of_day(result.distances, hour, config)

    if destination_id is not None and not graph.has_node(destination_id):
        logger.warning(f"Destination {destination_id!r} not in graph, ignoring it")
        destination_id = None

    order = {node_id: i for i, node_id in enumerate(graph.node_ids())}
    rows = [
        DestinationResult(
            node_id=node.node_id,
            name=node.name,
            travel_time=distances[node.node_id],
            path=list(result.paths[node.node_id]),
            is_selected=node.node_id == destination_id
        )
        for node in graph.get_all_nodes()
        if node.node_id != source_id
    ]
    rows.sort(key=lambda row: (row.travel_time, order[row.node_id]))

    destination = graph.get_node(destination_id) if destination_id else None

    return RouteSummary(
        source_id=source_id,
        source_name=graph.get_node(source_id).name,
        traffic_level=level,
        traffic_description=config.describe(level),
        hour=hour,
        hour_label=hour_label,
        is_rush_hour=config.is_rush_hour(hour),
        distances=distances,
        paths=result.paths,
        results=rows,
        destination_id=destination_id,
        destination_name=destination.name if destination else ""
    )
