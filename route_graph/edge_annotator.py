"""Per-edge color, arrival time and path highlighting for rendering."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from config.traffic import TRAFFIC_MULTIPLIERS, TrafficConfig, TrafficLevel
from config.visualization import UNUSED_EDGE_COLOR

from .graph_model import Edge, RouteGraph
from .shortest_paths import InvalidInputError, ShortestPaths, compute_shortest_paths

logger = logging.getLogger(__name__)

# Arrival time of an edge that is neither highlighted nor incident to the source
NO_ARRIVAL_TIME = -1.0

ColorForTime = Callable[[float], str]


@dataclass(frozen=True)
class ColoredEdge(Edge):
    """Edge decorated for display."""

    color: str = UNUSED_EDGE_COLOR
    arrival_time: float = NO_ARRIVAL_TIME
    is_on_path: bool = False


@dataclass(frozen=True)
class PathSegment:
    """One step of the highlighted path, traversed from_node -> to_node."""

    from_node: str
    to_node: str


def annotate_edges(graph: RouteGraph,
                   source_id: str,
                   traffic_level: Union[TrafficLevel, str],
                   color_for_time: ColorForTime,
                   destination_id: Optional[str] = None,
                   unused_color: str = UNUSED_EDGE_COLOR,
                   traffic_config: Optional[TrafficConfig] = None) -> List[ColoredEdge]:
    """
    Decorate every edge of the graph with a color, arrival time and path flag.

    Runs the shortest path engine once from source_id. When a destination
    with a non-trivial path is given, the edges along that path are
    highlighted and timed at their path-forward endpoint. Edges incident
    to the source are timed at their other endpoint. All other edges get
    NO_ARRIVAL_TIME and unused_color.

    Invalid input never raises. Anything that is not a RouteGraph or an
    unknown source yields [], and an unknown destination is dropped. An
    unknown traffic level falls back to medium. Any other failure during
    annotation yields []. Each case is logged as a warning.

    Args:
        graph: Route graph (not modified)
        source_id: Start location
        traffic_level: Traffic condition applied to all edge weights
        color_for_time: Maps a non-negative arrival time to a color token
        destination_id: Location whose path should be highlighted
        unused_color: Color for edges without an arrival time
        traffic_config: Multiplier table (defaults to TrafficConfig())

    Returns:
        One ColoredEdge per input edge, in input order
    """
    try:
        if not isinstance(graph, RouteGraph):
            logger.warning(f"Cannot annotate edges: expected a RouteGraph, got {type(graph).__name__}")
            return []

        if not _is_known_node(graph, source_id):
            logger.warning(f"Cannot annotate edges: source {source_id!r} not in graph")
            return []

        if destination_id is not None and not _is_known_node(graph, destination_id):
            logger.warning(f"Destination {destination_id!r} not in graph, ignoring it")
            destination_id = None

        multiplier = _resolve_multiplier(traffic_level, traffic_config or TrafficConfig())

        dangling = graph.find_dangling_edges()
        if dangling:
            logger.warning(f"{len(dangling)} edge(s) reference unknown nodes and will be left neutral: {dangling}")

        result = compute_shortest_paths(graph, source_id, multiplier)
        segments = _highlighted_segments(graph, result, destination_id)

        colored_edges = [
            _annotate_edge(graph, edge, segments.get(index), result, source_id,
                           color_for_time, unused_color)
            for index, edge in enumerate(graph.edges)
        ]
    except InvalidInputError as e:
        logger.warning(f"Shortest path computation rejected input: {e}")
        return []
    except Exception as e:
        logger.warning(f"Error annotating edges from {source_id!r}: {e}", exc_info=True)
        return []

    logger.debug(f"Annotated {len(colored_edges)} edges from {source_id} "
                 f"(destination: {destination_id}, highlighted: {len(segments)})")
    return colored_edges


def _is_known_node(graph: RouteGraph, node_id) -> bool:
    try:
        return graph.has_node(node_id)
    except TypeError:
        return False


def _resolve_multiplier(traffic_level: Union[TrafficLevel, str], traffic_config: TrafficConfig) -> float:
    try:
        return traffic_config.get_multiplier(traffic_level)
    except (ValueError, KeyError):
        fallback = traffic_config.multipliers.get(TrafficLevel.MEDIUM, TRAFFIC_MULTIPLIERS[TrafficLevel.MEDIUM])
        logger.warning(f"Unknown traffic level {traffic_level!r}, using {TrafficLevel.MEDIUM.value} ({fallback}x)")
        return fallback


def _highlighted_segments(graph: RouteGraph, result: ShortestPaths,
                          destination_id: Optional[str]) -> Dict[int, PathSegment]:
    """
    Map edge index -> traversal direction for each step of the destination path.

    The edge of a step is the one the engine relaxed through, so only one
    of several parallel edges is highlighted.
    """
    if destination_id is None:
        return {}

    path = result.paths.get(destination_id, [])
    if len(path) <= 1:
        return {}

    segments = {}
    for from_node, to_node in zip(path, path[1:]):
        edge_index = result.predecessor_edges.get(to_node)
        if edge_index is None:
            continue

        edge = graph.edges[edge_index]
        if not graph.edge_has_known_endpoints(edge):
            continue

        segments[edge_index] = PathSegment(from_node, to_node)

    return segments


def _annotate_edge(graph: RouteGraph,
                   edge: Edge,
                   segment: Optional[PathSegment],
                   result: ShortestPaths,
                   source_id: str,
                   color_for_time: ColorForTime,
                   unused_color: str) -> ColoredEdge:
    if segment is not None:
        arrival_time = result.distances[arrival_endpoint(edge, result.distances, segment)]
        return _colored(edge, color_for_time(arrival_time), arrival_time, True)

    if graph.edge_has_known_endpoints(edge) and edge.touches(source_id):
        arrival_time = result.distances[edge.other_endpoint(source_id)]
        return _colored(edge, color_for_time(arrival_time), arrival_time, False)

    return _colored(edge, unused_color, NO_ARRIVAL_TIME, False)


def arrival_endpoint(edge: Edge, distances: Dict[str, float],
                     segment: Optional[PathSegment] = None) -> str:
    """
    Endpoint of an on-path edge that the path travels toward.

    That is the endpoint strictly farther from the source. With equal
    distances (zero-weight edge) the traversal direction decides, then
    the edge's target label.
    """
    source_distance = distances[edge.source]
    target_distance = distances[edge.target]

    if target_distance > source_distance:
        return edge.target
    if source_distance > target_distance:
        return edge.source
    if segment is not None:
        return segment.to_node
    return edge.target


def _colored(edge: Edge, color: str, arrival_time: float, is_on_path: bool) -> ColoredEdge:
    return ColoredEdge(
        source=edge.source,
        target=edge.target,
        weight=edge.weight,
        color=color,
        arrival_time=arrival_time,
        is_on_path=is_on_path
    )
