"""Single-source shortest paths over a route graph (Dijkstra, linear scan)."""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from .graph_model import RouteGraph

logger = logging.getLogger(__name__)

# Distance of a node that cannot be reached from the source
UNREACHABLE = math.inf


class InvalidInputError(ValueError):
    """Raised when a computation is requested with arguments the graph cannot satisfy."""


@dataclass(frozen=True)
class ShortestPaths:
    """Result of one shortest path computation."""

    source_id: str
    distances: Dict[str, float]       # node -> weighted distance, UNREACHABLE if none
    paths: Dict[str, List[str]]       # node -> [source, ..., node], [] if none
    predecessor_edges: Dict[str, int]  # node -> index of the edge used to reach it

    def is_reachable(self, node_id: str) -> bool:
        return not math.isinf(self.distances.get(node_id, UNREACHABLE))


def compute_shortest_paths(graph: RouteGraph, source_id: str,
                           traffic_multiplier: float = 1.0) -> ShortestPaths:
    """
    Compute shortest travel times and paths from a source to every node.

    Each edge weight is scaled by traffic_multiplier. The unsettled node
    with minimum distance is picked by linear scan; ties go to the node
    that comes first in graph order. Relaxation only updates on strict
    improvement, so among parallel edges the first one (in edge list
    order) of minimal weight is the one recorded.

    Preconditions (not checked): edge weights are non-negative and
    traffic_multiplier is positive.

    Args:
        graph: Route graph (not modified)
        source_id: Node to compute distances from
        traffic_multiplier: Uniform scaling applied to every edge weight

    Returns:
        ShortestPaths with distances, paths and predecessor edges

    Raises:
        InvalidInputError: If source_id is not a node of the graph
    """
    if not graph.has_node(source_id):
        raise InvalidInputError(f"Source node not found in graph: {source_id!r}")

    node_ids = graph.node_ids()

    # Initialize distances
    distances: Dict[str, float] = {node_id: UNREACHABLE for node_id in node_ids}
    distances[source_id] = 0.0
    previous: Dict[str, str] = {}
    previous_edge: Dict[str, int] = {}

    # dict keeps graph order for deterministic tie-breaking
    unsettled = dict.fromkeys(node_ids)

    while unsettled:
        current: Optional[str] = None
        min_distance = UNREACHABLE
        for node_id in unsettled:
            if distances[node_id] < min_distance:
                min_distance = distances[node_id]
                current = node_id

        # All remaining nodes are unreachable
        if current is None:
            break

        del unsettled[current]

        for edge_index, edge in graph.edges_touching(current):
            neighbor = edge.other_endpoint(current)

            # Skip settled nodes and endpoints missing from the node set
            if neighbor not in unsettled:
                continue

            candidate = distances[current] + edge.weight * traffic_multiplier
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = current
                previous_edge[neighbor] = edge_index

    paths = {node_id: _reconstruct_path(node_id, source_id, previous) for node_id in node_ids}

    reachable = sum(1 for distance in distances.values() if not math.isinf(distance))
    logger.debug(f"Shortest paths from {source_id} (x{traffic_multiplier}): "
                 f"{reachable}/{len(node_ids)} nodes reachable")

    return ShortestPaths(
        source_id=source_id,
        distances=distances,
        paths=paths,
        predecessor_edges=previous_edge
    )


def _reconstruct_path(node_id: str, source_id: str, previous: Dict[str, str]) -> List[str]:
    """
    Walk predecessor links back to the source.

    Args:
        node_id: Path end
        source_id: Path start
        previous: Predecessor of each reached node

    Returns:
        Node sequence from source to node_id, [] if node_id was not reached
    """
    if node_id == source_id:
        return [source_id]
    if node_id not in previous:
        return []

    path = [node_id]
    current = node_id
    while current != source_id:
        current = previous[current]
        path.append(current)

    path.reverse()
    return path
