"""Random demo graph generation."""

import logging
from typing import List, Optional, Tuple

import networkx as nx
import numpy as np

from .graph_model import RouteGraph, Node, Edge

logger = logging.getLogger(__name__)


LOCATION_NAMES = [
    'Downtown', 'Airport', 'University', 'Mall', 'Park', 'Beach', 'Hospital',
    'Stadium', 'Library', 'School', 'Theater', 'Restaurant', 'Office', 'Hotel',
    'Museum', 'Zoo', 'Station', 'Market', 'Factory', 'Warehouse', 'Residential',
    'Plaza', 'Center', 'District', 'Terminal', 'Complex', 'Arena', 'Institute'
]

MIN_EDGE_WEIGHT = 3   # minutes
MAX_EDGE_WEIGHT = 20  # minutes
MAX_EDGES_PER_NODE = 3
MIN_NODE_SPACING = 100.0
POSITION_PADDING = 50
MAX_PLACEMENT_ATTEMPTS = 50


def generate_node_id(index: int) -> str:
    """
    Spreadsheet-style node id: A..Z, then AA, AB, ...

    Args:
        index: Zero-based node index

    Returns:
        Node identifier
    """
    if index < 0:
        raise ValueError(f"Node index must be non-negative, got {index}")

    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(65 + remainder) + label
    return label


def generate_random_graph(node_count: int = 8,
                          width: int = 1000,
                          height: int = 600,
                          connectivity_factor: float = 0.5,
                          seed: Optional[int] = None) -> RouteGraph:
    """
    Generate a random connected route graph for demos.

    Nodes are placed at random positions kept MIN_NODE_SPACING apart where
    possible. Every node gets between one and MAX_EDGES_PER_NODE outgoing
    connections (more with a higher connectivity_factor), and stray
    components are joined to the first node afterwards. Connections
    drawn from both ends of a pair are kept as parallel edges.

    Args:
        node_count: Number of locations
        width: Canvas width used for positions
        height: Canvas height used for positions
        connectivity_factor: 0-1, higher means more edges
        seed: Seed for reproducible graphs

    Returns:
        Connected RouteGraph
    """
    if node_count < 0:
        raise ValueError(f"node_count must be non-negative, got {node_count}")
    if not 0.0 <= connectivity_factor <= 1.0:
        raise ValueError(f"connectivity_factor must be in [0, 1], got {connectivity_factor}")

    rng = np.random.default_rng(seed)
    graph = RouteGraph()

    # Generate nodes
    positions: List[Tuple[int, int]] = []
    for i in range(node_count):
        position = _place_node(rng, positions, width, height)
        positions.append(position)

        name = LOCATION_NAMES[int(rng.integers(0, len(LOCATION_NAMES)))]
        graph.add_node(Node(generate_node_id(i), name, float(position[0]), float(position[1])))

    node_ids = graph.node_ids()

    # Generate edges
    max_edges = min(MAX_EDGES_PER_NODE, node_count - 1)
    for i, node_id in enumerate(node_ids):
        if max_edges < 1:
            break

        upper = 1 + int(round(connectivity_factor * (max_edges - 1)))
        edge_count = int(rng.integers(1, upper + 1))

        candidates = [j for j in range(node_count) if j != i]
        targets = rng.choice(candidates, size=edge_count, replace=False)

        for j in sorted(int(t) for t in targets):
            weight = int(rng.integers(MIN_EDGE_WEIGHT, MAX_EDGE_WEIGHT + 1))
            graph.add_edge(Edge(node_id, node_ids[j], float(weight)))

    _ensure_connected(graph, rng)

    logger.info(f"Generated random graph: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    return graph


def _place_node(rng: np.random.Generator, positions: List[Tuple[int, int]],
                width: int, height: int) -> Tuple[int, int]:
    """Pick a random position, retrying while it is too close to another node."""
    low_x, high_x = POSITION_PADDING, max(POSITION_PADDING, width - POSITION_PADDING)
    low_y, high_y = POSITION_PADDING, max(POSITION_PADDING, height - POSITION_PADDING)

    position = (low_x, low_y)
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        position = (int(rng.integers(low_x, high_x + 1)), int(rng.integers(low_y, high_y + 1)))
        if not positions:
            break

        existing = np.array(positions, dtype=float)
        spacing = np.hypot(existing[:, 0] - position[0], existing[:, 1] - position[1])
        if spacing.min() >= MIN_NODE_SPACING:
            break

    return position


def _ensure_connected(graph: RouteGraph, rng: np.random.Generator) -> None:
    """Join every component that misses the first node to the first node."""
    if len(graph.nodes) <= 1:
        return

    nx_graph = nx.Graph()
    nx_graph.add_nodes_from(graph.node_ids())
    nx_graph.add_edges_from((edge.source, edge.target) for edge in graph.edges)

    anchor = graph.node_ids()[0]
    order = {node_id: i for i, node_id in enumerate(graph.node_ids())}

    for component in nx.connected_components(nx_graph):
        if anchor in component:
            continue

        # Lowest-index node of the component keeps results reproducible
        stray = min(component, key=order.__getitem__)
        weight = int(rng.integers(MIN_EDGE_WEIGHT, MAX_EDGE_WEIGHT + 1))
        graph.add_edge(Edge(stray, anchor, float(weight)))
        logger.debug(f"Connected stray component via {stray} - {anchor}")
