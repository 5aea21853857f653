"""Static demo map used when no graph file is supplied."""

from .graph_model import RouteGraph, Node, Edge


# (node_id, name, x, y)
SAMPLE_NODES = [
    ("A", "Downtown", 100, 300),
    ("B", "Airport", 300, 100),
    ("C", "University", 500, 300),
    ("D", "Mall", 300, 500),
    ("E", "Park", 700, 300),
    ("F", "Beach", 900, 300),
    ("G", "Hospital", 500, 100),
    ("H", "Stadium", 700, 500),
]

# (source, target, base travel time in minutes)
SAMPLE_EDGES = [
    ("A", "B", 8),
    ("A", "D", 7),
    ("B", "G", 6),
    ("B", "C", 9),
    ("C", "E", 5),
    ("C", "G", 4),
    ("D", "C", 10),
    ("D", "H", 16),
    ("E", "F", 7),
    ("E", "H", 8),
    ("G", "E", 12),
]


def build_sample_graph() -> RouteGraph:
    """Build a fresh copy of the eight-location demo map."""
    nodes = [Node(node_id, name, float(x), float(y)) for node_id, name, x, y in SAMPLE_NODES]
    edges = [Edge(source, target, float(weight)) for source, target, weight in SAMPLE_EDGES]
    return RouteGraph(nodes, edges)
