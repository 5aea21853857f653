"""Route graph data structure: locations joined by undirected travel-time edges."""

import logging
from typing import Dict, Iterable, List, Optional, Tuple
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """A named location on the map."""

    node_id: str  # Unique location identifier
    name: str = ""

    # Position, only meaningful for rendering
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Edge:
    """
    Undirected road between two locations.

    source/target are arbitrary labels, the edge is traversable both ways
    with the same base weight.
    """

    source: str
    target: str
    weight: float  # Base travel time in minutes

    @property
    def key(self) -> Tuple[str, str]:
        """Canonical unordered key (sorted endpoint pair)."""
        if self.source <= self.target:
            return (self.source, self.target)
        return (self.target, self.source)

    def touches(self, node_id: str) -> bool:
        """Check if node is one of the edge endpoints."""
        return self.source == node_id or self.target == node_id

    def other_endpoint(self, node_id: str) -> str:
        """Return the endpoint opposite to node_id."""
        if self.source == node_id:
            return self.target
        if self.target == node_id:
            return self.source
        raise ValueError(f"Node {node_id} is not an endpoint of {self.source}-{self.target}")


class RouteGraph:
    """
    Static weighted undirected graph G = (V, E) of locations.

    Nodes keep insertion order, which is also the tie-break order used by
    the shortest path engine. Edges are kept as a list so parallel edges
    between the same pair stay distinct.
    """

    def __init__(self, nodes: Optional[Iterable[Node]] = None,
                 edges: Optional[Iterable[Edge]] = None):
        """Initialize graph, optionally from nodes and edges."""
        self.nodes: Dict[str, Node] = {}
        self.edges: List[Edge] = []
        self._incidence: Dict[str, List[int]] = {}

        for node in nodes or ():
            self.add_node(node)
        for edge in edges or ():
            self.add_edge(edge)

    def add_node(self, node: Node) -> None:
        """Add a location node, replacing any node with the same id."""
        if node.node_id in self.nodes:
            logger.warning(f"Replacing existing node: {node.node_id}")
        self.nodes[node.node_id] = node
        logger.debug(f"Added node: {node.node_id}")

    def add_edge(self, edge: Edge) -> int:
        """
        Append an edge and return its index in the edge list.

        Edges pointing at unknown nodes are stored as given; see
        find_dangling_edges().
        """
        index = len(self.edges)
        self.edges.append(edge)

        # Index both endpoints, once for self-loops
        self._incidence.setdefault(edge.source, []).append(index)
        if edge.target != edge.source:
            self._incidence.setdefault(edge.target, []).append(index)

        logger.debug(f"Added edge #{index}: {edge.source} - {edge.target} ({edge.weight})")
        return index

    def has_node(self, node_id: Optional[str]) -> bool:
        """Check if node exists in graph."""
        return node_id in self.nodes

    def get_node(self, node_id: str) -> Optional[Node]:
        """Get node by ID."""
        return self.nodes.get(node_id)

    def node_ids(self) -> List[str]:
        """Node ids in insertion order."""
        return list(self.nodes.keys())

    def get_all_nodes(self) -> List[Node]:
        """Get all nodes in the graph."""
        return list(self.nodes.values())

    def get_all_edges(self) -> List[Edge]:
        """Get all edges in the graph."""
        return list(self.edges)

    def edges_touching(self, node_id: str) -> List[Tuple[int, Edge]]:
        """Get (index, edge) pairs incident to a node, in edge list order."""
        return [(index, self.edges[index]) for index in self._incidence.get(node_id, [])]

    def edge_has_known_endpoints(self, edge: Edge) -> bool:
        """Check that both endpoints of an edge are nodes of this graph."""
        return edge.source in self.nodes and edge.target in self.nodes

    def find_dangling_edges(self) -> List[int]:
        """Indices of edges with at least one endpoint missing from the node set."""
        return [
            index for index, edge in enumerate(self.edges)
            if not self.edge_has_known_endpoints(edge)
        ]

    def copy(self) -> "RouteGraph":
        """Shallow copy; nodes and edges are immutable so they are shared."""
        return RouteGraph(self.nodes.values(), self.edges)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"RouteGraph(nodes={len(self.nodes)}, edges={len(self.edges)})"
