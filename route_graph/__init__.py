"""Shortest path engine and edge annotation for the route map."""

from .graph_model import RouteGraph, Node, Edge
from .shortest_paths import (
    compute_shortest_paths,
    ShortestPaths,
    InvalidInputError,
    UNREACHABLE
)
from .edge_annotator import annotate_edges, ColoredEdge, NO_ARRIVAL_TIME
from .route_summary import summarize_routes, RouteSummary, DestinationResult
from .sample_data import build_sample_graph
from .graph_generator import generate_random_graph

__all__ = [
    'RouteGraph',
    'Node',
    'Edge',
    'compute_shortest_paths',
    'ShortestPaths',
    'InvalidInputError',
    'UNREACHABLE',
    'annotate_edges',
    'ColoredEdge',
    'NO_ARRIVAL_TIME',
    'summarize_routes',
    'RouteSummary',
    'DestinationResult',
    'build_sample_graph',
    'generate_random_graph'
]
