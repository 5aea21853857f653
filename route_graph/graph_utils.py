"""Graph conversion, path costing and export utilities."""

import json
import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import networkx as nx

from .graph_model import RouteGraph
from .edge_annotator import ColoredEdge

logger = logging.getLogger(__name__)


def to_networkx(graph: RouteGraph, traffic_multiplier: float = 1.0) -> nx.MultiGraph:
    """
    Convert RouteGraph to a NetworkX MultiGraph.

    Parallel edges are preserved with their edge list index as key.
    Edges pointing at unknown nodes are skipped.

    Args:
        graph: Route graph to convert
        traffic_multiplier: Scaling applied to the 'weight' attribute

    Returns:
        NetworkX undirected multigraph with 'weight' (scaled) and
        'base_weight' edge attributes
    """
    nx_graph = nx.MultiGraph()

    # Add nodes
    for node in graph.get_all_nodes():
        nx_graph.add_node(node.node_id, name=node.name, x=float(node.x), y=float(node.y))

    # Add edges
    for index, edge in enumerate(graph.edges):
        if not graph.edge_has_known_endpoints(edge):
            continue
        nx_graph.add_edge(
            edge.source,
            edge.target,
            key=index,
            weight=float(edge.weight) * traffic_multiplier,
            base_weight=float(edge.weight)
        )

    return nx_graph


def path_travel_time(graph: RouteGraph, path: Sequence[str],
                     traffic_multiplier: float = 1.0) -> float:
    """
    Calculate the weighted travel time along a node path.

    Each step uses the lightest edge between the two nodes, which is the
    one the shortest path engine relaxes through.

    Args:
        graph: Route graph
        path: Node IDs forming the path
        traffic_multiplier: Scaling applied to edge weights

    Returns:
        Total travel time, 0.0 for paths of fewer than two nodes, or
        math.inf when some step has no connecting edge
    """
    total = 0.0

    for from_node, to_node in zip(path, path[1:]):
        weights = [
            edge.weight for _, edge in graph.edges_touching(from_node)
            if edge.other_endpoint(from_node) == to_node
        ]
        if not weights:
            logger.debug(f"No edge between {from_node} and {to_node}")
            return math.inf
        total += min(weights) * traffic_multiplier

    return total


def _finite_or_none(value: float) -> Optional[float]:
    return None if math.isinf(value) else value


def export_annotation_to_json(graph: RouteGraph,
                              colored_edges: List[ColoredEdge],
                              distances: Dict[str, float],
                              filepath: str) -> None:
    """
    Export an annotated graph to JSON format.

    Unreachable distances are written as null.

    Args:
        graph: Route graph the annotation was computed on
        colored_edges: Output of annotate_edges
        distances: Distance map of the same computation
        filepath: Output file path
    """
    export_data = {
        'nodes': [],
        'edges': [],
        'metadata': {
            'total_nodes': len(graph.nodes),
            'total_edges': len(colored_edges),
            'highlighted_edges': sum(1 for edge in colored_edges if edge.is_on_path),
            'unreachable_nodes': sum(1 for d in distances.values() if math.isinf(d))
        }
    }

    # Export nodes
    for node in graph.get_all_nodes():
        export_data['nodes'].append({
            'id': node.node_id,
            'name': node.name,
            'x': node.x,
            'y': node.y,
            'distance': _finite_or_none(distances.get(node.node_id, math.inf))
        })

    # Export edges
    for edge in colored_edges:
        export_data['edges'].append({
            'source': edge.source,
            'target': edge.target,
            'weight': edge.weight,
            'color': edge.color,
            'arrival_time': edge.arrival_time,
            'is_on_path': edge.is_on_path
        })

    # Write to file
    with open(filepath, 'w') as f:
        json.dump(export_data, f, indent=2)

    logger.info(f"Annotation exported to {filepath}")


def export_annotation_to_graphml(graph: RouteGraph,
                                 colored_edges: List[ColoredEdge],
                                 filepath: str) -> None:
    """
    Export an annotated graph to GraphML format (NetworkX compatible).

    Args:
        graph: Route graph the annotation was computed on
        colored_edges: Output of annotate_edges, aligned with graph.edges
        filepath: Output file path
    """
    if len(colored_edges) != len(graph.edges):
        raise ValueError(
            f"Annotation has {len(colored_edges)} edges, graph has {len(graph.edges)}"
        )

    nx_graph = to_networkx(graph)

    # Add edge attributes
    for index, colored in enumerate(colored_edges):
        if nx_graph.has_edge(colored.source, colored.target, key=index):
            attributes = nx_graph.edges[colored.source, colored.target, index]
            attributes['color'] = colored.color
            attributes['arrival_time'] = colored.arrival_time
            attributes['is_on_path'] = colored.is_on_path

    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    nx.write_graphml(nx_graph, filepath)
    logger.info(f"Annotation exported to GraphML: {filepath}")
