"""Pydantic data schemas for graph input files."""

import json
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from route_graph.graph_model import RouteGraph, Node, Edge


class NodeSchema(BaseModel):
    """Schema for a location node."""

    id: str = Field(min_length=1, description="Unique location identifier")
    name: str = Field(default="", description="Display name")
    x: float = Field(default=0.0, description="Horizontal position (rendering only)")
    y: float = Field(default=0.0, description="Vertical position (rendering only)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id": "A", "name": "Downtown", "x": 100, "y": 300}
        }
    )


class EdgeSchema(BaseModel):
    """Schema for an undirected road between two locations."""

    source: str = Field(description="One endpoint node ID")
    target: str = Field(description="Other endpoint node ID")
    weight: float = Field(ge=0, description="Base travel time (minutes)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"source": "A", "target": "B", "weight": 8}
        }
    )


class GraphSchema(BaseModel):
    """Complete graph: locations plus roads."""

    nodes: List[NodeSchema] = Field(description="Locations, ids must be unique")
    edges: List[EdgeSchema] = Field(default_factory=list, description="Roads; parallel roads allowed")

    @model_validator(mode="after")
    def check_references(self) -> "GraphSchema":
        seen = set()
        for node in self.nodes:
            if node.id in seen:
                raise ValueError(f"Duplicate node id: {node.id}")
            seen.add(node.id)

        for index, edge in enumerate(self.edges):
            missing = [end for end in (edge.source, edge.target) if end not in seen]
            if missing:
                raise ValueError(f"Edge {index} references unknown node(s): {', '.join(missing)}")
        return self


def graph_from_schema(schema: GraphSchema) -> RouteGraph:
    """Build a RouteGraph from a validated schema."""
    nodes = [Node(node.id, node.name, node.x, node.y) for node in schema.nodes]
    edges = [Edge(edge.source, edge.target, edge.weight) for edge in schema.edges]
    return RouteGraph(nodes, edges)


def graph_to_schema(graph: RouteGraph) -> GraphSchema:
    """Convert a RouteGraph to its schema (validates references)."""
    return GraphSchema(
        nodes=[NodeSchema(id=n.node_id, name=n.name, x=n.x, y=n.y) for n in graph.get_all_nodes()],
        edges=[EdgeSchema(source=e.source, target=e.target, weight=e.weight) for e in graph.edges]
    )


def load_graph_from_json(filepath: Union[str, Path]) -> RouteGraph:
    """
    Load and validate a graph file.

    Args:
        filepath: JSON file with "nodes" and "edges" lists

    Returns:
        RouteGraph

    Raises:
        pydantic.ValidationError: If the content does not match GraphSchema
        OSError: If the file cannot be read
    """
    with open(filepath, 'r') as f:
        data = json.load(f)
    return graph_from_schema(GraphSchema.model_validate(data))


def save_graph_to_json(graph: RouteGraph, filepath: Union[str, Path]) -> None:
    """Write a graph in the format read by load_graph_from_json."""
    with open(filepath, 'w') as f:
        f.write(graph_to_schema(graph).model_dump_json(indent=2))
