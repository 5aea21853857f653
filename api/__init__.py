"""Input schemas for route graphs."""

from .data_schemas import (
    NodeSchema,
    EdgeSchema,
    GraphSchema,
    graph_from_schema,
    graph_to_schema,
    load_graph_from_json,
    save_graph_to_json
)

__all__ = [
    'NodeSchema',
    'EdgeSchema',
    'GraphSchema',
    'graph_from_schema',
    'graph_to_schema',
    'load_graph_from_json',
    'save_graph_to_json'
]
