"""
Route Rainbow Mapper - travel times from one location, color coded by arrival time.
Command line entry point: loads or generates a graph, runs the shortest path
engine and prints the results panel and per-edge annotation.
"""

import sys
import argparse
from typing import List, Optional

from pydantic import ValidationError

from api.data_schemas import load_graph_from_json
from config.settings import get_settings
from config.traffic import TrafficConfig, TrafficLevel
from config.visualization import VisualizationConfig
from route_graph.graph_model import RouteGraph
from route_graph.graph_generator import generate_random_graph
from route_graph.sample_data import build_sample_graph
from route_graph.edge_annotator import annotate_edges, ColoredEdge
from route_graph.route_summary import RouteSummary, summarize_routes
from route_graph.shortest_paths import InvalidInputError
from route_graph.graph_utils import export_annotation_to_json, export_annotation_to_graphml
from utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Command line options; defaults come from ROUTE_* settings."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Route Rainbow Mapper: shortest travel times from a starting location.")

    graph_group = parser.add_mutually_exclusive_group()
    graph_group.add_argument('--graph', metavar='FILE',
                             help="JSON graph file (default: built-in sample map)")
    graph_group.add_argument('--random', type=int, metavar='N',
                             help="Generate a random connected graph with N locations")

    parser.add_argument('--seed', type=int, default=settings.random_seed,
                        help="Seed for --random")
    parser.add_argument('--source', default=settings.default_source,
                        help=f"Starting location id (default: {settings.default_source})")
    parser.add_argument('--destination', default=None,
                        help="Location id whose route should be highlighted")
    parser.add_argument('--traffic', choices=[level.value for level in TrafficLevel],
                        default=settings.default_traffic_level.value,
                        help="Traffic conditions")
    parser.add_argument('--hour', type=int, choices=range(24), default=settings.default_hour,
                        metavar='0-23', help="Hour of day (rush hour adds 20%%)")
    parser.add_argument('--export-json', metavar='FILE', help="Write the annotated graph as JSON")
    parser.add_argument('--export-graphml', metavar='FILE', help="Write the annotated graph as GraphML")
    parser.add_argument('--log-level', default=settings.log_level,
                        help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument('--log-dir', default=settings.log_dir,
                        help="Directory for log files (default: console only)")
    return parser


def load_graph(args: argparse.Namespace) -> RouteGraph:
    """Pick the graph source requested on the command line."""
    if args.graph:
        return load_graph_from_json(args.graph)
    if args.random is not None:
        return generate_random_graph(node_count=args.random, seed=args.seed)
    return build_sample_graph()


def print_summary(summary: RouteSummary) -> None:
    """Print the results panel."""
    print("\nTravel Time Results")
    print(f"From: {summary.source_name} ({summary.source_id})")
    if summary.destination_id:
        print(f"To: {summary.destination_name} ({summary.destination_id})")

    rush = " (Rush Hour)" if summary.is_rush_hour else ""
    print(f"Time of Day: {summary.hour_label}{rush}")
    print(f"Traffic Conditions: {summary.traffic_description}")

    destination = summary.destination
    if destination is not None:
        print(f"\nRoute: {destination.travel_time_label}")
        if destination.has_path:
            print(f"Path: {' -> '.join(destination.path)}")

    print()
    for row in summary.results:
        marker = "*" if row.is_selected else " "
        path = ' -> '.join(row.path) if row.has_path else ""
        print(f"{marker} {row.name + ' (' + row.node_id + ')':<24} {row.travel_time_label:>10}  {path}")


def print_edges(colored_edges: List[ColoredEdge], visualization: VisualizationConfig) -> None:
    """Print the per-edge annotation table and legend."""
    header = "| Edge       | Weight | Arrival | Color   | On Path |"
    divider = "-" * len(header)
    print(f"\n{header}")
    print(divider)

    for edge in colored_edges:
        arrival = f"{edge.arrival_time:.1f}" if edge.arrival_time >= 0 else "-"
        print(f"| {edge.source + ' - ' + edge.target:<10} | {edge.weight:>6g} | {arrival:>7} | "
              f"{edge.color:<7} | {'yes' if edge.is_on_path else '':<7} |")
    print(divider)

    print("\nLegend:")
    for label, color in visualization.legend_entries():
        print(f"  {color}  {label}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the route mapper."""
    args = build_parser().parse_args(argv)

    logger = setup_logging(args.log_level, args.log_dir)

    try:
        graph = load_graph(args)
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Could not load graph: {e}")
        return 1

    logger.info(f"Loaded graph: {graph!r}")

    traffic_config = TrafficConfig()
    visualization = VisualizationConfig()

    try:
        summary = summarize_routes(
            graph,
            args.source,
            traffic_level=args.traffic,
            hour=args.hour,
            destination_id=args.destination,
            traffic_config=traffic_config
        )
    except InvalidInputError as e:
        logger.error(f"{e}. Available locations: {', '.join(graph.node_ids())}")
        return 1

    colored_edges = annotate_edges(
        graph,
        args.source,
        args.traffic,
        visualization.color_for_time,
        destination_id=summary.destination_id,
        unused_color=visualization.unused_edge_color,
        traffic_config=traffic_config
    )

    print_summary(summary)
    print_edges(colored_edges, visualization)

    try:
        if args.export_json:
            export_annotation_to_json(graph, colored_edges, summary.distances, args.export_json)
        if args.export_graphml:
            export_annotation_to_graphml(graph, colored_edges, args.export_graphml)
    except OSError as e:
        logger.error(f"Error exporting annotation: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
