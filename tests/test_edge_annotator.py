"""Tests for edge coloring and path highlighting."""

import dataclasses
import logging

import pytest

from config.traffic import TrafficConfig, TrafficLevel
from config.visualization import VisualizationConfig, UNUSED_EDGE_COLOR
from route_graph.graph_model import RouteGraph, Node, Edge
from route_graph.edge_annotator import (
    annotate_edges,
    arrival_endpoint,
    ColoredEdge,
    PathSegment,
    NO_ARRIVAL_TIME
)
from route_graph.sample_data import build_sample_graph


def time_label(time):
    """Color function that encodes the arrival time in the token."""
    return f"t={time:g}"


@pytest.fixture
def palette():
    return VisualizationConfig()


@pytest.fixture
def line_graph():
    """A - B - C with weight 5 each, plus isolated D."""
    return RouteGraph(
        nodes=[Node("A"), Node("B"), Node("C"), Node("D")],
        edges=[Edge("A", "B", 5), Edge("B", "C", 5)]
    )


def test_highlighted_path_arrival_times(line_graph, palette):
    """Test the A -> C route at medium traffic."""
    edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, palette.color_for_time, "C")

    assert [edge.is_on_path for edge in edges] == [True, True]
    assert edges[0].arrival_time == pytest.approx(5)
    assert edges[1].arrival_time == pytest.approx(10)
    assert edges[0].color == "#4ade80"
    assert edges[1].color == "#facc15"


def test_highlighted_path_with_reversed_edge_labels(palette):
    """Test arrival endpoint is found regardless of stored orientation."""
    graph = RouteGraph(
        nodes=[Node("A"), Node("B"), Node("C")],
        edges=[Edge("B", "A", 5), Edge("C", "B", 5)]
    )
    edges = annotate_edges(graph, "A", TrafficLevel.MEDIUM, time_label, "C")

    assert all(edge.is_on_path for edge in edges)
    assert [edge.arrival_time for edge in edges] == [5, 10]
    assert [edge.color for edge in edges] == ["t=5", "t=10"]


def test_high_traffic_scales_arrival_times(line_graph):
    """Test traffic multiplier flows into arrival times."""
    edges = annotate_edges(line_graph, "A", TrafficLevel.HIGH, time_label, "C")

    assert edges[0].arrival_time == pytest.approx(7.5)
    assert edges[1].arrival_time == pytest.approx(15)


def test_traffic_level_as_string(line_graph):
    """Test string traffic levels are accepted."""
    edges = annotate_edges(line_graph, "A", "low", time_label, "C")

    assert edges[1].arrival_time == pytest.approx(8)


def test_no_destination_only_source_edges_timed(line_graph):
    """Test the incident-to-source rule without a destination."""
    edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label)

    assert not any(edge.is_on_path for edge in edges)

    assert edges[0].arrival_time == pytest.approx(5)
    assert edges[0].color == "t=5"

    assert edges[1].arrival_time == NO_ARRIVAL_TIME
    assert edges[1].color == UNUSED_EDGE_COLOR


def test_destination_equal_to_source(line_graph):
    """Test a trivial path highlights nothing."""
    edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label, "A")
    baseline = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label)

    assert not any(edge.is_on_path for edge in edges)
    assert edges == baseline


def test_unreachable_destination(line_graph):
    """Test an unreachable destination highlights nothing."""
    edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label, "D")

    assert not any(edge.is_on_path for edge in edges)
    assert edges[0].arrival_time == pytest.approx(5)
    assert edges[1].arrival_time == NO_ARRIVAL_TIME


def test_unknown_source_returns_empty(line_graph, caplog):
    """Test the annotator fails soft on a missing source."""
    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, "Z", TrafficLevel.MEDIUM, time_label, "C")

    assert edges == []
    assert "source 'Z' not in graph" in caplog.text


def test_not_a_graph_returns_empty(caplog):
    """Test a missing graph is logged instead of raising."""
    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(None, "A", TrafficLevel.MEDIUM, time_label, "C")

    assert edges == []
    assert "expected a RouteGraph" in caplog.text


def test_unhashable_source_returns_empty(line_graph, caplog):
    """Test a source of the wrong type is treated as unknown."""
    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, ["A"], TrafficLevel.MEDIUM, time_label, "C")

    assert edges == []
    assert "not in graph" in caplog.text


def test_unhashable_destination_is_dropped(line_graph, caplog):
    """Test a destination of the wrong type is ignored."""
    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label, ["C"])

    assert edges == annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label)
    assert "Destination ['C'] not in graph" in caplog.text


def test_corrupt_edge_list_returns_empty(line_graph, caplog):
    """Test a graph holding a non-edge object is logged instead of raising."""
    line_graph.edges.append("not an edge")

    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label, "C")

    assert edges == []
    assert "Error annotating edges from 'A'" in caplog.text


def test_traffic_level_missing_from_config(line_graph, caplog):
    """Test a level absent from the multiplier table uses the medium default."""
    config = TrafficConfig(multipliers={TrafficLevel.HIGH: 1.5})

    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, "A", "low", time_label, "C", traffic_config=config)

    assert edges[1].arrival_time == pytest.approx(10)
    assert "Unknown traffic level 'low'" in caplog.text


def test_missing_level_uses_config_medium(line_graph):
    """Test the fallback prefers the config's own medium multiplier."""
    config = TrafficConfig(multipliers={TrafficLevel.MEDIUM: 2.0})

    edges = annotate_edges(line_graph, "A", TrafficLevel.HIGH, time_label, "C", traffic_config=config)

    assert edges[1].arrival_time == pytest.approx(20)


def test_unknown_destination_is_dropped(line_graph, caplog):
    """Test a missing destination is treated as no destination."""
    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label, "Z")

    assert edges == annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label)
    assert "Destination 'Z' not in graph" in caplog.text


def test_unknown_traffic_level_falls_back_to_medium(line_graph, caplog):
    """Test an unrecognized traffic level does not raise."""
    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, "A", "gridlock", time_label, "C")

    assert edges[1].arrival_time == pytest.approx(10)
    assert "Unknown traffic level" in caplog.text


def test_parallel_edges_only_relaxed_edge_highlighted():
    """Test that only the lightest of parallel edges is on the path."""
    graph = RouteGraph(
        nodes=[Node("A"), Node("B"), Node("C")],
        edges=[Edge("A", "B", 9), Edge("B", "A", 3), Edge("B", "C", 1)]
    )
    edges = annotate_edges(graph, "A", TrafficLevel.MEDIUM, time_label, "C")

    assert [edge.is_on_path for edge in edges] == [False, True, True]

    # The heavy parallel edge still touches the source
    assert edges[0].arrival_time == pytest.approx(3)
    assert edges[1].arrival_time == pytest.approx(3)
    assert edges[2].arrival_time == pytest.approx(4)


def test_dangling_edge_emitted_neutral(caplog):
    """Test edges to unknown nodes are kept but left neutral."""
    graph = RouteGraph(
        nodes=[Node("A"), Node("B")],
        edges=[Edge("A", "ghost", 1), Edge("A", "B", 2)]
    )
    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(graph, "A", TrafficLevel.MEDIUM, time_label, "B")

    assert len(edges) == 2
    assert edges[0] == ColoredEdge("A", "ghost", 1, UNUSED_EDGE_COLOR, NO_ARRIVAL_TIME, False)
    assert edges[1].is_on_path
    assert "reference unknown nodes" in caplog.text


def test_sample_graph_route(palette):
    """Test highlighting on the demo map from Downtown to Beach."""
    graph = build_sample_graph()
    edges = annotate_edges(graph, "A", TrafficLevel.MEDIUM, palette.color_for_time, "F")

    on_path = {(edge.source, edge.target): edge.arrival_time for edge in edges if edge.is_on_path}
    assert on_path == {("A", "D"): 7, ("D", "C"): 17, ("C", "E"): 22, ("E", "F"): 29}

    airport = edges[0]
    assert (airport.source, airport.target) == ("A", "B")
    assert not airport.is_on_path
    assert airport.arrival_time == 8
    assert airport.color == "#facc15"

    stadium_road = edges[7]
    assert (stadium_road.source, stadium_road.target) == ("D", "H")
    assert stadium_road.arrival_time == NO_ARRIVAL_TIME
    assert stadium_road.color == palette.unused_edge_color


@pytest.mark.parametrize("level", list(TrafficLevel))
def test_output_preserves_edge_identity(level):
    """Test one output per edge with unchanged source, target and weight."""
    graph = build_sample_graph()

    for source in graph.node_ids():
        for destination in [None] + graph.node_ids():
            edges = annotate_edges(graph, source, level, time_label, destination)

            assert len(edges) == len(graph.edges)
            for original, colored in zip(graph.edges, edges):
                assert (colored.source, colored.target, colored.weight) == \
                    (original.source, original.target, original.weight)
            if destination is None or destination == source:
                assert not any(edge.is_on_path for edge in edges)


def test_color_function_only_sees_valid_times():
    """Test the injected color function never receives the sentinel."""
    seen = []

    def recording(time):
        seen.append(time)
        return "c"

    annotate_edges(build_sample_graph(), "E", TrafficLevel.HIGH, recording, "A")

    assert seen
    assert all(time >= 0 for time in seen)


def test_custom_unused_color(line_graph):
    """Test the neutral color is configurable."""
    edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label, unused_color="#000000")

    assert edges[1].color == "#000000"


def test_colored_edge_is_immutable(line_graph):
    """Test annotations cannot be changed after construction."""
    edge = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, time_label)[0]

    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.color = "#ffffff"


def test_arrival_endpoint():
    """Test the path-forward endpoint is the farther one."""
    distances = {"B": 5.0, "C": 10.0}

    assert arrival_endpoint(Edge("B", "C", 5), distances) == "C"
    assert arrival_endpoint(Edge("C", "B", 5), distances) == "C"


def test_arrival_endpoint_zero_weight_uses_traversal():
    """Test equal distances fall back to the traversal direction."""
    distances = {"A": 0.0, "B": 0.0}

    assert arrival_endpoint(Edge("B", "A", 0), distances, PathSegment("B", "A")) == "A"
    assert arrival_endpoint(Edge("B", "A", 0), distances, PathSegment("A", "B")) == "B"


def test_failing_color_function_does_not_raise(line_graph, caplog):
    """Test errors inside the annotation are logged, not propagated."""
    def broken(time):
        raise RuntimeError("palette unavailable")

    with caplog.at_level(logging.WARNING):
        edges = annotate_edges(line_graph, "A", TrafficLevel.MEDIUM, broken, "C")

    assert edges == []
    assert "palette unavailable" in caplog.text


def test_annotation_does_not_mutate_graph():
    """Test the input graph is left unchanged."""
    graph = build_sample_graph()
    edges_before = list(graph.edges)

    annotate_edges(graph, "A", TrafficLevel.HIGH, time_label, "H")

    assert graph.edges == edges_before


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
