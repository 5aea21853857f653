"""
Route Rainbow Mapper Test Suite

Test Organization:
- test_graph_model.py: Graph structure and edge keys
- test_shortest_paths.py: Shortest path engine
- test_edge_annotator.py: Edge coloring and path highlighting
- test_route_summary.py: Results panel summary
- test_graph_utils.py: NetworkX bridge and exports
- test_graph_generator.py: Random demo graphs
- test_data_schemas.py: Graph file validation
- test_config.py: Traffic, palette and settings
- test_main.py: Command line entry point

To run all tests:
    python -m pytest tests/
"""
