"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge, GraphConfigError
    from graph import tree_graph, network_graph, get_preset
"""

from graph.node    import Node
from graph.edge    import Edge
from graph.errors  import GraphConfigError
from graph.graph   import Graph
from graph.presets import PRESETS, get_preset, list_presets, network_graph, tree_graph

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "GraphConfigError",
    "PRESETS",
    "get_preset",
    "list_presets",
    "tree_graph",
    "network_graph",
]
