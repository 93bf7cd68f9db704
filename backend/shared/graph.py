"""
Graph utilities for sprite lineage (parent -> child provenance).
Used by layout to report parent cycles, which the traversal from the root never reaches.
"""

from typing import Any, Dict, Iterable, List

import networkx as nx


def build_lineage_graph(nodes: Iterable[Dict[str, Any]]) -> nx.DiGraph:
    """Build parent -> child graph. Nodes without parent_identity are sources."""
    G = nx.DiGraph()
    for n in nodes:
        nid = n.get("identity")
        if not nid:
            continue
        G.add_node(nid)
        parent = n.get("parent_identity")
        if parent:
            G.add_edge(parent, nid)
    return G


def find_lineage_cycles(G: nx.DiGraph) -> List[List[str]]:
    """Return every parent loop (self-parenting included), each as a list of sprite ids."""
    if nx.is_directed_acyclic_graph(G):
        return []
    return [sorted(cycle) for cycle in nx.simple_cycles(G)]
