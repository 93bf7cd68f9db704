"""
Generational tree layout for the sprite life tree (parent/child provenance).

Nodes are grouped by BFS depth (generation) and, within a generation, into groups of
consecutive siblings. Each generation is one row placed a level above its parents; groups
expand outward from the median group so that siblings and cousins never overlap.
"""

from collections import deque
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from loguru import logger

from shared.graph import build_lineage_graph, find_lineage_cycles

from .constants import ROOT_ID

if TYPE_CHECKING:
    from viewport.viz import Measures, Viz

Node = Dict[str, Any]
Group = List[Node]
Generation = List[Group]


class LayoutInvariantError(RuntimeError):
    """Internal state the traversal order should make impossible."""


def calc_group_width(group: Group, measures: "Measures") -> float:
    """Laid out width of a node group. Uses the vertical measures on purpose (matches the rendered tree)."""
    m = measures
    return (m.node_h * len(group)) + (m.delta_h * 2 * (len(group) - 1))


def _new_node(identity: str) -> Node:
    return {
        "identity": identity,
        "children": [],
        "generation": None,
        "visible": False,
        "x": None,
        "y": None,
        "x_offset": None,
        "y_offset": None,
    }


def _group_parent(layout: Dict[str, Node], group: Group) -> Node:
    parent_id = group[0].get("parent_identity")
    parent = layout.get(parent_id)
    if parent is None or parent["x"] is None:
        raise LayoutInvariantError(f"Parent {parent_id!r} of {group[0]['identity']!r} is not laid out")
    return parent


def _place(node: Node, x: float, y: float, measures: "Measures") -> None:
    node["x"] = x
    node["y"] = y
    node["x_offset"] = x - (measures.node_w / 2)
    node["y_offset"] = y - (measures.node_h / 2)


def update_frontier_layout(viz: "Viz", layout: Dict[str, Node], generation: Generation, gen_num: int) -> None:
    """
    Compute x/y of every node in one generation, whose parents are already placed.
    Groups left of the median are packed right-to-left, the rest left-to-right.
    """
    if gen_num == 0:
        return
    m = viz.measures
    step = m.node_w + (m.delta_w * 2)

    mid_index = len(generation) // 2
    mid_group = generation[mid_index]
    mid_parent = _group_parent(layout, mid_group)
    mid_x = mid_parent["x"] - (calc_group_width(mid_group, m) / 2)
    y = mid_parent["y"] - m.level_h

    right_limit = mid_x - m.delta_w
    for group in reversed(generation[:mid_index]):
        px = _group_parent(layout, group)["x"]
        group_w = calc_group_width(group, m)
        right_limit = min(right_limit, px + (group_w / 2))
        for i, node in enumerate(group):
            _place(node, right_limit - group_w + (m.node_w / 2) + (step * i), y, m)
        right_limit = right_limit - group_w - (2 * m.delta_w)

    left_limit = mid_x + m.delta_w
    for group in generation[mid_index:]:
        px = _group_parent(layout, group)["x"]
        group_w = calc_group_width(group, m)
        left_limit = max(left_limit, px - (group_w / 2))
        for i, node in enumerate(group):
            _place(node, left_limit + (m.node_w / 2) + (step * i), y, m)
        left_limit = left_limit + group_w + (2 * m.delta_w)


def _build_nodes(descriptors: List[Dict[str, Any]], layout: Dict[str, Node]) -> None:
    """Attach every descriptor under its parent, creating stubs for parents seen before their own record."""
    for d in descriptors:
        identity = d["identity"]
        if identity not in layout:
            layout[identity] = _new_node(identity)
        node = layout[identity]
        for key, value in d.items():
            if key != "children":
                node[key] = value
        if not node.get("parent_identity"):
            node["parent_identity"] = ROOT_ID
        parent_id = node["parent_identity"]
        if parent_id not in layout:
            layout[parent_id] = _new_node(parent_id)
        layout[parent_id]["children"].append(node)


def _collect_generations(root: Node) -> List[Generation]:
    """BFS from the root; a new group starts whenever the parent changes between dequeued nodes."""
    queue = deque([root])
    gen_num = 0
    generation: Generation = [[]]
    generations: List[Generation] = []
    cur_parent_id = root["parent_identity"]

    while queue:
        node = queue.popleft()
        for child in node["children"]:
            queue.append(child)
            child["visible"] = True
            child["generation"] = node["generation"] + 1

        if node["generation"] > gen_num:
            generations.append(generation)
            generation = [[node]]
        elif node.get("parent_identity") == cur_parent_id:
            generation[-1].append(node)
        else:
            generation.append([node])

        if not queue:
            generations.append(generation)
        gen_num = node["generation"]
        cur_parent_id = node.get("parent_identity")

    return generations


def compute_lifetree_layout(viz: "Viz", descriptors: Optional[List[Dict[str, Any]]]) -> Optional[Dict[str, Node]]:
    """
    Lay out the sprite lineage. Returns {identity: node} including the fictitious root
    'parent_0', or None when descriptors have not been loaded yet (None).

    Each node carries the descriptor fields plus generation, children, visible, x, y,
    x_offset, y_offset. Nodes whose parent never appears as a sprite, and sprites caught in a parent
    loop, are never reached from the root: they stay invisible and unplaced.
    """
    if descriptors is None:
        return None

    vp = viz.viewport
    m = viz.measures

    layout: Dict[str, Node] = {}

    # fictitious root, just below the viewport so it never renders
    root = _new_node(ROOT_ID)
    root["parent_identity"] = ""
    root["generation"] = 0
    _place(root, 0, vp.height + (m.node_h / 2), m)
    layout[ROOT_ID] = root

    _build_nodes(descriptors, layout)
    for cycle in find_lineage_cycles(build_lineage_graph(layout.values())):
        logger.warning("Circular lineage left unplaced: {}", ", ".join(cycle))

    generations = _collect_generations(root)
    for gen_num, generation in enumerate(generations):
        update_frontier_layout(viz, layout, generation, gen_num)

    unplaced = sum(1 for n in layout.values() if n["x"] is None)
    logger.debug(
        "Life tree layout: {} nodes, {} generations, {} unplaced",
        len(layout), len(generations), unplaced,
    )
    return layout
