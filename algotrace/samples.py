"""Hard-coded demonstration inputs used when a caller supplies none."""

import copy
from typing import Any, Dict, List, Optional

TRAVERSAL_NODES = [
    {"id": "A", "label": "A", "x": 100, "y": 100},
    {"id": "B", "label": "B", "x": 200, "y": 50},
    {"id": "C", "label": "C", "x": 200, "y": 150},
    {"id": "D", "label": "D", "x": 300, "y": 100},
    {"id": "E", "label": "E", "x": 400, "y": 50},
    {"id": "F", "label": "F", "x": 400, "y": 150},
]

TRAVERSAL_EDGES = [
    {"source": "A", "target": "B"},
    {"source": "A", "target": "C"},
    {"source": "B", "target": "D"},
    {"source": "C", "target": "D"},
    {"source": "D", "target": "E"},
    {"source": "D", "target": "F"},
]

WEIGHTED_EDGES = [
    {"source": "A", "target": "B", "weight": 4},
    {"source": "A", "target": "C", "weight": 1},
    {"source": "B", "target": "D", "weight": 1},
    {"source": "C", "target": "D", "weight": 5},
    {"source": "C", "target": "B", "weight": 2},
    {"source": "D", "target": "E", "weight": 3},
    {"source": "D", "target": "F", "weight": 6},
    {"source": "E", "target": "F", "weight": 1},
]

INSERT_NODES = [
    {"id": "A", "label": "A", "x": 100, "y": 100},
    {"id": "B", "label": "B", "x": 200, "y": 100},
    {"id": "C", "label": "C", "x": 150, "y": 200},
]
INSERT_EDGES = [{"source": "A", "target": "B"}]
INSERT_NEW_NODE = {"id": "D", "label": "D", "x": 300, "y": 100}
INSERT_CONNECT_TO = "B"

DELETE_NODES = [
    {"id": "A", "label": "A", "x": 100, "y": 100},
    {"id": "B", "label": "B", "x": 200, "y": 100},
    {"id": "C", "label": "C", "x": 150, "y": 200},
    {"id": "D", "label": "D", "x": 300, "y": 100},
]
DELETE_EDGES = [
    {"source": "A", "target": "B"},
    {"source": "B", "target": "C"},
    {"source": "B", "target": "D"},
    {"source": "C", "target": "D"},
]
DELETE_TARGET = "D"

TREE_INSERT_VALUE = 13
TREE_DELETE_VALUE = 7
FACTORIAL_N = 5


def tree_node(value, left: Optional[Dict] = None, right: Optional[Dict] = None) -> Dict[str, Any]:
    return {"value": value, "left": left, "right": right}


def sample_bst() -> Dict[str, Any]:
    """10(5(3,7),15(12,20)) as a fresh, caller-owned structure."""
    return tree_node(
        10,
        tree_node(5, tree_node(3), tree_node(7)),
        tree_node(15, tree_node(12), tree_node(20)),
    )


def traversal_graph() -> Dict[str, Any]:
    return {
        "nodes": copy.deepcopy(TRAVERSAL_NODES),
        "edges": copy.deepcopy(TRAVERSAL_EDGES),
        "start": "A",
    }


def weighted_graph() -> Dict[str, Any]:
    return {
        "nodes": copy.deepcopy(TRAVERSAL_NODES),
        "edges": copy.deepcopy(WEIGHTED_EDGES),
        "start": "A",
    }


def tree_values(root: Optional[Dict]) -> List:
    """Preorder value listing, used to check snapshot membership."""
    if not root:
        return []
    return [root["value"]] + tree_values(root.get("left")) + tree_values(root.get("right"))
