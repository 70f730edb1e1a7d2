"""
Step model shared by every trace generator.

A step is a plain JSON-ready dict tagged by ``type``:

    array      -> data, indices
    graph      -> graphState {nodes, edges, visited, queue, current}
    tree       -> treeState {root, visited, current}
    recursion  -> recursionStack [{function, params, depth, returnValue?}]

plus ``action``, ``description`` and the optional ``comparison`` / ``swap``
annotations. Generators never build these dicts by hand; they go through
``TraceRecorder`` so every payload is deep-copied at the moment it is
emitted and later mutation of the working state cannot leak backwards.
"""

import copy
import logging
import math
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from . import config

logger = logging.getLogger(__name__)

STEP_TYPES = ("array", "graph", "tree", "recursion")
TERMINAL_ACTIONS = {"complete", "notfound", "duplicate", "display"}


class AlgorithmKind(str, Enum):
    BUBBLE_SORT = "bubble_sort"
    SELECTION_SORT = "selection_sort"
    INSERTION_SORT = "insertion_sort"
    MERGE_SORT = "merge_sort"
    QUICK_SORT = "quick_sort"
    HEAP_SORT = "heap_sort"
    LINEAR_SEARCH = "linear_search"
    BINARY_SEARCH = "binary_search"
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"
    UNWEIGHTED_SHORTEST_PATH = "unweighted_shortest_path"
    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"
    TREE_INSERT = "tree_insert"
    TREE_DELETE = "tree_delete"
    GRAPH_INSERT = "graph_insert"
    GRAPH_DELETE = "graph_delete"
    RECURSION = "recursion"
    STACK = "stack"
    QUEUE = "queue"
    ARRAY = "array"


class TraceRecorder:
    """Collects steps, freezing every payload on emit."""

    def __init__(self):
        self.steps: List[Dict[str, Any]] = []

    def _emit(self, step_type: str, action: str, description: str, **payload) -> Dict[str, Any]:
        step = {"type": step_type, "action": action, "description": description}
        for key, value in payload.items():
            if value is None:
                continue
            step[key] = copy.deepcopy(value)
        self.steps.append(step)
        return step

    def array(self, action: str, description: str, data: Sequence, indices: Sequence[int] = (),
              comparison: Optional[Dict] = None, swap: Optional[Dict] = None) -> Dict[str, Any]:
        return self._emit(
            "array", action, description,
            data=list(data), indices=list(indices),
            comparison=comparison, swap=swap,
        )

    def graph(self, action: str, description: str, nodes: List[Dict], edges: List[Dict],
              visited: Sequence[str] = (), queue: Sequence[str] = (), current: Optional[str] = None,
              **extra) -> Dict[str, Any]:
        state = {
            "nodes": nodes,
            "edges": edges,
            "visited": list(visited),
            "queue": list(queue),
            "current": current,
        }
        state.update(extra)
        return self._emit("graph", action, description, graphState=state)

    def tree(self, action: str, description: str, root: Optional[Dict],
             visited: Sequence = (), current=None) -> Dict[str, Any]:
        state = {"root": root, "visited": list(visited), "current": current}
        return self._emit("tree", action, description, treeState=state)

    def recursion(self, action: str, description: str, stack: List[Dict]) -> Dict[str, Any]:
        return self._emit("recursion", action, description, recursionStack=stack)


def comparison(left, right, result: bool) -> Dict[str, Any]:
    return {"left": left, "right": right, "result": bool(result)}


def swap(src: int, dst: int) -> Dict[str, int]:
    return {"from": src, "to": dst}


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def sanitize_data(initial_data: Any) -> List:
    """Return a usable numeric list, falling back to the default array."""
    if not isinstance(initial_data, (list, tuple)) or len(initial_data) == 0:
        return list(config.DEFAULT_ARRAY)
    if not all(is_number(v) for v in initial_data):
        logger.warning("Non-numeric input %r, using default array", initial_data)
        return list(config.DEFAULT_ARRAY)
    data = list(initial_data)
    if config.MAX_ARRAY_LENGTH > 0 and len(data) > config.MAX_ARRAY_LENGTH:
        logger.warning("Input of %d elements truncated to %d", len(data), config.MAX_ARRAY_LENGTH)
        data = data[:config.MAX_ARRAY_LENGTH]
    return data


def is_terminal(step: Dict[str, Any]) -> bool:
    return step.get("action") in TERMINAL_ACTIONS

