"""
Concept -> generator selection.

The registry is keyed by ``AlgorithmKind``. Free-text concept keys (slugs,
titles) are resolved to a kind by ordered keyword rules first; callers that
already know the kind should use ``entry_for`` directly.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from . import samples
from . import generators as gen
from .steps import AlgorithmKind, sanitize_data

logger = logging.getLogger(__name__)

Step = Dict[str, Any]


@dataclass(frozen=True)
class GeneratorEntry:
    kind: AlgorithmKind
    name: str
    family: str
    generate: Callable[[Any], List[Step]]
    default_input: Any = None
    takes_array: bool = True


def _array_entry(kind, name, family, fn) -> GeneratorEntry:
    return GeneratorEntry(kind, name, family, fn, None, True)


def _fixed_entry(kind, name, family, fn, default_input=None) -> GeneratorEntry:
    return GeneratorEntry(kind, name, family, fn, default_input, False)


K = AlgorithmKind

REGISTRY: Dict[AlgorithmKind, GeneratorEntry] = {
    K.BUBBLE_SORT: _array_entry(K.BUBBLE_SORT, "Bubble Sort", "sorting", gen.bubble_sort_steps),
    K.SELECTION_SORT: _array_entry(K.SELECTION_SORT, "Selection Sort", "sorting", gen.selection_sort_steps),
    K.INSERTION_SORT: _array_entry(K.INSERTION_SORT, "Insertion Sort", "sorting", gen.insertion_sort_steps),
    K.MERGE_SORT: _array_entry(K.MERGE_SORT, "Merge Sort", "sorting", gen.merge_sort_steps),
    K.QUICK_SORT: _array_entry(K.QUICK_SORT, "Quick Sort", "sorting", gen.quick_sort_steps),
    K.HEAP_SORT: _array_entry(K.HEAP_SORT, "Heap Sort", "sorting", gen.heap_sort_steps),
    K.LINEAR_SEARCH: _array_entry(K.LINEAR_SEARCH, "Linear Search", "searching", gen.linear_search_steps),
    K.BINARY_SEARCH: _array_entry(K.BINARY_SEARCH, "Binary Search", "searching", gen.binary_search_steps),
    K.BFS: _fixed_entry(K.BFS, "Breadth-First Search", "graph_search", gen.bfs_steps),
    K.DFS: _fixed_entry(K.DFS, "Depth-First Search", "graph_search", gen.dfs_steps),
    K.DIJKSTRA: _fixed_entry(K.DIJKSTRA, "Dijkstra", "graph_search", gen.dijkstra_steps),
    K.UNWEIGHTED_SHORTEST_PATH: _fixed_entry(
        K.UNWEIGHTED_SHORTEST_PATH, "Unweighted Shortest Path", "graph_search",
        gen.unweighted_shortest_path_steps),
    K.PREORDER: _fixed_entry(K.PREORDER, "Preorder Traversal", "tree", gen.preorder_steps),
    K.INORDER: _fixed_entry(K.INORDER, "Inorder Traversal", "tree", gen.inorder_steps),
    K.POSTORDER: _fixed_entry(K.POSTORDER, "Postorder Traversal", "tree", gen.postorder_steps),
    K.TREE_INSERT: _fixed_entry(K.TREE_INSERT, "BST Insertion", "tree_mutation",
                                gen.tree_insert_steps, samples.TREE_INSERT_VALUE),
    K.TREE_DELETE: _fixed_entry(K.TREE_DELETE, "BST Deletion", "tree_mutation",
                                gen.tree_delete_steps, samples.TREE_DELETE_VALUE),
    K.GRAPH_INSERT: _fixed_entry(K.GRAPH_INSERT, "Graph Insertion", "graph_mutation", gen.graph_insert_steps),
    K.GRAPH_DELETE: _fixed_entry(K.GRAPH_DELETE, "Graph Deletion", "graph_mutation", gen.graph_delete_steps),
    K.RECURSION: _fixed_entry(K.RECURSION, "Recursive Factorial", "recursion",
                              gen.factorial_steps, samples.FACTORIAL_N),
    K.STACK: _array_entry(K.STACK, "Stack", "data_structure", gen.stack_steps),
    K.QUEUE: _array_entry(K.QUEUE, "Queue", "data_structure", gen.queue_steps),
    K.ARRAY: _array_entry(K.ARRAY, "Array", "array", gen.display_steps),
}

SORT_NAMES = [
    ("bubble", K.BUBBLE_SORT),
    ("selection", K.SELECTION_SORT),
    ("insertion", K.INSERTION_SORT),
    ("merge", K.MERGE_SORT),
    ("quick", K.QUICK_SORT),
    ("heap", K.HEAP_SORT),
]


def _normalize(text: str) -> str:
    text = (text or "").lower().strip()
    for ch in (" ", "_", "/"):
        text = text.replace(ch, "-")
    return text


def _has(text: str, *words: str) -> bool:
    return any(w in text for w in words)


def _sort_kind(text: str) -> Optional[AlgorithmKind]:
    if "sort" not in text:
        return None
    for name, kind in SORT_NAMES:
        if name in text:
            return kind
    return K.BUBBLE_SORT


def _search_kind(text: str) -> Optional[AlgorithmKind]:
    if "search-tree" in text or "searchtree" in text:
        return None
    if _has(text, "linear-search", "sequential-search") or ("linear" in text and "search" in text):
        return K.LINEAR_SEARCH
    if "binary-search" in text or ("binary" in text and "search" in text):
        return K.BINARY_SEARCH
    return None


def _graph_traversal_kind(text: str) -> Optional[AlgorithmKind]:
    if _has(text, "bfs", "breadth-first"):
        return K.BFS
    if _has(text, "dfs", "depth-first"):
        return K.DFS
    if "dijkstra" in text:
        return K.DIJKSTRA
    if _has(text, "unweighted", "shortest-path"):
        return K.UNWEIGHTED_SHORTEST_PATH
    return None


def _graph_mutation_kind(text: str) -> Optional[AlgorithmKind]:
    if "graph" not in text:
        return None
    if _has(text, "insert", "add"):
        return K.GRAPH_INSERT
    if _has(text, "delete", "remove"):
        return K.GRAPH_DELETE
    return None


def _tree_traversal_kind(text: str) -> Optional[AlgorithmKind]:
    compact = text.replace("-", "")
    if "preorder" in compact:
        return K.PREORDER
    if "postorder" in compact:
        return K.POSTORDER
    if "inorder" in compact:
        return K.INORDER
    return None


def _tree_mutation_kind(text: str) -> Optional[AlgorithmKind]:
    if not _has(text, "tree", "bst"):
        return None
    if "insert" in text:
        return K.TREE_INSERT
    if _has(text, "delete", "remove"):
        return K.TREE_DELETE
    return None


def _recursion_kind(text: str) -> Optional[AlgorithmKind]:
    if _has(text, "recursion", "recursive", "factorial"):
        return K.RECURSION
    return None


def _linear_kind(text: str) -> Optional[AlgorithmKind]:
    if "stack" in text:
        return K.STACK
    if "queue" in text:
        return K.QUEUE
    return None


def _array_kind(text: str) -> Optional[AlgorithmKind]:
    return K.ARRAY if "array" in text else None


# First matching category wins.
CATEGORY_RULES = [
    ("sort", _sort_kind),
    ("search", _search_kind),
    ("graph-traversal", _graph_traversal_kind),
    ("graph-mutation", _graph_mutation_kind),
    ("tree-traversal", _tree_traversal_kind),
    ("tree-mutation", _tree_mutation_kind),
    ("recursion", _recursion_kind),
    ("linear-structure", _linear_kind),
    ("generic-array", _array_kind),
]


def resolve_kind(concept_key: str, title: str = "") -> Optional[AlgorithmKind]:
    """Map a free-text concept key (and optional title) to a kind, or None."""
    key = _normalize(concept_key)
    try:
        return AlgorithmKind(key.replace("-", "_"))
    except ValueError:
        pass

    text = f"{key} {_normalize(title)}".strip()
    for category, rule in CATEGORY_RULES:
        kind = rule(text)
        if kind is not None:
            logger.debug("Concept %r matched category %s -> %s", concept_key, category, kind.value)
            return kind
    return None


def entry_for(kind: AlgorithmKind) -> GeneratorEntry:
    return REGISTRY[AlgorithmKind(kind)]


def select_generator(concept_key: Union[str, AlgorithmKind], title: str = "") -> GeneratorEntry:
    if isinstance(concept_key, AlgorithmKind):
        return entry_for(concept_key)
    kind = resolve_kind(concept_key, title)
    if kind is None:
        logger.info("No generator for concept %r, falling back to array display", concept_key)
        kind = K.ARRAY
    return entry_for(kind)


def build_trace(concept_key: Union[str, AlgorithmKind], initial_data: Any = None,
                title: str = "") -> List[Step]:
    """Select a generator and materialize its full trace. Never raises on bad input."""
    entry = select_generator(concept_key, title)
    data = sanitize_data(initial_data)
    try:
        if entry.takes_array:
            return entry.generate(data)
        return entry.generate(entry.default_input)
    except Exception:
        logger.exception("Generator %s failed, falling back to array display", entry.kind.value)
        return gen.display_steps(data)


def trace_document(concept_key: Union[str, AlgorithmKind], initial_data: Any = None,
                   title: str = "") -> Dict[str, Any]:
    """Trace wrapped with algorithm metadata, the shape written to trace.json."""
    entry = select_generator(concept_key, title)
    return {
        "algorithm": {"name": entry.name, "family": entry.family, "kind": entry.kind.value},
        "steps": build_trace(entry.kind, initial_data),
    }
