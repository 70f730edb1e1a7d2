"""Depth-first tree traversals (preorder, inorder, postorder)."""

import logging
from typing import Any, Dict, List, Optional

from .. import samples
from ..steps import TraceRecorder, is_number

logger = logging.getLogger(__name__)

ORDERS = ("preorder", "inorder", "postorder")
ORDER_HINTS = {
    "preorder": "Root -> Left -> Right",
    "inorder": "Left -> Root -> Right",
    "postorder": "Left -> Right -> Root",
}


def normalize_tree(root: Any) -> Optional[Dict[str, Any]]:
    """Deep-copy a caller tree, dropping malformed subtrees; default to the sample BST."""
    if root is None:
        return samples.sample_bst()

    def clean(node):
        if not isinstance(node, dict) or not is_number(node.get("value")):
            if node is not None:
                logger.debug("Dropping malformed tree node %r", node)
            return None
        return samples.tree_node(
            node["value"],
            clean(node.get("left")),
            clean(node.get("right")),
        )

    return clean(root)


def tree_traversal_steps(order: str = "inorder", root: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    if order not in ORDERS:
        logger.debug("Unknown traversal order %r, using inorder", order)
        order = "inorder"
    tree = normalize_tree(root)
    rec = TraceRecorder()
    rec.tree("init", f"Starting {order} traversal", tree)

    visited: List = []

    def visit(node):
        visited.append(node["value"])
        rec.tree("visit", f"Visiting {node['value']} ({order}: {ORDER_HINTS[order]})",
                 tree, visited, node["value"])

    def walk(node):
        if not node:
            return
        if order == "preorder":
            visit(node)
        walk(node["left"])
        if order == "inorder":
            visit(node)
        walk(node["right"])
        if order == "postorder":
            visit(node)

    walk(tree)
    rec.tree("complete", f"Traversal complete! Order: {visited}", tree, visited)
    return rec.steps


def preorder_steps(root: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    return tree_traversal_steps("preorder", root)


def inorder_steps(root: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    return tree_traversal_steps("inorder", root)


def postorder_steps(root: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    return tree_traversal_steps("postorder", root)
