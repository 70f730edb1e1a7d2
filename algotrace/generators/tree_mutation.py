"""
BST insertion and deletion traces.

Snapshots always carry the whole tree, so a node is attached before the
step that announces it and detached only after the step that removes it.
"""

import logging
from typing import Any, Dict, List, Optional

from .. import samples
from ..steps import TraceRecorder, is_number
from .tree_traversal import normalize_tree

logger = logging.getLogger(__name__)


def _checked_value(value, default):
    if is_number(value):
        return value
    logger.warning("Non-numeric BST value %r, using %s", value, default)
    return default


def tree_insert_steps(value: Any = samples.TREE_INSERT_VALUE,
                      root: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    value = _checked_value(value, samples.TREE_INSERT_VALUE)
    tree = normalize_tree(root)
    rec = TraceRecorder()
    rec.tree("init", f"Starting BST insertion of value {value}", tree)

    if tree is None:
        tree = samples.tree_node(value)
        rec.tree("insert", f"Tree is empty, {value} becomes the root", tree, [value], value)
        rec.tree("complete", f"Insertion complete! Value {value} inserted into BST", tree, [value], value)
        return rec.steps

    path: List = []
    node = tree
    while True:
        path.append(node["value"])
        rec.tree("compare", f"Comparing {value} with current node {node['value']}", tree, path, node["value"])

        if value == node["value"]:
            logger.debug("Value %s already in tree, nothing inserted", value)
            rec.tree("duplicate", f"Value {value} already exists in tree", tree, path, node["value"])
            return rec.steps

        side = "left" if value < node["value"] else "right"
        arrow = "<" if side == "left" else ">"
        rec.tree("traverse", f"{value} {arrow} {node['value']}, going to {side} subtree",
                 tree, path, node["value"])

        if node[side] is None:
            node[side] = samples.tree_node(value)
            rec.tree("insert", f"Creating new node {value} as {side} child of {node['value']}",
                     tree, path + [value], value)
            break
        node = node[side]

    rec.tree("complete", f"Insertion complete! Value {value} inserted into BST", tree, [value], value)
    return rec.steps


def tree_delete_steps(value: Any = samples.TREE_DELETE_VALUE,
                      root: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    value = _checked_value(value, samples.TREE_DELETE_VALUE)
    holder = {"root": normalize_tree(root)}
    rec = TraceRecorder()
    rec.tree("init", f"Starting BST deletion of value {value}", holder["root"])
    found = False

    def snapshot(action: str, description: str, visited: List, current=None):
        rec.tree(action, description, holder["root"], visited, current)

    def find_min(node: Dict[str, Any], path: List) -> Dict[str, Any]:
        while node["left"]:
            node = node["left"]
            path.append(node["value"])
        return node

    def delete(node: Optional[Dict[str, Any]], val, path: List) -> Optional[Dict[str, Any]]:
        nonlocal found
        if node is None:
            snapshot("notfound", f"Value {val} not found in tree", path)
            return None

        here = path + [node["value"]]
        snapshot("compare", f"Comparing {val} with current node {node['value']}", here, node["value"])

        if val < node["value"]:
            snapshot("traverse", f"{val} < {node['value']}, searching left subtree", here, node["value"])
            node["left"] = delete(node["left"], val, here)
            return node
        if val > node["value"]:
            snapshot("traverse", f"{val} > {node['value']}, searching right subtree", here, node["value"])
            node["right"] = delete(node["right"], val, here)
            return node

        found = True
        snapshot("found", f"Found node {val} to delete", here, node["value"])

        if node["left"] is None and node["right"] is None:
            snapshot("delete", f"Node {val} has no children, removing it directly", here, node["value"])
            return None
        if node["left"] is None:
            snapshot("delete", f"Node {val} has only a right child, splicing it in", here, node["value"])
            return node["right"]
        if node["right"] is None:
            snapshot("delete", f"Node {val} has only a left child, splicing it in", here, node["value"])
            return node["left"]

        min_path = here + [node["right"]["value"]]
        successor = find_min(node["right"], min_path)
        snapshot("findmin", f"Node {val} has two children, inorder successor is {successor['value']}",
                 min_path, successor["value"])

        node["value"] = successor["value"]
        snapshot("replace", f"Replacing {val} with inorder successor {successor['value']}",
                 path + [node["value"]], node["value"])

        node["right"] = delete(node["right"], successor["value"], path + [node["value"]])
        return node

    holder["root"] = delete(holder["root"], value, [])
    if found:
        snapshot("complete", f"Deletion complete! Value {value} removed from BST", [])
    else:
        logger.debug("Value %s not in tree, nothing deleted", value)
    return rec.steps
