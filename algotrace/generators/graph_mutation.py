"""Graph node/edge insertion and node deletion traces."""

import logging
from typing import Any, Dict, List, Optional

from .. import samples
from ..layout import with_coordinates
from ..steps import TraceRecorder
from .graph_traversal import normalize_graph

logger = logging.getLogger(__name__)


def _insert_sample() -> Dict[str, Any]:
    return {"nodes": samples.INSERT_NODES, "edges": samples.INSERT_EDGES}


def _delete_sample() -> Dict[str, Any]:
    return {"nodes": samples.DELETE_NODES, "edges": samples.DELETE_EDGES}


def graph_insert_steps(graph: Optional[Dict[str, Any]] = None,
                       new_node: Optional[Dict[str, Any]] = None,
                       connect_to: Optional[str] = None) -> List[Dict[str, Any]]:
    """Add one node, then one edge joining it to ``connect_to``."""
    nodes, edges, _ = normalize_graph(graph, default=_insert_sample)
    if not isinstance(new_node, dict) or "id" not in new_node:
        new_node = samples.INSERT_NEW_NODE
    if connect_to is None and graph is None:
        connect_to = samples.INSERT_CONNECT_TO
    new_id = str(new_node["id"])
    label = str(new_node.get("label", new_id))
    ids = {nd["id"] for nd in nodes}

    rec = TraceRecorder()
    target_text = f" and connecting it to {connect_to}" if connect_to is not None else ""
    rec.graph("init", f"Starting graph insertion: adding node {label}{target_text}", nodes, edges)

    if new_id in ids:
        logger.debug("Node %s already present, not adding it twice", new_id)
    else:
        placed = dict(new_node, id=new_id)
        if "x" not in placed or "y" not in placed:
            # Park the new node one grid step to the right of the rightmost node.
            xs = [nd["x"] for nd in nodes] or [0]
            placed.setdefault("x", max(xs) + 100)
            placed.setdefault("y", 100)
        nodes.extend(with_coordinates([placed]))
        ids.add(new_id)
        rec.graph("addnode", f"Adding new node {label} to graph", nodes, edges, [new_id], [], new_id)

    connect_to = str(connect_to) if connect_to is not None else None
    if connect_to in ids and connect_to != new_id:
        edges.append({"source": connect_to, "target": new_id})
        rec.graph("addedge", f"Connecting {connect_to} to {label}", nodes, edges,
                  [connect_to, new_id], [], new_id)
    elif connect_to is not None:
        logger.debug("Cannot connect %s to %s: unknown endpoint", new_id, connect_to)

    rec.graph("complete", f"Graph insertion complete! Node {label} is part of the graph", nodes, edges)
    return rec.steps


def graph_delete_steps(graph: Optional[Dict[str, Any]] = None,
                       target: Optional[str] = None) -> List[Dict[str, Any]]:
    """Prune every edge incident to ``target``, then remove the node itself."""
    nodes, edges, _ = normalize_graph(graph, default=_delete_sample)
    if target is None:
        target = samples.DELETE_TARGET
    target = str(target)
    rec = TraceRecorder()
    rec.graph("init", f"Starting graph deletion: removing node {target} and its edges", nodes, edges)

    if target not in {nd["id"] for nd in nodes}:
        rec.graph("notfound", f"Node {target} does not exist in the graph", nodes, edges)
        return rec.steps

    rec.graph("highlight", f"Identifying node {target} for deletion", nodes, edges, [target], [], target)

    incident = [e for e in edges if target in (e["source"], e["target"])]
    if incident:
        edges = [e for e in edges if target not in (e["source"], e["target"])]
        rec.graph("removeedges", f"Removing {len(incident)} edge(s) connected to {target}",
                  nodes, edges, [target], [], target)

    nodes = [nd for nd in nodes if nd["id"] != target]
    rec.graph("deletenode", f"Removing node {target} from graph", nodes, edges)
    rec.graph("complete", f"Graph deletion complete! Node {target} and its edges removed", nodes, edges)
    return rec.steps
