"""
Graph traversal traces: BFS, DFS, unweighted shortest path and Dijkstra.

All generators accept an optional ``{"nodes", "edges", "start"}`` graph and
fall back to the 6-node demo graph. Adjacency is undirected and ordered by
edge declaration; an edge naming a node that does not exist is dropped.
"""

import heapq
import logging
from typing import Any, Dict, List, Optional, Tuple

from .. import samples
from ..layout import with_coordinates
from ..steps import TraceRecorder

logger = logging.getLogger(__name__)


def normalize_graph(graph: Optional[Dict[str, Any]], default=samples.traversal_graph
                    ) -> Tuple[List[Dict], List[Dict], Optional[str]]:
    if not isinstance(graph, dict):
        graph = default()

    raw_nodes = [nd for nd in graph.get("nodes") or [] if isinstance(nd, dict) and "id" in nd]
    seen = set()
    unique = []
    for nd in raw_nodes:
        nd = dict(nd, id=str(nd["id"]))
        if nd["id"] in seen:
            continue
        seen.add(nd["id"])
        unique.append(nd)
    nodes = with_coordinates(unique)

    edges = []
    for e in graph.get("edges") or []:
        if not isinstance(e, dict):
            continue
        source, target = str(e.get("source")), str(e.get("target"))
        if source not in seen or target not in seen:
            logger.debug("Skipping edge %s-%s: unknown endpoint", source, target)
            continue
        edge = {"source": source, "target": target}
        weight = e.get("weight")
        if isinstance(weight, (int, float)) and not isinstance(weight, bool) and weight >= 0:
            edge["weight"] = weight
        edges.append(edge)

    start = graph.get("start")
    start = str(start) if start is not None else None
    if start not in seen:
        start = nodes[0]["id"] if nodes else None
    return nodes, edges, start


def build_adjacency(nodes: List[Dict], edges: List[Dict]) -> Dict[str, List[Tuple[str, Any]]]:
    adj: Dict[str, List[Tuple[str, Any]]] = {nd["id"]: [] for nd in nodes}
    for e in edges:
        weight = e.get("weight", 1)
        adj[e["source"]].append((e["target"], weight))
        adj[e["target"]].append((e["source"], weight))
    return adj


def bfs_steps(graph: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    nodes, edges, start = normalize_graph(graph)
    rec = TraceRecorder()
    if start is None:
        rec.graph("init", "Graph is empty, nothing to traverse", nodes, edges)
        rec.graph("complete", "BFS traversal complete!", nodes, edges)
        return rec.steps

    adj = build_adjacency(nodes, edges)
    rec.graph("init", f"Starting BFS from node {start}", nodes, edges, queue=[start])

    visited = [start]
    queue = [start]
    while queue:
        current = queue.pop(0)
        rec.graph("visit", f"Visiting node {current}", nodes, edges, visited, queue, current)

        for neighbor, _ in adj[current]:
            if neighbor in visited:
                continue
            visited.append(neighbor)
            queue.append(neighbor)
            rec.graph("enqueue", f"Adding {neighbor} to queue", nodes, edges, visited, queue, current)

    rec.graph("complete", "BFS traversal complete!", nodes, edges, visited)
    return rec.steps


def dfs_steps(graph: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    nodes, edges, start = normalize_graph(graph)
    rec = TraceRecorder()
    if start is None:
        rec.graph("init", "Graph is empty, nothing to traverse", nodes, edges)
        rec.graph("complete", "DFS traversal complete!", nodes, edges)
        return rec.steps

    adj = build_adjacency(nodes, edges)
    rec.graph("init", f"Starting DFS from node {start}", nodes, edges, queue=[start])

    visited: List[str] = []
    stack = [start]

    # Explicit (node, neighbor iterator) frames instead of recursion.
    seen = set()
    frames = []

    def enter(node: str):
        visited.append(node)
        seen.add(node)
        rec.graph("visit", f"Visiting node {node}", nodes, edges, visited, stack, node)
        frames.append((node, iter(adj[node])))

    enter(start)
    while frames:
        node, neighbors = frames[-1]
        nxt = next((nb for nb, _ in neighbors if nb not in seen), None)
        if nxt is None:
            frames.pop()
            stack.pop()
            rec.graph("backtrack", f"All neighbors of {node} explored, popping it",
                      nodes, edges, visited, stack, node)
            continue
        stack.append(nxt)
        rec.graph("push", f"Pushing {nxt} onto the stack", nodes, edges, visited, stack, node)
        enter(nxt)

    rec.graph("complete", "DFS traversal complete!", nodes, edges, visited)
    return rec.steps


def unweighted_shortest_path_steps(graph: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """BFS order, narrated as hop-count shortest paths. Edge weights are ignored."""
    steps = bfs_steps(graph)
    for step in steps:
        step["description"] = step["description"].replace("BFS", "Unweighted shortest path")
    return steps


def dijkstra_steps(graph: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """Weighted single-source shortest paths; unreachable distances are None."""
    nodes, edges, start = normalize_graph(graph, default=samples.weighted_graph)
    rec = TraceRecorder()
    if start is None:
        rec.graph("init", "Graph is empty, nothing to relax", nodes, edges, distances={})
        rec.graph("complete", "Dijkstra complete!", nodes, edges, distances={})
        return rec.steps

    adj = build_adjacency(nodes, edges)
    order = {nd["id"]: i for i, nd in enumerate(nodes)}
    dist: Dict[str, Any] = {nd["id"]: None for nd in nodes}
    dist[start] = 0
    visited: List[str] = []
    heap = [(0, order[start], start)]

    def frontier() -> List[str]:
        pending = [nid for nid, d in dist.items() if d is not None and nid not in visited]
        return sorted(pending, key=lambda nid: (dist[nid], order[nid]))

    rec.graph("init", f"Starting Dijkstra from node {start}", nodes, edges,
              queue=frontier(), distances=dist)

    while heap:
        d, _, current = heapq.heappop(heap)
        if current in visited or d != dist[current]:
            continue
        visited.append(current)
        rec.graph("visit", f"Visiting {current} with final distance {d}",
                  nodes, edges, visited, frontier(), current, distances=dist)

        for neighbor, weight in adj[current]:
            if neighbor in visited:
                continue
            candidate = d + weight
            if dist[neighbor] is None or candidate < dist[neighbor]:
                old = dist[neighbor]
                dist[neighbor] = candidate
                heapq.heappush(heap, (candidate, order[neighbor], neighbor))
                rec.graph(
                    "relax",
                    f"Relaxing {current}-{neighbor}: distance {'inf' if old is None else old} -> {candidate}",
                    nodes, edges, visited, frontier(), current, distances=dist,
                )
            else:
                rec.graph(
                    "skip", f"{current}-{neighbor} gives {candidate}, not better than {dist[neighbor]}",
                    nodes, edges, visited, frontier(), current, distances=dist,
                )

    rec.graph("complete", "Dijkstra complete! All reachable distances are final",
              nodes, edges, visited, distances=dist)
    return rec.steps
