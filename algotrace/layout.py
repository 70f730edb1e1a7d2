"""Node coordinates for caller-supplied graphs that arrive without any."""

from typing import Any, Dict, List

import numpy as np

GAP_X = 100.0
GAP_Y = 100.0
ORIGIN = np.array([100.0, 100.0])


def compute_graph_layout(nodes: List[Dict[str, Any]], gap_x: float = GAP_X,
                         gap_y: float = GAP_Y) -> Dict[str, np.ndarray]:
    """Compute node positions.

    Priority:
    - If stage/layer/level is provided, use layered layout (larger stage lower).
    - Otherwise, fall back to a regular grid.
    """
    positions: Dict[str, np.ndarray] = {}
    if not nodes:
        return positions

    stage_map: Dict[Any, List[str]] = {}
    has_stage = False
    for nd in nodes:
        nid = nd.get("id")
        stage = nd.get("stage")
        if stage is None:
            stage = nd.get("layer", nd.get("level"))
        if stage is not None:
            has_stage = True
            stage_map.setdefault(stage, []).append(nid)

    if has_stage:
        for layer_idx, stage in enumerate(sorted(stage_map.keys(), key=_stage_key)):
            for i, nid in enumerate(stage_map[stage]):
                positions[nid] = ORIGIN + np.array([i * gap_x, layer_idx * gap_y])
        # Nodes without a stage go on one extra row below.
        loose = [nd.get("id") for nd in nodes if nd.get("id") not in positions]
        for i, nid in enumerate(loose):
            positions[nid] = ORIGIN + np.array([i * gap_x, len(stage_map) * gap_y])
        return positions

    per_row = max(3, int(np.ceil(np.sqrt(len(nodes)))))
    for i, nd in enumerate(nodes):
        row, col = divmod(i, per_row)
        positions[nd.get("id")] = ORIGIN + np.array([col * gap_x, row * gap_y])
    return positions


def with_coordinates(nodes: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return copies of ``nodes`` where every node has numeric x/y and a label."""
    missing = [nd for nd in nodes if not _has_xy(nd)]
    positions = compute_graph_layout(missing) if missing else {}
    placed = []
    for nd in nodes:
        node = {"id": nd["id"], "label": str(nd.get("label", nd["id"]))}
        if _has_xy(nd):
            node["x"], node["y"] = nd["x"], nd["y"]
        else:
            pos = positions[nd["id"]]
            node["x"], node["y"] = float(pos[0]), float(pos[1])
        placed.append(node)
    return placed


def _stage_key(stage):
    # Numeric stages first in numeric order, then everything else by text.
    if isinstance(stage, (int, float)) and not isinstance(stage, bool):
        return (0, stage, "")
    return (1, 0, str(stage))


def _has_xy(node: Dict[str, Any]) -> bool:
    return all(isinstance(node.get(k), (int, float)) and not isinstance(node.get(k), bool)
               for k in ("x", "y"))
