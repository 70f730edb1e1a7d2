from typing import Any, Dict, List

from .steps import is_terminal


def extract_trace_features(trace: Dict[str, Any]) -> Dict[str, Any]:
    """
    Summarize a trace document ({"algorithm", "steps"}) for logs and the CLI.

    Returns algorithm name/family, payload type, data scale, frame count,
    the action tags used, maximum recursion depth and a rough complexity
    bucket.
    """
    algorithm = trace.get("algorithm", {})
    steps: List[Dict[str, Any]] = trace.get("steps", [])
    first = steps[0] if steps else {}
    data_type = first.get("type", "unknown")

    actions_used = []
    for step in steps:
        action = step.get("action")
        if action and action not in actions_used:
            actions_used.append(action)

    data_scale: Dict[str, Any] = {}
    if data_type == "array":
        data_scale["array_length"] = max((len(s.get("data", [])) for s in steps), default=0)
    elif data_type == "graph":
        state = first.get("graphState", {})
        data_scale["node_count"] = len(state.get("nodes", []))
        data_scale["edge_count"] = len(state.get("edges", []))
    elif data_type == "tree":
        data_scale["max_visited"] = max((len(s["treeState"]["visited"]) for s in steps), default=0)
    elif data_type == "recursion":
        data_scale["max_depth"] = max((len(s["recursionStack"]) for s in steps), default=0)

    frame_count = len(steps)
    complexity = "simple"
    if frame_count > 200:
        complexity = "complex"
    elif frame_count > 50:
        complexity = "medium"

    return {
        "algorithm": {
            "name": algorithm.get("name", "Unknown"),
            "family": algorithm.get("family", "Unknown"),
        },
        "data_type": data_type,
        "data_scale": data_scale,
        "frame_count": frame_count,
        "actions_used": actions_used,
        "terminal_action": steps[-1].get("action") if steps else None,
        "ends_terminal": bool(steps) and is_terminal(steps[-1]),
        "complexity": complexity,
    }
