#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema

from .samples import tree_values
from .steps import TERMINAL_ACTIONS

SCHEMA_PATH = Path(__file__).parent / "schema" / "step_schema.json"


def load_schema() -> dict:
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_trace(steps: List[Dict[str, Any]], schema: Optional[dict] = None) -> Tuple[bool, str]:
    """Structural check against the bundled JSON schema."""
    try:
        jsonschema.validate(instance=steps, schema=schema or load_schema())
        return True, ""
    except jsonschema.ValidationError as e:
        return False, e.message


def _check_array(i: int, step: Dict[str, Any], issues: List[str]):
    size = len(step.get("data", []))
    for idx in step.get("indices", []):
        if not 0 <= idx < size:
            issues.append(f"steps[{i}].indices {idx} out of range for {size} elements")
    sw = step.get("swap")
    if sw and not (0 <= sw["from"] < size and 0 <= sw["to"] < size):
        issues.append(f"steps[{i}].swap {sw} out of range")


def _check_graph(i: int, step: Dict[str, Any], issues: List[str]):
    state = step["graphState"]
    ids = {nd["id"] for nd in state["nodes"]}
    for e in state["edges"]:
        if e["source"] not in ids or e["target"] not in ids:
            issues.append(f"steps[{i}] dangling edge {e['source']}-{e['target']}")
    visited = state["visited"]
    if len(set(visited)) != len(visited):
        issues.append(f"steps[{i}].visited has duplicates")
    for nid in list(visited) + list(state["queue"]):
        if nid not in ids:
            issues.append(f"steps[{i}] references unknown node {nid}")
    if state["current"] is not None and state["current"] not in ids:
        issues.append(f"steps[{i}].current {state['current']} not in graph")


def _check_tree(i: int, step: Dict[str, Any], issues: List[str]):
    state = step["treeState"]
    values = set(tree_values(state["root"]))
    for v in state["visited"]:
        if v not in values:
            issues.append(f"steps[{i}].visited value {v} not in tree")
    if state["current"] is not None and state["current"] not in values:
        issues.append(f"steps[{i}].current {state['current']} not in tree")


def _check_recursion(i: int, step: Dict[str, Any], prev: Optional[List[Dict]], issues: List[str]):
    stack = step["recursionStack"]
    for depth, frame in enumerate(stack, start=1):
        if frame["depth"] != depth:
            issues.append(f"steps[{i}] frame {frame['function']}({frame['params']}) has depth "
                          f"{frame['depth']}, expected {depth}")
    if prev is None:
        return
    if abs(len(stack) - len(prev)) > 1:
        issues.append(f"steps[{i}] stack jumped from {len(prev)} to {len(stack)} frames")
        return
    common = min(len(stack), len(prev))
    for a, b in zip(stack[:common], prev[:common]):
        if (a["function"], a["params"]) != (b["function"], b["params"]):
            issues.append(f"steps[{i}] frames below the top changed, not LIFO")
            break


def semantic_check_trace(steps: List[Dict[str, Any]]) -> Tuple[bool, str]:
    """Invariant checks the schema cannot express."""
    issues: List[str] = []
    if not steps:
        return False, "trace is empty"

    last = steps[-1].get("action")
    if last not in TERMINAL_ACTIONS:
        issues.append(f"last step action '{last}' is not terminal")

    prev_stack = None
    for i, step in enumerate(steps):
        kind = step.get("type")
        if kind == "array":
            _check_array(i, step, issues)
        elif kind == "graph":
            _check_graph(i, step, issues)
        elif kind == "tree":
            _check_tree(i, step, issues)
        elif kind == "recursion":
            _check_recursion(i, step, prev_stack, issues)
            prev_stack = step["recursionStack"]

    return (len(issues) == 0, "; ".join(issues))


def check_trace(steps: List[Dict[str, Any]], schema: Optional[dict] = None) -> Tuple[bool, str]:
    ok, msg = validate_trace(steps, schema)
    if not ok:
        return ok, f"schema: {msg}"
    return semantic_check_trace(steps)
