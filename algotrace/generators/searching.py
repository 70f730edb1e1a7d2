"""Linear and binary search traces."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..steps import TraceRecorder, comparison, is_number, sanitize_data

logger = logging.getLogger(__name__)


def _middle(values: List):
    return values[len(values) // 2] if values else None


def _target_or_middle(values: List, target):
    if target is None:
        return _middle(values)
    if not is_number(target):
        logger.warning("Non-numeric search target %r, using the middle element", target)
        return _middle(values)
    return target


def linear_search_steps(arr: Sequence, target: Optional[Any] = None) -> List[Dict[str, Any]]:
    """Scan left to right; the target defaults to the middle element."""
    a = list(arr)
    target = _target_or_middle(a, target)
    rec = TraceRecorder()
    rec.array("init", f"Starting Linear Search: looking for value {target}", a)

    for i, value in enumerate(a):
        match = value == target
        rec.array(
            "compare", f"Checking index {i}: arr[{i}] = {value}",
            a, [i], comparison=comparison(value, target, match),
        )
        if match:
            rec.array("found", f"Found! Value {target} is at index {i}", a, [i])
            rec.array("complete", f"Search complete: {target} found at index {i}", a, [i])
            return rec.steps
        rec.array("notmatch", f"{value} != {target}, continuing", a, [i])

    rec.array("notfound", f"Value {target} not found in array", a)
    return rec.steps


def binary_search_steps(arr: Sequence, target: Optional[Any] = None) -> List[Dict[str, Any]]:
    """Search a sorted copy of ``arr``; the target defaults to its middle element."""
    a = list(arr)
    if not all(is_number(v) for v in a):
        a = sanitize_data(a)
    a.sort()
    target = _target_or_middle(a, target)
    rec = TraceRecorder()
    rec.array("init", f"Starting Binary Search: looking for value {target} in sorted array {a}", a)

    left, right = 0, len(a) - 1
    while left <= right:
        mid = (left + right) // 2
        rec.array("range", f"Search range [{left}..{right}], checking middle index {mid}",
                  a, [left, mid, right])
        rec.array(
            "compare", f"Comparing arr[{mid}] = {a[mid]} with target {target}",
            a, [mid], comparison=comparison(a[mid], target, a[mid] == target),
        )

        if a[mid] == target:
            rec.array("found", f"Found! Value {target} is at index {mid}", a, [mid])
            rec.array("complete", f"Search complete: {target} found at index {mid}", a, [mid])
            return rec.steps
        if a[mid] < target:
            rec.array("right", f"{a[mid]} < {target}, searching right half [{mid + 1}..{right}]", a, [mid])
            left = mid + 1
        else:
            rec.array("left", f"{a[mid]} > {target}, searching left half [{left}..{mid - 1}]", a, [mid])
            right = mid - 1

    rec.array("notfound", f"Value {target} not found in array", a)
    return rec.steps
