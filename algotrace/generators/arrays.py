"""Array display plus stack (LIFO) and queue (FIFO) operation traces."""

from typing import Any, Dict, List, Sequence

from ..steps import TraceRecorder, sanitize_data


def display_steps(arr: Any) -> List[Dict[str, Any]]:
    """Single-step trace over the raw input; the fallback for unknown concepts."""
    rec = TraceRecorder()
    rec.array("display", "Array visualization - elements stored in contiguous memory",
              sanitize_data(arr))
    return rec.steps


def stack_steps(values: Sequence) -> List[Dict[str, Any]]:
    items: List = []
    rec = TraceRecorder()
    rec.array("init", "Stack: last in, first out. Elements enter and leave at the top", items)

    for value in values:
        items.append(value)
        rec.array("push", f"PUSH {value}: now on top of the stack", items, [len(items) - 1])

    while items:
        top = len(items) - 1
        rec.array("peek", f"Top of the stack is {items[top]}", items, [top])
        value = items.pop()
        rec.array("pop", f"POP {value} from the top", items)

    rec.array("complete", "Stack is empty", items)
    return rec.steps


def queue_steps(values: Sequence) -> List[Dict[str, Any]]:
    items: List = []
    rec = TraceRecorder()
    rec.array("init", "Queue: first in, first out. Enqueue at the rear, dequeue at the front", items)

    for value in values:
        items.append(value)
        rec.array("enqueue", f"ENQUEUE {value} at the rear", items, [len(items) - 1])

    while items:
        rec.array("peek", f"Front of the queue is {items[0]}", items, [0])
        value = items.pop(0)
        rec.array("dequeue", f"DEQUEUE {value} from the front", items)

    rec.array("complete", "Queue is empty", items)
    return rec.steps
