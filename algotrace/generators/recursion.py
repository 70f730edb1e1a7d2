"""Call-stack simulation of recursive factorial."""

import logging
from typing import Any, Dict, List

from .. import config, samples
from ..steps import TraceRecorder

logger = logging.getLogger(__name__)


def clamp_n(n: Any) -> int:
    try:
        value = int(n)
    except (TypeError, ValueError):
        return samples.FACTORIAL_N
    if value < 0:
        return 0
    if value > config.MAX_RECURSION_DEPTH:
        logger.warning("factorial(%d) exceeds depth limit, using %d", value, config.MAX_RECURSION_DEPTH)
        return config.MAX_RECURSION_DEPTH
    return value


def factorial_steps(n: Any = samples.FACTORIAL_N) -> List[Dict[str, Any]]:
    """
    Push a frame on every call, annotate it with ``returnValue`` when it
    resolves, then pop it. The final result shown is the root frame's
    ``returnValue``.
    """
    n = clamp_n(n)
    rec = TraceRecorder()
    stack: List[Dict[str, Any]] = []
    rec.recursion("init", f"Calculating factorial({n}) using recursion", stack)

    def call(num: int) -> int:
        frame = {"function": "factorial", "params": num, "depth": len(stack) + 1}
        stack.append(frame)
        rec.recursion("call", f"Calling factorial({num}), stack depth {frame['depth']}", stack)

        if num <= 1:
            frame["returnValue"] = 1
            rec.recursion("return", f"Base case: factorial({num}) = 1", stack)
        else:
            sub = call(num - 1)
            frame["returnValue"] = num * sub
            rec.recursion(
                "return",
                f"Returning factorial({num}) = {num} x factorial({num - 1}) = {frame['returnValue']}",
                stack,
            )

        popped = stack.pop()
        return popped["returnValue"]

    result = call(n)
    rec.recursion("complete", f"Recursion complete! Result: {n}! = {result}", stack)
    return rec.steps
