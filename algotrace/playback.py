"""
Playback controller: which step is current and whether time advances.

States:

    IDLE     no playback yet, or just reset
    PLAYING  a timer advances the index every 1000/speed ms
    PAUSED   index frozen; next/previous/seek still work

The controller never touches a renderer directly. It calls ``on_change``
with the current step whenever the index or state changes, and gets its
timer from a scheduler exposing ``call_later(delay_seconds, callback)``
that returns a handle with ``cancel()``. The default scheduler is the
running asyncio event loop, so playback is single-threaded and cooperative.
"""

import asyncio
import copy
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from . import config
from .registry import build_trace

logger = logging.getLogger(__name__)

Step = Dict[str, Any]


class PlaybackState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class AsyncioScheduler:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]):
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class PlaybackController:

    def __init__(self, generate: Callable[[], List[Step]], speed: int = config.DEFAULT_SPEED,
                 scheduler=None, on_change: Optional[Callable[[Optional[Step], "PlaybackController"], None]] = None,
                 eager: bool = True):
        self._generate = generate
        self._scheduler = scheduler or AsyncioScheduler()
        self._on_change = on_change
        self._timer = None
        self.steps: Tuple[Step, ...] = ()
        self.index = 0
        self.state = PlaybackState.IDLE
        self.speed = config.clamp_speed(speed)
        if eager:
            self._load()

    @classmethod
    def for_concept(cls, concept_key, initial_data=None, title: str = "", **kwargs) -> "PlaybackController":
        return cls(lambda: build_trace(concept_key, initial_data, title), **kwargs)

    # -- queries --

    @property
    def interval(self) -> float:
        """Seconds between auto-advance ticks."""
        return 1.0 / self.speed

    @property
    def last_index(self) -> int:
        return max(0, len(self.steps) - 1)

    @property
    def at_end(self) -> bool:
        return self.index >= self.last_index

    @property
    def current_step(self) -> Optional[Step]:
        if not self.steps:
            return None
        return copy.deepcopy(self.steps[self.index])

    # -- transport --

    def play(self):
        if self.state == PlaybackState.PLAYING:
            return
        if not self.steps:
            self._load()
        self._set_state(PlaybackState.PLAYING)
        self._schedule()

    def pause(self):
        if self.state != PlaybackState.PLAYING:
            return
        self._cancel_timer()
        self._set_state(PlaybackState.PAUSED)

    def next(self):
        self.seek(self.index + 1)

    def previous(self):
        self.seek(self.index - 1)

    def seek(self, index: int):
        if not self.steps:
            return
        try:
            index = int(index)
        except (TypeError, ValueError, OverflowError):
            logger.debug("Ignoring seek to %r", index)
            return
        target = max(0, min(self.last_index, index))
        if target == self.index:
            return
        self.index = target
        if self.state == PlaybackState.PLAYING:
            # Restart the countdown; the next tick settles to PAUSED if we are at the end.
            self._cancel_timer()
            self._timer = self._scheduler.call_later(self.interval, self._tick)
        self._notify()

    def reset(self):
        self._cancel_timer()
        self._load()
        self.state = PlaybackState.IDLE
        self._notify()

    def set_speed(self, speed: int):
        self.speed = config.clamp_speed(speed)
        logger.debug("Playback speed set to %d", self.speed)

    def close(self):
        self._cancel_timer()
        if self.state == PlaybackState.PLAYING:
            self._set_state(PlaybackState.PAUSED)

    # -- internals --

    def _load(self):
        self.steps = tuple(self._generate() or ())
        self.index = 0
        logger.debug("Loaded %d steps", len(self.steps))

    def _schedule(self):
        if self.at_end:
            self._set_state(PlaybackState.PAUSED)
            return
        self._timer = self._scheduler.call_later(self.interval, self._tick)

    def _tick(self):
        self._timer = None
        if self.state != PlaybackState.PLAYING:
            return
        if not self.at_end:
            self.index += 1
            self._notify()
        self._schedule()

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _set_state(self, state: PlaybackState):
        if state == self.state:
            return
        logger.debug("Playback %s -> %s at step %d", self.state.value, state.value, self.index)
        self.state = state
        self._notify()

    def _notify(self):
        if self._on_change is not None:
            self._on_change(self.current_step, self)
