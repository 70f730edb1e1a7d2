"""Deterministic step traces for classic algorithms, plus a playback controller."""

from .playback import AsyncioScheduler, PlaybackController, PlaybackState
from .registry import (
    REGISTRY,
    GeneratorEntry,
    build_trace,
    entry_for,
    resolve_kind,
    select_generator,
    trace_document,
)
from .steps import AlgorithmKind, TraceRecorder, sanitize_data

__version__ = "0.1.0"
