"""Timing spans for ``--verbose`` output.

Service methods wrapped in :func:`traced` record how long they took, with
:func:`trace_span` marking sub-steps (opening the profile). The outermost
traced call attaches the tree to ``ServiceResult.meta["telemetry"]``.
Disabled unless the CLI calls :func:`enable_telemetry`.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from envperm.services.result import ServiceResult

log = structlog.get_logger("envperm.telemetry")

_enabled: ContextVar[bool] = ContextVar("envperm_telemetry_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("envperm_active_span", default=None)


@dataclass
class Span:
    """One timed step and the steps nested inside it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = self.annotations
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@contextmanager
def _open_span(name: str) -> Generator[Span]:
    """Start *name* under the active span (if any) and make it active."""
    span = Span(name=name)
    parent = _active.get()
    if parent is not None:
        parent.children.append(span)
    token = _active.set(span)
    try:
        yield span
    finally:
        span.finished = time.perf_counter()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a sub-step of a traced call; yields None when there is nothing to attach to."""
    if not _enabled.get() or _active.get() is None:
        yield None
        return
    with _open_span(name) as span:
        yield span


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method; the outermost call puts the span tree in ``meta``."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        outermost = _active.get() is None
        with _open_span(func.__qualname__) as span:
            result = func(*args, **kwargs)

        log.debug("span.complete", span_name=span.name, duration_ms=round(span.duration_ms, 2))
        if outermost and isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": span.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn on span recording (called by AppContext for ``--verbose``)."""
    _enabled.set(True)
