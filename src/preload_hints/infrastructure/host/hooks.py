"""Minimal in-process build host exposing both hook registration styles."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any, Callable, Sequence

from ...domain.models.chunk import Compilation
from ...domain.models.document import DocumentPayload

logger = logging.getLogger(__name__)

HTML_AFTER_PROCESSING = "html_after_processing"
LEGACY_COMPILATION_EVENT = "compilation"
LEGACY_HTML_EVENT = "html-before-processing"

AsyncTap = Callable[[Any, Callable[..., None]], None]


def run_async_series(
    taps: Sequence[AsyncTap],
    value: Any,
    callback: Callable[..., None],
) -> None:
    """
    Pass value through each tap in order; each tap hands its result to the next.

    The first tap reporting an error stops the series and the error goes to callback.
    """

    def step(index: int, current: Any) -> None:
        if index == len(taps):
            callback(None, current)
            return

        def done(error: BaseException | None = None, result: Any = None) -> None:
            if error is not None:
                callback(error)
                return
            step(index + 1, current if result is None else result)

        taps[index](current, done)

    step(0, value)


class SyncHook:
    """Hook whose taps are called in registration order."""

    def __init__(self) -> None:
        self.taps: list[tuple[str, Callable[..., Any]]] = []

    def tap(self, name: str, fn: Callable[..., Any]) -> None:
        self.taps.append((name, fn))

    def call(self, *args: Any) -> None:
        for _, fn in self.taps:
            fn(*args)


class AsyncSeriesWaterfallHook:
    """Hook whose taps transform a value in series through completion callbacks."""

    def __init__(self) -> None:
        self.taps: list[tuple[str, AsyncTap]] = []

    def tap_async(self, name: str, fn: AsyncTap) -> None:
        self.taps.append((name, fn))

    def call_async(self, value: Any, callback: Callable[..., None]) -> None:
        run_async_series([fn for _, fn in self.taps], value, callback)


def _default_compilation_hooks() -> SimpleNamespace:
    return SimpleNamespace(**{HTML_AFTER_PROCESSING: AsyncSeriesWaterfallHook()})


@dataclass
class HostCompilation(Compilation):
    """Compilation carrying both the hook-style and the event-style HTML extension points."""

    hooks: SimpleNamespace = field(default_factory=_default_compilation_hooks)
    handlers: dict[str, list[Callable[..., Any]]] = field(
        default_factory=lambda: defaultdict(list), repr=False
    )

    @classmethod
    def wrap(cls, compilation: Compilation) -> "HostCompilation":
        return cls(
            chunks=list(compilation.chunks),
            chunk_groups=dict(compilation.chunk_groups),
            assets=list(compilation.assets),
            public_path=compilation.public_path,
            errors=compilation.errors,
        )

    def plugin(self, event: str, fn: Callable[..., Any]) -> None:
        self.handlers[event].append(fn)


def _collect(compilation: Compilation, payload: DocumentPayload) -> tuple[dict[str, Any], Callable[..., None]]:
    outcome: dict[str, Any] = {"payload": payload}

    def done(error: BaseException | None = None, result: Any = None) -> None:
        if error is not None:
            # One failed document must not abort the others
            logger.error(f"Document '{payload.output_name}' failed: {error}")
            compilation.errors.append(str(error))
            return
        outcome["payload"] = result

    return outcome, done


class Compiler:
    """Host exposing `hooks` (the richer registration style)."""

    def __init__(self) -> None:
        self.hooks = SimpleNamespace(compilation=SyncHook())

    def apply(self, *plugins: Any) -> None:
        for plugin in plugins:
            plugin.apply(self)

    def compile(self, compilation: HostCompilation) -> HostCompilation:
        self.hooks.compilation.call(compilation)
        return compilation

    def emit_document(self, compilation: HostCompilation, payload: DocumentPayload) -> DocumentPayload:
        """Run the HTML hook for one document; failures land in compilation.errors."""
        hook = getattr(compilation.hooks, HTML_AFTER_PROCESSING, None)
        if hook is None:
            return payload
        outcome, done = _collect(compilation, payload)
        hook.call_async(payload, done)
        return outcome["payload"]


class LegacyCompiler:
    """Host exposing only `plugin(event, fn)` (the legacy registration style)."""

    def __init__(self) -> None:
        self.handlers: dict[str, list[Callable[..., Any]]] = defaultdict(list)

    def plugin(self, event: str, fn: Callable[..., Any]) -> None:
        self.handlers[event].append(fn)

    def apply(self, *plugins: Any) -> None:
        for plugin in plugins:
            plugin.apply(self)

    def compile(self, compilation: HostCompilation) -> HostCompilation:
        for fn in self.handlers[LEGACY_COMPILATION_EVENT]:
            fn(compilation)
        return compilation

    def emit_document(self, compilation: HostCompilation, payload: DocumentPayload) -> DocumentPayload:
        outcome, done = _collect(compilation, payload)
        run_async_series(compilation.handlers[LEGACY_HTML_EVENT], payload, done)
        return outcome["payload"]
