from typing import Any, Callable, Protocol, runtime_checkable

# Node-style completion callback: callback(error) or callback(None, result).
DoneCallback = Callable[..., None]


@runtime_checkable
class SyncHookPort(Protocol):
    """Hook whose taps are called synchronously with the hook arguments."""

    def tap(self, name: str, fn: Callable[..., Any]) -> None:
        ...


@runtime_checkable
class AsyncHookPort(Protocol):
    """Hook whose taps receive the payload and a completion callback."""

    def tap_async(self, name: str, fn: Callable[[Any, DoneCallback], None]) -> None:
        ...


@runtime_checkable
class LegacyPluginHostPort(Protocol):
    """
    Pre-hooks host style: event handlers are registered by event name.

    Used both for compilers ("compilation" event) and compilations
    ("html-before-processing" event).
    """

    def plugin(self, event: str, fn: Callable[..., Any]) -> None:
        ...
