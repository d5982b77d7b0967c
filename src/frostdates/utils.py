"""
Decorator giving frostdates coroutines a blocking ``.sync`` counterpart.
"""

import inspect
from typing import Any, Awaitable, Callable, TypeVar, get_type_hints

from .sync import AsyncSyncBridge

R = TypeVar("R")


def add_sync_version(
    async_fn: Callable[..., Awaitable[R]],
) -> Callable[..., Awaitable[R]]:
    """
    Attach ``async_fn.sync``, which runs ``async_fn`` in a fresh event loop.

    When ``async_fn`` accepts a ``client`` argument and the caller leaves it
    unset, a temporary client of the annotated class (e.g. ``ACISClient``)
    is created and closed around the call.

    Example:
        >>> report = get_frost_statistics.sync("80301")
    """
    sig = inspect.signature(async_fn)
    client_param = sig.parameters.get("client")

    def sync_wrapper(*args: Any, **kwargs: Any) -> R:
        client_class = None
        if client_param and kwargs.get("client") is None:
            annotation = get_type_hints(async_fn).get("client", client_param.annotation)
            client_class = AsyncSyncBridge.extract_client_class(annotation)

        return AsyncSyncBridge.run_async(
            async_fn, args=args, kwargs=kwargs, client_class=client_class
        )

    async_fn.sync = sync_wrapper  # type: ignore
    return async_fn
