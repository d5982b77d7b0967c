"""
Run frostdates coroutines from synchronous code.

Usage:
    # Instead of this async code:
    async with ACISClient() as client:
        report = await get_frost_statistics("80301", client=client)

    # Use this sync code:
    report = get_frost_statistics.sync("80301")
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union, get_args, get_origin

R = TypeVar("R")


class AsyncSyncBridge:
    """Handles conversion of async functions to synchronous versions.

    This class provides utilities for running async code synchronously,
    managing event loops, and handling client instantiation.
    """

    @staticmethod
    def run_async(
        async_fn: Callable[..., Awaitable[R]],
        args: tuple = (),
        kwargs: Optional[dict] = None,
        client_class: Optional[type] = None,
    ) -> R:
        """Run an async function synchronously.

        Args:
            async_fn: Async function to run
            args: Positional arguments for the function
            kwargs: Keyword arguments for the function
            client_class: Optional client class to instantiate if not provided

        Returns:
            Result of running the async function

        Raises:
            RuntimeError: If called from within an existing event loop
        """
        if kwargs is None:
            kwargs = {}

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise RuntimeError(
                "Cannot use sync version from within an existing asyncio event loop. "
                "Use the async version instead."
            )

        async def _call_and_cleanup() -> R:
            # Created inside the loop so the HTTP client binds to it
            temp_client = None
            if client_class:
                sig = inspect.signature(async_fn)
                client_param = sig.parameters.get("client")
                if client_param and kwargs.get("client") is None:
                    temp_client = client_class()
                    kwargs["client"] = temp_client
            try:
                return await async_fn(*args, **kwargs)
            finally:
                if temp_client:
                    await temp_client.close()

        return asyncio.run(_call_and_cleanup())

    @staticmethod
    def extract_client_class(annotation: Any) -> Optional[type]:
        """Extract client class from type annotation.

        Handles Optional, Union, and direct type annotations.

        Args:
            annotation: Type annotation to extract class from

        Returns:
            Client class if found, None otherwise
        """
        if annotation is None:
            return None

        origin = get_origin(annotation)
        if origin is Union:
            args = get_args(annotation)
            non_none_args = [arg for arg in args if arg is not type(None)]
            if non_none_args:
                arg = non_none_args[0]
                if isinstance(arg, type):
                    return arg
        else:
            if isinstance(annotation, type):
                return annotation

        return None
