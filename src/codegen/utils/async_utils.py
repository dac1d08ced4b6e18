"""
Async Utilities
===============

Run coroutines (the remote generation call) from synchronous callers such as
Flask views and the CLI, whether or not an event loop is already running in
the calling thread.
"""

import asyncio
import logging
import threading
from typing import Any, Coroutine, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def run_async_safely(coro: Coroutine[Any, Any, T]) -> T:
    """Run ``coro`` to completion from a synchronous context.

    With no running loop in this thread a fresh loop is created, used and
    closed. Inside a running loop the coroutine is moved to a helper thread
    with its own loop, since the current loop cannot be re-entered.

    Raises:
        Any exception raised by the coroutine
    """
    if is_event_loop_running():
        logger.debug("Event loop already running, executing coroutine in helper thread")
        return _run_in_new_thread(coro)

    loop = asyncio.new_event_loop()
    try:
        logger.debug(f"Running coroutine on fresh loop in thread {threading.current_thread().name}")
        return loop.run_until_complete(coro)
    finally:
        try:
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()


def _run_in_new_thread(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine in a dedicated thread with its own event loop."""
    outcome: dict = {}

    def _thread_runner():
        loop = asyncio.new_event_loop()
        try:
            outcome['result'] = loop.run_until_complete(coro)
        except BaseException as e:  # re-raised in the caller thread
            outcome['error'] = e
        finally:
            loop.close()

    thread = threading.Thread(target=_thread_runner, name="async-runner", daemon=True)
    thread.start()
    thread.join()

    if 'error' in outcome:
        raise outcome['error']
    return outcome.get('result')  # type: ignore[return-value]


def is_event_loop_running() -> bool:
    """True when called from inside a running event loop."""
    try:
        asyncio.get_running_loop()
        return True
    except RuntimeError:
        return False
