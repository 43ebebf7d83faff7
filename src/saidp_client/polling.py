"""
Poll-until-terminal loop for push-to-accept status checks.

A status check is issued once per interval tick. The loop ends when the
check reports one of the terminal states, or when the overall deadline
fires first, in which case ``PollTimeoutError`` is raised and no partial
result is returned. Errors from the check itself abort the loop.
"""

import asyncio
import time
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

from .errors import PollTimeoutError
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class PushStatus(str, Enum):
    """Push-to-accept states reported by the status endpoint."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    DENIED = "DENIED"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset(
    {PushStatus.ACCEPTED, PushStatus.DENIED, PushStatus.FAILED, PushStatus.EXPIRED}
)


def _default_state(result: Any) -> str:
    if isinstance(result, PushStatus):
        return result.value
    if isinstance(result, str):
        return result
    return getattr(result, "message", "")


_TERMINAL_VALUES = frozenset(s.value for s in TERMINAL_STATES)


def _is_terminal(state: str) -> bool:
    return getattr(state, "value", state) in _TERMINAL_VALUES


def _check_arguments(timeout: float, interval: float) -> None:
    if interval <= 0:
        raise ValueError("interval must be positive")
    if timeout <= 0:
        raise ValueError("timeout must be positive")


def _log_state(state: str, attempt: int) -> None:
    if state == PushStatus.PENDING.value:
        logger.debug("Status still pending", attempt=attempt)
    else:
        # Unknown states keep the loop running
        logger.warning("Unrecognised status, still waiting", state=state, attempt=attempt)


def poll_status(
    check: Callable[[], T],
    timeout: float,
    interval: float,
    *,
    state_of: Callable[[T], str] = _default_state,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Call ``check`` on every tick until it reports a terminal state.

    Ticks fall at ``start + n * interval``. A tick landing on or after the
    deadline never runs: the deadline wins. Ticks missed because a check
    ran long are skipped rather than replayed. A check that returns after
    the deadline is discarded, whatever state it reports.

    Args:
        check: Issues one status request and returns its result
        timeout: Seconds until the deadline
        interval: Seconds between ticks
        state_of: Extracts the state string from a result
        clock: Monotonic time source
        sleep: Blocking sleep

    Returns:
        The first result whose state is ACCEPTED, DENIED, FAILED or EXPIRED

    Raises:
        PollTimeoutError: If the deadline fires before a terminal state
        ValueError: If timeout or interval is not positive
    """
    _check_arguments(timeout, interval)

    start = clock()
    deadline = start + timeout
    next_tick = start + interval
    attempt = 0

    while True:
        if next_tick >= deadline:
            sleep(max(0.0, deadline - clock()))
            logger.info("Status poll timed out", timeout=timeout, attempts=attempt)
            raise PollTimeoutError(timeout)

        sleep(max(0.0, next_tick - clock()))
        attempt += 1
        result = check()
        now = clock()
        if now >= deadline:
            # The deadline passed while the check was in flight
            logger.info("Status poll timed out", timeout=timeout, attempts=attempt)
            raise PollTimeoutError(timeout)

        state = state_of(result)
        if _is_terminal(state):
            logger.debug("Status reached terminal state", state=state, attempt=attempt)
            return result
        _log_state(state, attempt)

        next_tick += interval
        while next_tick <= now and next_tick < deadline:
            next_tick += interval


async def poll_status_async(
    check: Callable[[], Awaitable[T]],
    timeout: float,
    interval: float,
    *,
    state_of: Callable[[T], str] = _default_state,
) -> T:
    """
    Async counterpart of ``poll_status``.

    The deadline is raced against the loop with ``asyncio.wait_for``, so a
    status check still in flight when it fires is cancelled.
    """
    _check_arguments(timeout, interval)
    loop = asyncio.get_running_loop()

    async def _poll() -> T:
        next_tick = loop.time() + interval
        attempt = 0
        while True:
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            attempt += 1
            result = await check()
            state = state_of(result)
            if _is_terminal(state):
                logger.debug("Status reached terminal state", state=state, attempt=attempt)
                return result
            _log_state(state, attempt)

            now = loop.time()
            next_tick += interval
            while next_tick <= now:
                next_tick += interval

    try:
        return await asyncio.wait_for(_poll(), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.info("Status poll timed out", timeout=timeout)
        raise PollTimeoutError(timeout) from e
