#!/usr/bin/env python3
# ip_globe/session.py
"""
Session state machine for the IP globe.

State is a single immutable SessionState value. transition() is the pure
reducer; SessionController owns the current value, feeds it events from one
ordered asyncio queue, and launches at most one fetch at a time.

Transitions:
    startup                      -> LOADING, fetch in flight
    any + FetchSucceeded         -> READY, record becomes last known
    any + FetchFailed            -> ERROR, last known record kept
    READY/ERROR + REFRESH        -> fetch started, display unchanged
    REFRESH with fetch in flight -> ignored
    any + QUIT                   -> quit, outstanding fetch abandoned
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Awaitable, Callable, Optional, Tuple, Union

from ip_globe.locate import LocationError, LocationRecord, NetworkError

log = logging.getLogger(__name__)

__all__ = [
    "Status",
    "Command",
    "FetchSucceeded",
    "FetchFailed",
    "Event",
    "SessionState",
    "SessionController",
    "initial_state",
    "transition",
    "describe_error",
]


class Status(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Command(Enum):
    QUIT = "quit"
    REFRESH = "refresh"


@dataclass(frozen=True)
class FetchSucceeded:
    record: LocationRecord


@dataclass(frozen=True)
class FetchFailed:
    error: LocationError


Event = Union[Command, FetchSucceeded, FetchFailed]


@dataclass(frozen=True)
class SessionState:
    status: Status = Status.LOADING
    message: str = ""
    refresh_in_flight: bool = False
    last_known: Optional[LocationRecord] = None
    quit: bool = False

    @property
    def record(self) -> Optional[LocationRecord]:
        """Record currently shown as Ready, or None."""
        return self.last_known if self.status is Status.READY else None


def initial_state() -> SessionState:
    # The startup fetch is the one outstanding fetch.
    return SessionState(status=Status.LOADING, refresh_in_flight=True)


def describe_error(err: LocationError) -> str:
    label = {
        "network": "Network error",
        "parse": "Bad response",
        "provider": "Provider error",
    }.get(err.kind, "Location error")
    detail = str(err)
    return f"{label}: {detail}" if detail else label


def transition(state: SessionState, event: Event) -> Tuple[SessionState, bool]:
    """Return (next state, whether to start a fetch)."""
    if state.quit:
        return state, False

    if event is Command.QUIT:
        return replace(state, quit=True), False

    if event is Command.REFRESH:
        if state.refresh_in_flight:
            return state, False
        return replace(state, refresh_in_flight=True), True

    if isinstance(event, FetchSucceeded):
        return SessionState(
            status=Status.READY,
            message="",
            refresh_in_flight=False,
            last_known=event.record,
        ), False

    if isinstance(event, FetchFailed):
        return SessionState(
            status=Status.ERROR,
            message=describe_error(event.error),
            refresh_in_flight=False,
            last_known=state.last_known,
        ), False

    raise TypeError(f"unknown session event: {event!r}")


Fetcher = Callable[[], Awaitable[LocationRecord]]


class SessionController:
    """
    Owns SessionState and drives it from a single FIFO of events.

    Key handlers call submit(); fetch tasks post their own completion into
    the same queue, so events are applied strictly in arrival order.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        on_change: Optional[Callable[[SessionState], None]] = None,
    ):
        self._fetcher = fetcher
        self._on_change = on_change
        self._state = initial_state()
        self._events: asyncio.Queue = asyncio.Queue()
        self._task: Optional[asyncio.Task] = None
        self.fetch_count = 0

    @property
    def state(self) -> SessionState:
        return self._state

    # -------- input --------

    def submit(self, event: Event) -> None:
        self._events.put_nowait(event)

    def dispatch(self, event: Event) -> SessionState:
        """Apply one event now. Must be called from the loop thread."""
        prev = self._state
        nxt, start_fetch = transition(prev, event)
        if event is Command.REFRESH and not start_fetch and not prev.quit:
            log.debug("Refresh ignored, fetch already in flight")
        if nxt is not prev:
            log.debug("Session %s -> %s on %s", prev.status.value, nxt.status.value, _event_name(event))
        self._state = nxt

        if start_fetch:
            self._start_fetch()
        if nxt.quit:
            self._abandon_fetch()
        self._notify()
        return nxt

    # -------- loop --------

    async def run(self) -> SessionState:
        """Issue the startup fetch and process events until quit."""
        if self._task is None and self._state.refresh_in_flight and not self._state.quit:
            self._start_fetch()
        self._notify()
        while not self._state.quit:
            event = await self._events.get()
            self.dispatch(event)
        return self._state

    # -------- fetch task --------

    def _start_fetch(self) -> None:
        self.fetch_count += 1
        log.info("Fetching location (#%d)", self.fetch_count)
        self._task = asyncio.ensure_future(self._fetch_once())

    async def _fetch_once(self) -> None:
        try:
            record = await self._fetcher()
        except LocationError as e:
            log.warning("Location fetch failed: %s", e)
            event: Event = FetchFailed(e)
        except Exception as e:
            log.exception("Unexpected error during location fetch")
            event = FetchFailed(NetworkError(f"unexpected error: {e}"))
        else:
            event = FetchSucceeded(record)

        if not self._state.quit:
            self._events.put_nowait(event)

    def _abandon_fetch(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            log.debug("Abandoning in-flight fetch")
            task.cancel()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self._state)


def _event_name(event: Event) -> str:
    if isinstance(event, Command):
        return event.value
    return type(event).__name__
