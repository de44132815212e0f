"""Change notifications for sortable tables.

``TableSortController`` publishes ``TableEvent.SORT_CHANGED`` after each sort
transition and ``TableEvent.ROWS_CHANGED`` when a new dataset arrives; views
subscribe to re-render. Dispatch is synchronous and happens on the caller's
thread. A handler that raises is logged and recorded in ``EventBus.errors``,
and the remaining handlers still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "TableEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

_log = logging.getLogger(__name__)


class TableEvent(str, Enum):  # Using str subclass for easier JSON/UI usage
    SORT_CHANGED = "sort_changed"
    ROWS_CHANGED = "rows_changed"


@dataclass
class Event:
    name: str  # matches TableEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


def _event_key(name: str | TableEvent) -> str:
    return name.value if isinstance(name, TableEvent) else name


class EventBus:
    """Dispatches table events to subscribed handlers in subscription order.

    Handlers run outside the lock on a snapshot of the subscriber list, so a
    handler may subscribe or unsubscribe while an event is being delivered.
    Once-subscriptions are dropped after their first successful call.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, Exception]] = []

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def subscribe(
        self, name: str | TableEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = _event_key(name)
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                self._subs[sub.event] = [s for s in bucket if s is not sub]
                if not self._subs[sub.event]:
                    self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def publish(self, name: str | TableEvent, payload: Any = None) -> Event:
        key = _event_key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        spent: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                _log.warning("handler for '%s' failed: %s", key, exc, exc_info=True)
                with self._lock:
                    self._errors.append((evt, exc))
            else:
                if sub.once:
                    spent.append(sub)
        for sub in spent:
            self.unsubscribe(sub)
        return evt

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def subscriber_count(self, name: str | TableEvent) -> int:
        with self._lock:
            return len(self._subs.get(_event_key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, Exception]]:
        with self._lock:
            return list(self._errors)
