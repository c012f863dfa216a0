import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from heapq import heappop, heappush
from itertools import count
from typing import Any, Callable


def parse_arrival(ts: str) -> datetime:
    """Route arrival timestamp ("2030-01-01T00:00:00.000Z") as an aware UTC datetime."""
    dt = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


@dataclass
class ScheduledTask:
    """One-shot deferred callback. Cancelling marks it; the scheduler skips it when popped."""

    key: str
    fire_at: datetime
    callback: Callable[[], Any]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


@dataclass
class ArrivalScheduler:
    """
    Tasks ordered by fire time. At most one pending task per key:
    scheduling a key again cancels the previous task.
    """

    clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc)
    sleep: Callable[[float], None] = time.sleep
    # (fire_at, sequence, task); the sequence keeps equal fire times in insertion order
    _heap: list[tuple[datetime, int, ScheduledTask]] = field(default_factory=list)
    _sequence: count = field(default_factory=count)
    _by_key: dict[str, ScheduledTask] = field(default_factory=dict)

    def schedule(self, key: str, fire_at: datetime, callback: Callable[[], Any]) -> ScheduledTask:
        previous = self._by_key.get(key)
        if previous is not None and previous.pending:
            logging.debug(f"Cancelling pending task {key} at {previous.fire_at.isoformat()}")
            previous.cancel()
        task = ScheduledTask(key=key, fire_at=fire_at, callback=callback)
        self._by_key[key] = task
        heappush(self._heap, (fire_at, next(self._sequence), task))
        logging.debug(f"Scheduled task {key} at {fire_at.isoformat()}")
        return task

    def cancel(self, key: str) -> bool:
        task = self._by_key.get(key)
        if task is None or not task.pending:
            return False
        task.cancel()
        return True

    def pending(self) -> list[ScheduledTask]:
        return sorted((t for t in self._by_key.values() if t.pending), key=lambda t: t.fire_at)

    def next_fire_time(self) -> datetime | None:
        while self._heap and not self._heap[0][2].pending:
            heappop(self._heap)
        return self._heap[0][0] if self._heap else None

    def run_pending(self, now: datetime | None = None) -> int:
        """Fire every due, uncancelled task. Returns the number fired."""
        now = now or self.clock()
        fired = 0
        while True:
            next_at = self.next_fire_time()
            if next_at is None or next_at > now:
                return fired
            _, _, task = heappop(self._heap)
            task.fired = True
            if self._by_key.get(task.key) is task:
                del self._by_key[task.key]
            logging.debug(f"Firing task {task.key} (due {task.fire_at.isoformat()})")
            task.callback()
            fired += 1

    def run_until_idle(self, max_sleep_s: float = 0.5) -> int:
        """Block until every pending task has fired, sleeping in bounded steps."""
        fired = 0
        while True:
            next_at = self.next_fire_time()
            if next_at is None:
                logging.debug("No tasks in scheduler queue")
                return fired
            wait_s = max(0.0, (next_at - self.clock()).total_seconds())
            if wait_s > 0:
                sleep_s = max(0.05, min(wait_s, max_sleep_s))
                logging.debug(f"Sleeping for {sleep_s:.3f}s (remaining {wait_s:.3f}s)")
                self.sleep(sleep_s)
                continue
            fired += self.run_pending()
