"""Tests for the arrival scheduler and the notifier."""

from datetime import datetime, timedelta, timezone

from flow.events import ARRIVED, Notifier
from flow.scheduler import ArrivalScheduler, parse_arrival

T0 = datetime(2030, 1, 1, tzinfo=timezone.utc)


def test_tasks_fire_in_time_order():
    scheduler = ArrivalScheduler()
    fired = []
    scheduler.schedule("b", T0 + timedelta(seconds=20), lambda: fired.append("b"))
    scheduler.schedule("a", T0 + timedelta(seconds=10), lambda: fired.append("a"))

    assert scheduler.next_fire_time() == T0 + timedelta(seconds=10)
    assert scheduler.run_pending(T0 + timedelta(seconds=30)) == 2
    assert fired == ["a", "b"]
    assert scheduler.next_fire_time() is None


def test_equal_fire_times_keep_schedule_order():
    scheduler = ArrivalScheduler()
    fired = []
    for key in ("first", "second", "third"):
        scheduler.schedule(key, T0, lambda key=key: fired.append(key))

    assert scheduler.run_pending(T0) == 3
    assert fired == ["first", "second", "third"]


def test_rescheduling_a_key_drops_the_stale_task_from_the_head():
    scheduler = ArrivalScheduler()
    fired = []
    scheduler.schedule("arrival:S-1", T0, lambda: fired.append("old"))
    scheduler.schedule("arrival:S-1", T0 + timedelta(seconds=5), lambda: fired.append("new"))

    assert scheduler.next_fire_time() == T0 + timedelta(seconds=5)
    assert [t.key for t in scheduler.pending()] == ["arrival:S-1"]
    assert scheduler.run_pending(T0 + timedelta(seconds=5)) == 1
    assert fired == ["new"]


def test_parse_arrival_reads_zulu_timestamps():
    assert parse_arrival("2030-01-01T00:00:10.000Z") == T0 + timedelta(seconds=10)
    assert parse_arrival("2030-01-01T00:00:10").tzinfo == timezone.utc


def test_cancelled_task_never_fires():
    scheduler = ArrivalScheduler()
    fired = []
    task = scheduler.schedule("a", T0, lambda: fired.append("a"))

    assert scheduler.cancel("a") is True
    assert task.cancelled
    assert scheduler.cancel("a") is False
    assert scheduler.run_pending(T0 + timedelta(days=1)) == 0
    assert fired == []


def test_run_until_idle_sleeps_in_bounded_steps():
    now = [T0]
    slept = []

    def sleep(seconds):
        slept.append(seconds)
        now[0] += timedelta(seconds=seconds)

    scheduler = ArrivalScheduler(clock=lambda: now[0], sleep=sleep)
    fired = []
    scheduler.schedule("a", T0 + timedelta(seconds=2), lambda: fired.append("a"))

    assert scheduler.run_until_idle(max_sleep_s=0.5) == 1
    assert fired == ["a"]
    assert slept and max(slept) <= 0.5
    assert sum(slept) >= 2


def test_notifier_emits_to_subscribers():
    notifier = Notifier()
    seen = []
    callback = lambda ship, wp: seen.append((ship, wp))  # noqa: E731
    notifier.subscribe(ARRIVED, callback)

    assert notifier.emit(ARRIVED, "S-1", "X1-AB12-A1") == 1
    notifier.unsubscribe(ARRIVED, callback)
    assert notifier.emit(ARRIVED, "S-1", "X1-AB12-B2") == 0
    assert seen == [("S-1", "X1-AB12-A1")]
