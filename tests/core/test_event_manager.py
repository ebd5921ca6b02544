"""
test_event_manager.py
---------------------
Subscription and dispatch behaviour of the EventManager.
"""

from dino_runner.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    ScoreChangedEvent,
)


def test_dispatch_reaches_matching_subscribers_only():
    events = EventManager()
    scores, overs = [], []
    events.subscribe(ScoreChangedEvent, scores.append)
    events.subscribe(GameOverEvent, overs.append)

    events.dispatch(ScoreChangedEvent(score=3))

    assert scores == [ScoreChangedEvent(score=3)]
    assert overs == []


def test_duplicate_subscription_ignored():
    events = EventManager()
    seen = []
    events.subscribe(ScoreChangedEvent, seen.append)
    events.subscribe(ScoreChangedEvent, seen.append)

    events.dispatch(ScoreChangedEvent(score=1))

    assert len(seen) == 1
    assert events.get_subscriber_count(ScoreChangedEvent) == 1


def test_unsubscribe():
    events = EventManager()
    seen = []
    events.subscribe(ScoreChangedEvent, seen.append)
    events.unsubscribe(ScoreChangedEvent, seen.append)
    events.unsubscribe(GameOverEvent, seen.append)  # Unknown pairing is harmless

    events.dispatch(ScoreChangedEvent(score=1))

    assert seen == []


def test_failing_callback_does_not_stop_others():
    events = EventManager()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    events.subscribe(GameOverEvent, broken)
    events.subscribe(GameOverEvent, seen.append)

    events.dispatch(GameOverEvent(final_score=9))

    assert seen == [GameOverEvent(final_score=9)]


def test_clear_all():
    events = EventManager()
    events.subscribe(GameOverEvent, print)
    events.subscribe(ScoreChangedEvent, print)

    assert events.get_subscriber_count() == 2
    events.clear_all()
    assert events.get_subscriber_count() == 0
