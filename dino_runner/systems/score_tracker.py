"""
score_tracker.py
----------------
Wall-clock score: one point per fixed interval, independent of frame rate.
"""


class ScoreTracker:
    """Accrues score from elapsed time, carrying the remainder forward."""

    def __init__(self, cfg):
        """
        Args:
            cfg: "score" section of the game config
        """
        self.interval = cfg["interval"]

    def update(self, session, dt: float) -> int:
        """
        Add `dt` to the session's score timer and pay out whole intervals.

        The leftover time stays in the timer so many short, uneven frames
        add up to the same score as one long one.

        Returns:
            int: Points awarded this cycle.
        """
        session.score_timer += dt
        awarded = 0
        while session.score_timer >= self.interval:
            session.score += 1
            session.score_timer -= self.interval
            awarded += 1
        return awarded
