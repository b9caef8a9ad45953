import logging

from pong_input import Control, InputTracker
from pong_physics import Event, reset_scores, serve, update
from pong_render import render

logger = logging.getLogger(__name__)


class ManualTimer:
    """Virtual clock: every wait() advances time by one nominal frame."""

    def __init__(self, frame_ms=1000 / 60, start=0.0):
        self.t = start
        self.frame_ms = frame_ms

    def now(self):
        return self.t

    def wait(self):
        self.t += self.frame_ms


class FrameDriver:
    """Runs update then render once per refresh, unless paused.

    ``timer`` provides now() in milliseconds and wait() until the next
    refresh. ``scoreboard`` (optional) gets show(player, computer) whenever
    the score changes.
    """

    def __init__(self, state, canvas, rng, timer, scoreboard=None):
        self.state = state
        self.canvas = canvas
        self.rng = rng
        self.timer = timer
        self.scoreboard = scoreboard
        self.tracker = InputTracker(state)
        self.frames = 0

    @property
    def paused(self):
        return self.state.run.paused

    def start(self):
        serve(self.state, self.rng)
        self.show_score()

    def show_score(self):
        if self.scoreboard is not None:
            self.scoreboard.show(self.state.score.player, self.state.score.computer)

    # input

    def key_down(self, key):
        control = self.tracker.key_down(key)
        if control is Control.PAUSE:
            self.toggle_pause()
        elif control is Control.RESET:
            self.reset()

    def key_up(self, key):
        self.tracker.key_up(key)

    def pointer_move(self, client_y, rect_top, rect_height):
        self.tracker.pointer_move(client_y, rect_top, rect_height)

    def toggle_pause(self):
        run = self.state.run
        run.paused = not run.paused
        logger.info("paused" if run.paused else "resumed")

    def reset(self):
        reset_scores(self.state, self.rng)
        logger.info("score reset")
        self.show_score()

    # loop

    def frame(self, timestamp):
        """One refresh callback. Returns the tick's events (empty when paused)."""
        run = self.state.run
        if run.last_time is None:
            run.last_time = timestamp
        run.last_delta = timestamp - run.last_time
        run.last_time = timestamp
        self.frames += 1

        if run.paused:
            return []
        events = update(self.state, self.rng)
        render(self.state, self.canvas)
        if Event.PLAYER_SCORED in events or Event.COMPUTER_SCORED in events:
            score = self.state.score
            logger.info("player %d - %d computer", score.player, score.computer)
            self.show_score()
        return events

    def run(self, frames=None, before_frame=None, after_frame=None):
        """Reschedule frame() forever, or ``frames`` times.

        ``before_frame`` is called first on every iteration (event pumping),
        ``after_frame`` after the frame callback (presenting).
        """
        n = 0
        while frames is None or n < frames:
            if before_frame is not None:
                before_frame(self)
            self.frame(self.timer.now())
            if after_frame is not None:
                after_frame(self)
            self.timer.wait()
            n += 1
