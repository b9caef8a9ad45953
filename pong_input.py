"""Keyboard and pointer handling for the player paddle.

Key handlers only flip level-triggered flags on ``InputState``; the physics
step reads them every tick. Pointer moves latch a target position that the
next tick applies before the key flags.
"""
import enum
import logging

from pong_config import DOWN_KEYS, PAUSE_KEYS, RESET_KEYS, UP_KEYS
from pong_geometry import clamp

logger = logging.getLogger(__name__)


class Control(enum.Enum):
    PAUSE = "pause"
    RESET = "reset"


def _normalize(key):
    return key.lower() if isinstance(key, str) else None


class InputTracker:
    def __init__(self, state):
        self.state = state

    def key_down(self, key):
        """Handle a key press. Returns a Control for pause/reset keys, else None."""
        k = _normalize(key)
        inp = self.state.input
        if k in UP_KEYS:
            inp.up = True
        elif k in DOWN_KEYS:
            inp.down = True
        elif k in PAUSE_KEYS:
            return Control.PAUSE
        elif k in RESET_KEYS:
            return Control.RESET
        else:
            logger.debug("ignoring key %r", key)
        return None

    def key_up(self, key):
        k = _normalize(key)
        if k in UP_KEYS:
            self.state.input.up = False
        elif k in DOWN_KEYS:
            self.state.input.down = False

    def pointer_move(self, client_y, rect_top, rect_height):
        """Map a pointer position in display coordinates onto the surface.

        ``rect_top``/``rect_height`` describe where the surface is shown; the
        ratio to the logical height undoes any scaling of the display.
        """
        if rect_height <= 0:
            return
        scale_y = self.state.height / rect_height
        mouse_y = (client_y - rect_top) * scale_y
        paddle = self.state.player
        self.state.input.pointer_y = clamp(mouse_y - paddle.height / 2, 0, self.state.height - paddle.height)
