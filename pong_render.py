"""Drawing of the court, paddles and ball.

``render`` only reads the game state. It draws through a small canvas
interface so the same code paints a pygame surface or a numpy frame:

    clear()
    fill_rect(x, y, w, h, color)
    fill_circle(x, y, r, color)
    stroke_circle(x, y, r, color)
"""
import numpy as np

from pong_config import (BALL_COLOR, BALL_OUTLINE, BG, COMPUTER_COLOR, NET_COLOR,
                         NET_SEGMENT, NET_WIDTH, PLAYER_COLOR)


def draw_net(canvas, width, height):
    x = width / 2 - NET_WIDTH / 2
    y = 0.0
    while y < height:
        canvas.fill_rect(x, y, NET_WIDTH, NET_SEGMENT, NET_COLOR)
        y += NET_SEGMENT * 1.5


def render(state, canvas):
    w, h = state.width, state.height
    canvas.clear()
    canvas.fill_rect(0, 0, w, h, BG)
    draw_net(canvas, w, h)

    p, c = state.player, state.computer
    canvas.fill_rect(p.x, p.y, p.width, p.height, PLAYER_COLOR)
    canvas.fill_rect(c.x, c.y, c.width, c.height, COMPUTER_COLOR)

    ball = state.ball
    canvas.fill_circle(ball.x, ball.y, ball.radius, BALL_COLOR)
    canvas.stroke_circle(ball.x, ball.y, ball.radius, BALL_OUTLINE)


class ArrayCanvas:
    """Off-screen canvas backed by an (H, W, 3) uint8 array."""

    def __init__(self, width, height):
        self.W, self.H = width, height
        self.img = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self):
        self.img[:] = 0

    def fill_rect(self, x, y, w, h, color):
        x0, y0 = max(0, int(round(x))), max(0, int(round(y)))
        x1, y1 = min(self.W, int(round(x + w))), min(self.H, int(round(y + h)))
        if x1 > x0 and y1 > y0:
            self.img[y0:y1, x0:x1] = color

    def _circle(self, x, y, r):
        # squared distances of the pixel centers inside the circle's bounding box
        x0, y0 = max(0, int(x - r)), max(0, int(y - r))
        x1, y1 = min(self.W, int(x + r) + 1), min(self.H, int(y + r) + 1)
        if x1 <= x0 or y1 <= y0:
            return None, None
        ys, xs = np.mgrid[y0:y1, x0:x1] + 0.5
        return self.img[y0:y1, x0:x1], (xs - x) ** 2 + (ys - y) ** 2

    def fill_circle(self, x, y, r, color):
        region, d2 = self._circle(x, y, r)
        if region is not None:
            region[d2 <= r * r] = color

    def stroke_circle(self, x, y, r, color, width=1):
        region, d2 = self._circle(x, y, r)
        if region is not None:
            region[(d2 <= r * r) & (d2 > (r - width) ** 2)] = color

    def to_rgb(self, scale=1):
        img = self.img.copy()
        if scale != 1:
            img = np.repeat(np.repeat(img, scale, axis=0), scale, axis=1)
        return img
