import enum
import logging
import math

from pong_geometry import rect_circle_colliding

logger = logging.getLogger(__name__)


class Event(enum.Enum):
    WALL = "wall"
    PLAYER_HIT = "player_hit"
    COMPUTER_HIT = "computer_hit"
    PLAYER_SCORED = "player_scored"
    COMPUTER_SCORED = "computer_scored"


LEFT, RIGHT = -1, 1


def serve(state, rng, direction=None):
    """Put the ball back in the center at base speed.

    ``direction`` is LEFT or RIGHT; None picks one at random. The angle is
    uniform within +/- config.serve_angle.
    """
    cfg = state.config
    ball = state.ball
    ball.x = state.width / 2
    ball.y = state.height / 2
    ball.speed = cfg.ball_speed
    angle = rng.uniform(-cfg.serve_angle, cfg.serve_angle)
    if direction is None:
        direction = RIGHT if rng.random() > 0.5 else LEFT
    ball.dx = direction * ball.speed * math.cos(angle)
    ball.dy = ball.speed * math.sin(angle)
    logger.debug("serve %s at %.1f deg", "right" if direction == RIGHT else "left", math.degrees(angle))


def reset_scores(state, rng):
    state.score.reset()
    serve(state, rng)


def apply_player_input(state):
    paddle = state.player
    inp = state.input
    if inp.pointer_y is not None:
        paddle.y = inp.pointer_y
        inp.pointer_y = None
    paddle.dy = int(inp.down) - int(inp.up)
    paddle.move(paddle.dy * paddle.speed, state.height)


def opponent_step(state):
    """Chase the ball's y with a fixed speed, holding still inside the dead-zone."""
    paddle = state.computer
    zone = state.config.dead_zone
    ball_y = state.ball.y
    if paddle.center_y < ball_y - zone:
        paddle.dy = 1
    elif paddle.center_y > ball_y + zone:
        paddle.dy = -1
    else:
        paddle.dy = 0
    paddle.move(paddle.dy * paddle.speed, state.height)


def bounce_walls(state):
    ball = state.ball
    if ball.y - ball.radius <= 0:
        ball.y = ball.radius
        ball.dy = -ball.dy
        return True
    if ball.y + ball.radius >= state.height:
        ball.y = state.height - ball.radius
        ball.dy = -ball.dy
        return True
    return False


def reflect_ball_from_paddle(state, paddle, direction):
    # where on the paddle the ball struck, roughly -1 (bottom) .. 1 (top)
    cfg = state.config
    ball = state.ball
    rel = (paddle.center_y - ball.y) / (paddle.height / 2)
    angle = rel * cfg.max_bounce_angle
    ball.speed = min(cfg.max_ball_speed, ball.speed + cfg.speed_increase)
    ball.dx = direction * abs(ball.speed * math.cos(angle))
    ball.dy = -ball.speed * math.sin(angle)
    logger.debug("paddle hit: speed %.1f angle %.1f deg", ball.speed, math.degrees(angle))


def collide_paddles(state):
    ball = state.ball
    if ball.dx < 0 and rect_circle_colliding(state.player, ball):
        reflect_ball_from_paddle(state, state.player, RIGHT)
        return Event.PLAYER_HIT
    if ball.dx > 0 and rect_circle_colliding(state.computer, ball):
        reflect_ball_from_paddle(state, state.computer, LEFT)
        return Event.COMPUTER_HIT
    return None


def check_score(state, rng):
    ball = state.ball
    if ball.x - ball.radius <= 0:
        state.score.computer += 1
        serve(state, rng, RIGHT)
        return Event.COMPUTER_SCORED
    if ball.x + ball.radius >= state.width:
        state.score.player += 1
        serve(state, rng, LEFT)
        return Event.PLAYER_SCORED
    return None


def update(state, rng):
    """Advance the game by one tick and return the events that happened.

    Movement is per tick, not scaled by elapsed time.
    """
    events = []
    apply_player_input(state)
    opponent_step(state)

    ball = state.ball
    ball.x += ball.dx
    ball.y += ball.dy

    if bounce_walls(state):
        events.append(Event.WALL)
    for ev in (collide_paddles(state), check_score(state, rng)):
        if ev is not None:
            events.append(ev)
    state.run.ticks += 1
    return events

