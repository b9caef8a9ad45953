def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def rect_circle_colliding(rect, circle):
    """True if the circle (x, y, radius) overlaps the rect (x, y, width, height).

    Uses the closest point of the rectangle to the circle's center.
    """
    closest_x = clamp(circle.x, rect.x, rect.x + rect.width)
    closest_y = clamp(circle.y, rect.y, rect.y + rect.height)
    dx = circle.x - closest_x
    dy = circle.y - closest_y
    return dx * dx + dy * dy <= circle.radius * circle.radius
