import math
from collections import namedtuple

from config_module import OFFSCREEN_MARGIN, SPEED_PX_PER_SEC

# position and direction are (x, y) float tuples; direction is not normalized
Particle = namedtuple("Particle", ["position", "direction", "radius"])
Window = namedtuple("Window", ["width", "height"])


def normalize(vector):
    """Returns the unit vector of (x, y), or (0, 0) for a zero-length vector."""
    length = math.hypot(vector[0], vector[1])
    if length == 0 or not math.isfinite(length):
        return (0.0, 0.0)
    return (vector[0] / length, vector[1] / length)


def is_offscreen(window, particle, margin=OFFSCREEN_MARGIN):
    x, y = particle.position
    reach = particle.radius + margin
    return (x + reach < 0 or
            x - reach > window.width or
            y + reach < 0 or
            y - reach > window.height)


def move(particle, delta_ms, speed_px_per_sec=SPEED_PX_PER_SEC):
    """Returns a new Particle displaced along its direction for delta_ms milliseconds."""
    if delta_ms <= 0:
        return particle
    nx, ny = normalize(particle.direction)
    distance = speed_px_per_sec / 1000.0 * delta_ms
    x, y = particle.position
    return particle._replace(position=(x + nx * distance, y + ny * distance))


def advance(window, delta_ms, particles, speed_px_per_sec=SPEED_PX_PER_SEC, margin=OFFSCREEN_MARGIN):
    """
    Culls particles that have left the window (plus margin), then moves the survivors.
    Culling looks at the positions from before this step. The input list is left untouched.
    """
    return [move(particle, delta_ms, speed_px_per_sec)
            for particle in particles
            if not is_offscreen(window, particle, margin)]


def spawn(particles, new_particles):
    return list(particles) + list(new_particles)
