import random

from config_module import MIN_RADIUS, MAX_RADIUS, SPAWN_BURST_SIZE
from particle_module import Particle


class SpawnGenerator:
    """
    Produces randomized particles. All randomness comes from the injected random source,
    so a generator built with a fixed seed always yields the same particles.
    """
    def __init__(self, rng=None, min_radius=MIN_RADIUS, max_radius=MAX_RADIUS):
        self.rng = rng if rng is not None else random.Random()
        self.min_radius = min_radius
        self.max_radius = max_radius

    @classmethod
    def seeded(cls, seed, **kwargs):
        return cls(random.Random(seed), **kwargs)

    def _direction(self):
        return (self.rng.uniform(-1, 1), self.rng.uniform(-1, 1))

    def _radius(self):
        return self.rng.uniform(self.min_radius, self.max_radius)

    def _particle(self, position):
        return Particle(position, self._direction(), self._radius())

    def _edge_position(self, window):
        if self.rng.random() < 0.5:
            # Left or right edge
            x = 0.0 if self.rng.random() < 0.5 else float(window.width)
            y = self.rng.uniform(0, window.height)
        else:
            # Top or bottom edge
            x = self.rng.uniform(0, window.width)
            y = 0.0 if self.rng.random() < 0.5 else float(window.height)
        return (x, y)

    def seed(self, window, count):
        """Particles scattered over the whole window, used to fill the field at startup."""
        return [self._particle((self.rng.uniform(0, window.width), self.rng.uniform(0, window.height)))
                for _ in range(count)]

    def edge(self, window, count):
        return [self._particle(self._edge_position(window)) for _ in range(count)]

    def burst(self, x, y, count=SPAWN_BURST_SIZE):
        return [self._particle((float(x), float(y))) for _ in range(count)]

    def replenish(self, window, particles, minimum):
        """Edge particles making up the shortfall below minimum. Empty when the field is full."""
        missing = minimum - len(particles)
        if missing <= 0:
            return []
        return self.edge(window, missing)
