"""Unit tests for particle_module: integration, offscreen culling and spawning."""

import math

import pytest

from particle_module import Particle, Window, advance, is_offscreen, move, normalize, spawn


class TestNormalize:

    def test_unit_length(self):
        x, y = normalize((3.0, 4.0))
        assert x == pytest.approx(0.6)
        assert y == pytest.approx(0.8)

    def test_zero_vector_is_zero(self):
        assert normalize((0.0, 0.0)) == (0.0, 0.0)

    def test_tiny_vector_stays_finite(self):
        x, y = normalize((1e-300, -1e-300))
        assert math.isfinite(x) and math.isfinite(y)


class TestMove:

    def test_speed_is_pixels_per_second(self, make_particle):
        particle = make_particle(10, 20, dx=3.0, dy=4.0)
        moved = move(particle, 1000, speed_px_per_sec=100)
        assert moved.position[0] == pytest.approx(70.0)
        assert moved.position[1] == pytest.approx(100.0)

    def test_direction_magnitude_does_not_matter(self, make_particle):
        slow = move(make_particle(0, 0, dx=0.01, dy=0.0), 500)
        fast = move(make_particle(0, 0, dx=1.0, dy=0.0), 500)
        assert slow.position == pytest.approx(fast.position)
        assert slow.position[0] == pytest.approx(50.0)

    def test_zero_direction_does_not_move(self, make_particle):
        particle = make_particle(5, 5, dx=0.0, dy=0.0)
        assert move(particle, 16).position == (5.0, 5.0)

    @pytest.mark.parametrize("delta_ms", [0, -16, -1000])
    def test_non_positive_delta_does_not_move(self, make_particle, delta_ms):
        particle = make_particle(5, 5, dx=1.0, dy=1.0)
        assert move(particle, delta_ms).position == (5.0, 5.0)


class TestIsOffscreen:

    @pytest.mark.parametrize("x, y", [
        (-153, 50),   # left
        (253, 50),    # right
        (50, -153),   # top
        (50, 253),    # bottom
    ])
    def test_outside_on_one_axis(self, x, y):
        window = Window(100.0, 100.0)
        particle = Particle((float(x), float(y)), (1.0, 0.0), 2.0)
        assert is_offscreen(window, particle, margin=150)

    @pytest.mark.parametrize("x, y", [
        (-151, 50),
        (251, 50),
        (50, -151),
        (50, 251),
        (50, 50),
    ])
    def test_within_margin_is_kept(self, x, y):
        window = Window(100.0, 100.0)
        particle = Particle((float(x), float(y)), (1.0, 0.0), 2.0)
        assert not is_offscreen(window, particle, margin=150)

    def test_zero_margin_uses_radius_only(self):
        window = Window(100.0, 100.0)
        assert is_offscreen(window, Particle((-2.5, 50.0), (1.0, 0.0), 2.0), margin=0)
        assert not is_offscreen(window, Particle((-1.5, 50.0), (1.0, 0.0), 2.0), margin=0)


class TestAdvance:

    def test_direction_and_radius_unchanged(self, window, spawner):
        particles = spawner.seed(window, 30)
        advanced = advance(window, 16, particles)
        assert len(advanced) == len(particles)
        for before, after in zip(particles, advanced):
            assert after.direction == before.direction
            assert after.radius == before.radius

    def test_zero_delta_keeps_positions(self, window, spawner):
        particles = spawner.seed(window, 30)
        advanced = advance(window, 0, particles)
        assert [p.position for p in advanced] == [p.position for p in particles]

    def test_removes_particle_far_outside(self, window, make_particle):
        inside = make_particle(600, 400)
        outside = make_particle(window.width + 2 + 150 + 1, 400)
        advanced = advance(window, 16, [inside, outside], margin=150)
        assert len(advanced) == 1
        assert advanced[0].radius == inside.radius

    def test_culls_before_moving(self, window, make_particle):
        # Outside before the step, heading back in: still culled
        returning = make_particle(-200, 400, dx=1.0, dy=0.0)
        assert advance(window, 10000, [returning], margin=150) == []

        # Inside before the step, leaving far: kept this step
        leaving = make_particle(1100, 400, dx=1.0, dy=0.0)
        advanced = advance(window, 10000, [leaving], margin=150)
        assert len(advanced) == 1
        assert advanced[0].position[0] == pytest.approx(2100.0)

    def test_does_not_mutate_input(self, window, make_particle):
        particles = [make_particle(600, 400), make_particle(-500, 400)]
        snapshot = list(particles)
        advance(window, 16, particles)
        assert particles == snapshot


class TestSpawn:

    def test_appends(self, make_particle):
        existing = [make_particle(1, 1)]
        new = [make_particle(2, 2), make_particle(2, 2)]
        result = spawn(existing, new)
        assert result == existing + new
        assert len(existing) == 1
