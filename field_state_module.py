from collections import namedtuple

import pygame

from particle_module import Window, advance, spawn

FieldModel = namedtuple("FieldModel", ["particles", "window", "logo", "map_image"])

# --- Events ---
Tick = namedtuple("Tick", ["delta_ms"])
Resize = namedtuple("Resize", ["width", "height"])
PointerDown = namedtuple("PointerDown", ["x", "y"])

LEFT_MOUSE_BUTTON = 1


def create_model(window, spawner, config, logo=None, map_image=None):
    """Builds the starting model with the field already filled to the minimum population."""
    return FieldModel(particles=spawner.seed(window, config.min_particles),
                      window=window,
                      logo=logo,
                      map_image=map_image)


def handle_event(model, event, spawner, config):
    """Applies one event to the model and returns the new model."""
    if isinstance(event, Tick):
        particles = advance(model.window, event.delta_ms, model.particles,
                            speed_px_per_sec=config.speed_px_per_sec,
                            margin=config.offscreen_margin)
        particles = spawn(particles, spawner.replenish(model.window, particles, config.min_particles))
        return model._replace(particles=particles)
    if isinstance(event, Resize):
        return model._replace(window=Window(float(event.width), float(event.height)))
    if isinstance(event, PointerDown):
        burst = spawner.burst(event.x, event.y, config.spawn_burst_size)
        return model._replace(particles=spawn(model.particles, burst))
    raise ValueError(f"Unknown field event: {event!r}")


def translate_pygame_event(event):
    """Maps a pygame event to a field event, or None when the field does not care about it."""
    if event.type == pygame.VIDEORESIZE:
        return Resize(event.w, event.h)
    if event.type == pygame.WINDOWRESIZED:
        return Resize(event.x, event.y)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_MOUSE_BUTTON:
        return PointerDown(event.pos[0], event.pos[1])
    return None
