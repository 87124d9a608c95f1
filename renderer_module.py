import numpy as np
import pygame
from scipy.spatial import cKDTree

from config_module import (
    CONNECTION_FLAT_ALPHA,
    CONNECTION_MAX_ALPHA,
    CONNECTION_WIDTH,
    OPACITY_DISTANCE,
)

# --- Draw operation kinds ---
FILL = "fill"
LINE = "line"
IMAGE = "image"
CIRCLE = "circle"


def connection_pairs(particles, threshold):
    """
    Index pairs (i, j), i < j, of particles whose centres are at most threshold apart,
    with their distance. Sorted, so the same particles always give the same list.
    """
    if len(particles) < 2:
        return []
    positions = np.array([p.position for p in particles], dtype=float)
    tree = cKDTree(positions)
    pairs = sorted(tree.query_pairs(r=threshold))
    result = []
    for i, j in pairs:
        distance = float(np.linalg.norm(positions[i] - positions[j]))
        result.append((i, j, distance))
    return result


def connection_alpha(distance, threshold, mode):
    if mode == OPACITY_DISTANCE:
        return int(round(CONNECTION_MAX_ALPHA * max(0.0, 1.0 - distance / threshold)))
    return CONNECTION_FLAT_ALPHA


def fit_to_width(image_size, window_width):
    """Scales (w, h) to fit the window width, never above natural size."""
    width, height = image_size
    if width <= 0 or height <= 0:
        return (0, 0)
    scale = min(1.0, window_width / width)
    return (width * scale, height * scale)


def _centered_rect(image, window):
    width, height = fit_to_width(image.get_size(), window.width)
    x = (window.width - width) / 2
    y = (window.height - height) / 2
    return (x, y, width, height)


def build_draw_ops(model, config):
    """Returns the back-to-front draw operations for the model. Never mutates the model."""
    window = model.window
    ops = [(FILL, config.background_color)]

    for i, j, distance in connection_pairs(model.particles, config.connection_threshold):
        alpha = connection_alpha(distance, config.connection_threshold, config.connection_opacity_mode)
        if alpha <= 0:
            continue
        color = tuple(config.connection_color) + (alpha,)
        ops.append((LINE, color, model.particles[i].position, model.particles[j].position))

    map_image = model.map_image.get() if model.map_image is not None else None
    if map_image is not None:
        ops.append((IMAGE, map_image, _centered_rect(map_image, window)))

    for particle in model.particles:
        ops.append((CIRCLE, config.particle_color, particle.position, particle.radius))

    logo = model.logo.get() if model.logo is not None else None
    if logo is not None:
        ops.append((IMAGE, logo, _centered_rect(logo, window)))

    return ops


def draw(screen, ops):
    """Paints draw operations onto a pygame surface."""
    overlay = None
    for op in ops:
        kind = op[0]
        if kind != LINE and overlay is not None:
            screen.blit(overlay, (0, 0))
            overlay = None

        if kind == FILL:
            screen.fill(op[1])
        elif kind == LINE:
            # Lines share one alpha overlay so their opacity blends with what is below
            if overlay is None:
                overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            pygame.draw.line(overlay, op[1], op[2], op[3], CONNECTION_WIDTH)
        elif kind == IMAGE:
            image, (x, y, width, height) = op[1], op[2]
            size = (max(1, int(round(width))), max(1, int(round(height))))
            if size != image.get_size():
                image = pygame.transform.scale(image, size)
            screen.blit(image, (int(round(x)), int(round(y))))
        elif kind == CIRCLE:
            x, y = op[2]
            pygame.draw.circle(screen, op[1], (int(round(x)), int(round(y))), max(1, int(round(op[3]))))
        else:
            raise ValueError(f"Unknown draw operation: {kind!r}")

    if overlay is not None:
        screen.blit(overlay, (0, 0))
