import os
import sys
from concurrent.futures import ThreadPoolExecutor

import pygame

from config_module import (
    ASSET_PATH,
    FPS,
    INITIAL_HEIGHT,
    INITIAL_WIDTH,
    LOGO_IMAGE,
    MAP_IMAGE,
    WINDOW_CAPTION,
    FieldConfig,
)
from field_state_module import Tick, create_model, handle_event, translate_pygame_event
from particle_module import Window
from renderer_module import build_draw_ops, draw
from spawn_module import SpawnGenerator
from texture_module import load_texture_async


def main():
    pygame.init()
    screen = pygame.display.set_mode((INITIAL_WIDTH, INITIAL_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_CAPTION)
    clock = pygame.time.Clock()

    config = FieldConfig()
    spawner = SpawnGenerator(min_radius=config.min_radius, max_radius=config.max_radius)
    print(f"Starting particle field with {config}")

    # Images load on one worker; the loop renders without them until they are ready
    executor = ThreadPoolExecutor(max_workers=1)
    logo = load_texture_async(os.path.join(ASSET_PATH, LOGO_IMAGE), executor)
    map_image = load_texture_async(os.path.join(ASSET_PATH, MAP_IMAGE), executor)
    executor.shutdown(wait=False)

    width, height = screen.get_size()
    model = create_model(Window(float(width), float(height)), spawner, config, logo, map_image)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            field_event = translate_pygame_event(event)
            if field_event is not None:
                model = handle_event(model, field_event, spawner, config)

        delta_ms = clock.tick(FPS)
        model = handle_event(model, Tick(delta_ms), spawner, config)

        screen = pygame.display.get_surface()
        draw(screen, build_draw_ops(model, config))
        pygame.display.flip()


if __name__ == '__main__':
    main()
