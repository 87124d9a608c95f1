import os
from concurrent.futures import Future

import pygame


class TextureSlot:
    """
    Holds an image that is loaded in the background. get() never waits: it returns the
    surface once loading succeeded and None while pending or after a failure.
    """
    def __init__(self, future, name=""):
        self.future = future
        self.name = name
        self._surface = None
        self._failed = False

    @classmethod
    def resolved(cls, surface, name=""):
        future = Future()
        future.set_result(surface)
        return cls(future, name)

    @classmethod
    def absent(cls, name=""):
        future = Future()
        future.set_result(None)
        return cls(future, name)

    def is_ready(self):
        return self.get() is not None

    def get(self):
        if self._surface is not None:
            return self._surface
        if self._failed or not self.future.done():
            return None

        error = self.future.exception()
        if error is not None:
            self._failed = True
            print(f"Unable to load texture {self.name}: {error}")
            return None

        surface = self.future.result()
        if surface is None:
            self._failed = True
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._surface = surface
        print(f"Texture {self.name} loaded ({surface.get_width()}x{surface.get_height()}).")
        return self._surface


def load_texture_async(path, executor):
    """Starts loading an image on the executor and returns its TextureSlot right away."""
    return TextureSlot(executor.submit(pygame.image.load, path), os.path.basename(path))
