# renderer/preview.py
import logging
import numpy as np
import pygame

logger = logging.getLogger(__name__)

MAX_WINDOW_SIZE = (1280, 720)

def _window_size(width: int, height: int):
    scale = min(MAX_WINDOW_SIZE[0] / width, MAX_WINDOW_SIZE[1] / height, 1.0)
    return max(1, int(width * scale)), max(1, int(height * scale))

def make_surface(rgb8) -> "pygame.Surface":
    """pygame surface for a (height, width, 3) uint8 image."""
    # surfarray indexes pixels as [x, y]
    return pygame.surfarray.make_surface(np.ascontiguousarray(np.transpose(rgb8, (1, 0, 2))))

def show_image(rgb8, title: str = "Path Tracer", wait: bool = True):
    """
    Displays a finished render in a pygame window, scaled down to fit.
    With wait=True blocks until the window is closed or Escape is pressed.
    """
    height, width = rgb8.shape[:2]
    window_size = _window_size(width, height)

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)
        frame_surface = make_surface(rgb8)
        if window_size != (width, height):
            frame_surface = pygame.transform.smoothscale(frame_surface, window_size)
        screen.blit(frame_surface, (0, 0))
        pygame.display.flip()
        logger.info("Preview window open (%dx%d)", *window_size)

        clock = pygame.time.Clock()
        running = wait
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
