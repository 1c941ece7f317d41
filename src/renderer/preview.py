# renderer/preview.py
import numpy as np
import pygame


def make_surface(pixels: np.ndarray) -> "pygame.Surface":
    """
    Wraps a (height, width, 3) image in a pygame surface. pygame indexes
    pixels as (x, y), so the array is transposed first.
    """
    return pygame.surfarray.make_surface(np.ascontiguousarray(pixels.swapaxes(0, 1)))


def show(pixels: np.ndarray, title: str = "Path Tracer") -> None:
    """Displays the image in a window until it is closed or Escape is pressed."""
    height, width, _ = pixels.shape
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        screen.blit(make_surface(pixels), (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
