"""Desktop preview of the greeting: the LED matrix drawn as a pygame window."""

import pygame

from greetmatrix.canvas import Canvas


class Simulator:
    """Window mirroring a greeting Canvas, each LED drawn as a `scale` x `scale` block.

    Escape or closing the window ends the greeting.
    """

    def __init__(self, canvas: Canvas, scale: int = 10, title: str = "Greeting Matrix"):
        self.canvas = canvas
        self.scale = scale
        self.width = canvas.width * scale
        self.height = canvas.height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        # One pixel per LED; scaled up on every flip
        self.surface = pygame.Surface((canvas.width, canvas.height))

    def update(self) -> bool:
        """Show the current greeting frame. False once the viewer has quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        # surfarray indexes (x, y); the canvas stores (y, x)
        pygame.surfarray.blit_array(self.surface, self.canvas.pixels.swapaxes(0, 1))

        pygame.transform.scale(self.surface, (self.width, self.height), self.screen)
        pygame.display.flip()
        return True

    def tick(self, fps: int = 30) -> None:
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
