"""The game window: drawing, events and the promotion chooser."""

from __future__ import annotations

import pygame

from .geometry import BOARD_HEIGHT, BOARD_WIDTH, SQUARE_HEIGHT, WINDOW_HEIGHT, WINDOW_WIDTH, TeamColour
from .kinds import Bishop, Knight, Queen, Rook
from .piece_type import PieceType

_PROMOTION_KINDS: tuple[type[PieceType], ...] = (Rook, Knight, Bishop, Queen)
_PROMOTION_BACKGROUND = (0, 127, 0, 127)


class Window:
    """A square window the board is drawn into."""

    def __init__(self) -> None:
        pygame.init()
        self.surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Chess")
        self._open = True
        self._images: dict[str, pygame.Surface | None] = {}

    def draw_rect(self, position: tuple[int, int], size: tuple[int, int],
                  colour: tuple[int, int, int, int]) -> None:
        """Draw a filled, possibly translucent rectangle."""
        layer = pygame.Surface((int(size[0]), int(size[1])), pygame.SRCALPHA)
        layer.fill(colour)
        self.surface.blit(layer, (int(position[0]), int(position[1])))

    def _image(self, path: str) -> pygame.Surface | None:
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(path)
            except (pygame.error, OSError):
                self._images[path] = None
        return self._images[path]

    def draw_image(self, path: str, position: tuple[int, int]) -> None:
        """Draw the image stored at ``path``; a missing image draws nothing."""
        image = self._image(path)
        if image is not None:
            self.surface.blit(image, (int(position[0]), int(position[1])))

    def clear(self) -> None:
        self.surface.fill((0, 0, 0))

    def display(self) -> None:
        pygame.display.flip()

    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()

    def wait_event(self) -> pygame.event.Event:
        """Block until the next event arrives and return it."""
        return pygame.event.wait()

    def was_closed(self, event: pygame.event.Event) -> bool:
        """Close the window on a quit request or Escape; report whether it closed."""
        if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
            self.close()
            return True
        return False

    def choose_promotion(self, colour: TeamColour) -> type[PieceType]:
        """Show the four promotion pieces and wait for the player to click one."""
        height = SQUARE_HEIGHT + 20
        width = height * 4
        left = (BOARD_WIDTH - width) / 2
        top = (BOARD_HEIGHT - height) / 2

        self.draw_rect((left, top), (width, height), _PROMOTION_BACKGROUND)
        prefix = "w" if colour is TeamColour.WHITE else "b"
        for index, kind in enumerate(_PROMOTION_KINDS):
            self.draw_image(f"Images/Pieces/{prefix}{kind.letter}.png",
                            (left + width * index / 4, top))
        self.display()

        while True:
            event = self.wait_event()
            if event.type != pygame.MOUSEBUTTONDOWN:
                continue
            x, y = event.pos
            if not (left <= x < left + width and top <= y < top + height):
                continue
            offset = x - left
            if offset <= width / 4:
                return Rook
            if offset <= width / 2:
                return Knight
            if offset <= 3 * width / 4:
                return Bishop
            return Queen