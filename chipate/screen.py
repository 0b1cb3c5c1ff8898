"""The 64x32 display and the window it is shown in."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import pygame

WIDTH = 64
HEIGHT = 32
TITLE = "Chip-8 Emulator"
SCALE = 8


class Window(Protocol):
    def is_open(self) -> bool: ...

    def is_escape_down(self) -> bool: ...

    def update_with_buffer(self, frame: list[int], width: int, height: int) -> None: ...


class PygameWindow:
    """A fixed-size window that shows a frame of 0xRRGGBB pixels scaled up."""

    def __init__(
        self,
        title: str = TITLE,
        width: int = WIDTH,
        height: int = HEIGHT,
        scale: int = SCALE,
        fps: int = 60,
    ) -> None:
        pygame.display.init()
        self._display = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._fps = fps
        self._open = True

    def is_open(self) -> bool:
        """Whether the window is still open; a close request shuts it."""
        if not self._open:
            return False
        pygame.event.pump()
        if pygame.event.get(pygame.QUIT):
            self._open = False
        return self._open

    def is_escape_down(self) -> bool:
        """Whether the Escape key is held."""
        if not self._open:
            return False
        pygame.event.pump()
        return bool(pygame.key.get_pressed()[pygame.K_ESCAPE])

    def update_with_buffer(self, frame: list[int], width: int, height: int) -> None:
        """Draw ``frame`` (row-major, ``width`` x ``height``) and present it."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid buffer size {width}x{height}")
        if len(frame) < width * height:
            raise ValueError(
                f"buffer holds {len(frame)} pixels, {width * height} needed"
            )
        if not self._open:
            raise RuntimeError("window is closed")
        surface = pygame.Surface((width, height))
        for index, color in enumerate(frame[: width * height]):
            y, x = divmod(index, width)
            surface.set_at(
                (x, y),
                pygame.Color((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF),
            )
        scaled = pygame.transform.scale(surface, self._display.get_size())
        self._display.blit(scaled, (0, 0))
        pygame.display.flip()
        self._clock.tick(self._fps)

    def close(self) -> None:
        """Close the window."""
        if self._open:
            self._open = False
            pygame.display.quit()


@dataclass
class Screen:
    """A frame of WIDTH x HEIGHT pixels, optionally shown in a window."""

    window: Window | None = None
    frame: list[int] = field(default_factory=lambda: [0] * (WIDTH * HEIGHT))
    pixel_on: int = 0xC6C5B9
    pixel_off: int = 0x62929E

    def dev_pattern(self) -> None:
        """Fill the frame with an XOR test pattern."""
        self.frame = [
            ((index % WIDTH) ^ (index // WIDTH)) << 8 for index in range(len(self.frame))
        ]

    def default_pattern(self) -> None:
        """Fill the frame with alternating on and off pixels."""
        self.frame = [
            self.pixel_on if index % 2 == 0 else self.pixel_off
            for index in range(len(self.frame))
        ]

    def blackout(self) -> None:
        """Turn every pixel off."""
        self.color(self.pixel_off)

    def color(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.frame = [color] * len(self.frame)

    def _require_window(self) -> Window:
        if self.window is None:
            raise RuntimeError("screen has no window")
        return self.window

    def is_running(self) -> bool:
        """Whether the window is open and Escape is not held."""
        window = self._require_window()
        return window.is_open() and not window.is_escape_down()

    def update(self) -> None:
        """Show the current frame in the window."""
        self._require_window().update_with_buffer(self.frame, WIDTH, HEIGHT)