"""The game window: a pygame display, keyboard and mouse state, and overlay text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import pygame

MOUSE_BUTTON = 0

Key = Union[int, str]


@dataclass
class Text:
    """A line of overlay text with its position, height and 0..255 RGB colour."""

    x: float
    y: float
    h: float
    r: float
    g: float
    b: float
    txt: str = ""


def _normalize_key(key: Key) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character key, got {key!r}")
        return ord(key.upper())
    return key


class KeyState:
    """Which keys are held down; letters are tracked by their upper-case code."""

    def __init__(self):
        self._held: set[int] = set()

    def press(self, key: Key) -> None:
        self._held.add(_normalize_key(key))

    def release(self, key: Key) -> None:
        self._held.discard(_normalize_key(key))

    def is_pressed(self, key: Key) -> bool:
        return _normalize_key(key) in self._held


def _event_key(code: int) -> int:
    if ord("a") <= code <= ord("z"):
        return code - ord("a") + ord("A")
    return code


class Window:
    """A display window that tracks input and paints queued overlay text."""

    def __init__(self, width: int, height: int, title: str):
        pygame.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.title = title
        self.width, self.height = self.surface.get_size()
        self.keys = KeyState()
        self.texts: list[Text] = []
        self.redraw = False
        self.closed = False

    def process_event(self, event: pygame.event.Event) -> None:
        """Apply one pygame event to the key state."""
        if event.type == pygame.KEYDOWN:
            self.keys.press(_event_key(event.key))
        elif event.type == pygame.KEYUP:
            self.keys.release(_event_key(event.key))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.keys.press(MOUSE_BUTTON)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.keys.release(MOUSE_BUTTON)
        elif event.type == pygame.QUIT:
            self.closed = True

    def update(self) -> None:
        """Handle pending events and paint overlay text if it changed."""
        for event in pygame.event.get():
            self.process_event(event)
        if self.redraw:
            self._paint_texts()
            self.redraw = False

    def add_text(self, text: Text) -> None:
        self.texts.append(text)
        self.redraw = True

    def _paint_texts(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        for text in self.texts:
            font = pygame.font.SysFont("arial", max(1, int(text.h)))
            color = tuple(max(0, min(255, int(c))) for c in (text.r, text.g, text.b))
            rendered = font.render(text.txt, True, color)
            self.surface.blit(rendered, (text.x, text.y))