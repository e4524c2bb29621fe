"""The terminal graphical library: a curses display and its factories."""

from __future__ import annotations

from typing import Optional

from arcadebox.curses_display import CursesDisplay
from arcadebox.curses_models import (
    CursesMusicFactory,
    CursesRectFactory,
    CursesSpriteFactory,
    CursesTextFactory,
)
from arcadebox.events import LibraryType
from arcadebox.interfaces import Library

NAME = "NCurses"
LIBRARY_TYPE = LibraryType.GRAPHIC


class CursesLibrary(Library):
    """Draws in the terminal; opens the terminal unless a display is given."""

    def __init__(self, display: Optional[CursesDisplay] = None) -> None:
        self._display = display if display is not None else CursesDisplay()
        self._rect_factory = CursesRectFactory()
        self._sprite_factory = CursesSpriteFactory()
        self._music_factory = CursesMusicFactory()
        self._text_factory = CursesTextFactory()

    @property
    def display(self) -> CursesDisplay:
        """The terminal display."""
        return self._display

    @property
    def rect_factory(self) -> CursesRectFactory:
        """Factory for terminal rectangles."""
        return self._rect_factory

    @property
    def sprite_factory(self) -> CursesSpriteFactory:
        """Factory for terminal sprites."""
        return self._sprite_factory

    @property
    def music_factory(self) -> CursesMusicFactory:
        """Factory for terminal music."""
        return self._music_factory

    @property
    def text_factory(self) -> CursesTextFactory:
        """Factory for terminal texts."""
        return self._text_factory


def entry_point() -> CursesLibrary:
    """Open the terminal and return a library drawing in it."""
    return CursesLibrary()