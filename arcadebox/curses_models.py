"""Terminal-side drawable objects, music and their factories."""

from __future__ import annotations

from dataclasses import dataclass, field

from arcadebox.events import Color
from arcadebox.interfaces import (
    Music,
    MusicFactory,
    Rect,
    RectFactory,
    Sprite,
    SpriteFactory,
    Text,
    TextFactory,
)
from arcadebox.vector import Vector

DEFAULT_CHARACTER = "#"
DEFAULT_FONT = "default"
DEFAULT_FONT_SIZE = 12


def _white() -> Color:
    return Color(255, 255, 255, 255)


def _one() -> Vector:
    return Vector(1, 1)


@dataclass
class CursesRect(Rect):
    """A rectangle drawn with box characters."""

    size: Vector = field(default_factory=_one)
    pos: Vector = field(default_factory=Vector)
    color: Color = field(default_factory=_white)
    outline_color: Color = field(default_factory=_white)
    thickness: int = 0


@dataclass
class CursesSprite(Sprite):
    """A sprite drawn as a single character."""

    path: str = ""
    size: Vector = field(default_factory=_one)
    pos: Vector = field(default_factory=Vector)
    rect_pos: Vector = field(default_factory=Vector)
    rect_size: Vector = field(default_factory=_one)
    scale: Vector = field(default_factory=_one)
    origin: Vector = field(default_factory=Vector)
    rotation: float = 0.0
    color: Color = field(default_factory=_white)
    character: str = DEFAULT_CHARACTER

    def set_path(self, path: str) -> None:
        """Set the source path; a one-character path becomes the drawn character."""
        self.path = path
        self.character = path if len(path) == 1 else DEFAULT_CHARACTER


@dataclass
class CursesText(Text):
    """A text drawn in the terminal."""

    text: str = ""
    font: str = DEFAULT_FONT
    font_size: int = DEFAULT_FONT_SIZE
    color: Color = field(default_factory=_white)
    pos: Vector = field(default_factory=Vector)


class CursesMusic(Music):
    """Music for a terminal: remembers its settings but plays nothing."""

    def __init__(self) -> None:
        self.looping = False
        self.position = 0.0

    def reset(self) -> None:
        """Rewind the track to its start."""
        self.position = 0.0

    def loop(self, is_loop: bool) -> None:
        """Record whether the track should repeat."""
        self.looping = is_loop


class CursesRectFactory(RectFactory):
    """Creates terminal rectangles."""

    def create(self) -> CursesRect:
        """Return a new rectangle."""
        return CursesRect()


class CursesSpriteFactory(SpriteFactory):
    """Creates terminal sprites and remembers loaded texture paths."""

    def __init__(self) -> None:
        self.loaded: set[str] = set()

    def load(self, path: str) -> None:
        """Record a texture path."""
        self.loaded.add(path)

    def create(self) -> CursesSprite:
        """Return a new sprite."""
        return CursesSprite()


class CursesTextFactory(TextFactory):
    """Creates terminal texts using the last loaded font."""

    def __init__(self) -> None:
        self.font_path = ""

    def load(self, path: str) -> None:
        """Use this font for texts created from now on."""
        self.font_path = path

    def create(self) -> CursesText:
        """Return a new text, in the loaded font if one was loaded."""
        text = CursesText()
        if self.font_path:
            text.font = self.font_path
        return text


class CursesMusicFactory(MusicFactory):
    """Creates terminal music and remembers loaded file paths."""

    def __init__(self) -> None:
        self.loaded: set[str] = set()

    def load(self, path: str) -> None:
        """Record a music path."""
        self.loaded.add(path)

    def create(self) -> CursesMusic:
        """Return a new music track."""
        return CursesMusic()