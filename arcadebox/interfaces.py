"""Abstract interfaces between games, graphical libraries and the core."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar, Union

from arcadebox.events import Color, Event
from arcadebox.vector import Vector


class Rect(ABC):
    """A drawable rectangle."""

    size: Vector
    pos: Vector
    color: Color
    outline_color: Color
    thickness: int


class Sprite(ABC):
    """A drawable image region."""

    size: Vector
    pos: Vector
    rect_pos: Vector
    rect_size: Vector
    rotation: float
    scale: Vector
    origin: Vector
    color: Color


class Text(ABC):
    """A drawable piece of text."""

    text: str
    font: str
    font_size: int
    color: Color
    pos: Vector


class Music(ABC):
    """A playable music track."""

    @abstractmethod
    def reset(self) -> None:
        """Rewind the track to its start."""

    @abstractmethod
    def loop(self, is_loop: bool) -> None:
        """Set whether the track repeats."""


T = TypeVar("T")


class Factory(ABC, Generic[T]):
    """Creates new drawable or playable objects."""

    @abstractmethod
    def create(self) -> T:
        """Return a new object."""


class RectFactory(Factory[Rect]):
    """Creates rectangles."""


class SpriteFactory(Factory[Sprite]):
    """Creates sprites from loaded textures."""

    @abstractmethod
    def load(self, path: str) -> None:
        """Load a texture from a path."""


class MusicFactory(Factory[Music]):
    """Creates music tracks from loaded files."""

    @abstractmethod
    def load(self, path: str) -> None:
        """Load a music file from a path."""


class TextFactory(Factory[Text]):
    """Creates texts using a loaded font."""

    @abstractmethod
    def load(self, path: str) -> None:
        """Load a font from a path."""


Drawable = Union[Rect, Sprite, Text]


class Display(ABC):
    """A window or terminal that draws objects and yields input events."""

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Set the window title."""

    @abstractmethod
    def set_size(self, size: Vector) -> None:
        """Resize the window."""

    @abstractmethod
    def close_window(self) -> None:
        """Close the window."""

    @abstractmethod
    def draw(self, item: Drawable) -> None:
        """Draw a rectangle, sprite or text."""

    @abstractmethod
    def play_music(self, music: Music) -> None:
        """Start playing a track."""

    @abstractmethod
    def stop_music(self, music: Music) -> None:
        """Stop a track."""

    @abstractmethod
    def restart_music(self, music: Music) -> None:
        """Play a track again from its start."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the drawing surface."""

    @abstractmethod
    def display(self) -> None:
        """Show everything drawn since the last clear."""

    @abstractmethod
    def poll_event(self) -> Optional[Event]:
        """Return the next pending event, or None when there is none."""

    @abstractmethod
    def is_open(self) -> bool:
        """Tell whether the window is still open."""


class Library(ABC):
    """A graphical library: a display plus the factories for its objects."""

    @property
    @abstractmethod
    def display(self) -> Display:
        """The library's display."""

    @property
    @abstractmethod
    def rect_factory(self) -> RectFactory:
        """Factory for rectangles."""

    @property
    @abstractmethod
    def sprite_factory(self) -> SpriteFactory:
        """Factory for sprites."""

    @property
    @abstractmethod
    def music_factory(self) -> MusicFactory:
        """Factory for music."""

    @property
    @abstractmethod
    def text_factory(self) -> TextFactory:
        """Factory for texts."""


class Game(ABC):
    """A game driven by the core loop."""

    @abstractmethod
    def init(self, lib: Library) -> None:
        """Prepare the game to run on a graphical library."""

    @abstractmethod
    def erase(self) -> None:
        """Release what init set up."""

    @property
    @abstractmethod
    def score(self) -> int:
        """The current score."""

    @abstractmethod
    def update(self, lib: Library, delta_time: float) -> None:
        """Advance the game by delta_time seconds."""

    @abstractmethod
    def handle_event(self, event: Event) -> None:
        """React to an input event."""

    @abstractmethod
    def dump(self, lib: Library) -> None:
        """Render the game."""