"""Discovery and loading of game and graphical libraries."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, Callable, Optional

from arcadebox import curses_library, nibbler_game, snake_game
from arcadebox.events import LibraryType

TTY_LIBRARY = curses_library.NAME


class LibraryObject:
    """A library known by its path, with a name, a kind and an entry point."""

    def __init__(
        self,
        path: str,
        name: Optional[str] = None,
        library_type: Optional[LibraryType] = None,
        entry_point: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.path = path
        self.name = name if name is not None else ""
        self.type = library_type if library_type is not None else LibraryType.UNKNOWN
        self._entry_point = entry_point
        self.loaded = name is not None and library_type is not None

    @classmethod
    def from_module(cls, module: Any, path: Optional[str] = None) -> LibraryObject:
        """Describe a module exposing NAME, LIBRARY_TYPE and entry_point."""
        if path is None:
            path = getattr(module, "__name__", "")
        name = getattr(module, "NAME", None)
        if name is None:
            print(f"{path}: undefined symbol: NAME", file=sys.stderr)
            return cls(path)
        library_type = getattr(module, "LIBRARY_TYPE", None)
        if library_type is None:
            print(f"{path}: undefined symbol: LIBRARY_TYPE", file=sys.stderr)
            return cls(path)
        return cls(path, name, LibraryType(library_type), getattr(module, "entry_point", None))

    def get(self) -> Any:
        """Create a new instance from the entry point, or None if there is none."""
        if not self.loaded:
            return None
        if self._entry_point is None:
            print(f"{self.path}: undefined symbol: entry_point", file=sys.stderr)
            return None
        return self._entry_point()

    def __repr__(self) -> str:
        return f"LibraryObject(path={self.path!r}, name={self.name!r}, type={self.type!r})"


def default_libraries() -> list[LibraryObject]:
    """Return the libraries shipped with the package."""
    return [
        LibraryObject.from_module(module)
        for module in (curses_library, snake_game, nibbler_game)
    ]


class LibraryLoader:
    """Holds every usable library; in a bare terminal only the terminal display."""

    def __init__(
        self, libraries: Optional[Iterable[LibraryObject]] = None, tty: bool = False
    ) -> None:
        if libraries is None:
            libraries = default_libraries()
        self._libs: list[LibraryObject] = []
        for obj in libraries:
            if tty and obj.type == LibraryType.GRAPHIC and obj.name != TTY_LIBRARY:
                continue
            if obj.loaded:
                self._libs.append(obj)

    @property
    def libs(self) -> list[LibraryObject]:
        """The usable libraries, in discovery order."""
        return list(self._libs)

    def load(self, path: str, library_type: LibraryType) -> Optional[LibraryObject]:
        """Return the library at path if it is of the given kind, else None."""
        for lib in self._libs:
            if lib.path == path and lib.type == library_type:
                return lib
        return None