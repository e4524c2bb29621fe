"""The core loop: runs the menu and games on a graphical library."""

from __future__ import annotations

import time
from typing import Optional

from arcadebox.events import EventType, KeyboardEvent, KeyCode, KeyEventType, LibraryType
from arcadebox.interfaces import Game, Library
from arcadebox.loader import LibraryLoader
from arcadebox.menu import CoreMenu
from arcadebox.score import SCORES_FILE, PathLike, Score, load_scores, save_scores


class CoreError(Exception):
    """The core cannot start or switch a library."""


class Core:
    """Owns the graphical library, the menu and the running game."""

    def __init__(
        self,
        path: str,
        tty: bool = False,
        loader: Optional[LibraryLoader] = None,
        scores_path: PathLike = SCORES_FILE,
    ) -> None:
        self._loader = loader if loader is not None else LibraryLoader(tty=tty)
        self._scores_path = scores_path
        handle = self._loader.load(path, LibraryType.GRAPHIC)
        if handle is None:
            raise CoreError(f"File {path} can't be loaded.")
        library = handle.get()
        if library is None:
            raise CoreError("cannot load graphical lib symbol entrypoint from.")
        self._graphic_handle = handle
        self._library: Library = library
        self.menu = CoreMenu(self._loader.libs, handle)
        self._game: Game = self.menu
        self._closing = False
        self._scores: dict[str, Score] = load_scores(scores_path)
        self.menu.update_scores(self._scores)

    @property
    def library(self) -> Library:
        """The graphical library in use."""
        return self._library

    @property
    def game(self) -> Game:
        """The game being run, the menu included."""
        return self._game

    @property
    def scores(self) -> dict[str, Score]:
        """Best scores by game."""
        return dict(self._scores)

    def start_game(self) -> None:
        """Leave the menu and start the selected game."""
        selected = self.menu.game
        game = selected.get()
        if game is None:
            raise CoreError(f"cannot load game entrypoint from {selected.path}.")
        self._game = game
        self.menu.running = False
        game.init(self._library)

    def end_game(self) -> None:
        """Record the score and go back to the menu; from the menu, quit."""
        if self.menu.running:
            self._closing = True
        self._save_score()
        self.menu.update_scores(self._scores)
        self._game.erase()
        self.menu.running = True
        self._game = self.menu
        self._game.init(self._library)

    def switch_graphic_lib(self) -> None:
        """Move to the graphical library selected in the menu."""
        handle = self.menu.graphic
        if handle is self._graphic_handle:
            return
        library = handle.get()
        if library is None:
            raise CoreError("cannot load graphical lib symbol entrypoint from.")
        previous = self._library
        self._graphic_handle = handle
        self._library = library
        previous.display.close_window()
        self._game.erase()
        self._game.init(self._library)

    def run(self) -> None:
        """Run frames until the display closes or the menu is left."""
        self._game.init(self._library)
        last = time.perf_counter()
        while self._library.display.is_open():
            if self._closing:
                break
            now = time.perf_counter()
            delta_time = now - last
            last = now
            self._library.display.clear()
            while (event := self._library.display.poll_event()) is not None:
                self._game.handle_event(event)
                if event.type == EventType.KEYBOARD and isinstance(event.data, KeyboardEvent):
                    self._on_key(event.data)
            self._game.update(self._library, delta_time)
            self._game.dump(self._library)

    def _on_key(self, key: KeyboardEvent) -> None:
        if key.event_type != KeyEventType.PRESS:
            return
        if key.key_code == KeyCode.F1:
            if self.menu.running:
                self.start_game()
        elif key.key_code == KeyCode.ESCAPE:
            self.end_game()
        elif key.key_code == KeyCode.F2:
            self.switch_graphic_lib()

    def _save_score(self) -> None:
        name = self.menu.game.name
        score = self._game.score
        current = self._scores.get(name)
        if score > (current.best if current is not None else 0):
            self._scores[name] = Score(name, self.menu.player, score)
        try:
            save_scores(self._scores_path, self._scores)
        except OSError:
            return