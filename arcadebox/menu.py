"""The menu shown between games: pick a game, a display and a player name."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from arcadebox.events import Color, Event, KeyboardEvent, KeyCode, KeyEventType, LibraryType
from arcadebox.interfaces import Game, Library, Text
from arcadebox.loader import LibraryObject
from arcadebox.score import Score
from arcadebox.vector import Vector

ARCADE_FONT = "./assets/PixelGame.ttf"
WINDOW_SIZE = Vector(1920, 1080)
GAMES_POS = Vector(200, 600)
GRAPH_POS = Vector(600, 600)
PLAYER_POS = Vector(50, 400)
GAME_POS = Vector(150, 400)
BEST_POS = Vector(250, 400)
LINE_SPACING = 50
MAX_PLAYER_LENGTH = 10
DEFAULT_PLAYER = "GUEST"

WHITE = Color(255, 255, 255, 255)
SELECTED = Color(0, 128, 0, 255)


def _make_text(
    lib: Library, content: str, pos: Vector, font: Optional[str] = None
) -> Text:
    text = lib.text_factory.create()
    text.text = content
    if font is not None:
        text.font = font
    text.pos = pos
    text.color = WHITE
    return text


class CoreMenu(Game):
    """Lists games and displays, names the player and shows the scoreboard."""

    def __init__(self, libs: Iterable[LibraryObject], handle: Optional[LibraryObject]) -> None:
        libs = list(libs)
        self.games = [lib for lib in libs if lib.type == LibraryType.GAME]
        self.graphics = [lib for lib in libs if lib.type == LibraryType.GRAPHIC]
        self._game_index = 0
        self._graph_index = next(
            (i for i, lib in enumerate(self.graphics) if lib is handle), len(self.graphics)
        )
        self.running = True
        self.naming = False
        self.scoring = False
        self.player = DEFAULT_PLAYER
        self.scores: dict[str, Score] = {}
        self.arcade_text: Optional[Text] = None
        self.name_text: Optional[Text] = None
        self.scoreboard_text: Optional[Text] = None
        self.game_texts: list[Text] = []
        self.graphic_texts: list[Text] = []

    @property
    def score(self) -> int:
        """The menu scores nothing."""
        return 0

    @property
    def game(self) -> LibraryObject:
        """The selected game library."""
        return self.games[self._game_index]

    @property
    def graphic(self) -> LibraryObject:
        """The selected graphical library."""
        return self.graphics[self._graph_index]

    def update_scores(self, scores: Mapping[str, Score]) -> None:
        """Replace the scores shown on the scoreboard."""
        self.scores = dict(scores)

    def erase(self) -> None:
        """Nothing to release."""

    def init(self, lib: Library) -> None:
        """Build the menu texts; raise RuntimeError when no game is available."""
        if not self.games:
            raise RuntimeError("No game available.")
        self.game_texts = []
        self.graphic_texts = []

        lib.display.set_title("Arcade")
        lib.display.set_size(WINDOW_SIZE.copy())
        lib.text_factory.load(ARCADE_FONT)

        width, height = int(WINDOW_SIZE.x), int(WINDOW_SIZE.y)
        self.arcade_text = _make_text(lib, "ARCADE", Vector(width // 2, height // 2))
        self.scoreboard_text = _make_text(lib, "SCOREBOARD", Vector(width // 2, height // 8))
        self.name_text = _make_text(lib, self.player, Vector(width // 2, height // 2 - 200))

        self.game_texts = [
            _make_text(lib, entry.name, GAMES_POS + Vector(0, index * LINE_SPACING), ARCADE_FONT)
            for index, entry in enumerate(self.games)
        ]
        self.game_texts[self._game_index].color = SELECTED
        self.graphic_texts = [
            _make_text(lib, entry.name, GRAPH_POS + Vector(0, index * LINE_SPACING), ARCADE_FONT)
            for index, entry in enumerate(self.graphics)
        ]
        self.graphic_texts[self._graph_index].color = SELECTED

    def update(self, lib: Library, delta_time: float) -> None:
        """Draw the menu, or the scoreboard when it is toggled on."""
        display = lib.display
        if not self.scoring:
            display.draw(self.arcade_text)
            display.draw(self.name_text)
            for item in self.graphic_texts:
                display.draw(item)
            for item in self.game_texts:
                display.draw(item)
            return
        display.draw(self.scoreboard_text)
        for row, key in enumerate(sorted(self.scores)):
            entry = self.scores[key]
            offset = Vector(0, row * LINE_SPACING)
            for content, pos in (
                (entry.player, PLAYER_POS),
                (entry.game, GAME_POS),
                (str(entry.best), BEST_POS),
            ):
                display.draw(_make_text(lib, content, pos + offset, ARCADE_FONT))

    def dump(self, lib: Library) -> None:
        """Show what was drawn."""
        lib.display.display()

    def on_key_pressed(self, event: KeyboardEvent) -> None:
        """Handle naming (N), scoreboard (P) and selection (Q/A games, S/Z displays)."""
        if event.event_type != KeyEventType.PRESS:
            return
        key = event.key_code
        if key == KeyCode.N:
            self.naming = not self.naming
        if self.naming:
            if key == KeyCode.BACKSPACE:
                self.player = self.player[:-1]
            elif KeyCode.A <= key <= KeyCode.Z and len(self.player) < MAX_PLAYER_LENGTH:
                self.player += chr(ord("A") + key - KeyCode.A)
            self.name_text.text = self.player
            self.name_text.color = SELECTED
            return
        if key == KeyCode.P:
            self.scoring = not self.scoring
        if self.scoring:
            return
        self.name_text.color = WHITE
        if key == KeyCode.Q:
            self._select_game(1)
        if key == KeyCode.S:
            self._select_graphic(1)
        if key == KeyCode.A:
            self._select_game(-1)
        if key == KeyCode.Z:
            self._select_graphic(-1)

    def handle_event(self, event: Event) -> None:
        """Pass keyboard events on while the menu is running."""
        if not self.running:
            return
        if isinstance(event.data, KeyboardEvent):
            self.on_key_pressed(event.data)

    def _select_game(self, step: int) -> None:
        self.game_texts[self._game_index].color = WHITE
        self._game_index = (self._game_index + step) % len(self.games)
        self.game_texts[self._game_index].color = SELECTED

    def _select_graphic(self, step: int) -> None:
        self.graphic_texts[self._graph_index].color = WHITE
        self._graph_index = (self._graph_index + step) % len(self.graphics)
        self.graphic_texts[self._graph_index].color = SELECTED