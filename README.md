# arcadebox

A small arcade platform. Games and display back ends talk to each other only
through the interfaces in `arcadebox.interfaces`, so a game can be drawn by
any display, and the core can move to another display while it runs.

Included:

- **Snake** (`arcadebox.snake`, `arcadebox.snake_game`): the classic game on
  a walled 32 × 24 grid. Eating fruit makes the snake grow; running into the
  border or into itself kills it.
- **Nibbler** (`arcadebox.nibbler`, `arcadebox.nibbler_game`): a maze
  variant with randomly generated walls and ten fruits per level. The snake
  turns by itself at walls; once every fruit is eaten, `Enter` loads the next
  level.
- **A curses display** (`arcadebox.curses_display`, `arcadebox.curses_models`,
  `arcadebox.curses_library`) that draws rectangles, sprites and text as
  characters in a terminal and turns key presses and mouse clicks into events.
- **A menu** (`arcadebox.menu.CoreMenu`) for picking the game and display,
  typing a player name and viewing the scoreboard, and a **core**
  (`arcadebox.core.Core`) that runs the main loop and keeps best scores in a
  `.scores` file.

## Installing

The package has no dependencies outside the standard library and needs
Python 3.10 or later. The curses display needs a real terminal with colour
support.

## Running the arcade

There is no command-line launcher; start the core from Python, inside a
terminal. A `Core` is given the path of the graphical library to start with.
The libraries shipped with the package are known by their module names:

```python
from arcadebox.core import Core

core = Core("arcadebox.curses_library")
try:
    core.run()
finally:
    core.library.display.close_window()
```

`Core` raises `CoreError` when the path does not name a graphical library.
`run()` loops until the display closes or `Escape` is pressed in the menu.

## Keys

In the menu:

| Key         | Action                                    |
|-------------|-------------------------------------------|
| `Q` / `A`   | next / previous game                      |
| `S` / `Z`   | next / previous display                   |
| `N`         | start or stop editing the player name     |
| `P`         | show or hide the scoreboard               |
| `F1`        | start the selected game                   |
| `F2`        | switch to the selected display            |
| `Escape`    | leave the game (or quit from the menu)    |

While the name is being edited, letters are appended (up to ten) and
`Backspace` removes the last one.

In the games the arrow keys steer and `R` restarts. In Nibbler a reversal is
ignored, and only one turn is taken per step.

## Scores

Leaving a game with `Escape` records its score (the cells gained beyond the
starting length) when it beats the best one stored for that game. Scores are
kept one per line as `game:player:best`:

```python
from arcadebox.score import Score, load_scores, save_scores

score = Score.parse("Snake:ALICE:12")
print(score.format())          # "Snake:ALICE:12\n"

scores = load_scores(".scores")  # {} when the file is missing
save_scores(".scores", scores)
```

`Score.parse` raises `ValueError` when a field is empty; `load_scores` skips
such lines and stops at the first empty line.

## Building blocks

`arcadebox.vector.Vector` is a small mutable 2D vector used for positions,
sizes and directions:

```python
from arcadebox.vector import Vector

step = Vector(1, 0) + Vector(0, 1)
print(step.magnitude())
```

`arcadebox.events` holds `Color`, the `KeyCode` and event-kind enums and the
`Event` type with its `KeyboardEvent`, `MouseEvent` and `WindowEvent`
payloads.

A game implements `Game` (`init`, `erase`, `update`, `handle_event`, `dump`
and a `score` property). A display back end is a `Library` giving a
`Display` and factories for rectangles, sprites, texts and music.
`SnakeGame`, `NibblerGame`, `SnakeState` and `NibblerState` take an optional
`random.Random`, so boards can be made reproducible.

`arcadebox.loader.LibraryLoader` holds the libraries the core and menu can
use. By default it takes `default_libraries()`: the curses library and the
two games. A module becomes a library through `LibraryObject.from_module` if
it defines `NAME`, `LIBRARY_TYPE` and `entry_point`. With `tty=True` only the
curses display is kept among the graphical libraries.

## What it does not do

- There is no installed command; the arcade is started from Python as shown
  above.
- The only display is the curses terminal display. No windowed or graphical
  display is included, so `F2` has nothing else to switch to unless you pass
  your own libraries to `LibraryLoader`.
- Libraries are Python modules listed in code, not files found by scanning a
  directory.
- The curses display plays no sound: its music objects only remember whether
  they loop.