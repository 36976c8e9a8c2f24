# ugolki

Ugolki ("corners") is played on an 8×8 board. Each side has nine pieces
packed into a 3×3 corner. You play white from the bottom-right corner and
the computer plays black from the top-left. A piece moves one square up,
down, left or right, and only onto an empty square. The aim is to bring
all of your pieces into the opposite corner.

## Installation

```
pip install .
```

This also installs pygame, which the window needs.

## Playing

```
ugolki
```

`ugolki --help` shows a short usage note. The command takes no other options.

- **Left click** on one of your white pieces to select it. It gets a green
  outline. Then left click on an empty square next to it to move there.
  Black replies straight away with one move.
- **Right click** twice to see a route. The first click clears the
  selection, repaints the board and marks the starting square in magenta.
  The second click picks the target. A route over empty squares from the
  start to the target is highlighted in yellow. If no route is found,
  nothing is highlighted.

Close the window to quit. Each left click on the board logs the cell and
its contents to standard error.

Piece images are loaded from `Textures/w_pawn.png`, `Textures/b_pawn.png`,
`Textures/w_bishop.png` and `Textures/b_bishop.png`, relative to the current
directory. When an image is missing, the piece is drawn as a plain circle.

## Using the game logic

The rules and the route finding work without opening a window:

```python
from ugolki.game import Game

game = Game((255, 255, 255), (0, 0, 255))
if game.can_move(9, 4, 5):        # white piece 9 stands on (5, 5)
    game.move_figure(9, 4, 5)
game.pc_go()                      # black answers

route = game.trace(5, 4, 0, 7)    # list of Step, from the target back to the start
```

- `Game.pc_go()` makes the simple black move that the window uses. It
  steps the black pieces in turn, trying right and then down.
- `Game.pc_go_strategic()` picks a black move by following routes towards
  free cells of the white corner (`Game.new_trace`, `Game.calculate_new_ways`).
- `Game.mark_trace(route)` paints the cells of a route yellow on the board.
- `ugolki.board.cell_at` turns window pixel coordinates into a board cell.
- `ugolki.app.render` draws a `Game` onto any pygame surface.
- `ugolki.app.Session` turns left and right clicks into game actions.

## What it does not do

The game never declares a winner and never ends by itself. It does not
enforce turns beyond black replying after each white move. Pieces do not
jump over one another. There is no saving or loading of games.

## Tests

```
pip install .[test]
pytest
```