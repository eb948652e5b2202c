# pawnstorm

A chess game for two players who share one screen. Pieces are moved with the
mouse in a pygame window. The console shows the material score and the list of
moves played.

## Installing

```
pip install .
```

pygame is installed as a dependency.

## Playing

```
pawnstorm
```

- White moves first. Click a piece of the side to move to select it. The
  squares it may move to are highlighted. Click one of them to move, or click
  the piece again to deselect it.
- Castling, en passant and promotion are supported. When a pawn reaches the
  last rank, a panel offers rook, knight, bishop and queen. Click the piece the
  pawn should become.
- Checks are enforced. A pinned piece may only move along the line of the pin.
  A side in check may only play moves that answer the check; in a double check
  only the king may move. When the side in check has no move left, the game
  ends and `WHITE WINS!` or `BLACK WINS!` is added to the move list. After
  that, clicks are ignored until the game is restarted.
- Press `r` to restart. Press `Esc` or close the window to quit.

When the game starts, and after every click or restart, the console is cleared
and shows three things:

- the material balance, for example `Score: WHITE +3`, or `Score: 0-0` when
  material is level (pawn 1, knight and bishop 3, rook 5, queen 9);
- the line `Press 'r' to restart`;
- the moves so far, one line per move pair, such as `PaE4:PaE5`.

The piece images are loaded from `Images/Pieces/` relative to the working
directory (`wP.png`, `bN.png` and so on). If an image is missing, that piece
is simply not drawn.

## Using the game logic

The rules work without a window. `pawnstorm.board.Board` takes a callable
that receives the pawn's `TeamColour` and returns the class the pawn is
promoted to. Call `update()` once after constructing the board so the pieces
take their squares. Then drive the board with clicks in board coordinates,
where files and ranks are counted from 0:

```python
from pawnstorm.board import Board
from pawnstorm.geometry import Coordinates
from pawnstorm.kinds import Queen

board = Board(lambda colour: Queen)
board.update()
board.click(Coordinates(4, 1))   # select the e2 pawn
board.click(Coordinates(4, 3))   # move it to e4
print(board.report())
```

The board also provides the following:

- `Board.turn` gives the side to move.
- `Board.game_over` reports whether the game has ended.
- `Board.move_list` holds the moves played.
- `Board.score_line()` returns the score line.
- `Board.restart()` starts a fresh game.
- `Board.draw(canvas)` draws the squares and pieces. `canvas` can be any
  object with `draw_rect(position, size, colour)` and
  `draw_image(path, position)` methods, such as `pawnstorm.window.Window`.

`pawnstorm.geometry` holds the board dimensions, `TeamColour`, `Coordinates`,
and the conversions between squares and pixel positions (`to_position` and
`to_board`). `pawnstorm.kinds` holds the six piece classes: `Pawn`, `Rook`,
`Knight`, `Bishop`, `Queen` and `King`.

## What it does not do

- There is no computer opponent; both sides are played by people at the same
  screen.
- Stalemate and draws by repetition, by the fifty-move rule or by insufficient
  material are not detected. The game only ends on mate.
- Games cannot be saved or loaded.

## Running the tests

```
pip install .[test]
pytest
```