# atuin

Building blocks for terminal user interfaces and small helpers for working with
shell history.

## What is inside

- `atuin.style`: `Color`, `Modifier` and `Style`. A style is an incremental
  change: foreground and background colours, and modifiers to add or remove.
  Build one with `with_fg`, `with_bg`, `with_modifier` and `without_modifier`;
  combine two with `Style.patch`. `Style.reset()` resets every property.
- `atuin.layout`: `Rect`, `Margin`, `Direction`, `Alignment`, `Corner`, and the
  constraints `Percentage`, `Ratio`, `Length`, `Max` and `Min`, each with an
  `apply(length)` method. `Rect.clipped` shrinks a rectangle so its area fits
  in 16 bits while keeping its aspect ratio; `Rect` also offers `inner`,
  `union`, `intersection` and `intersects`.
- `atuin.buffer`: `Cell` and `Buffer`. A buffer is a grid of styled cells.
  `set_string` and `set_stringn` print text grapheme by grapheme, taking
  double-width characters into account. `merge` grows a buffer to cover
  another, and `diff` gives the smallest list of `(x, y, cell)` updates needed
  to go from one buffer to another.
- `atuin.cursor`: `Cursor`, an editable input line with a cursor, supporting
  character and word movement and deletion. Word jumps follow either
  Emacs-style or Sublime-style rules (`WordJumpMode`, `WordJumper`).
- `atuin.duration`: `format_duration`, which renders a `timedelta` as its most
  significant unit, for example `3h` or `250ms`.
- `atuin.stats`: `interesting_command`, which reduces a command line to the
  part worth counting, and `compute_stats`, which returns a text report of the
  most-used commands with totals.

## Installation

```
pip install .
```

For development and testing:

```
pip install ".[test]"
pytest
```

## Examples

```python
from atuin.buffer import Buffer
from atuin.layout import Rect
from atuin.style import Color, Style

previous = Buffer.empty(Rect(0, 0, 20, 1))
current = Buffer.empty(Rect(0, 0, 20, 1))
current.set_string(0, 0, "hello", Style().with_fg(Color.RED))

for x, y, cell in previous.diff(current):
    print(x, y, cell.symbol)
```

```python
from datetime import timedelta

from atuin.cursor import Cursor
from atuin.duration import format_duration
from atuin.stats import compute_stats, interesting_command

interesting_command("sudo   cargo build foo bar")  # "cargo build"
print(compute_stats(["git status", "git commit -m x", "ls"], 10))

format_duration(timedelta(hours=3, minutes=5))  # "3h"

line = Cursor("hello")
line.end()
line.back()  # "o"
```

## What it does not do

The package holds no code that writes a buffer to a terminal: there is no
output backend, no screen handling and no reading of key presses. It has no
command-line program, and it does not store or read shell history itself;
`compute_stats` works on command strings that the caller supplies.