# gemheist

Map handling for a small tile-based puzzle: a thief in a walled vault must
pick up every gem and reach the exit without being stopped by a guard. This
package reads and checks the level files (`.ber` maps) and provides a few
helpers for text, bytes, linked lists, line reading and printf-style output.
It has no dependencies outside the standard library.

```
pip install .
```

## Map files

A map is a plain text file whose name ends in `.ber`, one row per line:

| Character | Meaning                     |
|-----------|-----------------------------|
| `1`       | wall                        |
| `0`       | floor                       |
| `P`       | player start (exactly one)  |
| `C`       | gem (at least one)          |
| `E`       | exit (exactly one)          |
| `T`       | guard                       |

Every row, the last one included, ends with a newline. Example:

```
1111111
1P0C0E1
1000T01
1111111
```

## Checking a map

```python
from gemheist.mapfile import load_map, MapError

try:
    level = load_map("levels/vault.ber", log=print)
except MapError as err:
    print("Error:", err)
else:
    print(level.width, level.height, level.start, level.collectibles)
    print(level.tile(1, 1))
```

`load_map(path, log=None)` runs the checks below in order and raises
`MapError` with a message at the first one that fails. If `log` is given, it
is called with progress text, ending with a listing of the map.

1. `check_extension(path)`: the name ends in `.ber` and the file can be opened.
2. `read_rows(path)`: the file is not empty, is at least 3 by 3, and every
   line has the same length as the first.
3. `validate_characters(rows)`: only the characters above appear.
4. `count_elements(rows)`: exactly one start, at least one gem, exactly one
   exit; returns the start `(x, y)` and the gem count.
5. `check_walls(rows)`: the whole border is wall.
6. `is_winnable(rows, start, collectibles)`: from the start, every gem and
   the exit can be reached. Walls block the way; a guard's tile can be
   stepped on but not crossed.

The result is a frozen `GameMap` with `rows`, `start`, `collectibles`, the
`width` and `height` properties, and `tile(x, y)`. `format_map(game_map)`
gives the map listing as text.

## Helpers

- `gemheist.lines.LineReader(source, buffer_size=5)` reads lines from any
  object with a `read` method, text or binary, keeping each line's newline;
  `readline()` returns `None` at the end, and the reader is iterable.
- `gemheist.printf.format_string(fmt, *args)` and
  `printf(fmt, *args, stream=None)` handle `%d %i %u %x %X %p %s %c %%`.
  Integers wrap to 32 bits; `%s` of `None` gives `(null)`, `%p` of `None`
  gives `(nil)`; unknown conversions are written out unchanged.
- `gemheist.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_only`), `to_upper`, `to_lower`,
  `atoi`, `itoa`, digit counting and `put_char`, `put_str`, `put_endl`,
  `put_nbr` for writing to a stream.
- `gemheist.strops`: `find_char`, `find_last_char`, `compare`,
  `find_bounded`, `substring`, `join`, `trim`, `split`, `map_indexed`,
  `iter_indexed`, `bounded_copy`, `bounded_concat`.
- `gemheist.memops`: `fill`, `zero`, `copy`, `move`, `find_byte`,
  `compare_bytes`, `zeroed` on `bytearray` buffers.
- `gemheist.linked`: `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, iteration and `len()`.

## What this package does not do

It only loads and checks maps. There is no game window, no drawing of
sprites, no keyboard handling, no player movement or gem pickup, and no
command to run from the shell; playing a level is left to the caller.