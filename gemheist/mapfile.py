"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from gemheist.lines import LineReader

WALL = "1"
FLOOR = "0"
START = "P"
COLLECTIBLE = "C"
EXIT = "E"
GUARD = "T"
VALID_TILES = frozenset((WALL, FLOOR, START, COLLECTIBLE, EXIT, GUARD))
MAP_EXTENSION = ".ber"
MIN_SIZE = 3

Position = tuple[int, int]
Log = Optional[Callable[[str], object]]
PathLike = Union[str, Path]

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class MapError(Exception):
    """Raised when a map file cannot be played."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, the player's start (x, y) and gem count."""

    rows: tuple[str, ...]
    start: Position
    collectibles: int

    def tile(self, x: int, y: int) -> str:
        """The tile character at column ``x`` of row ``y``."""
        return self.rows[y][x]

    @property
    def width(self) -> int:
        """Number of columns."""
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.rows)


def check_extension(path: PathLike) -> Path:
    """Check that ``path`` ends in ``.ber`` and names a readable file."""
    text = str(path)
    dot = text.rfind(".")
    if dot < 0:
        raise MapError("invalid map path")
    if text[dot:] != MAP_EXTENSION:
        raise MapError("not a .ber")
    try:
        with open(text, "rb"):
            pass
    except OSError:
        raise MapError("file doesn't exist") from None
    return Path(text)


def read_rows(path: PathLike) -> list[str]:
    """Read the map's rows, checking its size and that it is rectangular.

    Every line must hold one more character than the first line's tiles,
    which is its newline; a final line without a newline is one short.
    """
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            lines = list(LineReader(handle))
    except OSError:
        raise MapError("file doesn't exist") from None
    if not lines:
        raise MapError("There is nothing in the map.")
    width = len(lines[0]) - 1
    if width < MIN_SIZE or len(lines) < MIN_SIZE:
        raise MapError("Invalid map.")
    rows = []
    for line in lines:
        if len(line) - 1 != width:
            raise MapError("Map isn't rectangle.")
        rows.append(line[:width])
    return rows


def validate_characters(rows: Sequence[str]) -> None:
    """Reject any tile outside ``1 0 P C E T``."""
    if any(ch not in VALID_TILES for row in rows for ch in row):
        raise MapError("Invalid character in map")


def count_elements(rows: Sequence[str]) -> tuple[Position, int]:
    """Return the start position and the number of collectibles.

    The map needs exactly one start, at least one collectible and exactly
    one exit.
    """
    starts = [
        (x, y)
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
        if ch == START
    ]
    collectibles = sum(row.count(COLLECTIBLE) for row in rows)
    exits = sum(row.count(EXIT) for row in rows)
    if len(starts) != 1:
        raise MapError("must need 1 start")
    if collectibles == 0:
        raise MapError("must need atleast 1 collectible")
    if exits != 1:
        raise MapError("must need 1 exit")
    return starts[-1], collectibles


def check_walls(rows: Sequence[str]) -> None:
    """Require the whole border of the map to be walls."""
    if not rows:
        raise MapError("Border walls aren't closed")
    edges = (rows[0], rows[-1])
    if any(ch != WALL for edge in edges for ch in edge):
        raise MapError("Border walls aren't closed")
    if any(not row or row[0] != WALL or row[-1] != WALL for row in rows[1:-1]):
        raise MapError("Border walls aren't closed")


def is_winnable(rows: Sequence[str], start: Position, collectibles: int) -> bool:
    """True when every collectible and an exit are reachable from ``start``.

    Walls block the way; a guard's tile can be stepped on but not crossed.
    """

    def inside(x: int, y: int) -> bool:
        return 0 <= y < len(rows) and 0 <= x < len(rows[y])

    visited: set[Position] = set()
    found_collectibles = 0
    found_exits = 0
    stack = [start]
    while stack:
        x, y = stack.pop()
        if (x, y) in visited or not inside(x, y):
            continue
        visited.add((x, y))
        tile = rows[y][x]
        if tile == COLLECTIBLE:
            found_collectibles += 1
        elif tile == EXIT:
            found_exits += 1
        if found_exits >= 1 and found_collectibles == collectibles:
            return True
        if tile in (WALL, GUARD):
            continue
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if inside(nx, ny) and rows[ny][nx] != WALL and (nx, ny) not in visited:
                stack.append((nx, ny))
    return False


def format_map(game_map: GameMap) -> str:
    """The map listing shown once checking succeeds."""
    return "|\n| Map created :\n" + "".join(f"|\t\t{row}\n" for row in game_map.rows)


def load_map(path: PathLike, log: Log = None) -> GameMap:
    """Run every check on the map at ``path`` and return it.

    Progress messages are passed to ``log``, if given. The first failing
    check raises MapError.
    """

    def emit(text: str) -> None:
        if log is not None:
            log(text)

    emit("+--- Map Checking ---\n")
    emit("|  Extension check :\n")
    check_extension(path)
    emit("|\tGood extension\n")
    emit("|\tMap parsing :\n")
    rows = read_rows(path)
    validate_characters(rows)
    emit("|\tMap Valid\n")
    emit("|  Doublons check :\n")
    start, collectibles = count_elements(rows)
    emit("|\tNo Doublons\n")
    emit("|  Border walls check :\n")
    check_walls(rows)
    emit("|\tBorder walls are closed\n")
    emit("|  Possibility check :\n")
    if not is_winnable(rows, start, collectibles):
        raise MapError("Map impossible to win")
    emit("|\tMap possible\n")
    game_map = GameMap(tuple(rows), start, collectibles)
    emit(format_map(game_map))
    emit("|\n| Successfully check map, no errors !\n")
    emit("+--------------------\n")
    return game_map