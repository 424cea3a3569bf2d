#!/usr/bin/env python3
"""
  L I F E  on an unbounded plane

  Conway's Game of Life (B3/S23) played over a sparse set of live cells.
  Nothing bounds the world: a tick only looks at live cells and their
  immediate neighbours, so a lone glider costs the same whether it sits
  at the origin or a billion cells away. The terminal shows a window
  anchored at (0, 0), repainted every DELAY_MS milliseconds.

  Controls:
    Ctrl-C    quit

  Telemetry is written as CSV when LIFE_STATS names an output path:
    LIFE_STATS=life_stats.csv python3 life.py
"""

from __future__ import annotations

import curses
import os
import time
from collections.abc import Iterable, Iterator, Set
from pathlib import Path
from typing import IO, ClassVar

import numpy as np
from numpy.typing import NDArray

Coord = tuple[int, int]

# ── Display ─────────────────────────────────────────────────────────────
GLYPH_ALIVE = "0"
GLYPH_DEAD = " "

# ── Pacing ──────────────────────────────────────────────────────────────
DELAY_MS: int = 100

# ── Moore neighbourhood (reused every tick) ─────────────────────────────
NEIGHBOR_OFFSETS: tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

# ── Pattern library ─────────────────────────────────────────────────────
# Offsets are (x, y); y grows downward on screen.
PATTERNS: dict[str, list[Coord]] = {
    # heads toward +x, +y (down-right)
    "glider": [(0, 0), (2, 0), (1, 1), (2, 1), (1, 2)],
    "block": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "blinker": [(0, 0), (1, 0), (2, 0)],
    "beehive": [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
    "lwss": [
        (1, 0), (4, 0), (0, 1), (0, 2), (4, 2),
        (0, 3), (1, 3), (2, 3), (3, 3),
    ],
    "r_pentomino": [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
    "acorn": [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)],
    "diehard": [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
}

SEED_PATTERN = "glider"
SEED_ORIGIN: Coord = (2, 5)

# ── Telemetry ───────────────────────────────────────────────────────────
STATS_ENV = "LIFE_STATS"
LOG_EVERY = 10


# ═══════════════════════════════════════════════════════════════════════
#  Transition engine
# ═══════════════════════════════════════════════════════════════════════

def neighbors(coord: Coord) -> list[Coord]:
    """The eight cells surrounding ``coord``, never ``coord`` itself."""
    x, y = coord
    return [(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS]


def live_neighbors(cells: Set[Coord], coord: Coord) -> int:
    count = 0
    for n in neighbors(coord):
        if n in cells:
            count += 1
    return count


def candidates(cells: Iterable[Coord]) -> set[Coord]:
    """Every cell that could change state: the live ones plus their neighbours.

    A dead cell with no live neighbour can never be born, so it is never
    visited. Work per tick follows the live population, not the world size.
    """
    out: set[Coord] = set()
    for coord in cells:
        out.add(coord)
        out.update(neighbors(coord))
    return out


def next_generation(cells: Set[Coord]) -> set[Coord]:
    """
    Apply B3/S23 once and return the following generation as a new set.

    Counts are always taken against ``cells``, which is never modified;
    deaths and births land in a copy. Survivors need no action: a live
    cell with 2 or 3 neighbours simply stays in the copy.
    """
    nxt = set(cells)
    for coord in candidates(cells):
        count = live_neighbors(cells, coord)
        if count < 2 or count > 3:
            nxt.discard(coord)
        elif count == 3:
            nxt.add(coord)
    return nxt


# ═══════════════════════════════════════════════════════════════════════
#  Grid state
# ═══════════════════════════════════════════════════════════════════════

class SparseGrid:
    """
    The set of live cells on an unbounded plane.

    Only live coordinates are stored; anything absent is dead. Python ints
    do not overflow, so coordinates may drift arbitrarily far from the
    origin without wrapping.
    """

    def __init__(self, cells: Iterable[Coord] = ()) -> None:
        self._cells: set[Coord] = set(cells)

    # ── Membership ──────────────────────────────────────────────────

    def is_alive(self, coord: Coord) -> bool:
        return coord in self._cells

    def set_alive(self, coord: Coord) -> None:
        self._cells.add(coord)

    def set_dead(self, coord: Coord) -> None:
        self._cells.discard(coord)

    def seed(self, pattern: Iterable[Coord], origin: Coord = (0, 0)) -> None:
        """Mark ``pattern`` alive with its (0, 0) offset placed at ``origin``."""
        ox, oy = origin
        for dx, dy in pattern:
            self._cells.add((ox + dx, oy + dy))

    # ── Simulation ──────────────────────────────────────────────────

    def tick(self) -> None:
        """Advance one generation. The new set replaces the old in one step."""
        self._cells = next_generation(self._cells)

    # ── Queries ─────────────────────────────────────────────────────

    @property
    def cells(self) -> frozenset[Coord]:
        return frozenset(self._cells)

    @property
    def population(self) -> int:
        return len(self._cells)

    def sorted_cells(self) -> list[Coord]:
        """Live cells in reading order (top row first, left to right)."""
        return sorted(self._cells, key=lambda c: (c[1], c[0]))

    def bounds(self) -> tuple[int, int, int, int] | None:
        """Inclusive ``(min_x, min_y, max_x, max_y)``, or None when empty."""
        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return min(xs), min(ys), max(xs), max(ys)

    def window(
        self, width: int, height: int, origin: Coord = (0, 0)
    ) -> NDArray[np.bool_]:
        """Boolean ``(height, width)`` view of the rectangle starting at ``origin``."""
        width, height = max(width, 0), max(height, 0)
        view: NDArray[np.bool_] = np.zeros((height, width), dtype=np.bool_)
        ox, oy = origin
        xs: list[int] = []
        ys: list[int] = []
        for x, y in self._cells:
            vx, vy = x - ox, y - oy
            if 0 <= vx < width and 0 <= vy < height:
                xs.append(vx)
                ys.append(vy)
        if xs:
            view[ys, xs] = True
        return view

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseGrid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"SparseGrid({self.sorted_cells()!r})"


# ═══════════════════════════════════════════════════════════════════════
#  Stats logger
# ═══════════════════════════════════════════════════════════════════════

class StatsLogger:
    """Writes engine telemetry to CSV for post-hoc inspection."""

    HEADER: ClassVar[str] = (
        "gen,time_s,population,candidates,min_x,min_y,max_x,max_y\n"
    )

    def __init__(self, path: Path | None) -> None:
        self._path = path
        self._fh: IO[str] | None = None
        self._t0: float = time.monotonic()

    @property
    def enabled(self) -> bool:
        return self._fh is not None

    def open(self) -> None:
        if self._path is None:
            return
        try:
            self._fh = open(self._path, "w")
            self._fh.write(self.HEADER)
            self._fh.flush()
        except OSError:
            self._fh = None

    def log(self, gen: int, grid: SparseGrid) -> None:
        if self._fh is None:
            return
        t = time.monotonic() - self._t0
        box = grid.bounds()
        extent = ",".join(str(v) for v in box) if box is not None else ",,,"
        try:
            self._fh.write(
                f"{gen},{t:.1f},{grid.population},{len(candidates(grid))},{extent}\n"
            )
            if gen % 50 == 0:
                self._fh.flush()
        except OSError:
            self.close()

    def close(self) -> None:
        if self._fh is not None:
            try:
                self._fh.close()
            except OSError:
                pass
            self._fh = None


def stats_path_from_env() -> Path | None:
    value = os.environ.get(STATS_ENV, "").strip()
    return Path(value) if value else None


# ═══════════════════════════════════════════════════════════════════════
#  Rendering
# ═══════════════════════════════════════════════════════════════════════

def viewport_size(rows: int, cols: int) -> tuple[int, int]:
    """
    The ``(width, height)`` of the window drawn in a ``rows`` x ``cols`` terminal.

    One row is reserved for the status line and one more stays blank, and
    the last column is left alone: curses raises when a write ends in the
    bottom-right cell.
    """
    return max(cols - 1, 0), max(rows - 2, 0)


def render_frame(
    grid: SparseGrid,
    width: int,
    height: int,
    alive: str = GLYPH_ALIVE,
    dead: str = GLYPH_DEAD,
) -> str:
    """Row-major text of the ``width`` x ``height`` window at (0, 0).

    Every row is exactly ``width`` glyphs followed by a newline, whatever
    lies outside the window.
    """
    if width <= 0 or height <= 0:
        return ""
    glyphs = np.where(grid.window(width, height), alive, dead)
    return "".join("".join(row) + "\n" for row in glyphs.tolist())


def status_line(generation: int) -> str:
    return f"generation: {generation}"


def draw(stdscr: curses.window, grid: SparseGrid, generation: int) -> None:
    """Repaint the whole screen: frame from the top-left, status line below.

    curses errors are not caught here. A failed write ends the program.
    """
    max_y, max_x = stdscr.getmaxyx()
    width, height = viewport_size(max_y, max_x)

    stdscr.erase()
    frame = render_frame(grid, width, height)
    for y, line in enumerate(frame.splitlines()):
        stdscr.addstr(y, 0, line)
    stdscr.addstr(height, 0, status_line(generation))


# ═══════════════════════════════════════════════════════════════════════
#  Main loop
# ═══════════════════════════════════════════════════════════════════════

def main(stdscr: curses.window) -> None:
    curses.curs_set(0)

    grid = SparseGrid()
    grid.seed(PATTERNS[SEED_PATTERN], SEED_ORIGIN)

    logger = StatsLogger(stats_path_from_env())
    logger.open()

    generation = 0
    try:
        while True:
            # ── Render ─────────────────────────────────────────────
            draw(stdscr, grid, generation)
            stdscr.refresh()

            # ── Log ────────────────────────────────────────────────
            if generation % LOG_EVERY == 0:
                logger.log(generation, grid)

            time.sleep(DELAY_MS / 1000.0)

            # ── Simulate ───────────────────────────────────────────
            grid.tick()
            generation += 1
    finally:
        logger.close()


if __name__ == "__main__":
    try:
        curses.wrapper(main)
    except KeyboardInterrupt:
        pass
