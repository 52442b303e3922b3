"""
Contour Tracer - Walks the boundary between ink and background

The walker keeps ink on its left. At each cell it rotates the pattern so
its heading points up, then looks up its next heading in a single
up-relative transition table.
"""
from typing import List, Optional
from dataclasses import dataclass, field
from enum import Enum
import logging

from .cells import CellPattern, Direction, rotate
from .grid import CellGrid, Vertex

logger = logging.getLogger(__name__)


class TraceError(RuntimeError):
    """Raised when the walk breaks an internal invariant"""


class TraceStatus(Enum):
    CLOSED = "closed"  # Returned to the start cell
    OPEN = "open"  # Stepped into a uniform cell
    EMPTY = "empty"  # No boundary cell in the grid


@dataclass
class TraceResult:
    """Result of tracing one contour"""
    path: List[Vertex] = field(default_factory=list)
    status: TraceStatus = TraceStatus.EMPTY
    start: Optional[Vertex] = None
    steps: int = 0

    @property
    def closed(self) -> bool:
        return self.status == TraceStatus.CLOSED

    def __len__(self) -> int:
        return len(self.path)


_INITIAL_DIRECTION = {
    CellPattern.L_T: Direction.RIGHT,
    CellPattern.L_B: Direction.LEFT,
    CellPattern.L_R: Direction.DOWN,
    CellPattern.L_L: Direction.UP,
    CellPattern.C_R_B: Direction.RIGHT,
    CellPattern.C_L_B: Direction.DOWN,
    CellPattern.C_L_T: Direction.LEFT,
    CellPattern.C_R_T: Direction.UP,
    CellPattern.I_L_T: Direction.UP,
    CellPattern.I_R_T: Direction.RIGHT,
    CellPattern.I_R_B: Direction.DOWN,
    CellPattern.I_L_B: Direction.LEFT,
    CellPattern.D_L: Direction.LEFT,
    CellPattern.D_R: Direction.UP,
}

# Rotated pattern -> new heading. Relative entries are functions of the
# current heading; edges and uniform cells are absent and keep it.
_TRANSITIONS = {
    CellPattern.C_R_B: Direction.turn_right,
    CellPattern.I_L_B: Direction.turn_left,
    CellPattern.C_L_B: lambda _: Direction.DOWN,
    CellPattern.C_L_T: lambda _: Direction.LEFT,
    CellPattern.C_R_T: lambda _: Direction.UP,
    CellPattern.I_L_T: lambda _: Direction.UP,
    CellPattern.I_R_T: lambda _: Direction.RIGHT,
    CellPattern.I_R_B: lambda _: Direction.DOWN,
    CellPattern.D_L: Direction.turn_left,
    CellPattern.D_R: Direction.turn_right,
}


def initial_direction(pattern: CellPattern) -> Direction:
    """Heading for the first step away from the start cell"""
    try:
        return _INITIAL_DIRECTION[pattern]
    except KeyError:
        raise TraceError(f"Invalid start pattern: {pattern.name}") from None


def next_direction(direction: Direction, pattern: CellPattern) -> Direction:
    """Heading after entering a cell with `pattern` while moving `direction`"""
    rotated = rotate(pattern, direction)
    transition = _TRANSITIONS.get(rotated)
    if transition is None:
        return direction
    return transition(direction)


class ContourTracer:
    """
    Traces a single contour on a CellGrid.

    The start is the first non-uniform cell in row-major order, which puts
    it on the upper-left edge of the topmost shape. The walk ends when it
    comes back to the start coordinate (closed) or steps into a uniform
    cell (open). Only one contour is traced.
    """

    def trace(self, grid: CellGrid) -> TraceResult:
        """
        Trace the contour starting at the grid's first boundary cell.

        Args:
            grid: Cell grid with an empty border ring

        Returns:
            TraceResult with the visited vertices in walk order
        """
        start = grid.find_start()
        if start is None:
            logger.info("No boundary cells found, nothing to trace")
            return TraceResult()

        pattern = grid.pattern_at(*start)
        direction = initial_direction(pattern)
        logger.debug(f"Start at {start} ({pattern.name}), heading {direction.name}")

        path = [start]
        current = start
        steps = 0

        while True:
            dx, dy = direction.delta
            nxt = (current[0] + dx, current[1] + dy)
            steps += 1

            if not grid.contains(*nxt):
                raise TraceError(f"Walked off grid from {current} heading {direction.name}")

            if nxt == start:
                status = TraceStatus.CLOSED
                break

            pattern = grid.pattern_at(*nxt)
            if pattern.is_uniform:
                logger.warning(f"Open contour: stepped into {pattern.name} cell at {nxt}")
                status = TraceStatus.OPEN
                break

            path.append(nxt)
            new_direction = next_direction(direction, pattern)
            logger.debug(
                f"{nxt}: {direction.name} {pattern.name} "
                f"rot={rotate(pattern, direction).name} -> {new_direction.name}"
            )
            direction = new_direction
            current = nxt

            if steps > 4 * grid.width * grid.height:
                # More steps than (cell, heading) states means a cycle that misses the start
                raise TraceError(f"Walk did not terminate after {steps} steps")

        logger.debug(f"Trace {status.value}: {len(path)} vertices")
        return TraceResult(path=path, status=status, start=start, steps=steps)
