"""
Cell patterns and walking directions for marching-squares tracing

A cell is a 2x2 window of ink samples. Its pattern is stored as a 4-bit
key: tl | tr << 1 | bl << 2 | br << 3.
"""
from typing import Tuple
from enum import Enum, IntEnum


class CellPattern(IntEnum):
    """The 16 possible 2x2 windows, named by which samples hold ink"""
    EMPTY = 0b0000
    FULL = 0b1111

    # Edges: one full row or column
    L_T = 0b0011
    L_B = 0b1100
    L_L = 0b0101
    L_R = 0b1010

    # Corners: three samples set, named by position
    C_R_B = 0b0111
    C_L_B = 0b1011
    C_L_T = 0b1110
    C_R_T = 0b1101

    # Isolated: a single sample set
    I_L_T = 0b0001
    I_R_T = 0b0010
    I_R_B = 0b1000
    I_L_B = 0b0100

    # Diagonals
    D_L = 0b0110  # tr + bl
    D_R = 0b1001  # tl + br

    @classmethod
    def from_samples(cls, tl: int, tr: int, bl: int, br: int) -> "CellPattern":
        return cls((tl & 1) | (tr & 1) << 1 | (bl & 1) << 2 | (br & 1) << 3)

    @property
    def samples(self) -> Tuple[int, int, int, int]:
        """(tl, tr, bl, br)"""
        return self & 1, self >> 1 & 1, self >> 2 & 1, self >> 3 & 1

    @property
    def is_uniform(self) -> bool:
        return self in (CellPattern.EMPTY, CellPattern.FULL)


class Direction(Enum):
    """Walking direction on the cell grid, as a (dx, dy) step"""
    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def turn_left(self) -> "Direction":
        return _LEFT_OF[self]

    def turn_right(self) -> "Direction":
        return _RIGHT_OF[self]


_LEFT_OF = {
    Direction.NONE: Direction.LEFT,
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
}

_RIGHT_OF = {
    Direction.NONE: Direction.RIGHT,
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


def _rotate_cw(pattern: CellPattern) -> CellPattern:
    tl, tr, bl, br = pattern.samples
    return CellPattern.from_samples(bl, tl, br, tr)


def _rotate_ccw(pattern: CellPattern) -> CellPattern:
    tl, tr, bl, br = pattern.samples
    return CellPattern.from_samples(tr, br, tl, bl)


def rotate(pattern: CellPattern, direction: Direction) -> CellPattern:
    """
    Rotate a pattern into the walker's frame, where `direction` is "up".

    Args:
        pattern: Cell pattern in grid orientation
        direction: Current walking direction

    Returns:
        The pattern as seen by a walker heading up
    """
    if direction in (Direction.UP, Direction.NONE):
        return pattern
    if direction == Direction.LEFT:
        return _rotate_cw(pattern)
    if direction == Direction.RIGHT:
        return _rotate_ccw(pattern)
    if direction == Direction.DOWN:
        return _rotate_cw(_rotate_cw(pattern))
    raise ValueError(f"Invalid direction: {direction!r}")
