from enum import Enum
from typing import Optional, Tuple

# ==========================================
# 1. ENUMS & CONSTANTS
# ==========================================

class Direction(Enum):
    North = 0
    East = 1
    South = 2
    West = 3


class CellFlag(Enum):
    EMPTY = 0
    NORTH = 1 << 1
    EAST = 1 << 2
    SOUTH = 1 << 3
    WEST = 1 << 4
    BUILD_VISITED = 1 << 5   # never unset, has builder been here
    SOLVE_VISITED = 1 << 6   # never unset, has solver been here
    SOLVE_PATH = 1 << 7      # cell is on current solution path


PASSAGE_BIT = {
    Direction.North: CellFlag.NORTH,
    Direction.East: CellFlag.EAST,
    Direction.South: CellFlag.SOUTH,
    Direction.West: CellFlag.WEST,
}

PASSAGE_MASK = (CellFlag.NORTH.value | CellFlag.EAST.value |
                CellFlag.SOUTH.value | CellFlag.WEST.value)


def flip(d: Direction) -> Direction:
    if d == Direction.North: return Direction.South
    if d == Direction.South: return Direction.North
    if d == Direction.East: return Direction.West
    return Direction.East


class MazeInvariantError(RuntimeError):
    """Raised when the builder or solver reaches a state that valid input can never produce."""


# ==========================================
# 2. FRONTIER
# ==========================================

class Frontier:
    """LIFO of cell indices shared by the builder and the solver."""

    def __init__(self):
        self._items = []

    def push(self, idx: int): self._items.append(idx)

    def pop(self) -> int:
        if not self._items:
            raise MazeInvariantError("pop from empty frontier")
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise MazeInvariantError("top of empty frontier")
        return self._items[-1]

    def empty(self) -> bool: return not self._items
    def clear(self): self._items.clear()
    def snapshot(self) -> list: return list(self._items)
    def __len__(self): return len(self._items)
    def __iter__(self): return iter(self._items)
    def __repr__(self): return f"Frontier({self._items})"


# ==========================================
# 3. MAZE GRID
# ==========================================

class Maze:
    """
    Row-major grid of bit-flag cells.

    Index 0 is the top-left entry cell and ``width * height - 1`` the
    bottom-right goal cell. Passages are always carved in both cells at
    once so the flags stay symmetric.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.cells = [CellFlag.EMPTY.value] * (width * height)

    def size(self) -> int: return len(self.cells)
    def entry(self) -> int: return 0
    def goal(self) -> int: return self.width * self.height - 1

    def toIndex(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        return self.width * y + x

    def toCoords(self, idx: int) -> Tuple[int, int]:
        if not 0 <= idx < len(self.cells):
            raise IndexError(f"Cell index {idx} out of bounds")
        return idx % self.width, idx // self.width

    def _offsetUnchecked(self, idx: int, direction: Direction) -> int:
        if direction == Direction.North: return idx - self.width
        if direction == Direction.South: return idx + self.width
        if direction == Direction.East: return idx + 1
        return idx - 1

    def neighbor(self, idx: int, direction: Direction) -> Optional[int]:
        x, y = self.toCoords(idx)
        if direction == Direction.North:
            if y <= 0: return None
        elif direction == Direction.East:
            if x + 1 >= self.width: return None
        elif direction == Direction.South:
            if y + 1 >= self.height: return None
        elif direction == Direction.West:
            if x <= 0: return None
        return self._offsetUnchecked(idx, direction)

    # --- Flag helpers ---
    def getCell(self, idx: int) -> int: return self.cells[idx]
    def _hasFlag(self, idx: int, flag: CellFlag) -> bool: return (self.cells[idx] & flag.value) != 0
    def _setFlag(self, idx: int, flag: CellFlag): self.cells[idx] |= flag.value
    def _clearFlag(self, idx: int, flag: CellFlag): self.cells[idx] &= ~flag.value

    def hasPassage(self, idx: int, direction: Direction) -> bool:
        return self._hasFlag(idx, PASSAGE_BIT[direction])

    def openPassage(self, idx: int, direction: Direction):
        other = self.neighbor(idx, direction)
        if other is None:
            raise MazeInvariantError(f"No neighbour {direction.name} of cell {idx}")
        self._setFlag(idx, PASSAGE_BIT[direction])
        self._setFlag(other, PASSAGE_BIT[flip(direction)])

    def passageCount(self, idx: int) -> int:
        return bin(self.cells[idx] & PASSAGE_MASK).count("1")

    # --- Renderer contract ---
    def isBuildVisited(self, idx: int) -> bool: return self._hasFlag(idx, CellFlag.BUILD_VISITED)
    def isSolveVisited(self, idx: int) -> bool: return self._hasFlag(idx, CellFlag.SOLVE_VISITED)
    def isOnPath(self, idx: int) -> bool: return self._hasFlag(idx, CellFlag.SOLVE_PATH)

    def setBuildVisited(self, idx: int): self._setFlag(idx, CellFlag.BUILD_VISITED)
    def setSolveVisited(self, idx: int): self._setFlag(idx, CellFlag.SOLVE_VISITED)

    def markOnPath(self, idx: int, on_path: bool):
        if on_path: self._setFlag(idx, CellFlag.SOLVE_PATH)
        else: self._clearFlag(idx, CellFlag.SOLVE_PATH)

    def pathCells(self):
        return [i for i in range(len(self.cells)) if self.isOnPath(i)]

    def __repr__(self): return f"Maze({self.width}x{self.height})"
