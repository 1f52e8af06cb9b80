from .builder import MazeBuilder, RandomChooser, SHARED_CHOOSER
from .controller import Phase, PhaseController
from .grid import CellFlag, Direction, Frontier, Maze, MazeInvariantError, flip
from .solver import MazeSolver

__all__ = [
    "CellFlag", "Direction", "Frontier", "Maze", "MazeInvariantError", "flip",
    "MazeBuilder", "RandomChooser", "SHARED_CHOOSER",
    "MazeSolver", "Phase", "PhaseController",
]
