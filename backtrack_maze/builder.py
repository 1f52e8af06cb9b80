import logging
import random
from typing import Optional

from .grid import Direction, Frontier, Maze, MazeInvariantError

logger = logging.getLogger(__name__)

# Canonical scan order for collecting candidates.
BUILD_ORDER = [Direction.North, Direction.South, Direction.East, Direction.West]


class RandomChooser:
    """Uniform choice over ``[0, n)``; seed it for reproducible mazes."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def choose(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"Cannot choose from {n} candidates")
        return self._rng.randrange(n)


# Seeded once from system entropy at import, never reseeded on restart.
SHARED_CHOOSER = RandomChooser()


class MazeBuilder:
    """Randomized depth-first spanning-tree construction ("recursive backtracker")."""

    def __init__(self, maze: Maze, frontier: Frontier, chooser: Optional[RandomChooser] = None):
        self.maze = maze
        self.frontier = frontier
        self.chooser = chooser if chooser is not None else SHARED_CHOOSER
        self.carved = 0
        self.finished = False

    def buildEnter(self, idx: int):
        self.maze.setBuildVisited(idx)
        self.frontier.push(idx)

    def candidates(self, cur: int):
        found = []
        for d in BUILD_ORDER:
            idx = self.maze.neighbor(cur, d)
            if idx is not None and not self.maze.isBuildVisited(idx):
                found.append((d, idx))
        return found

    def step(self) -> str:
        if self.finished:
            raise MazeInvariantError("builder stepped after generation finished")
        cur = self.frontier.top()
        options = self.candidates(cur)
        if not options:
            self.frontier.pop()
            if self.frontier.empty():
                self.finished = True
                logger.debug("Generation complete: carved %d passages over %d cells",
                             self.carved, self.maze.size())
                return "FINISHED"
            return "BACKTRACKING"

        direction, nextIdx = options[self.chooser.choose(len(options))]
        self.maze.openPassage(cur, direction)
        self.buildEnter(nextIdx)
        self.carved += 1
        return "CARVING"

    def build_step_by_step(self):
        while not self.finished:
            yield self.step()
