import logging

from .grid import Direction, Frontier, Maze, MazeInvariantError

logger = logging.getLogger(__name__)

SOLVE_ORDER = [Direction.South, Direction.East, Direction.North, Direction.West]


class MazeSolver:
    """
    Iterative depth-first search from the entry cell to the goal cell.

    The cells currently on the frontier are exactly the cells carrying the
    on-path flag. When the goal is reached the frontier holds the solution
    in entry-to-goal order.
    """

    def __init__(self, maze: Maze, frontier: Frontier):
        self.maze = maze
        self.frontier = frontier
        self.backtracks = 0
        self.finished = False

    def solveEnter(self, idx: int):
        self.maze.setSolveVisited(idx)
        self.maze.markOnPath(idx, True)
        self.frontier.push(idx)

    def removeFromPath(self, idx: int):
        self.maze.markOnPath(idx, False)
        self.frontier.pop()
        self.backtracks += 1

    def nextCell(self, cur: int):
        for d in SOLVE_ORDER:
            if self.maze.hasPassage(cur, d):
                idx = self.maze.neighbor(cur, d)
                if idx is not None and not self.maze.isSolveVisited(idx):
                    return idx
        return None

    def step(self) -> str:
        if self.finished:
            raise MazeInvariantError("solver stepped after reaching the goal")
        cur = self.frontier.top()
        if cur == self.maze.goal():
            self.finished = True
            logger.debug("Solved: path length %d, %d backtracks",
                         len(self.frontier), self.backtracks)
            return "FINISHED"

        nextIdx = self.nextCell(cur)
        if nextIdx is not None:
            self.solveEnter(nextIdx)
            return "SEARCHING"

        if len(self.frontier) == 1:
            raise MazeInvariantError(f"goal {self.maze.goal()} unreachable from cell {cur}")
        self.removeFromPath(cur)
        return "BACKTRACKING"

    def solve_step_by_step(self):
        while not self.finished:
            yield self.step()
