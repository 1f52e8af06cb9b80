import logging
from enum import Enum
from typing import List, Optional

from . import config
from .builder import MazeBuilder, RandomChooser
from .grid import Frontier, Maze, MazeInvariantError
from .solver import MazeSolver

logger = logging.getLogger(__name__)


class Phase(Enum):
    Building = 0
    Solving = 1
    Solved = 2

    def __str__(self): return self.name


class PhaseController:
    """
    Building -> Solving -> Solved -> Building state machine.

    Owns the grid, the shared frontier and the chooser. The host calls
    ``tick(elapsed)`` once per frame; each tick advances the active phase
    by one step, or to the end of the phase when fast mode is enabled for
    it. ``fade`` grows while Solved and triggers a full reset once it
    reaches ``config.FADE_LIMIT``.
    """

    def __init__(self, width: int = config.DEFAULT_WIDTH, height: int = config.DEFAULT_HEIGHT,
                 fast_build: bool = config.DEFAULT_FAST_BUILD,
                 fast_solve: bool = config.DEFAULT_FAST_SOLVE,
                 chooser: Optional[RandomChooser] = None):
        self.width = width
        self.height = height
        self.fast_build = fast_build
        self.fast_solve = fast_solve
        self.chooser = chooser
        self.resets = 0
        self.init()

    def init(self):
        self.fade = 0
        self.elapsed = 0.0
        self.maze = Maze(self.width, self.height)
        self.frontier = Frontier()
        self.solver = None
        self.builder = MazeBuilder(self.maze, self.frontier, self.chooser)
        self.phase = Phase.Building
        self.builder.buildEnter(self.maze.entry())

    def restart(self):
        self.resets += 1
        logger.info("Resetting %dx%d maze (restart #%d)", self.width, self.height, self.resets)
        self.init()

    # --- Queries ---
    def solution(self) -> Optional[List[int]]:
        if self.phase != Phase.Solved:
            return None
        return self.frontier.snapshot()

    def fadeFraction(self) -> float:
        return min(self.fade, config.FADE_LIMIT) / config.FADE_LIMIT

    # --- Stepping ---
    def tick(self, elapsed: float = 0.0) -> Phase:
        self.elapsed += elapsed
        if self.phase == Phase.Building:
            self._run(self.builder.step, self.fast_build, Phase.Building)
        elif self.phase == Phase.Solving:
            self._run(self.solver.step, self.fast_solve, Phase.Solving)
        else:
            self._solved()
        return self.phase

    def _run(self, step, fast: bool, phase: Phase):
        # Builder and solver each take at most 2 * cells steps.
        budget = 2 * self.maze.size() + 1
        while True:
            status = step()
            if status == "FINISHED":
                self._advance()
            budget -= 1
            if not fast or self.phase != phase:
                return
            if budget <= 0:
                raise MazeInvariantError(f"{phase} did not finish within its step bound")

    def _advance(self):
        if self.phase == Phase.Building:
            self.frontier.clear()
            self.solver = MazeSolver(self.maze, self.frontier)
            self.solver.solveEnter(self.maze.entry())
            self.phase = Phase.Solving
            logger.info("Maze built (%d passages), solving", self.builder.carved)
        elif self.phase == Phase.Solving:
            self.phase = Phase.Solved
            logger.info("Maze solved: path of %d cells", len(self.frontier))

    def _solved(self):
        if self.elapsed > config.FADE_INTERVAL:
            self.fade += config.FADE_STEP
            self.elapsed = 0.0
        if self.fade >= config.FADE_LIMIT:
            self.restart()
