from collections import deque

import pytest

from backtrack_maze.builder import RandomChooser
from backtrack_maze.controller import Phase, PhaseController
from backtrack_maze.grid import Direction


class ScriptedChooser(RandomChooser):
    """Returns pre-set picks and records how many candidates each draw saw."""

    def __init__(self, picks=()):
        super().__init__(seed=0)
        self.picks = list(picks)
        self.seen = []

    def choose(self, n):
        self.seen.append(n)
        return self.picks.pop(0) if self.picks else 0


def passage_edges(maze):
    edges = set()
    for idx in range(maze.size()):
        for d in (Direction.East, Direction.South):
            if maze.hasPassage(idx, d):
                edges.add((idx, maze.neighbor(idx, d)))
    return edges


def reachable(maze, start=0):
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for d in Direction:
            if maze.hasPassage(cur, d):
                nxt = maze.neighbor(cur, d)
                if nxt not in seen:
                    seen.add(nxt)
                    q.append(nxt)
    return seen


def tree_path(maze, start, goal):
    parent = {start: None}
    q = deque([start])
    while q:
        cur = q.popleft()
        for d in Direction:
            if maze.hasPassage(cur, d):
                nxt = maze.neighbor(cur, d)
                if nxt not in parent:
                    parent[nxt] = cur
                    q.append(nxt)
    path = [goal]
    while parent[path[-1]] is not None:
        path.append(parent[path[-1]])
    return path[::-1]


def run_until(controller, phase, limit=100000):
    for _ in range(limit):
        if controller.phase == phase:
            return
        controller.tick(0.0)
    raise AssertionError(f"never reached {phase}")


@pytest.fixture
def scripted():
    return ScriptedChooser


@pytest.fixture
def solved_controller():
    controller = PhaseController(7, 5, chooser=RandomChooser(2024))
    run_until(controller, Phase.Solved)
    return controller
