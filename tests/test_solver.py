import pytest

from backtrack_maze.builder import MazeBuilder, RandomChooser
from backtrack_maze.grid import Direction, Frontier, Maze, MazeInvariantError
from backtrack_maze.solver import MazeSolver

from conftest import tree_path


def start_solver(maze):
    solver = MazeSolver(maze, Frontier())
    solver.solveEnter(maze.entry())
    return solver


def test_dead_end_is_abandoned():
    # 0 1
    # 2 3   passages 0-2 (dead end), 0-1, 1-3; goal is 3
    maze = Maze(2, 2)
    maze.openPassage(0, Direction.South)
    maze.openPassage(0, Direction.East)
    maze.openPassage(1, Direction.South)
    solver = start_solver(maze)

    assert solver.step() == "SEARCHING"
    assert solver.frontier.snapshot() == [0, 2]
    assert solver.step() == "BACKTRACKING"
    assert solver.frontier.snapshot() == [0]
    assert maze.isSolveVisited(2)
    assert not maze.isOnPath(2)

    assert solver.step() == "SEARCHING"
    assert solver.step() == "SEARCHING"
    assert solver.step() == "FINISHED"
    assert solver.frontier.snapshot() == [0, 1, 3]
    assert set(maze.pathCells()) == {0, 1, 3}
    assert solver.backtracks == 1


def test_south_is_probed_before_east():
    maze = Maze(2, 2)
    maze.openPassage(0, Direction.East)
    maze.openPassage(0, Direction.South)
    maze.openPassage(2, Direction.East)
    solver = start_solver(maze)
    solver.step()
    assert solver.frontier.top() == 2


def test_entry_equal_to_goal():
    maze = Maze(1, 1)
    solver = start_solver(maze)
    assert solver.step() == "FINISHED"
    assert solver.frontier.snapshot() == [0]
    assert maze.pathCells() == [0]


@pytest.mark.parametrize("seed", [3, 17, 256])
def test_on_path_matches_frontier_every_step(seed):
    maze = Maze(11, 8)
    builder = MazeBuilder(maze, Frontier(), RandomChooser(seed))
    builder.buildEnter(0)
    for _ in builder.build_step_by_step():
        pass

    solver = start_solver(maze)
    for _ in solver.solve_step_by_step():
        assert set(maze.pathCells()) == set(solver.frontier)

    expected = tree_path(maze, maze.entry(), maze.goal())
    assert solver.frontier.snapshot() == expected
    assert maze.pathCells() == sorted(expected)


def test_unreachable_goal_fails_fast():
    maze = Maze(2, 1)
    solver = start_solver(maze)
    with pytest.raises(MazeInvariantError):
        solver.step()
    assert solver.frontier.snapshot() == [0]


def test_stepping_after_goal_fails_fast():
    solver = start_solver(Maze(1, 1))
    solver.step()
    with pytest.raises(MazeInvariantError):
        solver.step()
