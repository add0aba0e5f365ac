from backend.engine.gamesolver.graph import PuzzleNode, PuzzleNodeNetwork
from backend.engine.gamesolver.solver import PuzzleSolution, PuzzleSolver

__all__ = ["PuzzleNode", "PuzzleNodeNetwork", "PuzzleSolution", "PuzzleSolver"]
