from backend.models.point import Point
from backend.models.puzzle import Puzzle
from backend.models.puzzle_array import ArrayPuzzle
from backend.models.puzzle_compact import CompactPuzzle

__all__ = ["ArrayPuzzle", "CompactPuzzle", "Point", "Puzzle"]
