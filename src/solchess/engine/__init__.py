"""Puzzle engine package: exhaustive solver and randomized generator."""

from solchess.engine.generator import (
    DEFAULT_CANDIDATE_PIECES,
    GenerateStats,
    GeneratorLimits,
    PuzzleGenerator,
    generate,
)
from solchess.engine.random_source import RandomRange, StdRandomRange
from solchess.engine.solver import Solution, Solver, solve

__all__ = [
    "DEFAULT_CANDIDATE_PIECES",
    "GenerateStats",
    "GeneratorLimits",
    "PuzzleGenerator",
    "RandomRange",
    "Solution",
    "Solver",
    "StdRandomRange",
    "generate",
    "solve",
]
