"""Core cellular automata logic."""

from .rules import RuleSet, Neighborhood
from .rulesets import BinaryCell, GameOfLife, Diffusion
from .world import CellWorld
from .grid import Grid, Adjacency, adjacency, neighborhood
from .parallel_grid import ParallelGrid
from .tensor_grid import TensorGrid
from .config import EngineConfig, create_world
from .patterns import Pattern, PatternLibrary

__all__ = [
    "RuleSet",
    "Neighborhood",
    "BinaryCell",
    "GameOfLife",
    "Diffusion",
    "CellWorld",
    "Grid",
    "Adjacency",
    "adjacency",
    "neighborhood",
    "ParallelGrid",
    "TensorGrid",
    "EngineConfig",
    "create_world",
    "Pattern",
    "PatternLibrary",
]
