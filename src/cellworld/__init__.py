"""Generic 2D cellular automaton engine with pluggable 3x3 neighborhood rules."""

__version__ = "0.1.0"

from .core.rules import RuleSet
from .core.rulesets import BinaryCell, GameOfLife, Diffusion
from .core.world import CellWorld
from .core.grid import Grid
from .core.parallel_grid import ParallelGrid
from .core.tensor_grid import TensorGrid
from .core.config import EngineConfig, create_world
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "RuleSet",
    "BinaryCell",
    "GameOfLife",
    "Diffusion",
    "CellWorld",
    "Grid",
    "ParallelGrid",
    "TensorGrid",
    "EngineConfig",
    "create_world",
    "Pattern",
    "PatternLibrary",
]
