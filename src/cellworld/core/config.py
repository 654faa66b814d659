"""Engine configuration and world factory."""

import logging
from dataclasses import dataclass
from typing import Optional

from .grid import Grid
from .parallel_grid import ParallelGrid
from .rules import RuleSet
from .tensor_grid import TensorGrid
from .world import CellWorld

logger = logging.getLogger(__name__)

STRATEGIES = ("sequential", "parallel", "tensor")


@dataclass
class EngineConfig:
    """Configuration for choosing and tuning a stepping strategy."""
    strategy: str = "sequential"
    workers: Optional[int] = None
    chunk_size: Optional[int] = None
    use_processes: bool = True
    min_parallel_cells: int = 0


def create_world(
    rule: RuleSet, width: int, height: int, config: Optional[EngineConfig] = None
) -> CellWorld:
    """Create a world for ``rule`` using the configured engine.

    Args:
        rule: Transition rule for every cell
        width: Number of columns
        height: Number of rows
        config: Engine configuration (None for sequential defaults)

    Returns:
        A new world with every cell set to the rule's default value

    Raises:
        ValueError: If the strategy is unknown or dimensions are not positive
    """
    config = config or EngineConfig()
    logger.debug("Creating %s world %dx%d for %r", config.strategy, width, height, rule)

    if config.strategy == "sequential":
        return Grid(rule, width, height)
    if config.strategy == "parallel":
        return ParallelGrid(
            rule,
            width,
            height,
            workers=config.workers,
            chunk_size=config.chunk_size,
            use_processes=config.use_processes,
            min_parallel_cells=config.min_parallel_cells,
        )
    if config.strategy == "tensor":
        return TensorGrid(rule, width, height)

    raise ValueError(f"Unknown strategy {config.strategy!r}, expected one of {STRATEGIES}")
