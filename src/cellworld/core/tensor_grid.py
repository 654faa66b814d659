"""Vectorized grid engine backed by a PyTorch tensor."""

import logging
from typing import List, Sequence

import numpy as np
import torch

from .rules import Cell, RuleSet
from .world import CellWorld

logger = logging.getLogger(__name__)


class TensorGrid(CellWorld):
    """Grid engine that advances a whole generation with one tensor operation.

    Cells are stored encoded (see :meth:`RuleSet.encode`) in a float64
    tensor of shape (height, width) and the rule's ``step_tensor`` computes
    the next generation, typically as a zero-padded convolution. Results
    match :class:`~cellworld.core.grid.Grid` exactly for integer-valued
    rules and up to floating point rounding for real-valued ones.
    """

    def __init__(self, rule: RuleSet, width: int, height: int) -> None:
        """Initialize a new tensor grid filled with the rule's default value.

        Args:
            rule: Transition rule providing ``step_tensor``
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If width or height is not positive
            TypeError: If the rule has no vectorized step
        """
        super().__init__(rule, width, height)

        if not rule.supports_tensor():
            raise TypeError(f"{type(rule).__name__} does not implement step_tensor")

        self._cells = torch.full(
            (height, width), float(rule.encode(rule.default())), dtype=torch.float64
        )

        logger.debug("Created %dx%d tensor grid for %r", width, height, rule)

    @property
    def tensor(self) -> torch.Tensor:
        """Get a copy of the encoded cell tensor."""
        return self._cells.clone()

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the value of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return self.rule.decode(self._cells[y, x].item())

    def set_cell(self, x: int, y: int, value: Cell) -> None:
        """Set the value of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._cells[y, x] = float(self.rule.encode(value))

    def cells(self) -> List[Cell]:
        return [self.rule.decode(value) for value in self._cells.flatten().tolist()]

    def load_cells(self, values: Sequence[Cell]) -> None:
        values = list(values)
        if len(values) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells for "
                f"{self.width}x{self.height} grid, got {len(values)}"
            )

        encoded = [float(self.rule.encode(value)) for value in values]
        self._cells = torch.tensor(encoded, dtype=torch.float64).reshape(self.height, self.width)

    def to_array(self) -> np.ndarray:
        return self._cells.numpy().astype(self.rule.dtype)

    def step(self) -> None:
        """Advance the grid by one generation."""
        next_cells = self.rule.step_tensor(self._cells)
        if next_cells.shape != self._cells.shape:
            raise ValueError(
                f"step_tensor returned shape {tuple(next_cells.shape)}, "
                f"expected {tuple(self._cells.shape)}"
            )
        self._cells = next_cells.to(torch.float64)
        self._generation += 1
