"""Engine-independent contract for a grid of cells evolved by a rule."""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

import numpy as np

from .rules import Cell, RuleSet


class CellWorld(ABC):
    """A fixed-size 2D world whose cells evolve under a :class:`RuleSet`.

    Callers program against this interface regardless of how an engine
    computes a step (sequentially, in a worker pool, or vectorized).

    Coordinates outside ``[0, width) x [0, height)`` raise ``IndexError``
    on both reads and writes; negative coordinates are never wrapped.
    """

    def __init__(self, rule: RuleSet, width: int, height: int) -> None:
        """Initialize the world dimensions.

        Args:
            rule: Transition rule for every cell
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.rule = rule
        self.width = width
        self.height = height
        self._generation = 0

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def generation(self) -> int:
        """Number of steps applied since construction."""
        return self._generation

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid"
            )

    @abstractmethod
    def get_cell(self, x: int, y: int) -> Cell:
        """Get the value of the cell at column x, row y."""

    @abstractmethod
    def set_cell(self, x: int, y: int, value: Cell) -> None:
        """Overwrite the value of the cell at column x, row y."""

    @abstractmethod
    def step(self) -> None:
        """Apply the rule once to every cell of the grid."""

    @abstractmethod
    def cells(self) -> List[Cell]:
        """Get a copy of all cell values in row-major order."""

    @abstractmethod
    def load_cells(self, values: Sequence[Cell]) -> None:
        """Replace all cell values from a row-major sequence.

        Raises:
            ValueError: If the sequence length is not width * height
        """

    def step_many(self, n: int) -> None:
        """Apply the rule ``n`` times in order.

        Args:
            n: Number of steps (0 is a no-op)

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Step count must be non-negative, got {n}")

        for _ in range(n):
            self.step()

    def rows(self) -> List[List[Cell]]:
        """Get a copy of the cells as a list of rows."""
        data = self.cells()
        return [data[y * self.width:(y + 1) * self.width] for y in range(self.height)]

    def clear(self) -> None:
        """Reset every cell to the rule's default value."""
        self.fill(self.rule.default())

    def fill(self, value: Cell) -> None:
        """Set every cell to ``value``."""
        self.load_cells([value] * (self.width * self.height))

    def count(self, value: Cell) -> int:
        """Count cells equal to ``value``."""
        return sum(1 for cell in self.cells() if cell == value)

    def to_array(self) -> np.ndarray:
        """Export the grid as an array of shape (height, width).

        Cells are converted with the rule's ``encode`` and stored using the
        rule's ``dtype``.
        """
        return np.array(
            [[self.rule.encode(cell) for cell in row] for row in self.rows()],
            dtype=self.rule.dtype,
        )

    def from_array(self, array) -> None:
        """Load the grid from an array of shape (height, width).

        Args:
            array: Array-like of encoded cell values

        Raises:
            ValueError: If the array shape doesn't match the grid
        """
        arr = np.asarray(array)
        if arr.shape != (self.height, self.width):
            raise ValueError(
                f"Data shape {arr.shape} doesn't match grid {(self.height, self.width)}"
            )

        self.load_cells([self.rule.decode(value) for value in arr.ravel().tolist()])

    def __eq__(self, other: object) -> bool:
        """Worlds are equal when rule, shape and cells match, whatever the engine."""
        if not isinstance(other, CellWorld):
            return NotImplemented
        return (
            self.rule == other.rule
            and self.shape == other.shape
            and self.cells() == other.cells()
        )

    def close(self) -> None:
        """Release resources held by the engine (no-op unless overridden)."""

    def __enter__(self) -> "CellWorld":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __str__(self) -> str:
        """Render one line per row, each the repr of that row's values.

        Rows are joined with newlines and there is no trailing newline, so
        ``print(world)`` ends right after the last row.
        """
        return "\n".join(
            "[" + ", ".join(repr(cell) for cell in row) + "]" for row in self.rows()
        )
