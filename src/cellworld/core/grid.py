"""Grid engine with flat storage and an absorbing boundary."""

import logging
from enum import Flag
from typing import List, Sequence

from .rules import Cell, Neighborhood, RuleSet
from .world import CellWorld

logger = logging.getLogger(__name__)


class Adjacency(Flag):
    """Which borders of the grid a cell touches.

    Interior cells are ``NONE``; edge cells touch one side and corner cells
    two. On grids one cell wide or tall a cell can touch opposite sides at
    once (e.g. ``TOP | BOTTOM``).
    """

    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8

    TOP_LEFT = TOP | LEFT
    TOP_RIGHT = TOP | RIGHT
    BOTTOM_LEFT = BOTTOM | LEFT
    BOTTOM_RIGHT = BOTTOM | RIGHT


def adjacency(index: int, width: int, length: int) -> Adjacency:
    """Classify the cell at a flat index by the borders it touches.

    Args:
        index: Row-major index of the cell
        width: Number of columns
        length: Total number of cells

    Returns:
        Combination of the borders the cell lies on
    """
    x = index % width
    y = index // width
    height = length // width

    result = Adjacency.NONE
    if y == 0:
        result |= Adjacency.TOP
    if y == height - 1:
        result |= Adjacency.BOTTOM
    if x == 0:
        result |= Adjacency.LEFT
    if x == width - 1:
        result |= Adjacency.RIGHT
    return result


def neighborhood(data: Sequence[Cell], index: int, width: int, default: Cell) -> Neighborhood:
    """Extract the 3x3 neighborhood around a cell.

    Neighbor slots outside the grid hold ``default``; there is no
    wraparound and no clamping to the nearest cell.

    Args:
        data: Row-major cell storage
        index: Flat index of the middle cell
        width: Number of columns
        default: Value used for off-grid slots

    Returns:
        Row-major 3x3 tuple of cell values
    """
    adj = adjacency(index, width, len(data))
    up = not (adj & Adjacency.TOP)
    down = not (adj & Adjacency.BOTTOM)
    left = not (adj & Adjacency.LEFT)
    right = not (adj & Adjacency.RIGHT)

    above = index - width
    below = index + width

    return (
        (
            data[above - 1] if up and left else default,
            data[above] if up else default,
            data[above + 1] if up and right else default,
        ),
        (
            data[index - 1] if left else default,
            data[index],
            data[index + 1] if right else default,
        ),
        (
            data[below - 1] if down and left else default,
            data[below] if down else default,
            data[below + 1] if down and right else default,
        ),
    )


def step_range(rule: RuleSet, data: Sequence[Cell], width: int, start: int, stop: int) -> List[Cell]:
    """Compute next-generation values for indices ``start`` to ``stop``.

    Reads only from ``data``, so any number of ranges can be computed
    independently against the same generation.
    """
    default = rule.default()
    return [rule.step(neighborhood(data, idx, width, default)) for idx in range(start, stop)]


class Grid(CellWorld):
    """Sequential grid engine.

    Cells live in one flat list in row-major order (``index = y * width + x``).
    Each step builds the complete next generation in a new list before
    replacing the old one, so no cell ever sees a neighbor that was already
    updated in the same step.
    """

    def __init__(self, rule: RuleSet, width: int, height: int) -> None:
        """Initialize a new grid filled with the rule's default value.

        Args:
            rule: Transition rule for every cell
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If width or height is not positive
        """
        super().__init__(rule, width, height)
        default = rule.default()
        self._data: List[Cell] = [default] * (width * height)

        logger.debug("Created %dx%d %s grid for %r", width, height, type(self).__name__, rule)

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the value of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            The cell value

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return self._data[y * self.width + x]

    def set_cell(self, x: int, y: int, value: Cell) -> None:
        """Set the value of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            value: New cell value

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._data[y * self.width + x] = value

    def cells(self) -> List[Cell]:
        return list(self._data)

    def load_cells(self, values: Sequence[Cell]) -> None:
        values = list(values)
        if len(values) != len(self._data):
            raise ValueError(
                f"Expected {len(self._data)} cells for {self.width}x{self.height} grid, got {len(values)}"
            )
        self._data = values

    def neighborhood(self, x: int, y: int) -> Neighborhood:
        """Get the 3x3 neighborhood the rule would see for a cell."""
        self._check_bounds(x, y)
        return neighborhood(self._data, y * self.width + x, self.width, self.rule.default())

    def step(self) -> None:
        """Advance the grid by one generation."""
        self._data = self._compute_next(tuple(self._data))
        self._generation += 1

    def _compute_next(self, data: Sequence[Cell]) -> List[Cell]:
        return step_range(self.rule, data, self.width, 0, len(data))
