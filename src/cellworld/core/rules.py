"""Rule abstraction for 3x3 neighborhood cellular automata."""

from abc import ABC, abstractmethod
from typing import Any, Tuple

import torch

Cell = Any
Row = Tuple[Cell, Cell, Cell]
Neighborhood = Tuple[Row, Row, Row]


class RuleSet(ABC):
    """Base class for a transition rule and the cell type it operates on.

    A rule sees a cell together with its eight Moore neighbors as a 3x3
    snapshot in row-major order::

        ((TL, T, TR),
         (L,  M,  R),
         (BL, B, BR))

    and returns the new value for the middle cell. Cell values must be
    immutable, comparable with ``==``, and the rule must provide a default
    value. Grids start filled with the default value and every neighbor
    slot that lies outside the grid reads as the default value.

    Rules may also provide a vectorized form used by
    :class:`~cellworld.core.tensor_grid.TensorGrid`: ``encode``/``decode``
    map cells to and from numbers and ``step_tensor`` advances a whole
    encoded generation at once.
    """

    name = ""
    dtype: Any = object

    @abstractmethod
    def default(self) -> Cell:
        """Return the default (zero) cell value."""

    @abstractmethod
    def step(self, neighborhood: Neighborhood) -> Cell:
        """Compute the next value of the middle cell.

        Must be deterministic and must not depend on anything except the
        neighborhood passed in.
        """

    def encode(self, cell: Cell) -> Any:
        """Map a cell value to its numeric representation."""
        return cell

    def decode(self, value: Any) -> Cell:
        """Map a numeric representation back to a cell value."""
        return value

    def step_tensor(self, cells: torch.Tensor) -> torch.Tensor:
        """Advance a whole encoded generation of shape (height, width).

        Implementations must treat positions outside the tensor as the
        encoded default value and return a new tensor of the same shape.
        """
        raise NotImplementedError(f"{type(self).__name__} has no vectorized step")

    def supports_tensor(self) -> bool:
        """Whether this rule overrides :meth:`step_tensor`."""
        return type(self).step_tensor is not RuleSet.step_tensor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
