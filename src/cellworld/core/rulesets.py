"""Example rule sets: Conway's Game of Life and a simple diffusion model."""

from enum import Enum

import numpy as np
import torch
import torch.nn.functional as F

from .rules import Neighborhood, RuleSet


class BinaryCell(Enum):
    """Cell state for two-state automata."""

    DEAD = 0
    LIVE = 1

    def __repr__(self) -> str:
        return self.name.title()


class GameOfLife(RuleSet):
    """Conway's Game of Life (B3/S23).

    - Any cell with exactly 3 live neighbors is live next generation
    - A live cell with exactly 2 live neighbors survives
    - All other cells die or stay dead
    """

    name = "Game of Life"
    dtype = np.int8

    def default(self) -> BinaryCell:
        return BinaryCell.DEAD

    def step(self, neighborhood: Neighborhood) -> BinaryCell:
        (tl, t, tr), (l, m, r), (bl, b, br) = neighborhood
        live_neighbors = sum(
            1 for cell in (tl, t, tr, l, r, bl, b, br) if cell is BinaryCell.LIVE
        )

        if live_neighbors == 3:
            return BinaryCell.LIVE
        if live_neighbors == 2 and m is BinaryCell.LIVE:
            return BinaryCell.LIVE
        return BinaryCell.DEAD

    def encode(self, cell: BinaryCell) -> int:
        return cell.value

    def decode(self, value) -> BinaryCell:
        return BinaryCell.LIVE if value else BinaryCell.DEAD

    def step_tensor(self, cells: torch.Tensor) -> torch.Tensor:
        kernel = torch.tensor(
            [[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=cells.dtype
        ).unsqueeze(0).unsqueeze(0)

        # Zero padding keeps off-grid neighbors dead
        neighbors = F.conv2d(cells.unsqueeze(0).unsqueeze(0), kernel, padding=1)[0, 0]

        birth = neighbors == 3
        survive = (cells > 0) & (neighbors == 2)
        return (birth | survive).to(cells.dtype)


class Diffusion(RuleSet):
    """Very simple heat diffusion.

    The middle cell keeps 40% of its value and receives 10% from each
    orthogonal neighbor and 5% from each diagonal neighbor.
    """

    name = "Diffusion"
    dtype = np.float64

    CORNER = 0.05
    EDGE = 0.1
    CENTER = 0.4

    def default(self) -> float:
        return 0.0

    def step(self, neighborhood: Neighborhood) -> float:
        (tl, t, tr), (l, m, r), (bl, b, br) = neighborhood
        return (
            self.CORNER * tl + self.EDGE * t + self.CORNER * tr
            + self.EDGE * l + self.CENTER * m + self.EDGE * r
            + self.CORNER * bl + self.EDGE * b + self.CORNER * br
        )

    def encode(self, cell: float) -> float:
        return float(cell)

    def decode(self, value) -> float:
        return float(value)

    def step_tensor(self, cells: torch.Tensor) -> torch.Tensor:
        kernel = torch.tensor(
            [
                [self.CORNER, self.EDGE, self.CORNER],
                [self.EDGE, self.CENTER, self.EDGE],
                [self.CORNER, self.EDGE, self.CORNER],
            ],
            dtype=cells.dtype,
        ).unsqueeze(0).unsqueeze(0)

        return F.conv2d(cells.unsqueeze(0).unsqueeze(0), kernel, padding=1)[0, 0]
