"""Seed patterns and a library of common Game of Life patterns."""

from typing import Any, Dict, List, Optional, Tuple

from .rules import Cell
from .world import CellWorld


class Pattern:
    """A set of cell offsets to seed a world with."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates to seed
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    def apply_to_world(
        self,
        world: CellWorld,
        value: Cell,
        offset_x: int = 0,
        offset_y: int = 0,
        clear: bool = True,
    ) -> int:
        """Write ``value`` at every pattern cell.

        Args:
            world: Target world
            value: Cell value to write
            offset_x: Horizontal offset
            offset_y: Vertical offset
            clear: Reset the world to default values first

        Returns:
            Number of cells written (cells outside the grid are skipped)
        """
        if clear:
            world.clear()

        written = 0
        for x, y in self.cells:
            try:
                world.set_cell(x + offset_x, y + offset_y, value)
            except IndexError:
                continue
            written += 1
        return written

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        min_x, min_y, _, _ = self.get_bounding_box()
        normalized_cells = [(x - min_x, y - min_y) for x, y in self.cells]

        return Pattern(self.name, normalized_cells, self.description, self.metadata.copy())

    @classmethod
    def from_world(cls, world: CellWorld, name: str, value: Cell, description: str = "") -> "Pattern":
        """Create a pattern from the cells of a world equal to ``value``.

        Args:
            world: Source world
            name: Pattern name
            value: Cell value to capture
            description: Optional description

        Returns:
            New Pattern instance
        """
        cells = []
        for y, row in enumerate(world.rows()):
            for x, cell in enumerate(row):
                if cell == value:
                    cells.append((x, y))

        metadata = {"source_grid_size": world.shape, "population": len(cells)}

        return cls(name, cells, description, metadata)


class PatternLibrary:
    """Collection of named patterns, preloaded with Game of Life classics."""

    CATEGORIES = {
        "Still Life": ["Block", "Beehive"],
        "Oscillators": ["Blinker", "Toad", "Beacon"],
        "Spaceships": ["Glider"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        self.add_pattern(
            Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block")
        )
        self.add_pattern(
            Pattern(
                "Beehive",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator", {"period": 2})
        )
        self.add_pattern(
            Pattern(
                "Toad",
                [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
                "Period-2 oscillator",
                {"period": 2},
            )
        )
        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
                "Period-2 oscillator",
                {"period": 2},
            )
        )

        self.add_pattern(
            Pattern(
                "Glider",
                [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
                "Smallest spaceship, period-4",
                {"period": 4},
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if not found."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names organized by category.

        Patterns that aren't built in are listed under "Custom".
        """
        categories = {cat: list(names) for cat, names in self.CATEGORIES.items()}
        categories["Custom"] = []

        all_builtin = set()
        for cat_patterns in self.CATEGORIES.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        return {cat: patterns for cat, patterns in categories.items() if patterns}
