"""Tests for the Pattern and PatternLibrary classes."""

from cellworld.core.grid import Grid
from cellworld.core.patterns import Pattern, PatternLibrary
from cellworld.core.rulesets import BinaryCell, Diffusion, GameOfLife

L, D = BinaryCell.LIVE, BinaryCell.DEAD


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"
        assert pattern.metadata == {}

    def test_apply_to_world(self):
        """Test applying a pattern writes the given value."""
        grid = Grid(GameOfLife(), 10, 10)
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])

        written = pattern.apply_to_world(grid, L)

        assert written == 3
        assert grid.get_cell(0, 0) is L
        assert grid.get_cell(1, 0) is L
        assert grid.get_cell(2, 0) is L
        assert grid.get_cell(0, 1) is D
        assert grid.count(L) == 3

    def test_apply_with_offset(self):
        """Test applying a pattern with an offset."""
        grid = Grid(GameOfLife(), 10, 10)
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])

        pattern.apply_to_world(grid, L, offset_x=5, offset_y=3)

        assert grid.get_cell(5, 3) is L
        assert grid.get_cell(7, 3) is L
        assert grid.get_cell(0, 0) is D
        assert grid.count(L) == 3

    def test_apply_out_of_bounds_skipped(self):
        """Test cells falling outside the grid are skipped."""
        grid = Grid(GameOfLife(), 3, 3)
        pattern = Pattern("Line", [(0, 0), (1, 0), (2, 0), (3, 0)])

        written = pattern.apply_to_world(grid, L, offset_x=1)

        assert written == 2
        assert grid.count(L) == 2

    def test_apply_clears_unless_disabled(self):
        """Test the world is cleared first by default."""
        grid = Grid(Diffusion(), 3, 3)
        grid.set_cell(2, 2, 9.0)
        pattern = Pattern("Dot", [(0, 0)])

        pattern.apply_to_world(grid, 1.0, clear=False)
        assert grid.get_cell(2, 2) == 9.0
        assert grid.get_cell(0, 0) == 1.0

        pattern.apply_to_world(grid, 1.0, offset_x=1)
        assert grid.get_cell(2, 2) == 0.0
        assert grid.get_cell(0, 0) == 0.0
        assert grid.get_cell(1, 0) == 1.0

    def test_bounding_box_and_size(self):
        """Test bounding box and size calculation."""
        pattern = Pattern("Test", [(1, 2), (3, 2), (2, 5)])
        assert pattern.get_bounding_box() == (1, 2, 3, 5)
        assert pattern.get_size() == (3, 4)

        empty = Pattern("Empty", [])
        assert empty.get_bounding_box() == (0, 0, 0, 0)

    def test_normalize(self):
        """Test normalization shifts cells to the origin."""
        pattern = Pattern("Test", [(5, 5), (6, 5), (7, 6)], metadata={"period": 1})
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 0), (2, 1)]
        assert normalized.metadata == {"period": 1}
        assert pattern.cells == [(5, 5), (6, 5), (7, 6)]

    def test_from_world(self):
        """Test capturing a pattern from a world."""
        grid = Grid(GameOfLife(), 4, 4)
        grid.set_cell(1, 1, L)
        grid.set_cell(2, 3, L)

        pattern = Pattern.from_world(grid, "Captured", L)

        assert sorted(pattern.cells) == [(1, 1), (2, 3)]
        assert pattern.metadata["population"] == 2
        assert pattern.metadata["source_grid_size"] == (4, 4)


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test the built-in patterns are available."""
        library = PatternLibrary()
        names = library.list_patterns()

        for name in ["Block", "Beehive", "Blinker", "Toad", "Beacon", "Glider"]:
            assert name in names

        assert library.get_pattern("Nope") is None

    def test_categories(self):
        """Test categorization including custom patterns."""
        library = PatternLibrary()
        assert "Custom" not in library.get_patterns_by_category()

        library.add_pattern(Pattern("Mine", [(0, 0)]))
        categories = library.get_patterns_by_category()

        assert categories["Custom"] == ["Mine"]
        assert "Glider" in categories["Spaceships"]
        assert "Block" in categories["Still Life"]

    def test_still_lifes_are_stable(self):
        """Test still life patterns don't change."""
        library = PatternLibrary()
        for name in library.get_patterns_by_category()["Still Life"]:
            grid = Grid(GameOfLife(), 8, 8)
            library.get_pattern(name).apply_to_world(grid, L, 2, 2)
            before = grid.cells()

            grid.step_many(3)

            assert grid.cells() == before, name

    def test_oscillators_return(self):
        """Test oscillators return to their initial state after their period."""
        library = PatternLibrary()
        for name in library.get_patterns_by_category()["Oscillators"]:
            pattern = library.get_pattern(name)
            grid = Grid(GameOfLife(), 8, 8)
            pattern.apply_to_world(grid, L, 2, 2)
            before = grid.cells()

            grid.step()
            assert grid.cells() != before, name

            grid.step_many(pattern.metadata["period"] - 1)
            assert grid.cells() == before, name

    def test_glider_translates(self):
        """Test a glider moves one cell diagonally every four generations."""
        glider = PatternLibrary().get_pattern("Glider")
        grid = Grid(GameOfLife(), 10, 10)
        glider.apply_to_world(grid, L, 1, 1)

        grid.step_many(4)

        expected = sorted((x + 2, y + 2) for x, y in glider.cells)
        assert sorted(Pattern.from_world(grid, "Moved", L).cells) == expected
