"""Tests for EngineConfig and the world factory."""

import pytest

from cellworld.core.config import EngineConfig, create_world
from cellworld.core.grid import Grid
from cellworld.core.parallel_grid import ParallelGrid
from cellworld.core.rulesets import Diffusion, GameOfLife
from cellworld.core.tensor_grid import TensorGrid


class TestCreateWorld:
    """Test cases for create_world."""

    def test_default_is_sequential(self):
        """Test the default config builds a sequential Grid."""
        world = create_world(GameOfLife(), 3, 4)
        assert type(world) is Grid
        assert world.shape == (3, 4)

    def test_parallel(self):
        """Test parallel options are passed through."""
        config = EngineConfig(
            strategy="parallel", workers=3, chunk_size=2, use_processes=False, min_parallel_cells=10
        )
        world = create_world(Diffusion(), 5, 5, config)

        assert isinstance(world, ParallelGrid)
        assert world.workers == 3
        assert world.chunk_size == 2
        assert world.use_processes is False
        assert world.min_parallel_cells == 10

    def test_tensor(self):
        """Test the tensor strategy."""
        world = create_world(Diffusion(), 2, 2, EngineConfig(strategy="tensor"))
        assert isinstance(world, TensorGrid)

    def test_unknown_strategy(self):
        """Test an unknown strategy raises ValueError."""
        with pytest.raises(ValueError, match="gpu"):
            create_world(GameOfLife(), 2, 2, EngineConfig(strategy="gpu"))

    def test_config_defaults(self):
        """Test EngineConfig defaults."""
        config = EngineConfig()
        assert config.strategy == "sequential"
        assert config.workers is None
        assert config.chunk_size is None
        assert config.use_processes is True
        assert config.min_parallel_cells == 0
