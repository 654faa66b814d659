#!/usr/bin/env python3
"""
Example usage of the cellworld package.
"""

from cellworld import BinaryCell, Diffusion, EngineConfig, GameOfLife, PatternLibrary, create_world


def main():
    """Demonstrate programmatic usage of the cellworld package."""
    # Game of Life with a glider, stepped in a worker pool
    config = EngineConfig(strategy="parallel", workers=4)
    world = create_world(GameOfLife(), 12, 12, config)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    glider.apply_to_world(world, BinaryCell.LIVE, offset_x=2, offset_y=2)

    print("Initial state:")
    print(world)
    print()

    for _ in range(4):
        world.step()
        print(f"Generation {world.generation}: {world.count(BinaryCell.LIVE)} live cells")

    print(world)
    world.close()
    print()

    # Heat spreading from a single hot cell
    heat = create_world(Diffusion(), 5, 5, EngineConfig(strategy="tensor"))
    heat.set_cell(2, 2, 100.0)
    heat.step_many(3)

    print(f"Diffusion after {heat.generation} steps:")
    print(heat.to_array().round(2))


if __name__ == "__main__":
    main()
