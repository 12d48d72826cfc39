"""Command-line entry point: build one world from the environment settings."""

import structlog

from .config import BuilderKind, WorldSettings, settings
from .core.world import generate_world
from .utils.logging import configure_logging


def main(argv=None):
    """Main function."""
    import argparse

    parser = argparse.ArgumentParser(description="Build a landmass map graph")
    parser.add_argument("--seed", type=int, help="Build seed")
    parser.add_argument("--builder", choices=[kind.value for kind in BuilderKind],
                        help="Graph builder")
    parser.add_argument("--width", type=float, help="Map width")
    parser.add_argument("--height", type=float, help="Map height")
    parser.add_argument("--sites", type=int, dest="site_count", help="Number of Voronoi sites")

    args = parser.parse_args(argv)

    configure_logging(settings.log_level, settings.log_format)
    logger = structlog.get_logger()

    overrides = {k: v for k, v in vars(args).items() if v is not None}
    world = generate_world(WorldSettings.from_settings(settings, **overrides))
    logger.info("World generated", seed=world.settings.seed, builder=world.builder.name,
                **world.map.stats())
    print(world.map)
    return world


if __name__ == "__main__":
    main()
