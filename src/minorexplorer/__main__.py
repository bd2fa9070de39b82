"""Headless command-line demo of the explorer."""
import logging

from minorexplorer.config import LayoutConfig
from minorexplorer.controller.explorer import Explorer
from minorexplorer.logging_config import setup_logging
from minorexplorer.model.graph import GraphState


def main() -> None:
    setup_logging(level=logging.INFO)
    logger = logging.getLogger("minorexplorer")

    config = LayoutConfig()
    explorer = Explorer(config)

    graph = GraphState.grid()
    graph.log_adjacency()
    explorer.seed(graph)

    # Branch on the first edge of the seed graph
    u, v = next(graph.edges())
    explorer.branch_on_nodes(0, 0, u, v)

    settled = explorer.scheduler.run(config.max_ticks)
    logger.info(f"Layout {'settled' if settled else 'stopped'} after {explorer.scheduler.ticks} ticks")

    for layer in range(explorer.tree.depth + 1):
        for slot, g in explorer.tree.occupied(layer):
            logger.info(f"layer {layer} slot {slot}: {g!r}")


if __name__ == "__main__":
    main()
