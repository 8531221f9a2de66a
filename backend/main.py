import logging
import sys

from algorithms import analyze_network, build_graph
from errors import TunnelNetworkError
from samples import EXAMPLE_TUNNELS

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    try:
        graph = build_graph(EXAMPLE_TUNNELS)
        report = analyze_network(graph)
    except TunnelNetworkError as e:
        logger.error(f"Could not compute network capacity: {e}")
        return 1

    for route in report["routes"]:
        logger.debug(f"{'-'.join(route['path'])}: bottleneck {route['bottleneck']:g}")
    print(f"{report['max_cars_per_hour']:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
