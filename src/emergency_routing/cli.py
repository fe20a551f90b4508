"""
Command line entry point

Runs the planner on a YAML configuration (the reference Dehradun scenario when
no file is given), prints every ant's path and the best route, and compares the
result with the exact optimum.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .algorithms.exhaustive_solver import find_optimal_route
from .algorithms.route_planner import RoutePlanner
from .config import load_config
from .exceptions import ConfigurationError
from .reporting import (
    CompositeReporter,
    ConsoleReporter,
    RecordingReporter,
    RouteObserver,
)
from .utils.metrics import MetricsCalculator

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emergency-route",
        description="Plan an emergency vehicle route with ant colony optimization.",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument("--ants", type=int, default=None, help="Number of ants per iteration")
    parser.add_argument("--iterations", type=int, default=None, help="Number of iterations")
    parser.add_argument("--plot", action="store_true", help="Save pheromone and convergence plots")
    parser.add_argument("--results-dir", type=Path, default=None, help="Directory for plots")
    parser.add_argument("--quiet", action="store_true", help="Do not print every ant's path")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``emergency-route``."""
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.seed is not None:
            config["experiment"]["seed"] = args.seed
        if args.ants is not None:
            config["aco"]["num_ants"] = args.ants
        if args.iterations is not None:
            config["aco"]["num_iterations"] = args.iterations
        if args.plot:
            config["output"]["plot"] = True
        if args.quiet:
            config["output"]["verbose"] = False

        recorder = RecordingReporter()
        if config["output"].get("verbose", True):
            observer: RouteObserver = CompositeReporter(ConsoleReporter(), recorder)
        else:
            observer = recorder
        planner = RoutePlanner.from_config(config, observer=observer)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    print("=" * 80)
    print(f"Experiment: {config['experiment']['name']}")
    print(
        f"Ants: {planner.num_ants}, Iterations: {planner.num_iterations}, "
        f"alpha={config['aco']['alpha']}, beta={config['aco']['beta']}"
    )
    print("=" * 80)

    planner.find_best_route()
    result = planner.last_result
    if not config["output"].get("verbose", True):
        print(result.format())

    optimal_route, optimal_score = find_optimal_route(
        planner.graph.to_networkx(), planner.starting_city, planner.incident_location
    )
    metrics = MetricsCalculator()
    print(
        f"Optimal Route: {planner.graph.format_route(optimal_route)} "
        f"(score={optimal_score})"
    )
    print(
        f"Route score: {result.score}, "
        f"optimality gap: {metrics.optimality_gap(result.score, optimal_score):.1%}"
    )
    if result.degenerate:
        logger.info("Best route contains the incident fallback: %s", result.route)

    if config["output"].get("plot", False):
        from .utils.visualization import Visualizer

        results_dir = args.results_dir or Path(config["output"]["results_dir"])
        visualizer = Visualizer(results_dir)
        visualizer.plot_pheromone_network(
            planner.graph, planner.pheromone.copy(), route=result.route
        )
        visualizer.plot_convergence(
            metrics.convergence(recorder.iterations), optimal_score=optimal_score
        )

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
