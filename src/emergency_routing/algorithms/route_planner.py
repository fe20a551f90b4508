"""
Route planner module

Ant colony optimization over a small complete graph of locations.

[Algorithm overview]
1. Every pheromone cell starts at a small constant (0.01)
2. Each iteration, every ant starts at the starting location and visits the
   remaining non-incident locations in an order drawn from
   pheromone ** alpha * (1 / distance) ** beta
3. Pheromone evaporates, then every ant deposits 1 / L on its path edges
   (plus the closing edge from its last location back to its first)
4. alpha and beta decay linearly with the iteration index
5. After the last iteration the ant with the lowest
   start -> path -> incident score is returned

The run is single-threaded and owns its matrices. Randomness comes from an
injected random.Random, so a fixed seed reproduces a run exactly.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..config import validate_config
from ..core.ant import Ant
from ..core.graph import LocationGraph, calculate_total_distance
from ..exceptions import ConfigurationError
from ..modules.pheromone import INITIAL_PHEROMONE, PheromoneMatrix, PheromoneUpdater
from ..modules.selection import CitySelector, SelectionOutcome
from ..reporting import (
    AntPathEvent,
    IterationEvent,
    NullReporter,
    RouteObserver,
    RouteResult,
)

logger = logging.getLogger(__name__)


class RoutePlanner:
    """
    ACO route planner for one emergency response

    Attributes:
        config (Dict): configuration dictionary
        graph (LocationGraph): distances and location names
        num_ants (int): ants per iteration
        num_iterations (int): fixed number of iterations
        alpha (float): pheromone exponent (decays each iteration)
        beta (float): inverse-distance exponent (decays each iteration)
        starting_city (int): where every ant starts
        incident_location (int): implicit final destination, excluded from paths
        pheromone (PheromoneMatrix): learned edge desirability
        ants (List[Ant]): ants of the most recent iteration
        rng (random.Random): random source
        observer (RouteObserver): receives progress events
        last_result (Optional[RouteResult]): result of the last find_best_route call
    """

    def __init__(
        self,
        config: Dict,
        graph: LocationGraph,
        observer: Optional[RouteObserver] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            config: configuration dictionary (``locations`` and ``aco`` sections)
            graph: location graph built from the same configuration
            observer: progress sink; events are discarded when None
            rng: random source; defaults to random.Random(config["experiment"]["seed"])

        Raises:
            ConfigurationError: if the configuration does not match the graph
        """
        validate_config(config)
        try:
            configured = np.array(config["locations"]["distances"], dtype=float)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Distance matrix is not numeric: {e}") from e
        if not np.array_equal(configured, graph.distances):
            raise ConfigurationError(
                "Configured distance matrix does not match the location graph"
            )

        self.config = config
        self.graph = graph
        self.observer = observer or NullReporter()

        aco = config["aco"]
        self.num_ants = aco["num_ants"]
        self.num_iterations = aco["num_iterations"]
        self.alpha = float(aco["alpha"])
        self.beta = float(aco["beta"])

        self.starting_city = config["locations"]["starting_city"]
        self.incident_location = config["locations"]["incident_location"]

        if rng is None:
            rng = random.Random(config["experiment"].get("seed"))
        self.rng = rng

        self.pheromone = PheromoneMatrix(
            graph.num_cities, aco.get("initial_pheromone", INITIAL_PHEROMONE)
        )
        self.pheromone_updater = PheromoneUpdater(config)
        self.selector = CitySelector(
            graph, self.pheromone, self.incident_location, self.rng
        )

        self.ants: List[Ant] = []
        self.iteration = 0
        self.last_result: Optional[RouteResult] = None

    @classmethod
    def from_config(
        cls,
        config: Dict,
        observer: Optional[RouteObserver] = None,
        rng: Optional[random.Random] = None,
    ) -> "RoutePlanner":
        """Build the location graph and the planner from one configuration dictionary."""
        validate_config(config)
        locations = config["locations"]
        graph = LocationGraph(
            locations["distances"],
            locations["names"],
            num_cities=locations.get("num_cities"),
        )
        return cls(config, graph, observer=observer, rng=rng)

    def initialize(self) -> None:
        """Set every pheromone cell, diagonal included, to the initial value."""
        self.pheromone.fill()

    def select_next_city(self, current_city: int, visited: Sequence[bool]) -> SelectionOutcome:
        """Apply the selection rule with the current alpha and beta."""
        return self.selector.select(current_city, visited, self.alpha, self.beta)

    def construct_solutions(self) -> List[Ant]:
        """
        Build one fresh path per ant.

        Every ant starts at the starting location and takes num_cities - 1 steps.
        A step that finds no eligible location appends the incident location and
        marks the ant degenerate.

        Returns:
            the ants of this iteration (also stored in ``self.ants``)
        """
        num_cities = self.graph.num_cities
        ants = []

        for ant_id in range(self.num_ants):
            ant = Ant(ant_id=ant_id, start_node=self.starting_city)
            visited = [False] * num_cities
            visited[self.starting_city] = True

            for _ in range(1, num_cities):
                outcome = self.select_next_city(ant.current_node, visited)
                if outcome.degenerate:
                    logger.debug(
                        "Ant %d found no eligible location after %s; "
                        "falling back to incident location %d",
                        ant_id,
                        ant.route,
                        outcome.location,
                    )
                distance = self.graph.distance(ant.current_node, outcome.location)
                ant.move_to(outcome.location, distance, degenerate=outcome.degenerate)
                visited[outcome.location] = True

            ants.append(ant)
            self.observer.on_ant_path(
                AntPathEvent(
                    iteration=self.iteration,
                    ant_id=ant_id,
                    route=list(ant.route),
                    location_names=self.graph.route_names(ant.route),
                    distance=ant.total_distance,
                    degenerate=ant.degenerate,
                )
            )

        self.ants = ants
        return ants

    def update_pheromones(self) -> None:
        """Evaporate, then reinforce every ant's path (closing edge included)."""
        self.pheromone_updater.update(self.pheromone, self.ants, self.graph)

    def update_alpha_beta(self, iteration: int, total_iterations: int) -> None:
        """alpha = beta = 1 - iteration / total_iterations"""
        decayed = 1.0 - (iteration / float(total_iterations))
        self.alpha = decayed
        self.beta = decayed

    def score_route(self, route: Sequence[int]) -> float:
        """
        Length of start -> route -> incident.

        Unlike calculate_total_distance, this includes the leg from the starting
        location to the route's first entry and from its last entry to the
        incident location.
        """
        length = self.graph.distance(self.starting_city, route[0])
        length += self.graph.path_length(route)
        length += self.graph.distance(route[-1], self.incident_location)
        return length

    def _best_ant(self) -> Ant:
        best_ant = self.ants[0]
        best_score = float("inf")
        for ant in self.ants:
            score = self.score_route(ant.route)
            # ties keep the lower ant index
            if score < best_score:
                best_ant = ant
                best_score = score
        return best_ant

    def find_best_route(self) -> List[int]:
        """
        Run every iteration and return the best ant's path.

        Returns:
            location indices of the best path (one of the stored ant paths)
        """
        self.initialize()

        for iteration in range(self.num_iterations):
            self.iteration = iteration
            self.construct_solutions()
            self.update_pheromones()
            self.update_alpha_beta(iteration, self.num_iterations)

            best = self._best_ant()
            event = IterationEvent(
                iteration=iteration,
                alpha=self.alpha,
                beta=self.beta,
                best_ant=best.ant_id,
                best_score=self.score_route(best.route),
                degenerate_ants=sum(1 for ant in self.ants if ant.degenerate),
            )
            if event.degenerate_ants:
                logger.warning(
                    "Iteration %d: %d of %d ants fell back to incident location %d",
                    iteration,
                    event.degenerate_ants,
                    self.num_ants,
                    self.incident_location,
                )
            logger.debug(
                "Iteration %d: best ant %d score=%.3f alpha=%.3f beta=%.3f",
                iteration,
                event.best_ant,
                event.best_score,
                self.alpha,
                self.beta,
            )
            self.observer.on_iteration_end(event)

        best = self._best_ant()
        self.last_result = RouteResult(
            route=best.route,
            location_names=self.graph.route_names(best.route),
            score=self.score_route(best.route),
            distance=calculate_total_distance(best.route, self.graph.distances),
            best_ant=best.ant_id,
            starting_name=self.graph.name(self.starting_city),
            incident_name=self.graph.name(self.incident_location),
            degenerate=best.degenerate,
        )
        self.observer.on_best_route(self.last_result)
        return best.route

    def __repr__(self) -> str:
        return (
            f"RoutePlanner(num_ants={self.num_ants}, num_cities={self.graph.num_cities}, "
            f"start={self.starting_city}, incident={self.incident_location})"
        )
