"""
Progress reporting

The planner emits structured events to an observer; observers decide how to
present them.

- AntPathEvent: one ant's path after construction
- IterationEvent: end of an iteration (after pheromone update and decay)
- RouteResult: the best route of the run
"""

from dataclasses import dataclass, field
from typing import List

from .core.graph import ROUTE_SEPARATOR


@dataclass
class AntPathEvent:
    """Path built by one ant in one iteration."""

    iteration: int
    ant_id: int
    route: List[int]
    location_names: List[str]
    distance: float
    degenerate: bool = False

    def format(self) -> str:
        return (
            f"Ant {self.ant_id} path: {ROUTE_SEPARATOR.join(self.location_names)}, "
            f"Distance: {self.distance}"
        )


@dataclass
class IterationEvent:
    """
    Summary of one iteration

    Attributes:
        iteration: 0-based iteration index
        alpha: alpha after decay
        beta: beta after decay
        best_ant: ant with the lowest score in this iteration
        best_score: start -> path -> incident score of that ant
        degenerate_ants: number of ants that took the incident fallback
    """

    iteration: int
    alpha: float
    beta: float
    best_ant: int
    best_score: float
    degenerate_ants: int = 0


@dataclass
class RouteResult:
    """
    Best route of a planning run

    Attributes:
        route: location indices of the best ant's path
        location_names: display names along the route
        score: start -> path -> incident score used for selection
        distance: calculate_total_distance(route), without the incident leg
        best_ant: index of the winning ant
        starting_name: name of the starting location
        incident_name: name of the incident location
        degenerate: True if the route contains the incident fallback
    """

    route: List[int]
    location_names: List[str]
    score: float
    distance: float
    best_ant: int
    starting_name: str
    incident_name: str
    degenerate: bool = False

    def format(self) -> str:
        return (
            f"Best Route from City {self.starting_name} to Incident Location "
            f"{self.incident_name}: {ROUTE_SEPARATOR.join(self.location_names)}\n"
            f"Best Route Distance: {self.distance}"
        )


class RouteObserver:
    """Observer interface; every hook is a no-op by default."""

    def on_ant_path(self, event: AntPathEvent) -> None:
        pass

    def on_iteration_end(self, event: IterationEvent) -> None:
        pass

    def on_best_route(self, result: RouteResult) -> None:
        pass


class NullReporter(RouteObserver):
    """Discards every event."""


class ConsoleReporter(RouteObserver):
    """Prints progress lines to stdout."""

    def __init__(self, show_iterations: bool = False):
        self.show_iterations = show_iterations

    def on_ant_path(self, event: AntPathEvent) -> None:
        print(event.format())

    def on_iteration_end(self, event: IterationEvent) -> None:
        if self.show_iterations:
            print(
                f"Iteration {event.iteration}: best ant {event.best_ant}, "
                f"score={event.best_score}, alpha={event.alpha:.3f}, beta={event.beta:.3f}"
            )

    def on_best_route(self, result: RouteResult) -> None:
        print(result.format())


@dataclass
class RecordingReporter(RouteObserver):
    """Keeps every event in memory."""

    ant_paths: List[AntPathEvent] = field(default_factory=list)
    iterations: List[IterationEvent] = field(default_factory=list)
    results: List[RouteResult] = field(default_factory=list)

    def on_ant_path(self, event: AntPathEvent) -> None:
        self.ant_paths.append(event)

    def on_iteration_end(self, event: IterationEvent) -> None:
        self.iterations.append(event)

    def on_best_route(self, result: RouteResult) -> None:
        self.results.append(result)

    def paths_for_iteration(self, iteration: int) -> List[AntPathEvent]:
        return [event for event in self.ant_paths if event.iteration == iteration]


class CompositeReporter(RouteObserver):
    """Forwards every event to several observers in order."""

    def __init__(self, *observers: RouteObserver):
        self.observers = list(observers)

    def on_ant_path(self, event: AntPathEvent) -> None:
        for observer in self.observers:
            observer.on_ant_path(event)

    def on_iteration_end(self, event: IterationEvent) -> None:
        for observer in self.observers:
            observer.on_iteration_end(event)

    def on_best_route(self, result: RouteResult) -> None:
        for observer in self.observers:
            observer.on_best_route(result)
