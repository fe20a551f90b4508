"""
Ant class

Search agent of the route planner.

[Role of an ant]
Each ant starts at the starting location and visits every other location once
(the incident location is excluded), recording the visiting order and the
accumulated edge distance. Ants are rebuilt every iteration; only pheromone
persists between iterations.

[Degenerate paths]
When the selection rule finds no eligible location it falls back to the
incident location. The ant keeps that step in its route and is flagged
``degenerate`` so the defect can be detected and logged.
"""

from typing import List, Tuple


class Ant:
    """
    One candidate path of one iteration

    Attributes:
        ant_id (int): index of the ant within the colony
        start_node (int): starting location
        current_node (int): location the ant is currently at
        route (List[int]): visited locations in order (tabu list)
        total_distance (float): accumulated distance along the route
        degenerate (bool): True once the incident fallback has been taken

    Example:
        >>> ant = Ant(ant_id=0, start_node=1)
        >>> ant.move_to(next_node=3, distance=1.0)
        >>> ant.route
        [1, 3]
        >>> ant.total_distance
        1.0
    """

    def __init__(self, ant_id: int, start_node: int):
        """
        Args:
            ant_id: index of the ant (unique within an iteration)
            start_node: starting location; added to the route immediately
        """
        self.ant_id = ant_id
        self.start_node = start_node
        self.current_node = start_node

        # tabu list
        self.route: List[int] = [start_node]

        self.total_distance: float = 0.0
        self.degenerate: bool = False

    def move_to(self, next_node: int, distance: float, degenerate: bool = False) -> None:
        """
        Move to the next location and accumulate the edge distance.

        Args:
            next_node: location to move to
            distance: length of the edge current_node -> next_node
            degenerate: True if next_node came from the incident fallback
        """
        self.route.append(next_node)
        self.current_node = next_node
        self.total_distance += distance
        if degenerate:
            self.degenerate = True

    def get_route_edges(self) -> List[Tuple[int, int]]:
        """
        Consecutive node pairs of the route.

        Example:
            >>> ant = Ant(0, 0)
            >>> ant.route = [0, 1, 2, 3]
            >>> ant.get_route_edges()
            [(0, 1), (1, 2), (2, 3)]
        """
        return [(self.route[i], self.route[i + 1]) for i in range(len(self.route) - 1)]

    def get_closing_edge(self) -> Tuple[int, int]:
        """Edge from the last location back to the first one (wrap-around)."""
        return (self.route[-1], self.route[0])

    def __repr__(self) -> str:
        return (
            f"Ant(id={self.ant_id}, route={self.route}, "
            f"D={self.total_distance:.1f}, degenerate={self.degenerate})"
        )
