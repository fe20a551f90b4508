"""
Visualization module

Plots the pheromone network with the chosen route highlighted, and the
best-score convergence over iterations.
"""

from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from ..core.graph import LocationGraph


class Visualizer:
    """Writes plots to an output directory."""

    def __init__(self, output_dir: Path):
        """
        Args:
            output_dir: output directory (created if missing)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def plot_pheromone_network(
        self,
        graph: LocationGraph,
        pheromone: np.ndarray,
        route: Optional[Sequence[int]] = None,
        filename: str = "pheromone_network.png",
    ) -> Path:
        """
        Location graph with edge width proportional to pheromone

        Args:
            graph: location graph
            pheromone: N×N pheromone values (e.g. PheromoneMatrix.copy())
            route: route to highlight in red
            filename: file name to save

        Returns:
            path of the saved image
        """
        nx_graph = graph.to_networkx()
        for u, v in nx_graph.edges():
            nx_graph.edges[u, v]["pheromone"] = float(pheromone[u][v])

        fig, ax = plt.subplots(figsize=(10, 8))
        pos = nx.circular_layout(nx_graph)

        edges = list(nx_graph.edges())
        levels = [nx_graph.edges[u, v]["pheromone"] for u, v in edges]
        max_level = max(levels) if levels else 1.0
        widths = [1.0 + 6.0 * level / max_level if max_level > 0 else 1.0 for level in levels]

        nx.draw_networkx_nodes(
            nx_graph, pos, ax=ax, node_color="skyblue", edgecolors="black", node_size=900
        )
        nx.draw_networkx_edges(
            nx_graph, pos, ax=ax, edgelist=edges, width=widths, edge_color="gray", alpha=0.6
        )

        if route and len(route) > 1:
            route_edges = [
                (u, v) for u, v in zip(route[:-1], route[1:]) if u != v
            ]
            nx.draw_networkx_edges(
                nx_graph, pos, ax=ax, edgelist=route_edges, width=3.0, edge_color="red"
            )

        nx.draw_networkx_labels(
            nx_graph,
            pos,
            ax=ax,
            labels={node: nx_graph.nodes[node]["name"] for node in nx_graph.nodes()},
            font_size=9,
        )
        edge_labels = {
            (u, v): f"{nx_graph.edges[u, v]['distance']:g} | "
            f"{nx_graph.edges[u, v]['pheromone']:.3f}"
            for u, v in edges
        }
        nx.draw_networkx_edge_labels(nx_graph, pos, ax=ax, edge_labels=edge_labels, font_size=7)

        ax.set_title("Pheromone network (distance | pheromone)")
        ax.axis("off")

        output_path = self.output_dir / filename
        plt.tight_layout()
        plt.savefig(output_path, dpi=150)
        plt.close(fig)
        print(f"Saved: {output_path}")
        return output_path

    def plot_convergence(
        self,
        best_scores: List[float],
        optimal_score: Optional[float] = None,
        filename: str = "convergence.png",
    ) -> Path:
        """
        Best score per iteration

        Args:
            best_scores: best (or best-so-far) score for each iteration
            optimal_score: exact optimum drawn as a dashed line
            filename: file name to save

        Returns:
            path of the saved image
        """
        fig, ax = plt.subplots(figsize=(10, 6))

        iterations = list(range(len(best_scores)))
        ax.plot(iterations, best_scores, marker="o", linestyle="-", linewidth=2, label="ACO")
        if optimal_score is not None:
            ax.axhline(optimal_score, color="red", linestyle="--", label="Optimal")

        ax.set_xlabel("Iteration", fontsize=12)
        ax.set_ylabel("Route score", fontsize=12)
        ax.legend()
        ax.grid(True, alpha=0.3)

        output_path = self.output_dir / filename
        plt.tight_layout()
        plt.savefig(output_path, dpi=150)
        plt.close(fig)
        print(f"Saved: {output_path}")
        return output_path
