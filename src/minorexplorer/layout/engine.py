"""
Force Layout Engine
===================
Relaxes node positions of a single graph state with a simple physical model.

Forces on node ``i`` (``d_ij = p_j - p_i``):

* repulsion  ``sum_j  -k_r / |d_ij|^2 * unit(d_ij)`` over all other nodes,
  skipping coincident points,
* attraction ``sum_j  k_a * d_ij`` over neighbours only (linear spring),
* gravity    ``k_g * unit(-p_i)`` towards the origin.

All forces are evaluated from one snapshot of positions before any node is
moved, so the result does not depend on node order. Integration is
semi-implicit Euler.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from minorexplorer.config import LayoutConfig
from minorexplorer.model.vector import EPSILON, Vector2

if TYPE_CHECKING:
    import numpy.typing as npt

    from minorexplorer.model.graph import GraphState

logger = logging.getLogger(__name__)


def _unit_rows(vectors: npt.NDArray[np.float64]) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Normalise along the last axis; vectors shorter than EPSILON become zero."""
    mag = np.linalg.norm(vectors, axis=-1)
    safe = np.where(mag < EPSILON, 1.0, mag)
    unit = np.where((mag < EPSILON)[..., None], 0.0, vectors / safe[..., None])
    return unit, mag


class ForceLayoutEngine:
    """
    Computes net forces and integrates node motion for one graph at a time.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """
        Args:
            config: Force coefficients and default time step.
        """
        self.config = config if config is not None else LayoutConfig()

    def force_field(self, positions: npt.NDArray[np.float64], adjacency: npt.NDArray[np.bool_]) -> npt.NDArray[np.float64]:
        """
        Net force on every node for the given positions.

        Args:
            positions: (n, 2) array of node positions.
            adjacency: (n, n) boolean adjacency matrix.

        Returns:
            (n, 2) array of net forces.
        """
        n = positions.shape[0]
        if n == 0:
            return np.zeros((0, 2), dtype=np.float64)

        cfg = self.config
        displacement = positions[None, :, :] - positions[:, None, :]  # d[i, j] = p_j - p_i

        # Component-wise zero test, same rule as Vector2.is_zero
        coincident = np.all(np.abs(displacement) < EPSILON, axis=-1)
        unit, mag = _unit_rows(displacement)
        coefficient = np.where(coincident, 0.0, -cfg.repulsion_strength / np.where(coincident, 1.0, mag) ** 2)
        repulsion = np.sum(unit * coefficient[..., None], axis=1)

        springs = np.where(adjacency[..., None], displacement, 0.0)
        attraction = cfg.attraction_strength * np.sum(springs, axis=1)

        gravity_dir, _ = _unit_rows(-positions)
        gravity = cfg.gravity_strength * gravity_dir

        return repulsion + attraction + gravity

    def compute_forces(self, graph: GraphState) -> bool:
        """
        Store the current net force on every node without moving anything.

        Returns:
            True when every node is in equilibrium.
        """
        nodes = graph.nodes()
        if not nodes:
            return True
        positions = np.array([[node.x, node.y] for node in nodes], dtype=np.float64)
        forces = self.force_field(positions, graph.adjacency())
        for node, force in zip(nodes, forces):
            node.net_force = Vector2.from_array(force)
        return all(node.is_in_equilibrium() for node in nodes)

    def step(self, graph: GraphState, dt: float | None = None) -> bool:
        """
        Advance the simulation of one graph by a single tick.

        Args:
            graph: Graph whose nodes are moved in place.
            dt: Time step. Defaults to the configured one.

        Returns:
            True when the forces used for this step were all zero, i.e. the
            graph was already in equilibrium.
        """
        dt = self.config.dt if dt is None else dt
        settled = self.compute_forces(graph)
        for node in graph.nodes():
            node.apply_force(dt)
        return settled
