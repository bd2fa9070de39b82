from __future__ import annotations

import itertools

from minorexplorer.model.vector import Vector2

# Process-wide id source; ids are never reused.
_ids = itertools.count()


class Node:
    """
    Represents a vertex of a graph state in the layout simulation.
    """
    def __init__(
        self,
        position: Vector2,
        uid: int | None = None,
    ) -> None:
        """
        Initialize the node at a position with zero velocity and force.

        Args:
            position: Position of the node in the global system [X, Y].
            uid: Identity to reuse when copying. A fresh id is minted when omitted.
        """
        self.uid: int = next(_ids) if uid is None else uid
        self.position: Vector2 = position
        self.velocity: Vector2 = Vector2.zero()
        self.net_force: Vector2 = Vector2.zero()

    def __repr__(self) -> str:
        """String representation of the node."""
        return f"{self.__class__.__name__}(id={self.uid}, position=({self.x:.3f}, {self.y:.3f}))"

    @property
    def id(self) -> int:
        return self.uid

    @property
    def x(self) -> float:
        """X-coordinate of the node."""
        return self.position.x

    @property
    def y(self) -> float:
        """Y-coordinate of the node."""
        return self.position.y

    def copy(self) -> Node:
        """Value copy that keeps the identity of this node."""
        other = Node(self.position, uid=self.uid)
        other.velocity = self.velocity
        other.net_force = self.net_force
        return other

    def is_in_equilibrium(self) -> bool:
        return self.net_force.is_zero()

    def apply_force(self, dt: float) -> None:
        """Semi-implicit Euler step using the stored net force."""
        self.velocity = self.velocity + self.net_force * dt
        self.position = self.position + self.velocity * dt
