import numpy as np
import pytest

from minorexplorer.config import LayoutConfig
from minorexplorer.layout.engine import ForceLayoutEngine
from minorexplorer.model.graph import GraphState
from minorexplorer.model.vector import Vector2


def make_graph(points, edges=()):
    g = GraphState.empty()
    for x, y in points:
        g.add_node(Vector2(x, y))
    for i, j in edges:
        g.add_edge(i, j)
    return g


def reference_forces(graph, cfg):
    """Plain per-node evaluation with Vector2 arithmetic."""
    nodes = graph.nodes()
    forces = []
    for i, node in enumerate(nodes):
        repulsion = Vector2.zero()
        attraction = Vector2.zero()
        for j, other in enumerate(nodes):
            if i == j:
                continue
            d = other.position - node.position
            if not d.is_zero():
                repulsion = repulsion + d.normalize() * (-cfg.repulsion_strength / d.magnitude ** 2)
            if graph.are_neighbours(i, j):
                attraction = attraction + d * cfg.attraction_strength
        gravity = node.position.negate().normalize() * cfg.gravity_strength
        forces.append(repulsion + attraction + gravity)
    return forces


class TestForces:

    def test_repulsion_pushes_apart(self):
        g = make_graph([(0.0, 0.0), (2.0, 0.0)])
        engine = ForceLayoutEngine(LayoutConfig(repulsion_strength=1.0, attraction_strength=0.0, gravity_strength=0.0))
        engine.compute_forces(g)
        a, b = g.nodes()
        assert a.net_force.x == pytest.approx(-0.25)
        assert a.net_force.y == pytest.approx(0.0)
        assert b.net_force.x == pytest.approx(0.25)

    def test_attraction_only_between_neighbours(self):
        g = make_graph([(0.0, 0.0), (2.0, 0.0), (0.0, 4.0)], edges=[(0, 1)])
        engine = ForceLayoutEngine(LayoutConfig(repulsion_strength=0.0, attraction_strength=0.5, gravity_strength=0.0))
        engine.compute_forces(g)
        a, b, c = g.nodes()
        assert a.net_force.x == pytest.approx(1.0)
        assert a.net_force.y == pytest.approx(0.0)
        assert b.net_force.x == pytest.approx(-1.0)
        assert c.net_force.is_zero()

    def test_gravity_points_to_origin(self):
        g = make_graph([(3.0, 4.0), (0.0, 0.0)])
        engine = ForceLayoutEngine(LayoutConfig(repulsion_strength=0.0, attraction_strength=0.0, gravity_strength=2.0))
        engine.compute_forces(g)
        far, centre = g.nodes()
        assert far.net_force.x == pytest.approx(-1.2)
        assert far.net_force.y == pytest.approx(-1.6)
        assert centre.net_force.is_zero()

    def test_coincident_nodes_do_not_repel(self):
        g = make_graph([(1.0, 1.0), (1.0, 1.0)])
        engine = ForceLayoutEngine(LayoutConfig(repulsion_strength=5.0, attraction_strength=0.0, gravity_strength=0.0))
        assert engine.compute_forces(g) is True
        assert all(np.isfinite([n.net_force.x, n.net_force.y]).all() for n in g.nodes())

    def test_matches_per_node_reference(self):
        rng = np.random.default_rng(7)
        points = rng.uniform(-10.0, 10.0, size=(12, 2)).tolist()
        edges = [(0, 1), (1, 2), (2, 3), (3, 0), (4, 5), (5, 11), (6, 9), (7, 8)]
        g = make_graph(points, edges)
        cfg = LayoutConfig(repulsion_strength=0.3, attraction_strength=0.05, gravity_strength=0.2)
        expected = reference_forces(g, cfg)
        ForceLayoutEngine(cfg).compute_forces(g)
        for node, force in zip(g.nodes(), expected):
            assert node.net_force.x == pytest.approx(force.x, rel=1e-9, abs=1e-12)
            assert node.net_force.y == pytest.approx(force.y, rel=1e-9, abs=1e-12)

    def test_independent_of_node_order(self):
        points = [(0.0, 0.0), (3.0, 1.0), (-2.0, 5.0), (4.0, -4.0)]
        cfg = LayoutConfig(repulsion_strength=1.0, attraction_strength=0.1, gravity_strength=0.5)
        forward = make_graph(points, [(0, 1), (1, 2)])
        backward = make_graph(points[::-1], [(3, 2), (2, 1)])
        engine = ForceLayoutEngine(cfg)
        engine.step(forward)
        engine.step(backward)
        for a, b in zip(forward.nodes(), backward.nodes()[::-1]):
            assert a.position.x == pytest.approx(b.position.x)
            assert a.position.y == pytest.approx(b.position.y)


class TestIntegration:

    def test_semi_implicit_euler(self):
        g = make_graph([(3.0, 4.0)])
        engine = ForceLayoutEngine(LayoutConfig(repulsion_strength=0.0, attraction_strength=0.0, gravity_strength=1.0))
        settled = engine.step(g, dt=0.5)
        node = g.node(0)
        assert settled is False
        assert node.velocity.x == pytest.approx(-0.3)
        assert node.velocity.y == pytest.approx(-0.4)
        assert node.position.x == pytest.approx(2.85)
        assert node.position.y == pytest.approx(3.8)

    def test_default_time_step_from_config(self):
        cfg = LayoutConfig(repulsion_strength=0.0, attraction_strength=0.0, gravity_strength=1.0, dt=0.25)
        g = make_graph([(0.0, 2.0)])
        ForceLayoutEngine(cfg).step(g)
        assert g.node(0).velocity.y == pytest.approx(-0.25)

    def test_non_zero_force_is_not_equilibrium(self):
        g = make_graph([(0.0, 0.0), (1.0, 0.0)], edges=[(0, 1)])
        engine = ForceLayoutEngine(LayoutConfig(repulsion_strength=0.0, attraction_strength=0.1, gravity_strength=0.0))
        assert engine.step(g) is False
        assert not g.in_equilibrium()
        assert not any(n.is_in_equilibrium() for n in g.nodes())

    def test_no_forces_is_equilibrium(self, grid, still_config):
        positions = [n.position for n in grid.nodes()]
        engine = ForceLayoutEngine(still_config)
        assert engine.step(grid) is True
        assert engine.step(grid) is True
        assert grid.in_equilibrium()
        assert [n.position for n in grid.nodes()] == positions

    def test_empty_graph(self):
        assert ForceLayoutEngine().step(GraphState.empty()) is True

    def test_attraction_pulls_neighbours_together(self, segment):
        engine = ForceLayoutEngine(LayoutConfig(repulsion_strength=0.0, attraction_strength=1.0, gravity_strength=0.0, dt=0.1))
        for _ in range(5):
            engine.step(segment)
        a, b = segment.nodes()
        assert (b.position - a.position).magnitude < 2.0
