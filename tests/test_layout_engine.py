"""
Unit tests for ForceDirectedLayout.
"""

import math
import random

import pytest

from forcegraph.graph.node import Node
from forcegraph.layout.engine import ForceDirectedLayout, bounds_center, parameters_for


def make_nodes(positions, edges=()):
    nodes = [Node(i, x, y) for i, (x, y) in enumerate(positions)]
    for src, dst in edges:
        nodes[src].add_neighbor(nodes[dst])
    return nodes


def test_parameter_tiers():
    small = parameters_for(3)
    assert small.repulsion_strength == pytest.approx(12000.0)
    assert small.ideal_edge_length == pytest.approx(234.0)
    assert parameters_for(1) == small

    medium = parameters_for(4)
    assert medium.repulsion_strength == pytest.approx(8000.0)
    assert medium.ideal_edge_length == pytest.approx(180.0)
    assert parameters_for(10) == medium

    large = parameters_for(11)
    assert large.repulsion_strength == pytest.approx(6400.0)
    assert large.ideal_edge_length == pytest.approx(162.0)
    assert large.edge_repulsion_strength == pytest.approx(3200.0)


def test_bounds_empty_is_default_canvas():
    assert ForceDirectedLayout().bounds([]) == (0.0, 0.0, 800.0, 600.0)


def test_bounds_single_node_adds_margin():
    layout = ForceDirectedLayout()

    assert layout.bounds([Node(1, 100.0, 100.0)]) == (0.0, 0.0, 200.0, 200.0)


def test_bounds_in_negative_coordinates():
    nodes = make_nodes([(-300.0, -50.0), (-200.0, -10.0)])

    assert ForceDirectedLayout().bounds(nodes) == (-400.0, -150.0, -100.0, 90.0)


def test_bounds_center():
    assert bounds_center((0.0, 0.0, 200.0, 100.0)) == (100.0, 50.0)


def test_is_stable_for_nodes_at_rest():
    assert ForceDirectedLayout().is_stable(make_nodes([(0, 0), (50, 50)]))


def test_is_stable_threshold_is_inclusive():
    layout = ForceDirectedLayout()
    node = Node(1)
    node.vx, node.vy = 0.3, 0.4
    assert layout.is_stable([node])

    node.vx = 0.5
    assert not layout.is_stable([node])


def test_repulsion_pushes_pair_apart():
    nodes = make_nodes([(0.0, 0.0), (10.0, 0.0)])
    layout = ForceDirectedLayout(5.0, 0.0)

    layout.calculate_forces(nodes)

    # 12000 / 10^2 outward, plus 0.01 * 5 gravity inward
    assert nodes[0].vx == pytest.approx(-119.95)
    assert nodes[1].vx == pytest.approx(119.95)
    assert nodes[0].vy == pytest.approx(0.0)
    assert nodes[1].vy == pytest.approx(0.0)


def test_spring_pulls_long_edge_together():
    nodes = make_nodes([(0.0, 0.0), (300.0, 0.0)], edges=[(0, 1)])
    layout = ForceDirectedLayout(150.0, 0.0)

    layout.calculate_forces(nodes)

    # repulsion 12000/300^2, spring 0.05 * (300 - 234), gravity 0.01 * 150
    expected = -12000.0 / 90000.0 + 3.3 + 1.5
    assert nodes[0].vx == pytest.approx(expected)
    assert nodes[1].vx == pytest.approx(-expected)


def test_spring_pushes_short_edge_apart():
    nodes = make_nodes([(0.0, 0.0), (100.0, 0.0)], edges=[(0, 1)])
    layout = ForceDirectedLayout(50.0, 0.0)

    layout.calculate_forces(nodes)

    expected = -12000.0 / 10000.0 - 0.05 * 134.0 + 0.5
    assert nodes[0].vx == pytest.approx(expected)
    assert nodes[0].vx < 0


def test_mutual_edges_accumulate_spring_twice():
    layout = ForceDirectedLayout(150.0, 0.0)
    single = make_nodes([(0.0, 0.0), (300.0, 0.0)], edges=[(0, 1)])
    mutual = make_nodes([(0.0, 0.0), (300.0, 0.0)], edges=[(0, 1), (1, 0)])

    layout.calculate_forces(single)
    layout.calculate_forces(mutual)

    assert mutual[0].vx - single[0].vx == pytest.approx(3.3)
    assert mutual[1].vx - single[1].vx == pytest.approx(-3.3)


def test_self_loop_contributes_no_force():
    layout = ForceDirectedLayout(400.0, 300.0)
    plain = make_nodes([(100.0, 120.0), (260.0, 310.0)])
    looped = make_nodes([(100.0, 120.0), (260.0, 310.0)], edges=[(0, 0)])

    layout.calculate_forces(plain)
    layout.calculate_forces(looped)

    for a, b in zip(plain, looped):
        assert (a.vx, a.vy) == pytest.approx((b.vx, b.vy))


def test_edge_pushes_nearby_node_off_segment():
    layout = ForceDirectedLayout(100.0, 0.0)
    positions = [(0.0, 0.0), (200.0, 0.0), (100.0, 10.0)]
    without_edge = make_nodes(positions)
    with_edge = make_nodes(positions, edges=[(0, 1)])

    layout.calculate_forces(without_edge)
    layout.calculate_forces(with_edge)

    # 0.5 * 12000 / 10^2 on the bystander, half of it back on each endpoint
    assert with_edge[2].vy - without_edge[2].vy == pytest.approx(60.0)
    assert with_edge[2].vx - without_edge[2].vx == pytest.approx(0.0)
    assert with_edge[0].vy - without_edge[0].vy == pytest.approx(-30.0)
    assert with_edge[1].vy - without_edge[1].vy == pytest.approx(-30.0)


def test_edge_ignores_node_projecting_outside_segment():
    layout = ForceDirectedLayout(100.0, 0.0)
    positions = [(0.0, 0.0), (200.0, 0.0), (300.0, 10.0)]
    without_edge = make_nodes(positions)
    with_edge = make_nodes(positions, edges=[(0, 1)])

    layout.calculate_forces(without_edge)
    layout.calculate_forces(with_edge)

    assert (with_edge[2].vx, with_edge[2].vy) == pytest.approx(
        (without_edge[2].vx, without_edge[2].vy)
    )


def test_edge_ignores_node_outside_corridor():
    layout = ForceDirectedLayout(100.0, 0.0)
    # corridor is 234 / 2 = 117
    positions = [(0.0, 0.0), (200.0, 0.0), (100.0, 120.0)]
    without_edge = make_nodes(positions)
    with_edge = make_nodes(positions, edges=[(0, 1)])

    layout.calculate_forces(without_edge)
    layout.calculate_forces(with_edge)

    assert with_edge[2].vy == pytest.approx(without_edge[2].vy)


def test_center_gravity():
    node = Node(1, 0.0, 0.0)
    layout = ForceDirectedLayout(100.0, -50.0)

    layout.calculate_forces([node])

    assert (node.vx, node.vy) == pytest.approx((1.0, -0.5))


def test_calculate_forces_on_empty_list():
    ForceDirectedLayout().calculate_forces([])


def test_update_positions_damps_velocity():
    node = Node(1, 0.0, 0.0)
    node.vx, node.vy = 10.0, -20.0

    ForceDirectedLayout().update_positions([node], 0.1)

    assert (node.vx, node.vy) == pytest.approx((8.5, -17.0))
    assert node.position == pytest.approx((0.85, -1.7))


def test_update_positions_clamps_velocity():
    node = Node(1, 0.0, 0.0)
    node.vx, node.vy = 300.0, 400.0

    ForceDirectedLayout().update_positions([node], 0.1)

    assert node.speed() == pytest.approx(50.0)
    assert (node.vx, node.vy) == pytest.approx((30.0, 40.0))
    assert node.position == pytest.approx((3.0, 4.0))


def test_zero_delta_time_keeps_positions():
    nodes = make_nodes([(0.0, 0.0), (10.0, 0.0)], edges=[(0, 1)])

    ForceDirectedLayout().tick(nodes, 0.0)

    assert [n.position for n in nodes] == [(0.0, 0.0), (10.0, 0.0)]
    assert nodes[0].speed() > 0


def test_tick_is_deterministic():
    positions = [(120.0, 80.0), (410.0, 300.0), (250.0, 510.0), (260.0, 300.0)]
    edges = [(0, 1), (1, 2), (2, 0), (3, 3), (1, 3)]
    first = make_nodes(positions, edges)
    second = make_nodes(positions, edges)

    ForceDirectedLayout(300.0, 300.0, rng=random.Random(1)).tick(first, 1 / 60)
    ForceDirectedLayout(300.0, 300.0, rng=random.Random(2)).tick(second, 1 / 60)

    for a, b in zip(first, second):
        assert a.position == b.position
        assert (a.vx, a.vy) == (b.vx, b.vy)


def test_tick_separates_coincident_nodes():
    nodes = make_nodes([(300.0, 300.0)] * 3)

    ForceDirectedLayout(300.0, 300.0).tick(nodes, 0.1)

    for i in range(3):
        for j in range(i + 1, 3):
            a, b = nodes[i], nodes[j]
            assert math.hypot(a.x - b.x, a.y - b.y) > 0


def test_perturb_jitters_velocity_within_range():
    nodes = make_nodes([(0.0, 0.0)] * 20)

    ForceDirectedLayout(rng=random.Random(3)).perturb(nodes)

    assert any(n.speed() > 0 for n in nodes)
    for node in nodes:
        assert -10.0 <= node.vx <= 10.0
        assert -10.0 <= node.vy <= 10.0


def test_perturb_is_reproducible_with_seed():
    first = make_nodes([(0.0, 0.0)] * 5)
    second = make_nodes([(0.0, 0.0)] * 5)

    ForceDirectedLayout(rng=random.Random(9)).perturb(first)
    ForceDirectedLayout(rng=random.Random(9)).perturb(second)

    assert [(n.vx, n.vy) for n in first] == [(n.vx, n.vy) for n in second]
