import numpy as np

from algorithms import OrcaConfig, solve
from algorithms.orca import cluster_static_agents, generate_halfplanes
from entities import Agent

TAU = 2.0
STATIONARY = 1e-9

def make_agent(position, velocity=(0.0, 0.0), radius=0.2, max_speed=1.0) -> Agent:
    agent = Agent(position=position, velocity=velocity, radius=radius, max_speed=max_speed)
    return agent.with_inner_state(0.0, position)

def make_subject() -> Agent:
    return make_agent((0.0, -2.0), velocity=(0.0, 0.5), radius=0.1)

# 0.2 + 0.2 + 2 * 0.1
THRESHOLD = 0.6

def test_pair_just_inside_threshold_is_merged():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((THRESHOLD - 1e-6, 0.0))]

    clusters = cluster_static_agents(subject, neighbors, TAU, STATIONARY)

    assert clusters.merged == [True, True]
    assert len(clusters.planes) == 1
    obstacle = clusters.obstacles[0]
    assert np.array_equal(obstacle.start, neighbors[0].position)
    assert np.array_equal(obstacle.end, neighbors[1].position)
    assert obstacle.radius == 0.2

def test_merged_pair_contributes_no_neighbor_plane():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((THRESHOLD - 1e-6, 0.0))]

    neighbor_planes, obstacle_planes, merged = generate_halfplanes(
        subject, neighbors, [], TAU, OrcaConfig(cluster_static_agents=True)
    )

    assert neighbor_planes == []
    assert len(obstacle_planes) == 1
    assert merged == [True, True]

def test_pair_outside_threshold_stays_independent():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((THRESHOLD + 1e-6, 0.0))]

    neighbor_planes, obstacle_planes, merged = generate_halfplanes(
        subject, neighbors, [], TAU, OrcaConfig(cluster_static_agents=True)
    )

    assert len(neighbor_planes) == 2
    assert obstacle_planes == []
    assert merged == [False, False]

def test_moving_agent_is_never_merged():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((0.3, 0.0), velocity=(0.1, 0.0))]

    clusters = cluster_static_agents(subject, neighbors, TAU, STATIONARY)

    assert clusters.merged == [False, False]
    assert clusters.planes == []

def test_merged_agent_is_not_a_seed():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((0.5, 0.0)), make_agent((1.0, 0.0))]

    clusters = cluster_static_agents(subject, neighbors, TAU, STATIONARY)

    assert clusters.merged == [True, True, False]
    assert len(clusters.planes) == 1

def test_seed_can_absorb_several_partners():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((0.5, 0.0)), make_agent((-0.5, 0.0))]

    clusters = cluster_static_agents(subject, neighbors, TAU, STATIONARY)

    assert clusters.merged == [True, True, True]
    assert len(clusters.planes) == 2

def test_clustering_does_not_mutate_neighbors():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((0.3, 0.0))]

    cluster_static_agents(subject, neighbors, TAU, STATIONARY)

    assert [agent.merged_into_obstacle for agent in neighbors] == [False, False]

def test_subject_in_neighbor_list_is_ignored():
    subject = make_agent((0.0, 0.0))
    neighbors = [subject, make_agent((0.3, 0.0)), make_agent((5.0, 5.0))]

    neighbor_planes, obstacle_planes, merged = generate_halfplanes(
        subject, neighbors, [], TAU, OrcaConfig(cluster_static_agents=True)
    )

    assert merged == [False, False, False]
    assert len(neighbor_planes) == 2
    assert obstacle_planes == []

def test_solve_records_merged_flags_and_resets_them():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((0.3, 0.0)), make_agent((3.0, 0.0))]
    neighbors[2].merged_into_obstacle = True

    solve(subject, neighbors, [], TAU, OrcaConfig(cluster_static_agents=True))

    assert [agent.merged_into_obstacle for agent in neighbors] == [True, True, False]

def test_clustering_can_be_disabled_at_runtime():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((0.3, 0.0))]

    neighbor_planes, obstacle_planes, merged = generate_halfplanes(
        subject, neighbors, [], TAU, OrcaConfig(cluster_static_agents=False)
    )

    assert len(neighbor_planes) == 2
    assert obstacle_planes == []
    assert merged == [False, False]

def test_agent_merged_by_earlier_seed_is_not_paired_again():
    subject = make_subject()
    neighbors = [make_agent((0.0, 0.0)), make_agent((1.0, 0.0)), make_agent((0.5, 0.0))]

    clusters = cluster_static_agents(subject, neighbors, TAU, STATIONARY)

    assert clusters.merged == [True, False, True]
    assert len(clusters.planes) == 1
    assert np.array_equal(clusters.obstacles[0].end, neighbors[2].position)
