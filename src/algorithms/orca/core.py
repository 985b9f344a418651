import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from entities import Agent, Obstacle
from utils.geometry import clamp_norm, zero_vector
from utils.logger import get_logger

from ..common import BasePlanner, OrcaConfig
from .clustering import cluster_static_agents
from .geometry import agent_halfplane, obstacle_halfplane
from .halfplane import Halfplane, halfplane_intersection, make_halfplane

logger = get_logger("algorithms.orca.core")

@dataclass
class OrcaResult:
    velocity: np.ndarray
    feasible: bool = True
    iterations: int = 0
    halfplanes: list[Halfplane] = field(default_factory=list)

def _validate_inputs(
    subject: Agent,
    neighbors: Sequence[Agent],
    obstacles: Sequence[Obstacle],
    tau: float,
) -> None:
    if not (math.isfinite(tau) and tau > 0.0):
        raise ValueError(f"Time horizon tau must be a positive finite number, got {tau}")

    for agent in (subject, *neighbors):
        if agent.radius < 0.0 or agent.confidence < 0.0:
            raise ValueError("Agent radius and confidence must be non-negative")
        if not (np.all(np.isfinite(agent.position)) and np.all(np.isfinite(agent.velocity))):
            raise ValueError("Agent position and velocity must be finite")

    for obstacle in obstacles:
        if obstacle.radius < 0.0:
            raise ValueError("Obstacle radius must be non-negative")

def generate_halfplanes(
    subject: Agent,
    neighbors: Sequence[Agent],
    obstacles: Sequence[Obstacle],
    tau: float,
    config: OrcaConfig,
) -> tuple[list[Halfplane], list[Halfplane], list[bool]]:
    """Build the neighbor planes and the obstacle planes for ``subject``.

    Obstacle planes (clustered pairs first, then raw obstacles) are kept apart
    so the caller can append them after the neighbor planes and relax only
    the neighbor planes.
    """
    if config.cluster_static_agents:
        clusters = cluster_static_agents(subject, neighbors, tau, config.stationary_speed)
        merged = clusters.merged
        obstacle_planes = list(clusters.planes)
    else:
        merged = [False] * len(neighbors)
        obstacle_planes = []

    neighbor_planes: list[Halfplane] = []
    for other, is_merged in zip(neighbors, merged, strict=True):
        if other is subject or is_merged:
            continue
        u, n = agent_halfplane(subject, other, tau)
        neighbor_planes.append(make_halfplane(u, n))

    for obstacle in obstacles:
        u, n = obstacle_halfplane(subject, obstacle, tau)
        obstacle_planes.append(make_halfplane(u, n))

    return neighbor_planes, obstacle_planes, merged

def solve_detailed(
    subject: Agent,
    neighbors: Sequence[Agent],
    obstacles: Sequence[Obstacle],
    tau: float,
    config: OrcaConfig | None = None,
) -> OrcaResult:
    config = config or OrcaConfig()
    config.validate()
    _validate_inputs(subject, neighbors, obstacles, tau)

    neighbor_planes, obstacle_planes, merged = generate_halfplanes(
        subject, neighbors, obstacles, tau, config
    )
    for other, is_merged in zip(neighbors, merged, strict=True):
        if other is not subject:
            other.merged_into_obstacle = is_merged

    logger.debug(
        f"Solving with {len(neighbor_planes)} neighbor planes and "
        f"{len(obstacle_planes)} obstacle planes"
    )

    preferred = subject.velocity
    halfplanes = neighbor_planes + obstacle_planes

    for iteration in range(config.max_relaxation_iterations):
        new_velocity = halfplane_intersection(halfplanes, subject.velocity, preferred)
        if new_velocity is not None:
            if iteration > 0:
                logger.debug(f"Feasible velocity found after {iteration} relaxation steps")
            return OrcaResult(
                velocity=clamp_norm(new_velocity, subject.max_speed),
                feasible=True,
                iterations=iteration,
                halfplanes=halfplanes,
            )

        neighbor_planes = [plane.relaxed(config.relaxation_step) for plane in neighbor_planes]
        halfplanes = neighbor_planes + obstacle_planes

    logger.warning(
        f"No feasible velocity after {config.max_relaxation_iterations} relaxation steps, "
        "returning zero velocity"
    )
    return OrcaResult(
        velocity=zero_vector(),
        feasible=False,
        iterations=config.max_relaxation_iterations,
        halfplanes=halfplanes,
    )

def solve(
    subject: Agent,
    neighbors: Sequence[Agent],
    obstacles: Sequence[Obstacle],
    tau: float,
    config: OrcaConfig | None = None,
) -> np.ndarray:
    return solve_detailed(subject, neighbors, obstacles, tau, config).velocity

class ORCAPlanner(BasePlanner):
    def compute_velocity(
        self,
        subject: Agent,
        neighbors: Sequence[Agent],
        obstacles: Sequence[Obstacle] | None = None,
    ) -> np.ndarray:
        return solve(subject, neighbors, obstacles or [], self.config.time_horizon, self.config)
