from dataclasses import dataclass, field
from typing import Sequence

from entities import Agent, Obstacle
from utils.geometry import dist
from utils.logger import get_logger

from .geometry import obstacle_halfplane
from .halfplane import Halfplane, make_halfplane

logger = get_logger("algorithms.orca.clustering")

@dataclass
class ClusterResult:
    planes: list[Halfplane] = field(default_factory=list)
    merged: list[bool] = field(default_factory=list)
    obstacles: list[Obstacle] = field(default_factory=list)

def cluster_static_agents(
    subject: Agent,
    neighbors: Sequence[Agent],
    tau: float,
    stationary_speed: float,
) -> ClusterResult:
    stationary = [
        other is not subject and other.is_stationary(stationary_speed) for other in neighbors
    ]
    result = ClusterResult(merged=[False] * len(neighbors))
    subject_margin = 2.0 * subject.clearance

    for i, seed in enumerate(neighbors):
        if not stationary[i] or result.merged[i]:
            continue

        for j in range(i + 1, len(neighbors)):
            if not stationary[j] or result.merged[j]:
                continue

            other = neighbors[j]
            threshold = seed.clearance + other.clearance + subject_margin
            if dist(seed.position, other.position) >= threshold:
                continue

            obstacle = Obstacle(
                start=seed.position,
                end=other.position,
                radius=max(seed.clearance, other.clearance),
            )
            u, n = obstacle_halfplane(subject, obstacle, tau)
            result.planes.append(make_halfplane(u, n))
            result.obstacles.append(obstacle)
            result.merged[i] = True
            result.merged[j] = True

    if result.planes:
        logger.debug(
            f"Clustered {sum(result.merged)} stationary neighbors into {len(result.planes)} obstacles"
        )

    return result
