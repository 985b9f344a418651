import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from utils.geometry import EPSILON, closest_point_on_segment, cross, dot
from utils.logger import get_logger

logger = get_logger("algorithms.orca.halfplane")

@dataclass(frozen=True, eq=False)
class Halfplane:
    # feasible side: (v - (base + u)) . n >= 0
    u: np.ndarray
    n: np.ndarray

    def boundary_point(self, base_velocity: np.ndarray) -> np.ndarray:
        return base_velocity + self.u

    def direction(self) -> np.ndarray:
        return np.array([self.n[1], -self.n[0]], dtype=float)

    def contains(self, point: np.ndarray, base_velocity: np.ndarray) -> bool:
        return dot(point - self.boundary_point(base_velocity), self.n) >= 0.0

    def relaxed(self, step: float) -> "Halfplane":
        return Halfplane(u=self.u - self.n * step, n=self.n)

def feasible_interval(
    plane: Halfplane,
    others: Sequence[Halfplane],
) -> tuple[float, float] | None:
    left = -math.inf
    right = math.inf

    direction = plane.direction()

    for other in others:
        other_direction = other.direction()
        numerator = cross(other.u - plane.u, other_direction)
        denominator = cross(direction, other_direction)

        if abs(denominator) <= EPSILON:
            if numerator < -EPSILON:
                return None
            continue

        t = numerator / denominator
        if denominator > 0.0:
            right = min(right, t)
        else:
            left = max(left, t)

        if left > right:
            return None

    return left, right

def halfplane_intersection(
    halfplanes: Sequence[Halfplane],
    base_velocity: np.ndarray,
    preferred: np.ndarray,
) -> np.ndarray | None:
    absolute = [Halfplane(u=plane.boundary_point(base_velocity), n=plane.n) for plane in halfplanes]
    solution = np.array(preferred, dtype=float)

    for i, plane in enumerate(absolute):
        if dot(solution - plane.u, plane.n) >= 0.0:
            continue

        interval = feasible_interval(plane, absolute[:i])
        if interval is None:
            logger.debug(f"Empty intersection at half-plane {i} of {len(absolute)}")
            return None

        left, right = interval
        solution = closest_point_on_segment(
            plane.u,
            plane.u + plane.direction(),
            preferred,
            left,
            right,
        )

    return solution

def make_halfplane(u: np.ndarray, n: np.ndarray) -> Halfplane:
    return Halfplane(u=np.asarray(u, dtype=float), n=np.asarray(n, dtype=float))
