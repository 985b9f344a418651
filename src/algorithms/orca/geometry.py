import math

import numpy as np

from entities import Agent, Obstacle
from utils.geometry import (
    angle_diff,
    angle_of,
    arcsin_deg,
    closest_point_on_segment,
    dist,
    dot,
    norm,
    normalize,
    vector_of_angle,
    zero_vector,
)
from utils.logger import get_logger

logger = get_logger("algorithms.orca.geometry")

ESCAPE_BIAS_DEG = 10.0

def out_of_disk(
    center: np.ndarray,
    radius: float,
    velocity: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    relative = velocity - center
    w_length = norm(relative)
    n = vector_of_angle(angle_of(relative) + ESCAPE_BIAS_DEG)
    u = n * (radius - w_length)
    return u, n

def agent_halfplane(
    subject: Agent,
    other: Agent,
    tau: float,
) -> tuple[np.ndarray, np.ndarray]:
    relative_pos = other.position - subject.position
    relative_vel = subject.velocity - other.velocity
    combined_radius = subject.clearance + other.clearance
    distance = norm(relative_pos)

    if distance < combined_radius or distance == 0.0:
        # boundary anchored at the neighbor's velocity, so the result separates
        escape, n = out_of_disk(relative_pos, combined_radius, zero_vector())
        logger.debug(f"Overlap with neighbor at distance {distance:.3f} < {combined_radius:.3f}")
        return escape - relative_vel, n

    disk_center = relative_pos / tau
    disk_radius = combined_radius / tau
    w = relative_vel - disk_center
    w_dot_pos = dot(w, relative_pos)

    if w_dot_pos < 0.0 and w_dot_pos**2 > combined_radius**2 * dot(w, w):
        return out_of_disk(disk_center, disk_radius, relative_vel)

    position_angle = angle_of(relative_pos)
    half_angle = arcsin_deg(combined_radius, distance)

    origin = zero_vector()
    left = closest_point_on_segment(
        origin, vector_of_angle(position_angle + half_angle), relative_vel, 0.0, math.inf
    )
    right = closest_point_on_segment(
        origin, vector_of_angle(position_angle - half_angle), relative_vel, 0.0, math.inf
    )
    closest = left if dist(left, relative_vel) <= dist(right, relative_vel) else right

    u = closest - relative_vel
    n = normalize(u)

    if angle_diff(angle_of(relative_vel), position_angle) > half_angle:
        return u / 2.0, -n
    return u * 2.0, n

def obstacle_halfplane(
    subject: Agent,
    obstacle: Obstacle,
    tau: float,
) -> tuple[np.ndarray, np.ndarray]:
    clearance = subject.clearance + obstacle.radius

    closest = closest_point_on_segment(obstacle.start, obstacle.end, subject.position)
    dist_vec = closest - subject.position

    if norm(dist_vec) < clearance:
        logger.debug(f"Overlap with obstacle at distance {norm(dist_vec):.3f} < {clearance:.3f}")
        return -dist_vec - subject.velocity, normalize(-dist_vec)

    start = (obstacle.start - subject.position) / tau
    end = (obstacle.end - subject.position) / tau
    closest_vel = closest_point_on_segment(start, end, zero_vector())
    # expand the scaled segment towards the subject by the clearance
    closest_vel = closest_vel - normalize(closest_vel) * (clearance / tau)

    return closest_vel - subject.velocity, -normalize(closest_vel)
