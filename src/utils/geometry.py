import math
from typing import Sequence

import numpy as np

EPSILON = 1e-9

Vector = np.ndarray

def as_vector(value: Sequence[float] | np.ndarray) -> Vector:
    vector = np.asarray(value, dtype=float).reshape(-1)
    if vector.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {vector.shape}")
    return vector.copy()

def zero_vector() -> Vector:
    return np.zeros(2, dtype=float)

def norm(vector: Vector) -> float:
    return float(math.sqrt(float(np.dot(vector, vector))))

def normalize(vector: Vector) -> Vector:
    length = norm(vector)
    if length == 0.0:
        return zero_vector()
    return vector / length

def dot(a: Vector, b: Vector) -> float:
    return float(a[0] * b[0] + a[1] * b[1])

def cross(a: Vector, b: Vector) -> float:
    return float(a[0] * b[1] - a[1] * b[0])

def dist(a: Vector, b: Vector) -> float:
    return norm(a - b)

def mix(a: Vector, b: Vector, amount: float) -> Vector:
    return a + (b - a) * amount

def clamp_norm(vector: Vector, max_norm: float) -> Vector:
    if norm(vector) > max_norm:
        return normalize(vector) * max_norm
    return vector

def angle_of(vector: Vector) -> float:
    """Signed angle in degrees between ``vector`` and the x-axis, in [-180, 180]."""
    unit = normalize(vector)
    if not unit.any():
        return 0.0
    cosine = max(-1.0, min(1.0, float(unit[0])))
    angle = math.degrees(math.acos(cosine))
    if vector[1] < 0.0:
        angle *= -1.0
    return angle

def vector_of_angle(angle: float) -> Vector:
    radians = math.radians(angle)
    return np.array([math.cos(radians), math.sin(radians)], dtype=float)

def rotate(vector: Vector, angle: float) -> Vector:
    radians = math.radians(angle)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return np.array(
        [vector[0] * cos_a - vector[1] * sin_a, vector[0] * sin_a + vector[1] * cos_a],
        dtype=float,
    )

def arcsin_deg(opposite: float, hypotenuse: float) -> float:
    ratio = max(-1.0, min(1.0, opposite / hypotenuse))
    return math.degrees(math.asin(ratio))

def angle_diff(a: float, b: float) -> float:
    x = (a + 360.0) % 360.0
    y = (b + 360.0) % 360.0
    return min(abs(x - y), abs(x - y - 360.0), abs(x - y + 360.0))

def closest_point_on_segment(
    p0: Vector,
    p1: Vector,
    target: Vector,
    t_min: float = 0.0,
    t_max: float = 1.0,
) -> Vector:
    """Project ``target`` onto the line p0-p1 and clamp the line parameter.

    The parameter is scaled so that t=0 is ``p0`` and t=1 is ``p1``. A
    degenerate segment (p0 == p1) returns ``p0``.
    """
    direction = p1 - p0
    length = norm(direction)
    if length == 0.0:
        return p0.copy()

    t = dot(target - p0, direction / length) / length
    t = min(max(t, t_min), t_max)
    return mix(p0, p1, t)
