from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from utils.geometry import as_vector, clamp_norm, norm, zero_vector

from .obstacle import Obstacle

@dataclass(eq=False)
class Agent:
    position: np.ndarray
    velocity: np.ndarray
    radius: float
    max_speed: float
    confidence: float = 0.0
    target: np.ndarray = field(default_factory=zero_vector)
    merged_into_obstacle: bool = False

    def __post_init__(self) -> None:
        self.position = as_vector(self.position)
        self.velocity = as_vector(self.velocity)
        self.target = as_vector(self.target)
        self.radius = float(self.radius)
        self.max_speed = float(self.max_speed)
        self.confidence = float(self.confidence)

        if self.radius < 0.0:
            raise ValueError(f"Agent radius must be non-negative, got {self.radius}")
        if self.max_speed < 0.0:
            raise ValueError(f"Agent max_speed must be non-negative, got {self.max_speed}")
        if self.confidence < 0.0:
            raise ValueError(f"Agent confidence must be non-negative, got {self.confidence}")

        self.velocity = clamp_norm(self.velocity, self.max_speed)

    def with_inner_state(self, confidence: float, target: Sequence[float] | np.ndarray) -> "Agent":
        confidence = float(confidence)
        if confidence < 0.0:
            raise ValueError(f"Agent confidence must be non-negative, got {confidence}")
        self.confidence = confidence
        self.target = as_vector(target)
        return self

    @property
    def speed(self) -> float:
        return norm(self.velocity)

    @property
    def clearance(self) -> float:
        return self.radius + self.confidence

    def is_stationary(self, threshold: float) -> bool:
        return self.speed < threshold

    def update_position(self, position: Sequence[float] | np.ndarray) -> None:
        self.position = as_vector(position)
        self.velocity = clamp_norm(self.target - self.position, self.max_speed)

    def orca(
        self,
        neighbors: Sequence["Agent"],
        obstacles: Sequence[Obstacle],
        tau: float,
        config=None,
    ) -> np.ndarray:
        from algorithms.orca.core import solve

        return solve(self, neighbors, obstacles, tau, config)
