from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from entities import Agent, Obstacle

from .config import OrcaConfig

class BasePlanner(ABC):
    def __init__(self, config: OrcaConfig | None = None):
        self.config = config or OrcaConfig()
        self.config.validate()

    @abstractmethod
    def compute_velocity(
        self,
        subject: Agent,
        neighbors: Sequence[Agent],
        obstacles: Sequence[Obstacle] | None = None,
    ) -> np.ndarray:
        pass

    def step(
        self,
        agents: Sequence[Agent],
        obstacles: Sequence[Obstacle] | None = None,
    ) -> list[np.ndarray]:
        velocities = []
        for subject in agents:
            neighbors = [other for other in agents if other is not subject]
            velocities.append(self.compute_velocity(subject, neighbors, obstacles))
        return velocities
