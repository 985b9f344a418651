from dataclasses import dataclass

import numpy as np

from utils.geometry import as_vector

@dataclass(frozen=True, eq=False)
class Obstacle:
    start: np.ndarray
    end: np.ndarray
    radius: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_vector(self.start))
        object.__setattr__(self, "end", as_vector(self.end))
        object.__setattr__(self, "radius", float(self.radius))

        if self.radius < 0.0:
            raise ValueError(f"Obstacle radius must be non-negative, got {self.radius}")

        self.start.setflags(write=False)
        self.end.setflags(write=False)
