import os
from dataclasses import dataclass

def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")

@dataclass
class OrcaConfig:
    time_horizon: float = float(os.getenv("ORCA_TIME_HORIZON", "2.0"))
    cluster_static_agents: bool = _env_flag("ORCA_CLUSTER_STATIC_AGENTS", "1")
    stationary_speed: float = float(os.getenv("ORCA_STATIONARY_SPEED", "1e-9"))
    relaxation_step: float = float(os.getenv("ORCA_RELAXATION_STEP", "0.0001"))
    max_relaxation_iterations: int = int(os.getenv("ORCA_MAX_RELAXATION_ITERATIONS", "10000"))

    def validate(self) -> None:
        if not self.time_horizon > 0.0:
            raise ValueError(f"time_horizon must be positive, got {self.time_horizon}")
        if self.stationary_speed < 0.0:
            raise ValueError(f"stationary_speed must be non-negative, got {self.stationary_speed}")
        if not self.relaxation_step > 0.0:
            raise ValueError(f"relaxation_step must be positive, got {self.relaxation_step}")
        if self.max_relaxation_iterations < 1:
            raise ValueError(
                f"max_relaxation_iterations must be at least 1, got {self.max_relaxation_iterations}"
            )
