from .common import BasePlanner, OrcaConfig
from .orca import ORCAPlanner, OrcaResult, solve, solve_detailed

__all__ = [
    "BasePlanner",
    "OrcaConfig",
    "ORCAPlanner",
    "OrcaResult",
    "solve",
    "solve_detailed",
]
