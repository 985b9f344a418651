from .clustering import ClusterResult, cluster_static_agents
from .core import ORCAPlanner, OrcaResult, generate_halfplanes, solve, solve_detailed
from .geometry import agent_halfplane, obstacle_halfplane, out_of_disk
from .halfplane import Halfplane, feasible_interval, halfplane_intersection

__all__ = [
    "ClusterResult",
    "Halfplane",
    "ORCAPlanner",
    "OrcaResult",
    "agent_halfplane",
    "cluster_static_agents",
    "feasible_interval",
    "generate_halfplanes",
    "halfplane_intersection",
    "obstacle_halfplane",
    "out_of_disk",
    "solve",
    "solve_detailed",
]
