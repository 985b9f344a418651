from .agent import Agent
from .obstacle import Obstacle

__all__ = [
    "Agent",
    "Obstacle",
]
