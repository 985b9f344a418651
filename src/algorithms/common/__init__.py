from .base import BasePlanner
from .config import OrcaConfig

__all__ = [
    "BasePlanner",
    "OrcaConfig",
]
