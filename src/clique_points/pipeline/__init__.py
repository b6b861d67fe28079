"""Points pipeline orchestration."""

from .orchestrator import PointsEngine, compute_points, get_points

__all__ = ["PointsEngine", "compute_points", "get_points"]
