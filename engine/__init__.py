"""
Projection engine: deterministic monthly revenue, expense and result math.
"""

from .runner import ProjectionResult, compute

__all__ = ["ProjectionResult", "compute"]
