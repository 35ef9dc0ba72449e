"""Route group exports."""

from . import datasets, health, route_plan

__all__ = ["datasets", "health", "route_plan"]
