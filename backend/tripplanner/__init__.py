"""Trip planner backend: heuristic attraction generation for a city."""

__version__ = "0.1.0"
SERVICE_NAME = "trip-planner-backend"
