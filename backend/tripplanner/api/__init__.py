"""HTTP API."""

from .routes import get_services, router

__all__ = ["get_services", "router"]
