"""FastAPI server integration."""

from .routes import register_summary_routes

__all__ = ["register_summary_routes"]
