"""Routers module - FastAPI route handlers"""

from . import about, config, diff, modules, projects

__all__ = ["about", "config", "diff", "modules", "projects"]
