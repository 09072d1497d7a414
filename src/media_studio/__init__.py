"""
Media Studio
------------
Factory Method walkthrough: productions create movies or series and
release them, with series episodes spaced out on a scheduler.
"""

__all__ = ["config", "cli", "products", "production", "scheduler"]

__version__ = "0.1.0"
