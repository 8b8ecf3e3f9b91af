"""Template configuration value store."""

__version__ = "1.0.0"
