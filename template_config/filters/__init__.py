"""Declarative query filters (fastapi-filter)."""

from .config_value import ConfigValueFilter

__all__ = ["ConfigValueFilter"]
