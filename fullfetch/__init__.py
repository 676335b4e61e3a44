"""Configurable terminal system information fetch tool."""

__version__ = "2.1.1"
__all__ = ["__version__"]