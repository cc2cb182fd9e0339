"""Blueprint exports."""

from . import debt

__all__ = ["debt"]
