"""Plain-text records of a small cinema's show schedule, staff and customers."""

__version__ = "0.1.0"
__all__ = ["__version__"]