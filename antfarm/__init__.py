"""Route a colony of ants through a farm of rooms in as few turns as possible."""

__version__ = "0.1.0"
__all__ = ["__version__"]