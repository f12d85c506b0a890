"""Turn-based grid war simulation: armies roam a map of provinces, collect resources and fight."""

__version__ = "0.1.0"
__all__ = ["__version__"]