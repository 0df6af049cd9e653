"""Feature tour: page through a catalog of feature topics."""

__version__ = "1.0.0"
