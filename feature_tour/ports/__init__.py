"""Ports (interfaces) for the application.

This module contains Protocol definitions for the boundaries between the
application core and where topic content comes from.
"""

from feature_tour.ports.catalog import TopicCatalog

__all__ = ["TopicCatalog"]
