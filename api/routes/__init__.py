"""API routes package"""

from . import attributes, options, preferences, characteristics, health

__all__ = ["attributes", "options", "preferences", "characteristics", "health"]
