"""
Adapters layer - Integration with the serialization layer (pydantic).
"""

from .wire import SlugStr, UtcDateTime, WireModel

__all__ = ["SlugStr", "UtcDateTime", "WireModel"]
