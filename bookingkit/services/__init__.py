"""
Service layer helpers that orchestrate domain logic and persistence.
"""

from .slug_allocator import SlugAllocatorService, SlugStoreProtocol

__all__ = ["SlugAllocatorService", "SlugStoreProtocol"]
