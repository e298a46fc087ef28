"""
Application service for allocating unique slugs.

``generate_slug`` makes no uniqueness promise. This service owns collision
handling for callers that persist slugs: it derives a base slug, falls back
to a fixed word when the name has no usable characters, and appends ``-1``,
``-2``, ... until the store reports the candidate as free. The store is a
simple protocol so the persistence layer can be stubbed in tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable, Optional, Protocol

from ..domain.exceptions import SlugAllocationError
from ..domain.slugs import generate_slug, is_valid_slug

if TYPE_CHECKING:
    from ..config import SlugConfig

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "company"
DEFAULT_MAX_ATTEMPTS = 1000


class SlugStoreProtocol(Protocol):
    """Protocol describing the slug lookup needed by the service."""

    async def slug_exists(self, slug: str, exclude_id: Optional[Hashable] = None) -> bool:
        """Return True if ``slug`` is taken by an entity other than ``exclude_id``."""


class SlugAllocatorService:
    """
    Finds the first free slug for a display name.
    """

    def __init__(
        self,
        store: SlugStoreProtocol,
        *,
        fallback: str = DEFAULT_FALLBACK,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if not is_valid_slug(fallback):
            raise ValueError(f"Fallback must be a valid slug, got {fallback!r}")
        if max_attempts <= 0:
            raise ValueError("max_attempts must be greater than zero")

        self._store = store
        self._fallback = fallback
        self._max_attempts = max_attempts

    @classmethod
    def from_config(cls, store: SlugStoreProtocol, config: SlugConfig) -> SlugAllocatorService:
        """Build a service from the ``slug`` section of the app config."""
        return cls(store, fallback=config.fallback, max_attempts=config.max_attempts)

    def base_slug(self, name: str | None) -> str:
        """Slug for ``name``, or the fallback when nothing survives."""
        return generate_slug(name) or self._fallback

    async def allocate(self, name: str | None, *, exclude_id: Optional[Hashable] = None) -> str:
        """
        Allocate a free slug for ``name``.

        Args:
            name: Display name to derive the slug from
            exclude_id: Entity that may keep its own current slug (renames)

        Returns:
            The base slug if free, otherwise the first free ``base-N``

        Raises:
            SlugAllocationError: If every candidate within the budget is taken
        """
        base = self.base_slug(name)
        candidate = base

        for counter in range(1, self._max_attempts + 1):
            if not await self._store.slug_exists(candidate, exclude_id=exclude_id):
                return candidate

            logger.debug("Slug %r is taken, trying the next suffix", candidate)
            candidate = f"{base}-{counter}"

        raise SlugAllocationError(
            f"No free slug for {base!r} after {self._max_attempts} attempts"
        )
