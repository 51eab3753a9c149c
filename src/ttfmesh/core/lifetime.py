"""Ownership and borrow tracking for foreign resources.

A ``ResourceGuard`` is attached to each owning handle (Font, Mesh). It pairs
the foreign pointer with a ``weakref.finalize`` so the matching release
routine runs exactly once, whether the handle is closed explicitly or
collected. Releasing bumps the guard's generation.

Borrowed objects (Glyph, ForeignArrayView) keep a strong reference to their
owner, so collection can never free memory under them, and a ``Borrow`` that
records the generation it was taken at. Every pointer access goes through
``Borrow.get()``, which raises once the owner has been closed.
"""

import weakref
from collections.abc import Callable
from typing import Any

from ttfmesh.exceptions import HandleClosedError, StaleHandleError


class ResourceGuard:
    """Single owner of one foreign pointer.

    Args:
        owner: Handle whose lifetime bounds the resource
        kind: Name used in error messages (e.g. "Font")
        pointer: Foreign pointer; must be non-NULL
        release: Routine freeing ``pointer``; called at most once
        keepalive: Object the foreign resource depends on, held until release
    """

    def __init__(
        self,
        owner: object,
        kind: str,
        pointer: Any,
        release: Callable[[Any], None],
        keepalive: object = None,
    ) -> None:
        if not pointer:
            raise ValueError(f"{kind} guard requires a non-NULL pointer")
        self.kind = kind
        self._pointer = pointer
        self._generation = 0
        # finalize must not reference owner, or owner would never be collected
        self._finalizer = weakref.finalize(owner, _release, release, pointer, keepalive)

    @property
    def alive(self) -> bool:
        return self._finalizer.alive

    @property
    def generation(self) -> int:
        return self._generation

    def get(self) -> Any:
        """Return the pointer for use by the owner itself.

        Raises:
            HandleClosedError: If the resource has been released
        """
        if not self._finalizer.alive:
            raise HandleClosedError(self.kind)
        return self._pointer

    def borrow(self) -> "Borrow":
        """Take a borrow bound to the current generation.

        Raises:
            HandleClosedError: If the resource has been released
        """
        if not self._finalizer.alive:
            raise HandleClosedError(self.kind)
        return Borrow(self, self._generation)

    def release(self) -> bool:
        """Free the resource if still held.

        Returns:
            True if this call released it, False if it was already released
        """
        if not self._finalizer.alive:
            return False
        self._finalizer()
        self._pointer = None
        self._generation += 1
        return True


def _release(release: Callable[[Any], None], pointer: Any, _keepalive: object) -> None:
    release(pointer)


class Borrow:
    """Checked access to a pointer owned by someone else."""

    __slots__ = ("_guard", "_generation")

    def __init__(self, guard: ResourceGuard, generation: int) -> None:
        self._guard = guard
        self._generation = generation

    @property
    def valid(self) -> bool:
        return self._guard.alive and self._guard.generation == self._generation

    def get(self) -> Any:
        """Return the owner's pointer.

        Raises:
            StaleHandleError: If the owner was released after this borrow was taken
        """
        if not self.valid:
            raise StaleHandleError(self._guard.kind)
        return self._guard._pointer
