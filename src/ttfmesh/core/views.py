"""Zero-copy views over mesh arrays owned by the engine.

A ``ForeignArrayView`` wraps a base pointer and an element count reported by
the engine. Nothing is copied up front: each element is read from foreign
memory when it is requested and converted to a tuple of Python numbers.
Every read is bounds-checked against the stored count and goes through the
owner's ``Borrow``, so a view used after its mesh is closed raises
``StaleHandleError`` instead of touching freed memory.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ttfmesh.core.lifetime import Borrow
from ttfmesh.engine.structs import Face, Normal, Vertex2D, Vertex3D

T = TypeVar("T", bound=tuple)

Point2 = tuple[float, float]
Point3 = tuple[float, float, float]
Triangle = tuple[int, int, int]


@dataclass(frozen=True)
class ElementShape(Generic[T]):
    """How to read one element of a foreign array.

    Attributes:
        name: Label used in repr()
        struct: ctypes structure type of one element
        fields: Structure fields, in tuple order
    """

    name: str
    struct: type
    fields: tuple[str, ...]

    def read(self, element: Any) -> T:
        return tuple(getattr(element, f) for f in self.fields)  # type: ignore[return-value]


VERTEX_2D: ElementShape[Point2] = ElementShape("vertex2d", Vertex2D, ("x", "y"))
VERTEX_3D: ElementShape[Point3] = ElementShape("vertex3d", Vertex3D, ("x", "y", "z"))
FACE: ElementShape[Triangle] = ElementShape("face", Face, ("v1", "v2", "v3"))
NORMAL: ElementShape[Point3] = ElementShape("normal", Normal, ("x", "y", "z"))


class ForeignArrayView(Generic[T]):
    """Read-only, restartable sequence over a foreign array.

    Iterating twice yields the same elements twice; each ``iter()`` starts a
    fresh lazy pass. The view holds its owner strongly, so it never outlives
    the memory it reads, and checks the borrow on every access so it fails
    cleanly once the owner is closed.

    Example:
        for x, y in mesh.iter_vertices():
            ...
        first_face = mesh.iter_faces()[0]
    """

    __slots__ = ("_owner", "_borrow", "_attribute", "_count", "_shape")

    def __init__(
        self,
        owner: object,
        borrow: Borrow,
        attribute: str,
        count: int,
        shape: ElementShape[T],
    ) -> None:
        """Create a view.

        Args:
            owner: Handle owning the memory; kept alive by the view
            borrow: Borrow of the owner's guard, yielding the struct pointer
            attribute: Field of the owner's struct holding the array base
            count: Number of elements, as reported by the engine
            shape: Element layout
        """
        if count < 0:
            raise ValueError(f"element count must be non-negative, got {count}")
        self._owner = owner
        self._borrow = borrow
        self._attribute = attribute
        self._count = count
        self._shape = shape

    @property
    def shape(self) -> ElementShape[T]:
        return self._shape

    def _base(self) -> Any:
        base = getattr(self._borrow.get().contents, self._attribute)
        if not base and self._count:
            raise ValueError(f"{self._shape.name} array is NULL but count is {self._count}")
        return base

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._shape.read(self._base()[i])

    def __getitem__(self, index: int) -> T:
        if not isinstance(index, int):
            raise TypeError(f"view indices must be integers, not {type(index).__name__}")
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError(f"{self._shape.name} index out of range")
        return self._shape.read(self._base()[index])

    def __repr__(self) -> str:
        state = "" if self._borrow.valid else ", stale"
        return f"ForeignArrayView({self._shape.name}, count={self._count}{state})"
