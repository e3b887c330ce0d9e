"""Three-component vectors for physics calculations.

``Vector3D`` holds three components of one numeric type (int, float,
Fraction, numpy scalars...) and supports the usual arithmetic operators.
Free functions provide the dot product, the cross product and the Euclidean
distance.

Division never guards against zero divisors. Real operands follow IEEE-754,
so ``Vector3D(1.0, 0.0, -1.0) / 0`` is ``(inf, nan, -inf)``, and the
direction of the zero vector is all NaN. Compare results with ``is_close``
when exact equality is too strict.

Typical usage example:
    from vector3d.vectors import Vector3D, cross_product, distance

    position = Vector3D(100.0, 500.0, 200.0)
    velocity = Vector3D(50.0, 0.0, 10.0)
    new_position = position + velocity * dt
"""

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import numpy as np
import numpy.typing as npt

T = TypeVar("T")

_REAL_TYPES = (int, float, np.integer, np.floating)


def _divide(a: Any, b: Any) -> Any:
    """True division that yields inf/nan instead of raising for real operands.

    Numpy scalars keep their numpy type; plain int/float give a Python float.
    """
    if isinstance(a, _REAL_TYPES) and isinstance(b, _REAL_TYPES):
        with np.errstate(divide="ignore", invalid="ignore"):
            quotient = np.true_divide(a, b)
        if isinstance(a, np.generic) or isinstance(b, np.generic):
            return quotient
        return quotient.item()
    return a / b


@dataclass(eq=False)
class Vector3D(Generic[T]):
    """3D vector with components of a single numeric type.

    Represents a point or a displacement. Components are plain attributes and
    can be reassigned in place; every operator returns a new vector.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.

    Examples:
        >>> v1 = Vector3D(1.0, 2.0, 3.0)
        >>> v2 = Vector3D(4.0, 5.0, 6.0)
        >>> v1 + v2
        Vector3D(x=5.0, y=7.0, z=9.0)
        >>> str(Vector3D(1, 2, 3))
        '1, 2, 3'
    """

    x: T = 0  # type: ignore[assignment]
    y: T = 0  # type: ignore[assignment]
    z: T = 0  # type: ignore[assignment]

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Vector3D[T]") -> "Vector3D[T]":
        """Add two vectors component-wise."""
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3D[T]") -> "Vector3D[T]":
        """Subtract two vectors component-wise.

        Args:
            other: Vector to subtract.

        Returns:
            ``self - other``; the operation is not commutative.
        """
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "T | Vector3D[T]") -> "Vector3D[T]":
        """Multiply by a scalar, or component-wise by another vector.

        The vector-vector form is the Hadamard product, not the dot product;
        use ``scalar_product`` for that.

        Args:
            other: Scalar factor or vector.

        Returns:
            Scaled vector or component-wise product.

        Examples:
            >>> Vector3D(1, 2, 3) * 2
            Vector3D(x=2, y=4, z=6)
            >>> Vector3D(1, 2, 3) * Vector3D(4, 5, 6)
            Vector3D(x=4, y=10, z=18)
        """
        if isinstance(other, Vector3D):
            return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3D(other * self.x, other * self.y, other * self.z)

    def __rmul__(self, scalar: T) -> "Vector3D[T]":
        """Multiply scalar by vector, so ``2 * v == v * 2``."""
        return Vector3D(scalar * self.x, scalar * self.y, scalar * self.z)

    def __truediv__(self, other: "T | Vector3D[T]") -> "Vector3D[T]":
        """Divide by a scalar, or component-wise by another vector.

        Zero divisors are not checked. With int or float operands the result
        follows IEEE-754 (``inf``, ``-inf``, ``nan``) instead of raising.
        Numpy scalar components keep their numpy type.

        Args:
            other: Scalar divisor or vector of divisors.

        Returns:
            Vector of quotients.
        """
        if isinstance(other, Vector3D):
            return Vector3D(
                _divide(self.x, other.x), _divide(self.y, other.y), _divide(self.z, other.z)
            )
        return Vector3D(_divide(self.x, other), _divide(self.y, other), _divide(self.z, other))

    def __neg__(self) -> "Vector3D[T]":
        """Negate vector (reverse direction)."""
        return Vector3D(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        """Exact component-wise equality, without tolerance.

        NaN components never compare equal, not even to themselves.
        """
        if not isinstance(other, Vector3D):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    def __iter__(self) -> Iterator[T]:
        """Iterate over x, y, z, allowing ``x, y, z = v``."""
        yield self.x
        yield self.y
        yield self.z

    def module(self) -> float:
        """Calculate the Euclidean length of the vector.

        Returns:
            ``sqrt(x² + y² + z²)`` as a float, whatever the component type.

        Examples:
            >>> Vector3D(3, 4, 0).module()
            5.0
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def module_squared(self) -> T:
        """Squared length, in the component type (no square root)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def direction(self) -> "Vector3D[float]":
        """Return the unit vector pointing the same way.

        Components are converted to float first, so integer vectors get a
        float direction. The zero vector has no direction: its result is
        ``(nan, nan, nan)``.

        Examples:
            >>> Vector3D(3, 4, 0).direction()
            Vector3D(x=0.6, y=0.8, z=0.0)
        """
        return self.astype(float) / self.module()

    def astype(self, component_type: Callable[[Any], Any]) -> "Vector3D[Any]":
        """Convert every component with ``component_type``.

        Args:
            component_type: Numeric type or converter, e.g. ``float``.

        Returns:
            New vector with converted components.
        """
        return Vector3D(component_type(self.x), component_type(self.y), component_type(self.z))

    def lerp(self, other: "Vector3D[T]", t: float) -> "Vector3D[Any]":
        """Linear interpolation between this vector and another.

        Args:
            other: Target vector.
            t: Interpolation factor, 0.0 gives ``self`` and 1.0 gives ``other``.

        Returns:
            Interpolated vector.
        """
        return self + (other - self) * t

    def to_array(self, dtype: npt.DTypeLike = None) -> npt.NDArray[Any]:
        """Convert to a numpy array ``[x, y, z]``.

        Args:
            dtype: Array dtype. None lets numpy infer it from the components.
        """
        return np.array([self.x, self.y, self.z], dtype=dtype)

    @classmethod
    def from_array(cls, arr: npt.ArrayLike) -> "Vector3D[Any]":
        """Create a vector from the first three elements of an array.

        Elements are converted to native Python scalars.

        Args:
            arr: Array-like with at least 3 elements.

        Raises:
            IndexError: If fewer than 3 elements are available.

        Examples:
            >>> Vector3D.from_array(np.array([1, 2, 3]))
            Vector3D(x=1, y=2, z=3)
        """
        flat = np.asarray(arr).ravel()
        return cls(flat[0].item(), flat[1].item(), flat[2].item())

    @classmethod
    def zero(cls, component_type: Callable[[Any], Any] = float) -> "Vector3D[Any]":
        """Create the zero vector (0, 0, 0) of the given component type."""
        return cls(component_type(0), component_type(0), component_type(0))

    @classmethod
    def one(cls, component_type: Callable[[Any], Any] = float) -> "Vector3D[Any]":
        """Create the vector (1, 1, 1)."""
        return cls(component_type(1), component_type(1), component_type(1))

    @classmethod
    def unit_x(cls, component_type: Callable[[Any], Any] = float) -> "Vector3D[Any]":
        """Create the unit vector (1, 0, 0)."""
        return cls(component_type(1), component_type(0), component_type(0))

    @classmethod
    def unit_y(cls, component_type: Callable[[Any], Any] = float) -> "Vector3D[Any]":
        """Create the unit vector (0, 1, 0)."""
        return cls(component_type(0), component_type(1), component_type(0))

    @classmethod
    def unit_z(cls, component_type: Callable[[Any], Any] = float) -> "Vector3D[Any]":
        """Create the unit vector (0, 0, 1)."""
        return cls(component_type(0), component_type(0), component_type(1))

    def __str__(self) -> str:
        """Components separated by ``", "``, e.g. ``"1, 2, 3"``."""
        return f"{self.x}, {self.y}, {self.z}"

    def __repr__(self) -> str:
        return f"Vector3D(x={self.x!r}, y={self.y!r}, z={self.z!r})"


def scalar_product(a: Vector3D[Any], b: Vector3D[Any]) -> float:
    """Dot product of two vectors.

    Computed as the sum of the components of the component-wise product
    ``a * b``.

    Examples:
        >>> scalar_product(Vector3D(1, 2, 3), Vector3D(4, 5, 6))
        32.0
    """
    product = a * b
    return float(product.x + product.y + product.z)


def cross_product(a: Vector3D[T], b: Vector3D[T]) -> Vector3D[T]:
    """Cross product of two vectors.

    The result is perpendicular to both operands. Swapping the operands
    negates it.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        ``(ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx)``.

    Examples:
        >>> cross_product(Vector3D(1, 0, 0), Vector3D(0, 1, 0))
        Vector3D(x=0, y=0, z=1)
    """
    return Vector3D(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def distance(a: Vector3D[Any], b: Vector3D[Any]) -> float:
    """Euclidean distance between two points.

    Examples:
        >>> distance(Vector3D(0, 0, 0), Vector3D(1, 2, 2))
        3.0
    """
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def is_close(
    a: Vector3D[Any], b: Vector3D[Any], *, rel_tol: float = 1e-09, abs_tol: float = 0.0
) -> bool:
    """Approximate component-wise equality, see ``math.isclose``.

    Use ``abs_tol`` when comparing against zero components.
    """
    return all(
        math.isclose(p, q, rel_tol=rel_tol, abs_tol=abs_tol) for p, q in zip(a, b)
    )
