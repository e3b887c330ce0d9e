"""Generic three-component vectors for physics calculations.

Provides the ``Vector3D`` value type, dot/cross products, Euclidean distance
and plain-text reading and writing of vectors.
"""

from vector3d.text_io import (
    VectorReadError,
    format_vector,
    parse_vector,
    read_vector,
    write_vector,
)
from vector3d.vectors import Vector3D, cross_product, distance, is_close, scalar_product

__all__ = [
    "Vector3D",
    "VectorReadError",
    "cross_product",
    "distance",
    "format_vector",
    "is_close",
    "parse_vector",
    "read_vector",
    "scalar_product",
    "write_vector",
]
