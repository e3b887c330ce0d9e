"""Plain-text reading and writing of vectors.

The text form of a vector is its three components joined by ``", "``, for
example ``"1.5, -2, 3"``, with no trailing newline. Reading accepts that form
and also plain whitespace separation, so anything ``write_vector`` produces
can be read back.

Typical usage example:
    import io

    from vector3d.text_io import read_vector, write_vector
    from vector3d.vectors import Vector3D

    buffer = io.StringIO()
    write_vector(buffer, Vector3D(1.5, 2.0, 3.0))
    buffer.seek(0)
    target = Vector3D.zero(float)
    read_vector(buffer, target)
"""

from collections.abc import Callable
from typing import Any, TextIO

from vector3d.core.logging_system import get_logger
from vector3d.vectors import Vector3D

logger = get_logger(__name__)

SEPARATOR = ", "
_DELIMITERS = frozenset(" \t\r\n\f\v,")


class VectorReadError(ValueError):
    """Raised when three components cannot be read from a text source."""


def format_vector(vector: Vector3D[Any]) -> str:
    """Render a vector as ``"x, y, z"``."""
    return SEPARATOR.join(str(component) for component in vector)


def write_vector(sink: TextIO, vector: Vector3D[Any]) -> TextIO:
    """Write a vector to a text sink.

    No newline is written, callers decide where lines end.

    Args:
        sink: Writable text stream.
        vector: Vector to write.

    Returns:
        The sink, to allow chained writes.
    """
    sink.write(format_vector(vector))
    return sink


def _next_token(source: TextIO) -> str | None:
    """Read one token, skipping leading whitespace and commas.

    The delimiter that ends the token is consumed. Returns None at end of
    input.
    """
    char = source.read(1)
    while char and char in _DELIMITERS:
        char = source.read(1)

    if not char:
        return None

    chars = []
    while char and char not in _DELIMITERS:
        chars.append(char)
        char = source.read(1)
    return "".join(chars)


def _parse_components(
    tokens: list[str], component_type: Callable[[str], Any]
) -> tuple[Any, Any, Any]:
    values = []
    for axis, token in zip("xyz", tokens):
        try:
            values.append(component_type(token))
        except (TypeError, ValueError, ArithmeticError) as e:
            logger.debug("Cannot parse %s component %r: %s", axis, token, e)
            raise VectorReadError(f"Invalid {axis} component: {token!r}") from e
    return values[0], values[1], values[2]


def read_vector(
    source: TextIO,
    target: Vector3D[Any],
    component_type: Callable[[str], Any] | None = None,
) -> TextIO:
    """Read three components from a text source into ``target``.

    Components are separated by whitespace, commas, or both. Only the
    characters up to and including the delimiter after the third component
    are consumed, so several vectors can be read from one stream.

    Args:
        source: Readable text stream.
        target: Vector overwritten in place, only when all three components
            were read successfully.
        component_type: Parser for each component. Defaults to the type of
            ``target.x``.

    Returns:
        The source, to allow chained reads.

    Raises:
        VectorReadError: If the source ends early or a component does not
            parse; ``target`` is left unmodified.
    """
    if component_type is None:
        component_type = type(target.x)

    tokens = []
    while len(tokens) < 3:
        token = _next_token(source)
        if token is None:
            logger.debug("Text source exhausted after %d of 3 components", len(tokens))
            raise VectorReadError(f"Expected 3 components, got {len(tokens)}")
        tokens.append(token)

    target.x, target.y, target.z = _parse_components(tokens, component_type)
    return source


def parse_vector(text: str, component_type: Callable[[str], Any] = float) -> Vector3D[Any]:
    """Parse a complete ``"x, y, z"`` string into a new vector.

    Unlike ``read_vector``, trailing content is rejected.

    Raises:
        VectorReadError: If the text does not hold exactly three components.
    """
    tokens = text.replace(",", " ").split()
    if len(tokens) != 3:
        raise VectorReadError(f"Expected 3 components, got {len(tokens)}")
    return Vector3D(*_parse_components(tokens, component_type))
