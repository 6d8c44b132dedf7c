"""Projections from a parent value to one of its parts.

Nestable conditions and the equality factory evaluate their children against
a value *derived* from the actual value: a field of a record, an element of
a sequence. A projection is either:

- a callable taking the parent value and returning the child value, or
- a dotted attribute path such as ``"address.town"``, walked with
  ``getattr`` one segment at a time.

Both are wrapped in a :class:`Projection` so that a failure to produce the
child value surfaces as a :class:`~conditree.errors.ProjectionError` instead
of a bare ``AttributeError`` or ``IndexError`` from deep inside a tree.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .errors import ProjectionError

T = TypeVar("T")
U = TypeVar("U")


class FieldPath:
    """Parsed representation of a (possibly dotted) attribute path.

    ``FieldPath("address.postcode.value")`` is stored as the segments
    ``["address", "postcode", "value"]`` and resolved hop by hop.

    A hop that lands on ``None`` stops the walk and resolves to ``None``: an
    absent optional field is a value the leaf condition can reject, not a
    malformed path. A hop naming an attribute the object does not have is a
    :class:`ProjectionError`.
    """

    def __init__(self, path: str) -> None:
        """Parse and validate a dotted path.

        Args:
            path: Attribute path, e.g. ``"address.town"``. Whitespace around
                segments is ignored.

        Raises:
            TypeError: If `path` is not a string.
            ValueError: If `path` is empty or contains an empty segment, as
                in ``"address..town"``.
        """
        if not isinstance(path, str):
            raise TypeError(f"path must be str, got {type(path).__name__}")

        path = path.strip()
        if path == "":
            raise ValueError("path cannot be empty")

        parts = [part.strip() for part in path.split(".")]
        for i, part in enumerate(parts):
            if part == "":
                raise ValueError(
                    f"Invalid field path {path!r}: empty segment at position {i}"
                )

        self._raw = path
        self._parts = parts

    @property
    def raw(self) -> str:
        """Return the normalised dotted path string."""
        return self._raw

    @property
    def parts(self) -> list[str]:
        """Return a copy of the path segments."""
        return self._parts.copy()

    def resolve(self, value: Any) -> Any:
        """Walk the path on `value` and return the final attribute.

        Raises:
            ProjectionError: If a segment names a missing attribute. The
                message says how far the walk got.
        """
        current = value
        walked: list[str] = []

        for segment in self._parts:
            if current is None:
                return None

            walked.append(segment)
            if not hasattr(current, segment):
                raise ProjectionError(
                    self._raw,
                    f"{type(current).__name__} has no attribute "
                    f"{'.'.join(walked)!r}",
                )
            current = getattr(current, segment)

        return current

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldPath):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(tuple(self._parts))

    def __repr__(self) -> str:
        return f"FieldPath({self._raw!r})"


class Projection(Generic[T, U]):
    """A total function from a parent value to a child value.

    Wraps either a callable or a :class:`FieldPath`. Any exception the
    callable raises is re-raised as a :class:`ProjectionError` chained to the
    original, tagged with the label of the condition doing the projecting.
    """

    def __init__(self, source: "Callable[[T], U] | str | FieldPath") -> None:
        """Create a projection.

        Args:
            source: A callable, a dotted attribute path string, or an already
                parsed :class:`FieldPath`.

        Raises:
            TypeError: If `source` is none of the above.
            ValueError: If `source` is a malformed path string.
        """
        if isinstance(source, str):
            source = FieldPath(source)

        if isinstance(source, FieldPath):
            self._path: FieldPath | None = source
            self._func: Callable[[Any], Any] = source.resolve
        elif callable(source):
            self._path = None
            self._func = source
        else:
            raise TypeError(
                "projection must be callable or a dotted attribute path, "
                f"got {type(source).__name__}"
            )

    @property
    def path(self) -> FieldPath | None:
        """The attribute path, or None for callable projections."""
        return self._path

    def apply(self, value: T, label: str) -> U:
        """Project `value`, reporting failures against `label`.

        Raises:
            ProjectionError: If the projection cannot produce a value.
        """
        try:
            return self._func(value)
        except ProjectionError:
            raise
        except Exception as e:
            raise ProjectionError(label, f"{type(e).__name__}: {e}") from e

    def __repr__(self) -> str:
        if self._path is not None:
            return f"Projection({self._path.raw!r})"
        name = getattr(self._func, "__name__", "<callable>")
        return f"Projection({name})"
