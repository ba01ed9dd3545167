"""Collection helpers: list builder and a null-aware string joiner.

The joiner is an immutable value object. Configuration methods return new
instances so a joiner can be shared freely and specialised per call site::

    Joiner.on(", ").skip_nulls().join(["apple", None, "banana"])

Contents:
    * :func:`new_list` - Build a mutable list from literal elements.
    * :func:`mark_absent` - Map raw text tokens to absence markers.
    * :func:`join_skipping_nulls` - Join non-absent elements with a separator.
    * :class:`Joiner` - Configurable joiner with a :class:`NullPolicy`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import TextIO, TypeVar

from .enums import NullPolicy
from .errors import JoinerConfigurationError, NullElementError

T = TypeVar("T")
StreamT = TypeVar("StreamT", bound=TextIO)


def new_list(*elements: T) -> list[T]:
    """Return a new mutable list holding ``elements`` in order.

    Absence markers are kept as-is; filtering is the joiner's job.

    Example:
        >>> new_list("apple", None, "banana")
        ['apple', None, 'banana']
        >>> new_list()
        []
    """
    return list(elements)


def mark_absent(tokens: Iterable[str], null_marker: str | None) -> list[str | None]:
    """Replace every token equal to ``null_marker`` with ``None``.

    A ``null_marker`` of ``None`` or ``""`` disables the mapping.

    Example:
        >>> mark_absent(["apple", "null", "banana"], "null")
        ['apple', None, 'banana']
        >>> mark_absent(["apple", "null"], None)
        ['apple', 'null']
    """
    if not null_marker:
        return list(tokens)
    return [None if token == null_marker else token for token in tokens]


def join_skipping_nulls(elements: Iterable[object | None], separator: str) -> str:
    """Join the non-absent ``elements`` in order, separated by ``separator``.

    Example:
        >>> join_skipping_nulls(["apple", None, "banana", "cherry"], ", ")
        'apple, banana, cherry'
        >>> join_skipping_nulls([None, None], ", ")
        ''
    """
    return Joiner.on(separator).skip_nulls().join(elements)


@dataclass(frozen=True, slots=True)
class Joiner:
    """Join elements with a separator, handling ``None`` per :class:`NullPolicy`.

    A fresh joiner from :meth:`on` is strict: it refuses absent elements.
    The null policy can be chosen once with :meth:`skip_nulls` or
    :meth:`use_for_null`.

    Attributes:
        separator: Text inserted between adjacent rendered elements.
        policy: How absent elements are treated.
        null_text: Replacement text for the ``SUBSTITUTE`` policy.

    Example:
        >>> Joiner.on("; ").skip_nulls().join(["a", None, "b"])
        'a; b'
        >>> Joiner.on("; ").use_for_null("-").join(["a", None, "b"])
        'a; -; b'
    """

    separator: str
    policy: NullPolicy = NullPolicy.STRICT
    null_text: str | None = None

    @classmethod
    def on(cls, separator: str) -> Joiner:
        """Return a strict joiner using ``separator``."""
        return cls(separator=separator)

    def skip_nulls(self) -> Joiner:
        """Return a copy that drops absent elements.

        Repeating the call is harmless.

        Raises:
            JoinerConfigurationError: If use_for_null() was already called.
        """
        if self.policy is NullPolicy.SKIP:
            return self
        self._require_unset_policy("skip_nulls")
        return replace(self, policy=NullPolicy.SKIP)

    def use_for_null(self, text: str) -> Joiner:
        """Return a copy that renders absent elements as ``text``.

        Raises:
            JoinerConfigurationError: If a null policy was already chosen.
        """
        self._require_unset_policy("use_for_null")
        return replace(self, policy=NullPolicy.SUBSTITUTE, null_text=text)

    def join(self, elements: Iterable[object | None]) -> str:
        """Render ``elements`` into a single string.

        Raises:
            NullElementError: If the policy is ``STRICT`` and an element is ``None``.
        """
        return self.separator.join(self._render(elements))

    def join_values(self, first: object | None, second: object | None, *rest: object | None) -> str:
        """Variadic form of :meth:`join`.

        Example:
            >>> Joiner.on("-").skip_nulls().join_values("a", None, "c")
            'a-c'
        """
        return self.join((first, second, *rest))

    def append_to(self, stream: StreamT, elements: Iterable[object | None]) -> StreamT:
        """Write the joined text to ``stream`` and return the stream.

        Example:
            >>> import io
            >>> Joiner.on(", ").skip_nulls().append_to(io.StringIO(), ["a", None, "b"]).getvalue()
            'a, b'
        """
        stream.write(self.join(elements))
        return stream

    def _render(self, elements: Iterable[object | None]) -> Iterator[str]:
        for index, element in enumerate(elements):
            if element is not None:
                yield str(element)
            elif self.policy is NullPolicy.SKIP:
                continue
            elif self.policy is NullPolicy.SUBSTITUTE:
                yield self.null_text or ""
            else:
                raise NullElementError(f"Element at index {index} is None; use skip_nulls() or use_for_null()")

    def _require_unset_policy(self, method: str) -> None:
        if self.policy is not NullPolicy.STRICT:
            raise JoinerConfigurationError(f"Cannot call {method}(): null policy already set to {self.policy.value!r}")


__all__ = [
    "Joiner",
    "join_skipping_nulls",
    "mark_absent",
    "new_list",
]
