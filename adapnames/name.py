"""
Name: a sequence of masked string components.

A name is an ordered sequence of string components separated by a delimiter
character. Two characters are special: the delimiter and the escape
character. A component that contains either of them literally must carry an
escape character in front of it. The escape character is fixed, the
delimiter can be chosen per name.

Examples, all with default masking:

    "oss.cs.fau.de"   four components, delimiter '.'
    "///"             four empty components, delimiter '/'
    "Oh\\.\\.\\."     one component, delimiter '.'
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .utils.config import get_config
from .utils.constants import DEFAULT_DELIMITER, ESCAPE_CHARACTER
from .utils.exceptions import IndexOutOfRangeError
from .utils.logging import get_logger
from .utils.string_utils import join_components, mask_component, unmask_component

logger = get_logger(__name__)


class Name:
    """
    Mutable sequence of masked name components.

    Components are expected to be properly masked with the default control
    characters. This is not validated; malformed components only affect the
    rendered strings.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, components: Iterable[str], delimiter: Optional[str] = None):
        """
        Initialize a name.

        Args:
            components: Masked components; copied, never aliased
            delimiter: Delimiter character for human-readable output,
                defaults to DEFAULT_DELIMITER
        """
        self._delimiter = DEFAULT_DELIMITER if delimiter is None else delimiter
        self._components: List[str] = list(components)

    @property
    def delimiter(self) -> str:
        """Delimiter character chosen at construction."""
        return self._delimiter

    # =========================================================================
    # Conversion
    # =========================================================================

    def as_string(self, delimiter: Optional[str] = None) -> str:
        """
        Return the human-readable form.

        Masking is removed from every component and the results are joined
        with ``delimiter`` (the name's own delimiter when omitted). The
        result is not guaranteed to be parseable.
        """
        if delimiter is None:
            delimiter = self._delimiter
        return join_components(
            (unmask_component(c, ESCAPE_CHARACTER) for c in self._components), delimiter
        )

    def as_data_string(self) -> str:
        """
        Return the machine-readable form.

        Components are masked and joined with the default control characters,
        whatever delimiter this name uses for display.
        """
        return join_components(
            (mask_component(c, DEFAULT_DELIMITER, ESCAPE_CHARACTER) for c in self._components),
            DEFAULT_DELIMITER,
        )

    # =========================================================================
    # Component access
    # =========================================================================

    def get_component(self, i: int) -> str:
        """Return the masked component at index ``i``."""
        self._check_index(i, "get_component")
        return self._components[i]

    def set_component(self, i: int, c: str) -> None:
        """Replace the component at index ``i``; ``c`` must be masked."""
        self._check_index(i, "set_component")
        self._components[i] = c
        self._trace("set_component", i, c)

    def get_no_components(self) -> int:
        """Return the number of components."""
        return len(self._components)

    def is_empty(self) -> bool:
        return not self._components

    # =========================================================================
    # Structural edits
    # =========================================================================

    def insert(self, i: int, c: str) -> None:
        """
        Insert component ``c`` before index ``i``.

        Args:
            i: Target position, ``0 <= i <= get_no_components()``
            c: Masked component

        Raises:
            IndexOutOfRangeError: If ``i`` is outside the valid range
        """
        self._check_index(i, "insert", allow_end=True)
        self._components.insert(i, c)
        self._trace("insert", i, c)

    def append(self, c: str) -> None:
        """Append masked component ``c``."""
        self.insert(len(self._components), c)

    def remove(self, i: int) -> None:
        """Remove the component at index ``i``."""
        self._check_index(i, "remove")
        removed = self._components.pop(i)
        self._trace("remove", i, removed)

    # =========================================================================
    # Python protocols
    # =========================================================================

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._components))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._delimiter == other._delimiter and self._components == other._components

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"Name({self._components!r}, delimiter={self._delimiter!r})"

    # =========================================================================
    # Helpers
    # =========================================================================

    def _check_index(self, i: int, operation: str, allow_end: bool = False) -> None:
        size = len(self._components)
        upper = size if allow_end else size - 1
        if i < 0 or i > upper:
            logger.debug(f"Rejected index {i} for {operation} on {size} components")
            raise IndexOutOfRangeError(i, size, operation)

    def _trace(self, operation: str, i: int, c: str) -> None:
        if get_config().is_tracing_enabled():
            logger.debug(f"{operation}({i}, {c!r}) -> {len(self._components)} components")
