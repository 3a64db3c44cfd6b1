"""src/urlivo/url/query.py

Ordered multi-valued query parameters for Urlivo.
"""

import functools
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from urlivo.codec.percent import percent_encode

__all__ = ["QueryParams"]

Param = Tuple[str, str]


@functools.total_ordering
class QueryParams:
    """
    Ordered multimap of decoded query parameter keys to values.

    Keys may repeat. Insertion order is kept and is significant both for
    serialization and for comparison.
    """

    __slots__ = ("_params",)

    def __init__(self, params: Optional[Iterable[Param]] = None):
        self._params: List[Param] = []
        if params:
            for key, value in params:
                self._params.append((key, value))

    def add(self, key: str, value: str) -> None:
        """
        Add a parameter.

        If one already exists with the same key, there will now be two.
        """
        self._params.append((key, value))

    def overwrite(self, key: str, value: str) -> None:
        """
        Replace every parameter with the given key by a single new one.

        The new pair is appended, so the key moves to the end.
        """
        self._params = [param for param in self._params if param[0] != key]
        self._params.append((key, value))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get the first value for a key.

        Args:
            key: Parameter name (case-sensitive).
            default: Value returned when the key is absent.

        Returns:
            First value stored under the key, or default if not found.
        """
        for name, value in self._params:
            if name == key:
                return value
        return default

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a parameter, in order.

        Args:
            key: Parameter name (case-sensitive).

        Returns:
            List of all values for the key, empty list if not found.
        """
        return [value for name, value in self._params if name == key]

    def keys(self) -> List[str]:
        """Distinct keys in order of first appearance."""
        return list(dict.fromkeys(name for name, _ in self._params))

    def copy(self) -> "QueryParams":
        """Return an independent copy."""
        return QueryParams(self._params)

    def to_string(self) -> str:
        """
        Convert to a percent-encoded query string (without the leading ``?``).

        Parameters with an empty value are emitted without ``=``, unless the
        key is empty as well: that pair is written as a lone ``=``.
        """
        pieces = []
        for key, value in self._params:
            if value or not key:
                pieces.append(f"{percent_encode(key)}={percent_encode(value)}")
            else:
                pieces.append(percent_encode(key))
        return "&".join(pieces)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"QueryParams({self._params!r})"

    def __iter__(self) -> Iterator[Param]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self._params)

    def __copy__(self) -> "QueryParams":
        return self.copy()

    def __deepcopy__(self, memo: Any) -> "QueryParams":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._params == other._params

    def __lt__(self, other: "QueryParams") -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        # pairwise by (key, value), then by length
        return self._params < other._params

    __hash__ = None  # type: ignore[assignment]
