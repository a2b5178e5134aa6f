"""
Per-message parameter store.

Arbitrary metadata travelling alongside a single request or response.
"""

from collections.abc import MutableMapping
from typing import Any, Dict, Iterator, Optional


class ParameterStore(MutableMapping):
    """Mapping from string keys to arbitrary values, owned by one message.

    Stores are never shared: cloning a message copies its store, so
    changes on a clone never reach the original.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = {}
        if initial:
            self.update(initial)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Parameter keys must be strings, got {type(key).__name__}")
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterStore({self._values!r})"

    def copy(self) -> "ParameterStore":
        """Return an independent store holding the same values."""
        return ParameterStore(self._values)
