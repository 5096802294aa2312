"""
authconf - Property accessor.

Read-only view over the flat ``str -> str`` property set. Indexed keys are
formatted as ``<key>.<index>``; lookups never raise, an absent key is
``None``. Typed readers used by the builders raise ``ConfigInvalidFault``
when a present value cannot be parsed.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from .faults import ConfigInvalidFault


_TRUE_VALUES = ("true", "yes", "1")
_FALSE_VALUES = ("false", "no", "0")


def is_blank(value: Optional[str]) -> bool:
    """True for ``None``, empty and whitespace-only strings."""
    return value is None or not value.strip()


def is_not_blank(value: Optional[str]) -> bool:
    return not is_blank(value)


def indexed_key(key: str, index: Optional[int] = None) -> str:
    """Format ``key`` for ``index`` (``cas.loginUrl`` + 0 -> ``cas.loginUrl.0``)."""
    if index is None:
        return key
    return f"{key}.{index}"


class Properties:
    """
    Immutable property set.

    Not a ``Mapping``: ``get`` takes an index where ``Mapping.get`` takes a
    default.

    Example:
        >>> props = Properties({"cas.loginUrl.0": "https://cas/login"})
        >>> props.get("cas.loginUrl", 0)
        'https://cas/login'
        >>> props.exists("cas.loginUrl", 1)
        False
    """

    __slots__ = ("_data",)

    def __init__(self, data: "Properties | Mapping[str, Any] | None" = None):
        data = data.to_dict() if isinstance(data, Properties) else dict(data or {})
        for key, value in data.items():
            if not isinstance(key, str):
                raise ConfigInvalidFault(str(key), "property keys must be strings")
            if not isinstance(value, str):
                raise ConfigInvalidFault(key, f"expected a string value, got {type(value).__name__}")
        self._data: dict[str, str] = data

    @classmethod
    def of(cls, source: "Properties | Mapping[str, Any] | None") -> "Properties":
        """Wrap ``source`` unless it already is a ``Properties``."""
        if isinstance(source, Properties):
            return source
        return cls(source)

    # Container protocol

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Properties({len(self._data)} keys)"

    # Lookups

    def get(self, key: str, index: Optional[int] = None) -> Optional[str]:
        """Value of ``key`` (formatted for ``index``), or ``None``."""
        return self._data.get(indexed_key(key, index))

    def exists(self, key: str, index: Optional[int] = None) -> bool:
        """True if the key is present, whatever its value."""
        return indexed_key(key, index) in self._data

    def is_set(self, key: str, index: Optional[int] = None) -> bool:
        """True if the key is present with a non-blank value."""
        return is_not_blank(self.get(key, index))

    # Typed readers

    def get_str(
        self, key: str, index: Optional[int] = None, default: Optional[str] = None
    ) -> Optional[str]:
        """Stripped value, or ``default`` when blank."""
        value = self.get(key, index)
        if is_blank(value):
            return default
        return value.strip()

    def get_int(
        self, key: str, index: Optional[int] = None, default: Optional[int] = None
    ) -> Optional[int]:
        value = self.get(key, index)
        if is_blank(value):
            return default
        try:
            return int(value.strip())
        except ValueError:
            raise ConfigInvalidFault(indexed_key(key, index), f"expected an integer, got {value!r}")

    def get_bool(
        self, key: str, index: Optional[int] = None, default: Optional[bool] = None
    ) -> Optional[bool]:
        value = self.get(key, index)
        if is_blank(value):
            return default
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigInvalidFault(indexed_key(key, index), f"expected a boolean, got {value!r}")

    def get_list(
        self, key: str, index: Optional[int] = None, separator: str = ","
    ) -> list[str]:
        """Split a delimited value, dropping blank items."""
        value = self.get(key, index)
        if is_blank(value):
            return []
        return [item.strip() for item in value.split(separator) if item.strip()]

    def to_dict(self) -> dict[str, str]:
        """Return a copy of the underlying data."""
        return dict(self._data)
