"""The capability set shared by all data value variants."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DataValue(Protocol):
    """Protocol for typed, immutable data values.

    Variants are told apart by ``get_type()``. A type registry uses that tag
    to pick the variant for a serialized value, and orders mixed variants by
    ``get_sort_key()`` before falling back to its own secondary keys.
    """

    @classmethod
    def get_type(cls) -> str:
        ...

    def get_sort_key(self) -> int | float | str:
        ...

    def get_value(self) -> Any:
        ...

    def get_array_value(self) -> Any:
        ...

    def to_array(self) -> dict[str, Any]:
        ...

    def serialize(self) -> str:
        ...

    def deserialize(self, data: str | bytes) -> None:
        ...

    def equals(self, other: object) -> bool:
        ...
