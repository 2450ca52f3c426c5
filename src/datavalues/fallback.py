"""Data value standing in for a value that could not be deserialized."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from .core.codec import Codec, JsonCodec
from .core.errors import InvalidArgument
from .core.payload import Payload, check_payload, copy_payload, payload_equal

logger = logging.getLogger(__name__)


class FallbackValue:
    """A value that could not be deserialized into its intended type.

    It holds the raw native data structure, the originally intended value
    type and an error message. Serializing keeps all three, so data of
    unknown or broken types survives a round trip unchanged.

    Instances are immutable except through ``deserialize``, which replaces
    the whole state. ``deserialize`` must not run concurrently with any
    other call on the same instance.
    """

    TYPE: ClassVar[str] = "bad"
    codec: ClassVar[Codec] = JsonCodec()

    __slots__ = ("_payload", "_intended_type", "_reason")

    def __init__(self, payload: Any, intended_type: str | None, reason: str) -> None:
        """
        Args:
            payload: The raw data structure
            intended_type: The originally intended value type, if known
            reason: The error that occurred when processing the payload

        Raises:
            InvalidArgument: If the payload holds an object, or the type or
                reason is not a string
        """
        checked = check_payload(payload)

        if intended_type is not None and not isinstance(intended_type, str):
            raise InvalidArgument(
                f"intended_type must be a string or None, got {type(intended_type).__name__}",
                "intended_type",
                intended_type,
            )

        if not isinstance(reason, str):
            raise InvalidArgument(
                f"reason must be a string, got {type(reason).__name__}",
                "reason",
                reason,
            )

        self._payload: Payload = checked
        self._intended_type = intended_type
        self._reason = reason

    @classmethod
    def from_serialized(cls, data: str | bytes) -> FallbackValue:
        intended_type, payload, reason = cls.codec.decode(data)
        return cls(payload, intended_type, reason)

    def serialize(self) -> str:
        """Encode the intended type, payload and error message."""
        return self.codec.encode((self._intended_type, self._payload, self._reason))

    def deserialize(self, data: str | bytes) -> None:
        """Replace this value's state with the one encoded in ``data``.

        The state is only replaced once decoding and validation succeed.

        Raises:
            DecodeFailure: If ``data`` is not a valid encoding
            InvalidArgument: If the decoded fields are rejected
        """
        restored = self.from_serialized(data)
        logger.debug("Restoring %r from serialized form", restored)
        self._payload = restored._payload
        self._intended_type = restored._intended_type
        self._reason = restored._reason

    @property
    def payload(self) -> Payload:
        return copy_payload(self._payload)

    @property
    def intended_type(self) -> str | None:
        return self._intended_type

    @property
    def reason(self) -> str:
        return self._reason

    @classmethod
    def get_type(cls) -> str:
        return cls.TYPE

    def get_target_type(self) -> str | None:
        """Return the value type that was intended for the payload."""
        return self._intended_type

    get_intended_type = get_target_type

    def get_reason(self) -> str:
        """Return a description of why the payload could not be deserialized."""
        return self._reason

    def get_sort_key(self) -> int:
        # A failed value has nothing to order by.
        return 0

    def get_value(self) -> Payload:
        return copy_payload(self._payload)

    def get_array_value(self) -> Payload:
        return copy_payload(self._payload)

    def to_array(self) -> dict[str, Any]:
        """Return the native representation.

        This uses the intended type rather than ``"bad"``, so the result
        reads like the value that was meant to be there.
        """
        return {
            "value": copy_payload(self._payload),
            "type": self._intended_type,
            "error": self._reason,
        }

    to_projection = to_array

    def equals(self, other: object) -> bool:
        if self is other:
            return True

        return (
            isinstance(other, FallbackValue)
            and payload_equal(self._payload, other._payload)
            and self._intended_type == other._intended_type
            and self._reason == other._reason
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FallbackValue):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"FallbackValue(payload={self._payload!r}, "
            f"intended_type={self._intended_type!r}, reason={self._reason!r})"
        )
