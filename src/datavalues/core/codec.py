"""Text codecs for the serialized form of data values."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeFailure

logger = logging.getLogger(__name__)

Triple = tuple[Any, Any, Any]

_TRIPLE_ADAPTER: TypeAdapter[Triple] = TypeAdapter(Triple)


class Codec(Protocol):
    """Protocol for encoding an ordered triple to text and back.

    A codec only guarantees the shape of what it decodes. Checking the
    individual fields is left to the value constructor.
    """

    def encode(self, triple: Triple) -> str:
        """Encode the triple.

        Args:
            triple: The ordered fields to encode

        Returns:
            The serialized text
        """
        ...

    def decode(self, data: str | bytes) -> Triple:
        """Decode text produced by ``encode``.

        Args:
            data: The serialized text, or its UTF-8 bytes

        Returns:
            The ordered triple

        Raises:
            DecodeFailure: If ``data`` is not a valid encoding
        """
        ...

    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class JsonCodec(Codec):
    """Codec writing the triple as a JSON array.

    Non-finite floats are written as ``NaN``/``Infinity``, which Python's
    json module reads back.
    """

    sort_keys: bool = False
    ensure_ascii: bool = False

    def encode(self, triple: Triple) -> str:
        return json.dumps(
            list(triple),
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
            allow_nan=True,
        )

    def decode(self, data: str | bytes) -> Triple:
        if isinstance(data, (bytes, bytearray)):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError as e:
                logger.debug("Rejected non UTF-8 input: %r", data)
                raise DecodeFailure(
                    f"Invalid UTF-8: {e.reason}", data, type(self).__name__, e.start
                ) from e

        if not isinstance(data, str):
            raise DecodeFailure(
                f"Expected str or bytes, got {type(data).__name__}", data, type(self).__name__
            )

        try:
            decoded = json.loads(data)
        except json.JSONDecodeError as e:
            logger.debug("Rejected malformed JSON: %r", data)
            raise DecodeFailure(f"Invalid JSON: {e.msg}", data, type(self).__name__, e.pos) from e

        if not isinstance(decoded, list):
            raise DecodeFailure(
                f"Expected a JSON array, got {type(decoded).__name__}", data, type(self).__name__
            )

        try:
            return _TRIPLE_ADAPTER.validate_python(decoded)
        except ValidationError as e:
            logger.debug("Rejected JSON array of length %d: %r", len(decoded), data)
            raise DecodeFailure(
                f"Expected 3 fields, got {len(decoded)}", data, type(self).__name__
            ) from e

    def describe(self) -> str:
        return f"JsonCodec(sort_keys={self.sort_keys}, ensure_ascii={self.ensure_ascii})"
