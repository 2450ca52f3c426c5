from .core import (
    Codec,
    DataValue,
    DecodeFailure,
    InvalidArgument,
    JsonCodec,
    Payload,
    check_payload,
    payload_equal,
)
from .fallback import FallbackValue

__all__ = [
    # Values
    "DataValue",
    "FallbackValue",
    "Payload",
    # Errors
    "InvalidArgument",
    "DecodeFailure",
    # Serialization
    "Codec",
    "JsonCodec",
    # Helpers
    "check_payload",
    "payload_equal",
]
