"""Error types raised while building or decoding data values."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Error raised when a data value constructor rejects an argument.

    The rejected value is kept on the exception for debugging.
    """

    def __init__(self, message: str, argument: str, raw_value: object) -> None:
        self.argument = argument
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"InvalidArgument({super().__repr__()}, argument={self.argument!r}, "
            f"raw_value={self.raw_value!r})"
        )


class DecodeFailure(Exception):
    """Error raised when serialized input cannot be decoded.

    ``codec`` names the codec that rejected the input and ``position`` is
    the offset of the failure, when the parser reports one. The underlying
    parser error is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        raw_value: object,
        codec: str,
        position: int | None = None,
    ) -> None:
        self.raw_value = raw_value
        self.codec = codec
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.position is None:
            return f"{self.codec}: {message}"
        return f"{self.codec}: {message} at position {self.position}"

    def __repr__(self) -> str:
        return (
            f"DecodeFailure({self.args[0]!r}, codec={self.codec!r}, "
            f"position={self.position!r}, raw_value={self.raw_value!r})"
        )
