"""Raw payload validation and comparison.

A payload is the native data structure a value was built from: scalars,
lists and string-keyed dicts nested to any finite depth. Anything else is
an opaque object and is rejected.
"""

from __future__ import annotations

from typing import Any, Union

from .errors import InvalidArgument

Payload = Union[None, bool, int, float, str, list["Payload"], dict[str, "Payload"]]

_SCALAR_TYPES = (type(None), bool, int, float, str)


def check_payload(value: Any, path: str = "$", _seen: frozenset[int] = frozenset()) -> Payload:
    """Validate a raw payload and return a deep copy.

    Scalars must be of an exact builtin type, so enum members and other
    subclasses count as objects. Tuples are rejected too, since they would
    not compare equal to the list they decode back to.

    Args:
        value: The raw data structure
        path: Location of ``value`` inside the outer payload, used in errors

    Returns:
        A copy of ``value`` that shares no containers with the input

    Raises:
        InvalidArgument: If ``value`` holds anything but scalars, lists and
            string-keyed dicts, or a container holds itself
    """
    if type(value) in _SCALAR_TYPES:
        return value

    if type(value) in (list, dict):
        if id(value) in _seen:
            raise InvalidArgument(f"payload must not contain cycles at {path}", "payload", value)
        seen = _seen | {id(value)}

        if type(value) is list:
            return [check_payload(item, f"{path}[{index}]", seen) for index, item in enumerate(value)]

        checked: dict[str, Payload] = {}
        for key, item in value.items():
            if type(key) is not str:
                raise InvalidArgument(
                    f"payload keys must be strings, got {type(key).__name__} at {path}",
                    "payload",
                    value,
                )
            checked[key] = check_payload(item, f"{path}.{key}", seen)
        return checked

    raise InvalidArgument(
        f"payload must not be an object, got {type(value).__name__} at {path}",
        "payload",
        value,
    )


def copy_payload(value: Payload) -> Payload:
    """Deep copy an already validated payload."""
    if isinstance(value, list):
        return [copy_payload(item) for item in value]
    if isinstance(value, dict):
        return {key: copy_payload(item) for key, item in value.items()}
    return value


def payload_equal(a: Any, b: Any) -> bool:
    """Compare two payloads structurally with exact scalar matching.

    Unlike ``==``, ``True`` does not equal ``1`` and ``1`` does not equal
    ``1.0``. NaN equals NaN, so equality never depends on object identity.
    Dict key order is ignored.
    """
    if type(a) is not type(b):
        return False

    if isinstance(a, list):
        return len(a) == len(b) and all(payload_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, dict):
        if a.keys() != b.keys():
            return False
        return all(payload_equal(item, b[key]) for key, item in a.items())

    if isinstance(a, float):
        return a == b or (a != a and b != b)

    return a == b
