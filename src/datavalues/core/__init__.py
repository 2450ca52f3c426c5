from .codec import Codec, JsonCodec
from .errors import DecodeFailure, InvalidArgument
from .payload import Payload, check_payload, copy_payload, payload_equal
from .value import DataValue
