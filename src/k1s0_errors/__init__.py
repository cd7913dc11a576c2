"""k1s0 errors library."""

from .coded import has_code, is_coded, new, new_coded
from .codes import UNCODED, Code, ErrorCodes
from .exceptions import CodedError, PlainError, WithMessageError, WithStackError
from .logger import add_error_code, get_logger
from .models import CodedErrorPayload, ErrorsConfig
from .serialization import marshal_json, to_payload, unmarshal_json
from .stack import capture_stack, configure, get_config
from .wrap import (
    as_type,
    cause,
    errorf,
    stack_trace,
    unwrap,
    walk,
    with_message,
    with_messagef,
    with_stack,
    wrap,
    wrapf,
)

__all__ = [
    "Code",
    "ErrorCodes",
    "UNCODED",
    "CodedError",
    "PlainError",
    "WithMessageError",
    "WithStackError",
    "new",
    "new_coded",
    "has_code",
    "is_coded",
    "as_type",
    "cause",
    "errorf",
    "stack_trace",
    "unwrap",
    "walk",
    "with_message",
    "with_messagef",
    "with_stack",
    "wrap",
    "wrapf",
    "CodedErrorPayload",
    "to_payload",
    "marshal_json",
    "unmarshal_json",
    "ErrorsConfig",
    "capture_stack",
    "configure",
    "get_config",
    "add_error_code",
    "get_logger",
]
