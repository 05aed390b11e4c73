"""Firebase Authentication: parsing do evento de criação de conta."""

from .receive import (
    USER_CREATED_EVENT_TYPE,
    AuthEventRequestError,
    InvalidEventError,
    InvalidJsonError,
    ReceivedAuthEvent,
    parse_user_created_request,
)

__all__ = [
    "USER_CREATED_EVENT_TYPE",
    "AuthEventRequestError",
    "InvalidEventError",
    "InvalidJsonError",
    "ReceivedAuthEvent",
    "parse_user_created_request",
]
