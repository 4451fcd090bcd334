from enum import Enum

from tourdesk.network.envelope import Envelope


class ResponseType(Enum):
    OK = "ok"
    ERROR = "error"
    FLIGHTS_UPDATED = "flights_updated"


class Response(Envelope):
    """A server reply, or an update pushed to every logged-in client."""

    type_enum = ResponseType
