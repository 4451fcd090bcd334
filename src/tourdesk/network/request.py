from enum import Enum

from tourdesk.network.envelope import Envelope


class RequestType(Enum):
    LOGIN = "login"
    LOGOUT = "logout"
    GET_FLIGHTS = "get_flights"
    FIND_FLIGHTS = "find_flights"
    BUY_TICKET = "buy_ticket"


class Request(Envelope):
    """A client call: the operation to run and its argument."""

    type_enum = RequestType
