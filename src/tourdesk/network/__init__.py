"""
Network

Request/response envelopes for the client-server channel.
"""

from tourdesk.network.envelope import Envelope, EnvelopeBuilder
from tourdesk.network.request import Request, RequestType
from tourdesk.network.response import Response, ResponseType

__all__ = [
    "Envelope",
    "EnvelopeBuilder",
    "Request",
    "RequestType",
    "Response",
    "ResponseType",
]
