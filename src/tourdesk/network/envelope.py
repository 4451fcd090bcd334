"""
Tagged envelopes exchanged between the booking client and server.

An envelope is a ``type`` discriminator plus an opaque ``data`` payload
(entities, lists of entities, error messages). Envelopes are immutable and
are assembled through a builder that sets type and data independently:

    response = Response.builder().type(ResponseType.OK).data(flights).build()

How envelopes are put on the wire is left to the transport.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


@dataclass(frozen=True)
class Envelope:
    type: Enum
    data: Any = None

    type_enum: ClassVar[type[Enum]] = Enum

    def __str__(self) -> str:
        return f"{self.__class__.__name__}{{type='{self.type.name}', data='{self.data}'}}"

    @classmethod
    def builder(cls) -> "EnvelopeBuilder":
        return EnvelopeBuilder(cls)


class EnvelopeBuilder:
    """Incrementally collects the type and data of an envelope."""

    def __init__(self, envelope_class: type[Envelope]):
        self._envelope_class = envelope_class
        self._type = None
        self._data = None

    def type(self, envelope_type: Enum) -> "EnvelopeBuilder":
        if not isinstance(envelope_type, self._envelope_class.type_enum):
            raise ValueError(
                f"{self._envelope_class.__name__} type must be a "
                f"{self._envelope_class.type_enum.__name__}, got {envelope_type!r}"
            )
        self._type = envelope_type
        return self

    def data(self, data: Any) -> "EnvelopeBuilder":
        self._data = data
        return self

    def build(self) -> Envelope:
        if self._type is None:
            raise ValueError(f"{self._envelope_class.__name__} requires a type")
        return self._envelope_class(type=self._type, data=self._data)
