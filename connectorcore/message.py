"""Messages exchanged over a connection: a header plus a text payload."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from connectorcore.uuid_utils import Uuid


class HeaderFlag(enum.Flag):
    """Bits carried in a message header's description field."""

    NONE = 0
    R1 = enum.auto()
    IDENTIFIER = enum.auto()


@dataclass
class MessageHeader:
    """Fixed-size information sent in front of every payload."""

    description: HeaderFlag = HeaderFlag.NONE
    message_id: Optional[Uuid] = None
    message_length: int = 0

    @property
    def is_message(self) -> bool:
        """True when the header carries the message identifier bit."""
        return HeaderFlag.IDENTIFIER in self.description


@dataclass
class Message:
    """A payload bound to the context it travels on."""

    context: int = 0
    payload: Optional[str] = None
    header: Optional[MessageHeader] = field(default_factory=MessageHeader)

    def clear(self) -> None:
        """Drop the payload and reset every field to its empty state."""
        self.payload = None
        self.context = 0
        self.header = None


def build_message(context: int, message_type: Uuid, payload: str) -> Message:
    """Create a message of ``message_type`` carrying ``payload`` on ``context``.

    The header records the payload length in UTF-8 bytes and is marked as a
    revision-one message.
    """
    if payload is None or message_type is None:
        raise ValueError("message type and payload are required")
    header = MessageHeader(
        description=HeaderFlag.R1 | HeaderFlag.IDENTIFIER,
        message_id=message_type,
        message_length=len(payload.encode("utf-8")),
    )
    return Message(context=context, payload=payload, header=header)