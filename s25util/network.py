"""IP helpers, proxy settings and the base of network messages."""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

NMS_NULL_MSG = 0x0000
NMS_DEAD_MSG = 0xFFFF

_log = logging.getLogger(__name__)


def make_ip(a: int, b: int, c: int, d: int) -> int:
    """Combine four octets into a 32-bit IPv4 address, ``a`` most significant."""
    for octet in (a, b, c, d):
        if not 0 <= octet <= 0xFF:
            raise ValueError(f"{octet} is not a valid octet")
    return (a << 24) + (b << 16) + (c << 8) + d


class ProxyType(Enum):
    NONE = 0
    SOCKS4 = 4
    SOCKS5 = 5


@dataclass
class ProxySettings:
    """Proxy to connect through."""

    type: ProxyType = ProxyType.NONE
    hostname: str = ""
    port: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"Invalid port {self.port}")


class MessageInterface:
    """Receiver of messages; every handler returns True if it handled the message.

    The default handlers leave the message unhandled.
    """

    def _unhandled(self, kind: int, msg_id: int) -> bool:
        _log.debug("Message 0x%04X from %d not handled by %s", kind, msg_id, type(self).__name__)
        return False

    def on_nms_null(self, msg_id: int) -> bool:
        return self._unhandled(NMS_NULL_MSG, msg_id)

    def on_nms_dead(self, msg_id: int) -> bool:
        return self._unhandled(NMS_DEAD_MSG, msg_id)


class Message(ABC):
    """A network message identified by a 16-bit id.

    Subclasses describe their payload in ``payload_fields`` as pairs of
    attribute name and serializer kind (``"unsigned_char"``, ``"unsigned_int"``,
    ``"var_size"``, ``"bool"``, ``"string"``, ``"long_string"``); the base class
    writes and reads them in that order.
    """

    payload_fields: ClassVar[tuple[tuple[str, str], ...]] = ()

    def __init__(self, msg_id: int) -> None:
        if not 0 <= msg_id <= 0xFFFF:
            raise ValueError(f"Invalid message id {msg_id}")
        self._id = msg_id

    @property
    def id(self) -> int:
        return self._id

    def serialize(self, ser) -> None:
        """Write the message payload to ``ser``."""
        for name, kind in self.payload_fields:
            getattr(ser, f"push_{kind}")(getattr(self, name))

    def deserialize(self, ser) -> None:
        """Read the message payload from ``ser``."""
        for name, kind in self.payload_fields:
            setattr(self, name, getattr(ser, f"pop_{kind}")())

    def clone(self) -> "Message":
        return copy.copy(self)

    @abstractmethod
    def run(self, callback: MessageInterface, msg_id: int) -> bool:
        """Dispatch to ``callback``; return True if handled."""


class NullMessage(Message):
    def __init__(self) -> None:
        super().__init__(NMS_NULL_MSG)

    def run(self, callback: MessageInterface, msg_id: int) -> bool:
        return callback.on_nms_null(msg_id)


class DeadMessage(Message):
    def __init__(self) -> None:
        super().__init__(NMS_DEAD_MSG)

    def run(self, callback: MessageInterface, msg_id: int) -> bool:
        return callback.on_nms_dead(msg_id)