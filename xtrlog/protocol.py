"""Frames exchanged with a logger over its command socket.

Every frame starts with a 32-bit little-endian frame id. The id identifies
the payload that follows. Payloads use a fixed binary layout, and text
fields are nul-terminated within fixed-size slots.
"""

import enum
import struct
from dataclasses import dataclass, field
from typing import Any, ClassVar, Tuple, Type, TypeVar, Union

from .strings import strzcpy

MAX_FRAME_ALIGNMENT = 16
MAX_FRAME_SIZE = 512
PATTERN_TEXT_SIZE = 256
SINK_NAME_SIZE = 128
ERROR_REASON_SIZE = 256

_HEADER = struct.Struct("<I")


class FrameError(ValueError):
    """A received frame is malformed or of an unexpected kind."""


class MessageId(enum.IntEnum):
    """Frame ids of every message kind."""

    STATUS = 0
    SET_LEVEL = 1
    SINK_INFO = 2
    SUCCESS = 3
    ERROR = 4
    REOPEN = 5


class PatternType(enum.IntEnum):
    """How a pattern selecting sinks by name is interpreted."""

    NONE = 0
    EXTENDED_REGEX = 1
    BASIC_REGEX = 2
    WILDCARD = 3


class LogLevel(enum.IntEnum):
    """Severity levels, from least to most verbose."""

    NONE = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    DEBUG = 5

    def __str__(self) -> str:
        return format_log_level(self)


def _encode_text(text: Union[str, bytes], size: int) -> bytes:
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return strzcpy(raw, size)


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "replace")


class _Payload:
    FRAME_ID: ClassVar[int]
    _STRUCT: ClassVar[struct.Struct]

    def _pack(self) -> Tuple[Any, ...]:
        return ()

    @classmethod
    def _unpack(cls, values: Tuple[Any, ...]) -> Any:
        return cls()


@dataclass(frozen=True)
class Pattern:
    """A pattern selecting sinks by name."""

    type: PatternType = PatternType.NONE
    ignore_case: bool = False
    text: str = ""

    def _pack(self) -> Tuple[Any, ...]:
        return (int(self.type), bool(self.ignore_case),
                _encode_text(self.text, PATTERN_TEXT_SIZE))

    @classmethod
    def _unpack(cls, values: Tuple[Any, ...]) -> "Pattern":
        ptype, ignore_case, text = values
        return cls(PatternType(ptype), bool(ignore_case), _decode_text(text))


@dataclass(frozen=True)
class Status(_Payload):
    """Request for information about the sinks matching a pattern."""

    FRAME_ID: ClassVar[int] = MessageId.STATUS
    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<Ii?256s3x")

    pattern: Pattern = field(default_factory=Pattern)

    def _pack(self) -> Tuple[Any, ...]:
        return self.pattern._pack()

    @classmethod
    def _unpack(cls, values: Tuple[Any, ...]) -> "Status":
        return cls(Pattern._unpack(values))


@dataclass(frozen=True)
class SetLevel(_Payload):
    """Request to change the level of the sinks matching a pattern."""

    FRAME_ID: ClassVar[int] = MessageId.SET_LEVEL
    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<Iii?256s3x")

    level: LogLevel = LogLevel.NONE
    pattern: Pattern = field(default_factory=Pattern)

    def _pack(self) -> Tuple[Any, ...]:
        return (int(self.level), *self.pattern._pack())

    @classmethod
    def _unpack(cls, values: Tuple[Any, ...]) -> "SetLevel":
        return cls(LogLevel(values[0]), Pattern._unpack(values[1:]))


@dataclass(frozen=True)
class Reopen(_Payload):
    """Request to reopen the log file."""

    FRAME_ID: ClassVar[int] = MessageId.REOPEN
    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<I")


@dataclass(frozen=True)
class SinkInfo(_Payload):
    """Description of one sink, sent in reply to a status request."""

    FRAME_ID: ClassVar[int] = MessageId.SINK_INFO
    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<I4xi4xQQQ128s")

    level: LogLevel = LogLevel.NONE
    buf_capacity: int = 0
    buf_nbytes: int = 0
    dropped_count: int = 0
    name: str = ""

    def _pack(self) -> Tuple[Any, ...]:
        return (int(self.level), self.buf_capacity, self.buf_nbytes,
                self.dropped_count, _encode_text(self.name, SINK_NAME_SIZE))

    @classmethod
    def _unpack(cls, values: Tuple[Any, ...]) -> "SinkInfo":
        level, capacity, nbytes, dropped, name = values
        return cls(LogLevel(level), capacity, nbytes, dropped, _decode_text(name))

    def __str__(self) -> str:
        return format_sink_info(self)


@dataclass(frozen=True)
class Success(_Payload):
    """Reply indicating that a request succeeded."""

    FRAME_ID: ClassVar[int] = MessageId.SUCCESS
    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<I")


@dataclass(frozen=True)
class Error(_Payload):
    """Reply indicating that a request failed, with the reason."""

    FRAME_ID: ClassVar[int] = MessageId.ERROR
    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<I256s")

    reason: str = ""

    def _pack(self) -> Tuple[Any, ...]:
        return (_encode_text(self.reason, ERROR_REASON_SIZE),)

    @classmethod
    def _unpack(cls, values: Tuple[Any, ...]) -> "Error":
        return cls(_decode_text(values[0]))


PAYLOAD_TYPES = (Status, SetLevel, Reopen, SinkInfo, Success, Error)

P = TypeVar("P", Status, SetLevel, Reopen, SinkInfo, Success, Error)


def encode_frame(payload: _Payload) -> bytes:
    """Return the wire bytes of a frame carrying ``payload``."""
    if not isinstance(payload, PAYLOAD_TYPES):
        raise TypeError(f"not a frame payload: {payload!r}")
    try:
        return payload._STRUCT.pack(int(payload.FRAME_ID), *payload._pack())
    except struct.error as e:
        raise ValueError(f"cannot encode {payload!r}: {e}") from e


def frame_id_of(data: Union[bytes, bytearray, memoryview]) -> int:
    """Return the frame id at the start of ``data``."""
    data = bytes(data)
    if len(data) < _HEADER.size:
        raise FrameError(
            f"frame too short: expected at least {_HEADER.size} bytes, "
            f"received {len(data)}"
        )
    return _HEADER.unpack_from(data)[0]


def decode_frame(data: Union[bytes, bytearray, memoryview], payload_type: Type[P]) -> P:
    """Decode a frame expected to carry a payload of ``payload_type``."""
    if payload_type not in PAYLOAD_TYPES:
        raise TypeError(f"not a frame payload type: {payload_type!r}")
    data = bytes(data)
    expected = payload_type._STRUCT.size
    if len(data) != expected:
        raise FrameError(f"Expected {expected} bytes, received {len(data)}")
    received = frame_id_of(data)
    if received != payload_type.FRAME_ID:
        raise FrameError(
            f"Unexpected frame id, expected {int(payload_type.FRAME_ID)}, "
            f"received {received}"
        )
    values = payload_type._STRUCT.unpack(data)[1:]
    try:
        return payload_type._unpack(values)
    except ValueError as e:
        raise FrameError(f"invalid {payload_type.__name__} frame: {e}") from e


def format_log_level(level: Union[LogLevel, int]) -> str:
    """Return the lower-case name of ``level``, or ``<invalid>``."""
    try:
        return LogLevel(level).name.lower()
    except ValueError:
        return "<invalid>"


def format_sink_info(info: SinkInfo) -> str:
    """Return a one-line human readable description of a sink."""
    return (
        f"{info.name} ({format_log_level(info.level)}) "
        f"{info.buf_capacity // 1024}K capacity, "
        f"{info.buf_nbytes // 1024}K used, "
        f"{info.dropped_count} dropped"
    )