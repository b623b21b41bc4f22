"""Binary Canonical Serialization (BCS) encoder and decoder."""

from __future__ import annotations

import struct
from typing import Any, TypeVar

T = TypeVar("T")

_MAX_ULEB128 = 0xFFFFFFFF
_MAX_ULEB128_BYTES = 5


class BcsError(ValueError):
    """Raised when a value cannot be encoded or decoded as BCS."""


def _check_range(value: int, bits: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BcsError(f"{name} value must be an integer, got {value!r}")
    if not 0 <= value < (1 << bits):
        raise BcsError(f"{name} value out of range: {value}")


class Encoder:
    """Accumulates BCS-encoded bytes."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def write_bytes(self, data: bytes) -> None:
        """Append raw bytes with no length prefix."""
        self._buf += bytes(data)

    def write_uleb128(self, value: int) -> None:
        """Append an unsigned 32-bit integer in ULEB128 form."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise BcsError(f"ULEB128 value must be an integer, got {value!r}")
        if not 0 <= value <= _MAX_ULEB128:
            raise BcsError(f"ULEB128 value out of range: {value}")
        while True:
            byte = value & 0x7F
            value >>= 7
            if value:
                self._buf.append(byte | 0x80)
            else:
                self._buf.append(byte)
                return

    def write_u8(self, value: int) -> None:
        _check_range(value, 8, "u8")
        self._buf += struct.pack("<B", value)

    def write_u16(self, value: int) -> None:
        _check_range(value, 16, "u16")
        self._buf += struct.pack("<H", value)

    def write_u64(self, value: int) -> None:
        _check_range(value, 64, "u64")
        self._buf += struct.pack("<Q", value)

    def write_bool(self, value: bool) -> None:
        self._buf.append(1 if value else 0)

    def write_str(self, value: str) -> None:
        """Append a UTF-8 string with a ULEB128 length prefix."""
        self.write_byte_vector(value.encode("utf-8"))

    def write_byte_vector(self, data: bytes) -> None:
        """Append bytes with a ULEB128 length prefix."""
        data = bytes(data)
        self.write_uleb128(len(data))
        self._buf += data

    def to_bytes(self) -> bytes:
        return bytes(self._buf)


class Decoder:
    """Reads BCS values from a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read_bytes(self, n: int) -> bytes:
        """Read exactly ``n`` raw bytes."""
        if n < 0:
            raise BcsError(f"negative read length: {n}")
        if self.remaining() < n:
            raise BcsError(
                f"unexpected end of input: need {n} bytes, have {self.remaining()}"
            )
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk

    def read_uleb128(self) -> int:
        """Read an unsigned 32-bit integer in ULEB128 form."""
        value = 0
        for index in range(_MAX_ULEB128_BYTES):
            byte = self.read_u8()
            value |= (byte & 0x7F) << (7 * index)
            if not byte & 0x80:
                if value > _MAX_ULEB128:
                    raise BcsError("ULEB128 value overflows 32 bits")
                return value
        raise BcsError("ULEB128 value overflows 32 bits")

    def read_u8(self) -> int:
        return struct.unpack("<B", self.read_bytes(1))[0]

    def read_u16(self) -> int:
        return struct.unpack("<H", self.read_bytes(2))[0]

    def read_u64(self) -> int:
        return struct.unpack("<Q", self.read_bytes(8))[0]

    def read_bool(self) -> bool:
        byte = self.read_u8()
        if byte not in (0, 1):
            raise BcsError(f"invalid bool byte: {byte}")
        return byte == 1

    def read_str(self) -> str:
        raw = self.read_byte_vector()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BcsError(f"invalid UTF-8 string: {exc}") from exc

    def read_byte_vector(self) -> bytes:
        return self.read_bytes(self.read_uleb128())

    def remaining(self) -> int:
        return len(self._data) - self._pos


def encode(value: Any) -> bytes:
    """Encode a value that has an ``encode(encoder)`` method."""
    encoder = Encoder()
    value.encode(encoder)
    return encoder.to_bytes()


def decode(cls: type[T], data: bytes) -> T:
    """Decode ``data`` as ``cls``; trailing bytes are an error."""
    decoder = Decoder(data)
    value = cls.decode(decoder)  # type: ignore[attr-defined]
    if decoder.remaining():
        raise BcsError(f"{decoder.remaining()} trailing bytes after decode")
    return value