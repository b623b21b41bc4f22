"""Sui addresses, object digests and object references."""

from __future__ import annotations

from dataclasses import dataclass

from suitxn.bcs import BcsError, Decoder, Encoder

ADDRESS_LENGTH = 32
DIGEST_LENGTH = 32

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class SuiAddress:
    """A 32-byte Sui address."""

    value: bytes = bytes(ADDRESS_LENGTH)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))
        if len(self.value) != ADDRESS_LENGTH:
            raise ValueError(
                f"address must be {ADDRESS_LENGTH} bytes, got {len(self.value)}"
            )

    @classmethod
    def parse(cls, text: str) -> SuiAddress:
        """Parse a hex address, with or without a 0x prefix; short forms are zero-padded."""
        digits = text.removeprefix("0x").rjust(2 * ADDRESS_LENGTH, "0")
        if len(digits) % 2 or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"invalid address hex: {text!r}")
        raw = bytes.fromhex(digits)
        if len(raw) != ADDRESS_LENGTH:
            raise ValueError(f"address must be {ADDRESS_LENGTH} bytes, got {len(raw)}")
        return cls(raw)

    def hex(self) -> str:
        """Return the 0x-prefixed lower-case hex form."""
        return "0x" + self.value.hex()

    def __str__(self) -> str:
        return self.hex()

    def encode(self, encoder: Encoder) -> None:
        encoder.write_bytes(self.value)

    @classmethod
    def decode(cls, decoder: Decoder) -> SuiAddress:
        return cls(decoder.read_bytes(ADDRESS_LENGTH))


@dataclass(frozen=True)
class ObjectDigest:
    """A 32-byte object digest, encoded with a length prefix."""

    value: bytes = bytes(DIGEST_LENGTH)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))
        if len(self.value) != DIGEST_LENGTH:
            raise ValueError(
                f"digest must be {DIGEST_LENGTH} bytes, got {len(self.value)}"
            )

    def encode(self, encoder: Encoder) -> None:
        encoder.write_uleb128(DIGEST_LENGTH)
        encoder.write_bytes(self.value)

    @classmethod
    def decode(cls, decoder: Decoder) -> ObjectDigest:
        length = decoder.read_uleb128()
        if length != DIGEST_LENGTH:
            raise BcsError(
                f"digest length mismatch: expected {DIGEST_LENGTH}, got {length}"
            )
        return cls(decoder.read_bytes(DIGEST_LENGTH))


@dataclass(frozen=True)
class ObjectRef:
    """A reference to an object by ID, version and digest."""

    object_id: SuiAddress
    version: int
    digest: ObjectDigest

    def encode(self, encoder: Encoder) -> None:
        self.object_id.encode(encoder)
        encoder.write_u64(self.version)
        self.digest.encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> ObjectRef:
        object_id = SuiAddress.decode(decoder)
        version = decoder.read_u64()
        digest = ObjectDigest.decode(decoder)
        return cls(object_id, version, digest)


@dataclass(frozen=True)
class SharedObjectRef:
    """A shared object referenced by ID and initial shared version."""

    object_id: SuiAddress
    initial_shared_version: int
    mutable: bool

    def encode(self, encoder: Encoder) -> None:
        self.object_id.encode(encoder)
        encoder.write_u64(self.initial_shared_version)
        encoder.write_bool(self.mutable)

    @classmethod
    def decode(cls, decoder: Decoder) -> SharedObjectRef:
        object_id = SuiAddress.decode(decoder)
        version = decoder.read_u64()
        mutable = decoder.read_bool()
        return cls(object_id, version, mutable)