"""Move type tags and struct tags, and the helpers shared by the BCS enums."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, TypeVar

from suitxn.address import SuiAddress
from suitxn.bcs import BcsError, Decoder, Encoder

_T = TypeVar("_T")


def _freeze(obj: Any, *names: str) -> None:
    """Turn the named sequence fields of a frozen dataclass into tuples."""
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


def _encode_item(encoder: Encoder, item: Any) -> None:
    item.encode(encoder)


def _write_seq(
    encoder: Encoder,
    items: Iterable[_T],
    write: Callable[[Encoder, _T], None] = _encode_item,
) -> None:
    """Write a BCS vector: a ULEB128 count followed by the items."""
    items = tuple(items)
    encoder.write_uleb128(len(items))
    for item in items:
        write(encoder, item)


def _read_seq(decoder: Decoder, read: Callable[[Decoder], _T]) -> tuple[_T, ...]:
    """Read a BCS vector whose items are read with ``read``."""
    count = decoder.read_uleb128()
    return tuple(read(decoder) for _ in range(count))


def _read_variant(
    decoder: Decoder, readers: Mapping[int, Callable[[Decoder], _T]], name: str
) -> _T:
    """Read an enum tag and the variant it selects."""
    tag = decoder.read_uleb128()
    reader = readers.get(tag)
    if reader is None:
        raise BcsError(f"unknown {name} tag: {tag}")
    return reader(decoder)


class _Variant:
    """A variant of a BCS enum: a ULEB128 tag followed by its own data."""

    _TAG: ClassVar[int]

    def _tag(self) -> int:
        return self._TAG

    def _encode_body(self, encoder: Encoder) -> None:
        """Write the data that follows the tag; nothing by default."""

    def encode(self, encoder: Encoder) -> None:
        encoder.write_uleb128(self._tag())
        self._encode_body(encoder)


class TypeTagKind(IntEnum):
    """Wire tags of the TypeTag enum."""

    BOOL = 0
    U8 = 1
    U64 = 2
    U128 = 3
    ADDRESS = 4
    SIGNER = 5
    VECTOR = 6
    STRUCT = 7
    U16 = 8
    U32 = 9
    U256 = 10


class TypeTag(_Variant):
    """A Move type tag; the concrete variants are its subclasses."""

    def encode(self, encoder: Encoder) -> None:
        """Write the tag of the variant followed by its data."""
        super().encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> TypeTag:
        raw = decoder.read_uleb128()
        try:
            kind = TypeTagKind(raw)
        except ValueError:
            raise BcsError(f"unknown TypeTag tag: {raw}") from None
        if kind is TypeTagKind.VECTOR:
            return VectorTypeTag(TypeTag.decode(decoder))
        if kind is TypeTagKind.STRUCT:
            return StructTypeTag(StructTag.decode(decoder))
        return PrimitiveTypeTag(kind)


@dataclass(frozen=True)
class PrimitiveTypeTag(TypeTag):
    """A type tag that carries no data: bool, integers, address, signer."""

    kind: TypeTagKind

    def __post_init__(self) -> None:
        kind = TypeTagKind(self.kind)
        if kind in (TypeTagKind.VECTOR, TypeTagKind.STRUCT):
            raise ValueError(f"{kind.name} is not a primitive type tag")
        object.__setattr__(self, "kind", kind)

    def _tag(self) -> int:
        return int(self.kind)


@dataclass(frozen=True)
class VectorTypeTag(TypeTag):
    """``vector<inner>``."""

    _TAG = int(TypeTagKind.VECTOR)

    inner: TypeTag

    def _encode_body(self, encoder: Encoder) -> None:
        self.inner.encode(encoder)


@dataclass(frozen=True)
class StructTypeTag(TypeTag):
    """A struct type, described by a StructTag."""

    _TAG = int(TypeTagKind.STRUCT)

    tag: StructTag

    def _encode_body(self, encoder: Encoder) -> None:
        self.tag.encode(encoder)


@dataclass(frozen=True)
class StructTag:
    """Identifies a Move struct type."""

    address: SuiAddress
    module: str
    name: str
    type_params: tuple[TypeTag, ...] = field(default=())

    def __post_init__(self) -> None:
        _freeze(self, "type_params")

    def encode(self, encoder: Encoder) -> None:
        self.address.encode(encoder)
        encoder.write_str(self.module)
        encoder.write_str(self.name)
        _write_seq(encoder, self.type_params)

    @classmethod
    def decode(cls, decoder: Decoder) -> StructTag:
        address = SuiAddress.decode(decoder)
        module = decoder.read_str()
        name = decoder.read_str()
        return cls(address, module, name, _read_seq(decoder, TypeTag.decode))