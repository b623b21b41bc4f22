"""Transaction arguments, object arguments and call arguments."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from suitxn.address import ObjectRef, SharedObjectRef
from suitxn.bcs import Decoder, Encoder
from suitxn.typetag import _read_variant, _Variant

_U16_MAX = 0xFFFF


def _check_u16(value: int, name: str) -> None:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must fit in 16 bits, got {value}")


class Argument(_Variant):
    """A reference to a value inside a programmable transaction."""

    def encode(self, encoder: Encoder) -> None:
        """Write the tag of the variant followed by its data."""
        super().encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> Argument:
        return _read_variant(decoder, _ARGUMENT_READERS, "Argument")


@dataclass(frozen=True)
class GasCoin(Argument):
    """The gas coin of the transaction."""

    _TAG = 0


@dataclass(frozen=True)
class _IndexArgument(Argument):
    index: int

    def __post_init__(self) -> None:
        _check_u16(self.index, f"{type(self).__name__} index")

    def _encode_body(self, encoder: Encoder) -> None:
        encoder.write_u16(self.index)


@dataclass(frozen=True)
class Input(_IndexArgument):
    """A transaction input, by index."""

    _TAG = 1


@dataclass(frozen=True)
class Result(_IndexArgument):
    """The result of an earlier command, by index."""

    _TAG = 2


@dataclass(frozen=True)
class NestedResult(Argument):
    """One value of a command that returned several."""

    _TAG = 3

    command_index: int
    result_index: int

    def __post_init__(self) -> None:
        _check_u16(self.command_index, "command index")
        _check_u16(self.result_index, "result index")

    def _encode_body(self, encoder: Encoder) -> None:
        encoder.write_u16(self.command_index)
        encoder.write_u16(self.result_index)


_ARGUMENT_READERS: Mapping[int, Callable[[Decoder], Argument]] = {
    0: lambda d: GasCoin(),
    1: lambda d: Input(d.read_u16()),
    2: lambda d: Result(d.read_u16()),
    3: lambda d: NestedResult(d.read_u16(), d.read_u16()),
}


class ObjectArg(_Variant):
    """An object passed to a transaction; every variant carries a ``ref``."""

    def _encode_body(self, encoder: Encoder) -> None:
        self.ref.encode(encoder)  # type: ignore[attr-defined]

    def encode(self, encoder: Encoder) -> None:
        """Write the tag of the variant followed by its object reference."""
        super().encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> ObjectArg:
        return _read_variant(decoder, _OBJECT_ARG_READERS, "ObjectArg")


@dataclass(frozen=True)
class ImmOrOwnedObject(ObjectArg):
    """An immutable or owned object."""

    _TAG = 0

    ref: ObjectRef


@dataclass(frozen=True)
class SharedObject(ObjectArg):
    """A shared object."""

    _TAG = 1

    ref: SharedObjectRef


@dataclass(frozen=True)
class Receiving(ObjectArg):
    """An object being received."""

    _TAG = 2

    ref: ObjectRef


_OBJECT_ARG_READERS: Mapping[int, Callable[[Decoder], ObjectArg]] = {
    0: lambda d: ImmOrOwnedObject(ObjectRef.decode(d)),
    1: lambda d: SharedObject(SharedObjectRef.decode(d)),
    2: lambda d: Receiving(ObjectRef.decode(d)),
}


class CallArg(_Variant):
    """An input of a programmable transaction."""

    def encode(self, encoder: Encoder) -> None:
        """Write the tag of the variant followed by its data."""
        super().encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> CallArg:
        return _read_variant(decoder, _CALL_ARG_READERS, "CallArg")


@dataclass(frozen=True)
class PureArg(CallArg):
    """A pure value, already BCS-encoded."""

    _TAG = 0

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def _encode_body(self, encoder: Encoder) -> None:
        encoder.write_byte_vector(self.data)


@dataclass(frozen=True)
class ObjectCallArg(CallArg):
    """An object input."""

    _TAG = 1

    arg: ObjectArg

    def _encode_body(self, encoder: Encoder) -> None:
        self.arg.encode(encoder)


_CALL_ARG_READERS: Mapping[int, Callable[[Decoder], CallArg]] = {
    0: lambda d: PureArg(d.read_byte_vector()),
    1: lambda d: ObjectCallArg(ObjectArg.decode(d)),
}