"""Programmable transaction commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from suitxn.address import SuiAddress
from suitxn.arguments import Argument
from suitxn.bcs import Decoder, Encoder
from suitxn.typetag import TypeTag, _freeze, _read_seq, _read_variant, _Variant, _write_seq


class Command(_Variant):
    """A command of a programmable transaction; the variants are its subclasses."""

    def encode(self, encoder: Encoder) -> None:
        """Write the tag of the command followed by its data."""
        super().encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> Command:
        return _read_variant(decoder, _READERS, "Command")


@dataclass(frozen=True)
class MoveCall(Command):
    """A call of a Move function."""

    _TAG = 0

    package: SuiAddress
    module: str
    function: str
    type_args: tuple[TypeTag, ...] = field(default=())
    args: tuple[Argument, ...] = field(default=())

    def __post_init__(self) -> None:
        _freeze(self, "type_args", "args")

    def _encode_body(self, encoder: Encoder) -> None:
        self.package.encode(encoder)
        encoder.write_str(self.module)
        encoder.write_str(self.function)
        _write_seq(encoder, self.type_args)
        _write_seq(encoder, self.args)

    @classmethod
    def _decode_body(cls, decoder: Decoder) -> MoveCall:
        package = SuiAddress.decode(decoder)
        module = decoder.read_str()
        function = decoder.read_str()
        type_args = _read_seq(decoder, TypeTag.decode)
        return cls(package, module, function, type_args, _read_seq(decoder, Argument.decode))


@dataclass(frozen=True)
class TransferObjects(Command):
    """Transfers objects to a destination address."""

    _TAG = 1

    objects: tuple[Argument, ...]
    destination: Argument

    def __post_init__(self) -> None:
        _freeze(self, "objects")

    def _encode_body(self, encoder: Encoder) -> None:
        _write_seq(encoder, self.objects)
        self.destination.encode(encoder)

    @classmethod
    def _decode_body(cls, decoder: Decoder) -> TransferObjects:
        objects = _read_seq(decoder, Argument.decode)
        return cls(objects, Argument.decode(decoder))


@dataclass(frozen=True)
class SplitCoins(Command):
    """Splits a coin into several amounts."""

    _TAG = 2

    coin: Argument
    amounts: tuple[Argument, ...]

    def __post_init__(self) -> None:
        _freeze(self, "amounts")

    def _encode_body(self, encoder: Encoder) -> None:
        self.coin.encode(encoder)
        _write_seq(encoder, self.amounts)

    @classmethod
    def _decode_body(cls, decoder: Decoder) -> SplitCoins:
        coin = Argument.decode(decoder)
        return cls(coin, _read_seq(decoder, Argument.decode))


@dataclass(frozen=True)
class MergeCoins(Command):
    """Merges source coins into a destination coin."""

    _TAG = 3

    destination: Argument
    sources: tuple[Argument, ...]

    def __post_init__(self) -> None:
        _freeze(self, "sources")

    def _encode_body(self, encoder: Encoder) -> None:
        self.destination.encode(encoder)
        _write_seq(encoder, self.sources)

    @classmethod
    def _decode_body(cls, decoder: Decoder) -> MergeCoins:
        destination = Argument.decode(decoder)
        return cls(destination, _read_seq(decoder, Argument.decode))


@dataclass(frozen=True)
class Publish(Command):
    """Publishes a Move package from compiled modules."""

    _TAG = 4

    modules: tuple[bytes, ...]
    dependencies: tuple[SuiAddress, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "modules", tuple(bytes(m) for m in self.modules))
        _freeze(self, "dependencies")

    def _encode_body(self, encoder: Encoder) -> None:
        _write_seq(encoder, self.modules, Encoder.write_byte_vector)
        _write_seq(encoder, self.dependencies)

    @classmethod
    def _decode_body(cls, decoder: Decoder) -> Publish:
        modules = _read_seq(decoder, Decoder.read_byte_vector)
        return cls(modules, _read_seq(decoder, SuiAddress.decode))


_READERS = {
    variant._TAG: variant._decode_body
    for variant in (MoveCall, TransferObjects, SplitCoins, MergeCoins, Publish)
}