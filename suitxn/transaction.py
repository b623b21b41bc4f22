"""Gas data, programmable transactions and the top-level transaction data."""

from __future__ import annotations

from dataclasses import dataclass, field

from suitxn.address import ObjectRef, SuiAddress
from suitxn.arguments import CallArg
from suitxn.bcs import Decoder, Encoder
from suitxn.commands import Command
from suitxn.typetag import _freeze, _read_seq, _read_variant, _write_seq


@dataclass(frozen=True)
class GasData:
    """Gas payment: coins, owner, price and budget."""

    payment: tuple[ObjectRef, ...]
    owner: SuiAddress
    price: int
    budget: int

    def __post_init__(self) -> None:
        _freeze(self, "payment")

    def encode(self, encoder: Encoder) -> None:
        _write_seq(encoder, self.payment)
        self.owner.encode(encoder)
        encoder.write_u64(self.price)
        encoder.write_u64(self.budget)

    @classmethod
    def decode(cls, decoder: Decoder) -> GasData:
        payment = _read_seq(decoder, ObjectRef.decode)
        owner = SuiAddress.decode(decoder)
        price = decoder.read_u64()
        return cls(payment, owner, price, decoder.read_u64())


@dataclass(frozen=True)
class ProgrammableTransaction:
    """Inputs and the commands that use them."""

    inputs: tuple[CallArg, ...] = field(default=())
    commands: tuple[Command, ...] = field(default=())

    def __post_init__(self) -> None:
        _freeze(self, "inputs", "commands")

    def encode(self, encoder: Encoder) -> None:
        _write_seq(encoder, self.inputs)
        _write_seq(encoder, self.commands)

    @classmethod
    def decode(cls, decoder: Decoder) -> ProgrammableTransaction:
        inputs = _read_seq(decoder, CallArg.decode)
        return cls(inputs, _read_seq(decoder, Command.decode))


@dataclass(frozen=True)
class TransactionKind:
    """The kind of a transaction; only programmable transactions are supported."""

    programmable_tx: ProgrammableTransaction

    def encode(self, encoder: Encoder) -> None:
        encoder.write_uleb128(0)
        self.programmable_tx.encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> TransactionKind:
        readers = {0: lambda d: cls(ProgrammableTransaction.decode(d))}
        return _read_variant(decoder, readers, "TransactionKind")


@dataclass(frozen=True)
class TransactionExpiration:
    """Expiration epoch of a transaction, or None for no expiration."""

    epoch: int | None = None

    def encode(self, encoder: Encoder) -> None:
        if self.epoch is None:
            encoder.write_uleb128(0)
            return
        encoder.write_uleb128(1)
        encoder.write_u64(self.epoch)

    @classmethod
    def decode(cls, decoder: Decoder) -> TransactionExpiration:
        readers = {0: lambda d: cls(None), 1: lambda d: cls(d.read_u64())}
        return _read_variant(decoder, readers, "TransactionExpiration")


@dataclass(frozen=True)
class TransactionDataV1:
    """Kind, sender, gas data and expiration of a transaction."""

    kind: TransactionKind
    sender: SuiAddress
    gas_data: GasData
    expiration: TransactionExpiration = field(default_factory=TransactionExpiration)

    def encode(self, encoder: Encoder) -> None:
        for part in (self.kind, self.sender, self.gas_data, self.expiration):
            part.encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> TransactionDataV1:
        kind = TransactionKind.decode(decoder)
        sender = SuiAddress.decode(decoder)
        gas_data = GasData.decode(decoder)
        return cls(kind, sender, gas_data, TransactionExpiration.decode(decoder))


@dataclass(frozen=True)
class TransactionData:
    """The versioned transaction data; always written as V1."""

    v1: TransactionDataV1

    def encode(self, encoder: Encoder) -> None:
        encoder.write_uleb128(0)
        self.v1.encode(encoder)

    @classmethod
    def decode(cls, decoder: Decoder) -> TransactionData:
        readers = {0: lambda d: cls(TransactionDataV1.decode(d))}
        return _read_variant(decoder, readers, "TransactionData version")