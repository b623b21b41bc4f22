# suitxn

Sui transaction data types with Binary Canonical Serialization (BCS)
encoding and decoding. The package is plain Python with no dependencies.

## Modules

- `suitxn.bcs`: the `Encoder` and `Decoder` classes, plus two helpers.
  The classes handle ULEB128 lengths, little-endian `u8`/`u16`/`u64`, bools,
  UTF-8 strings and length-prefixed byte vectors. The helper `encode(value)`
  returns the bytes of any value that has an `encode(encoder)` method. The
  helper `decode(cls, data)` decodes a whole byte string and raises `BcsError`
  if bytes are left over.
- `suitxn.address`:
  - `SuiAddress` holds 32 bytes. `SuiAddress.parse` accepts hex with or
    without `0x` and zero-pads short forms. `.hex()` returns the `0x` form.
  - `ObjectDigest` holds 32 bytes and is written with a length prefix.
  - `ObjectRef` is an ID, a version and a digest.
  - `SharedObjectRef` is an ID, an initial shared version and a mutable flag.
- `suitxn.typetag`: Move type tags.
  - `TypeTag` is the base class. Its variants are `PrimitiveTypeTag`, which
    takes a `TypeTagKind`, `VectorTypeTag` and `StructTypeTag`.
  - `StructTag` is an address, a module, a name and type parameters.
  - `TypeTagKind` is an `IntEnum` of the wire tags.
- `suitxn.arguments`:
  - Command arguments, under the base class `Argument`: `GasCoin`, `Input`,
    `Result` and `NestedResult`.
  - Object arguments, under `ObjectArg`: `ImmOrOwnedObject`, `SharedObject`
    and `Receiving`.
  - Call arguments, under `CallArg`: `PureArg`, which holds bytes that are
    already BCS-encoded, and `ObjectCallArg`.
- `suitxn.commands`: commands, under the base class `Command`: `MoveCall`,
  `TransferObjects`, `SplitCoins`, `MergeCoins` and `Publish`.
- `suitxn.transaction`: `GasData`, `ProgrammableTransaction`,
  `TransactionKind`, `TransactionExpiration`, `TransactionDataV1` and
  `TransactionData`.

Every type has an `encode(encoder)` method and a `decode(decoder)`
classmethod. Decoding a base class such as `Argument.decode` reads the enum
tag and returns the matching variant.

All values are frozen dataclasses and compare by value. List fields are
stored as tuples.

### Errors

Decoding raises `BcsError`, a subclass of `ValueError`, in these cases:

- an unknown enum tag;
- a digest length other than 32;
- truncated input;
- an invalid bool byte;
- invalid UTF-8.

Building a value with bad data raises `ValueError`. This covers:

- a malformed address string;
- a byte value of the wrong length;
- an index that does not fit in 16 bits.

## Installing

```
pip install .
```

## Example: a simple SUI transfer

```python
from suitxn.address import ObjectDigest, ObjectRef, SuiAddress
from suitxn.arguments import GasCoin, Input, PureArg, Result
from suitxn.bcs import Encoder, decode, encode
from suitxn.commands import SplitCoins, TransferObjects
from suitxn.transaction import (
    GasData,
    ProgrammableTransaction,
    TransactionData,
    TransactionDataV1,
    TransactionExpiration,
    TransactionKind,
)

sender = SuiAddress.parse("0x90f3e6d73b5730f16974f4df1d3441394ebae62186baf83608599f226455afa7")
recipient = SuiAddress.parse("0xfd233cd9a5dd7e577f16fa523427c75fbc382af1583c39fdf1c6747d2ed807a3")

amount = Encoder()
amount.write_u64(1_000_000_000)

ptb = ProgrammableTransaction(
    inputs=[PureArg(amount.to_bytes()), PureArg(encode(recipient))],
    commands=[
        SplitCoins(GasCoin(), [Input(0)]),
        TransferObjects([Result(0)], Input(1)),
    ],
)

gas = GasData(
    payment=[ObjectRef(SuiAddress.parse("0x5"), 1, ObjectDigest(bytes(31) + b"\x01"))],
    owner=sender,
    price=1000,
    budget=10_000_000,
)

tx = TransactionData(
    TransactionDataV1(
        kind=TransactionKind(ptb),
        sender=sender,
        gas_data=gas,
        expiration=TransactionExpiration(),
    )
)

tx_bytes = encode(tx)
assert decode(TransactionData, tx_bytes) == tx
```

## Example: a Move call with a type argument

```python
from suitxn.address import SuiAddress
from suitxn.arguments import Input
from suitxn.commands import MoveCall
from suitxn.typetag import StructTag, StructTypeTag

framework = SuiAddress.parse("0x2")
call = MoveCall(
    package=framework,
    module="pay",
    function="split",
    type_args=[StructTypeTag(StructTag(framework, "sui", "SUI"))],
    args=[Input(0), Input(1)],
)
```

## What the package does not do

The package builds, encodes and decodes transaction data, and nothing more:

- It holds no keys and does not sign transactions.
- It does not derive wallets from mnemonics.
- It does not talk to a Sui node.

Signing, key management and submitting the encoded bytes are left to other
tools.

## Running the tests

```
pip install .[test]
pytest
```