import pytest

from suitxn.address import SuiAddress
from suitxn.arguments import GasCoin, Input, NestedResult, Result
from suitxn.bcs import BcsError, Encoder, decode, encode
from suitxn.commands import (
    Command,
    MergeCoins,
    MoveCall,
    Publish,
    SplitCoins,
    TransferObjects,
)
from suitxn.typetag import (
    PrimitiveTypeTag,
    StructTag,
    StructTypeTag,
    TypeTagKind,
    VectorTypeTag,
)

FRAMEWORK = SuiAddress.parse(
    "0000000000000000000000000000000000000000000000000000000000000002"
)
COUNTER_PACKAGE = SuiAddress.parse("88" * 32)
SUI_TYPE = StructTypeTag(StructTag(FRAMEWORK, "sui", "SUI", ()))


def _raw(*items):
    """Encode ints as ULEB128, str as BCS strings, bytes raw, others via encode."""
    enc = Encoder()
    for item in items:
        if isinstance(item, int):
            enc.write_uleb128(item)
        elif isinstance(item, str):
            enc.write_str(item)
        elif isinstance(item, bytes):
            enc.write_bytes(item)
        else:
            item.encode(enc)
    return enc.to_bytes()


@pytest.mark.parametrize(
    "command",
    [
        MoveCall(FRAMEWORK, "pay", "split", [SUI_TYPE], [Input(0), Input(1)]),
        MoveCall(COUNTER_PACKAGE, "counter", "increment", [], [Input(0)]),
        MoveCall(
            FRAMEWORK,
            "m",
            "f",
            [VectorTypeTag(PrimitiveTypeTag(TypeTagKind.U8))],
            [Input(3), NestedResult(0, 0)],
        ),
        TransferObjects([Result(0), Result(1)], Input(0)),
        SplitCoins(GasCoin(), [Input(0), Input(1)]),
        MergeCoins(Input(0), [Input(1), Input(2)]),
        Publish([b"\x01\x02\x03", b""], [SuiAddress.parse("0x1"), FRAMEWORK]),
    ],
)
def test_roundtrip(command):
    data = encode(command)
    decoded = decode(Command, data)
    assert decoded == command
    assert type(decoded) is type(command)
    assert encode(decoded) == data


def test_decoded_fields():
    call = decode(
        Command, encode(MoveCall(FRAMEWORK, "pay", "split", [SUI_TYPE], [Input(0)]))
    )
    assert (call.module, call.function) == ("pay", "split")
    assert call.type_args == (SUI_TYPE,)
    publish = decode(Command, encode(Publish([b"\x01"], [FRAMEWORK])))
    assert publish.modules == (b"\x01",)
    assert publish.dependencies == (FRAMEWORK,)


def test_split_coins_bytes():
    assert encode(SplitCoins(GasCoin(), [Input(0)])) == bytes.fromhex("020001010000")


def test_lists_become_tuples():
    assert MergeCoins(Input(0), [Input(1)]).sources == (Input(1),)


@pytest.mark.parametrize(
    "items",
    [
        pytest.param((), id="empty"),
        pytest.param((5,), id="tag-5"),
        pytest.param((6,), id="tag-6"),
        pytest.param((99,), id="tag-99"),
        pytest.param((0,), id="move-call-no-body"),
        pytest.param((1,), id="transfer-no-body"),
        pytest.param((2,), id="split-no-body"),
        pytest.param((3,), id="merge-no-body"),
        pytest.param((4,), id="publish-no-body"),
        pytest.param((0, FRAMEWORK), id="move-call-after-package"),
        pytest.param((0, FRAMEWORK, "pay"), id="move-call-after-module"),
        pytest.param((0, FRAMEWORK, "pay", "split"), id="move-call-after-function"),
        pytest.param((0, FRAMEWORK, "pay", "split", 0), id="move-call-after-type-args"),
        pytest.param((0, FRAMEWORK, "pay", "split", 1), id="move-call-type-arg-element"),
        pytest.param((0, FRAMEWORK, "pay", "split", 0, 1), id="move-call-arg-element"),
        pytest.param((1, 1, Result(0)), id="transfer-after-objects"),
        pytest.param((1, 1), id="transfer-object-element"),
        pytest.param((2, GasCoin()), id="split-after-coin"),
        pytest.param((2, GasCoin(), 1), id="split-amount-element"),
        pytest.param((3, Input(0)), id="merge-after-destination"),
        pytest.param((3, Input(0), 1), id="merge-source-element"),
        pytest.param((4, 1, 10, b"\x00\x01"), id="publish-truncated-module"),
    ],
)
def test_decode_errors(items):
    with pytest.raises(BcsError):
        decode(Command, _raw(*items))