from dataclasses import dataclass

import pytest

from suitxn.bcs import BcsError, Decoder, Encoder, decode, encode


@dataclass
class _Pair:
    first: int
    label: str

    def encode(self, encoder):
        encoder.write_u64(self.first)
        encoder.write_str(self.label)

    @classmethod
    def decode(cls, decoder):
        return cls(decoder.read_u64(), decoder.read_str())


@pytest.mark.parametrize("value", [0, 1, 127, 128, 300, 16384, 2**21, 2**32 - 1])
def test_uleb128_roundtrip(value):
    enc = Encoder()
    enc.write_uleb128(value)
    dec = Decoder(enc.to_bytes())
    assert dec.read_uleb128() == value
    assert dec.remaining() == 0


def test_uleb128_small_value_is_single_byte():
    enc = Encoder()
    enc.write_uleb128(10)
    assert enc.to_bytes() == b"\x0a"


def test_uleb128_encoding_grows_with_value():
    lengths = []
    for value in (1, 2**7, 2**14, 2**21, 2**28):
        enc = Encoder()
        enc.write_uleb128(value)
        lengths.append(len(enc.to_bytes()))
    assert lengths == sorted(lengths)
    assert len(set(lengths)) == len(lengths)


@pytest.mark.parametrize("value", [-1, 2**32])
def test_uleb128_out_of_range(value):
    with pytest.raises(BcsError):
        Encoder().write_uleb128(value)


def test_read_uleb128_empty():
    with pytest.raises(BcsError):
        Decoder(b"").read_uleb128()


def test_read_uleb128_truncated_continuation():
    with pytest.raises(BcsError):
        Decoder(b"\x80").read_uleb128()


def test_read_uleb128_overflow():
    with pytest.raises(BcsError):
        Decoder(b"\xff\xff\xff\xff\xff\x01").read_uleb128()


def test_u64_wire_format():
    enc = Encoder()
    enc.write_u64(42)
    assert enc.to_bytes() == bytes.fromhex("2a00000000000000")


@pytest.mark.parametrize("value", [0, 1, 255, 65535])
def test_u16_roundtrip(value):
    enc = Encoder()
    enc.write_u16(value)
    data = enc.to_bytes()
    assert len(data) == 2
    assert Decoder(data).read_u16() == value


@pytest.mark.parametrize("value", [0, 1000, 10_000_000, 2**64 - 1])
def test_u64_roundtrip(value):
    enc = Encoder()
    enc.write_u64(value)
    data = enc.to_bytes()
    assert len(data) == 8
    assert Decoder(data).read_u64() == value


@pytest.mark.parametrize("value", [0, 200, 255])
def test_u8_roundtrip(value):
    enc = Encoder()
    enc.write_u8(value)
    assert Decoder(enc.to_bytes()).read_u8() == value


def test_u16_out_of_range():
    with pytest.raises(BcsError):
        Encoder().write_u16(65536)


def test_u64_negative():
    with pytest.raises(BcsError):
        Encoder().write_u64(-1)


@pytest.mark.parametrize("value", [True, False])
def test_bool_roundtrip(value):
    enc = Encoder()
    enc.write_bool(value)
    assert Decoder(enc.to_bytes()).read_bool() is value


def test_invalid_bool_byte():
    with pytest.raises(BcsError):
        Decoder(b"\x02").read_bool()


def test_str_is_length_prefixed():
    enc = Encoder()
    enc.write_str("pay")
    data = enc.to_bytes()
    assert data[0] == len("pay")
    assert data[1:] == b"pay"
    assert Decoder(data).read_str() == "pay"


def test_invalid_utf8_string():
    enc = Encoder()
    enc.write_byte_vector(b"\xff\xfe")
    with pytest.raises(BcsError):
        Decoder(enc.to_bytes()).read_str()


@pytest.mark.parametrize("data", [b"", b"\xde\xad\xbe\xef", bytes(range(200))])
def test_byte_vector_roundtrip(data):
    enc = Encoder()
    enc.write_byte_vector(data)
    dec = Decoder(enc.to_bytes())
    assert dec.read_byte_vector() == data
    assert dec.remaining() == 0


def test_read_bytes_truncated():
    with pytest.raises(BcsError):
        Decoder(b"\x01\x02").read_bytes(3)


def test_remaining_tracks_reads():
    dec = Decoder(b"\x01\x02\x03\x04")
    assert dec.remaining() == 4
    assert dec.read_bytes(3) == b"\x01\x02\x03"
    assert dec.remaining() == 1


def test_encode_decode_helpers_roundtrip():
    value = _Pair(7, "split")
    data = encode(value)
    assert decode(_Pair, data) == value


def test_decode_rejects_trailing_bytes():
    data = encode(_Pair(1, "a")) + b"\x00"
    with pytest.raises(BcsError):
        decode(_Pair, data)


def test_bcs_error_is_value_error():
    with pytest.raises(ValueError):
        Decoder(b"").read_u8()