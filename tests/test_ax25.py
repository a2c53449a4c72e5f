import pytest

from aprstrack.afsk import AX25_ESC, HDLC_FLAG, HDLC_RESET, AfskModulator
from aprstrack.ax25 import (
    AX25_CRC_CORRECT,
    AX25_CTRL_UI,
    AX25_MIN_FRAME_LEN,
    AX25_PID_NOLAYER3,
    AX25Encoder,
    Callsign,
)
from aprstrack.crc import crc_ccit


def make_encoder():
    out = []
    return AX25Encoder(out.append), out


def unframe(raw):
    assert raw[0] == HDLC_FLAG and raw[-1] == HDLC_FLAG
    body = []
    it = iter(raw[1:-1])
    for byte in it:
        if byte == AX25_ESC:
            byte = next(it)
        body.append(byte)
    return bytes(body)


def decode_addresses(body, count):
    result = []
    for n in range(count):
        chunk = body[n * 7:(n + 1) * 7]
        call = bytes(b >> 1 for b in chunk[:6]).decode("ascii").rstrip()
        result.append((call, (chunk[6] >> 1) & 0x0F, chunk[6] & 0x01))
    return result


def test_empty_raw_frame_has_valid_fcs():
    enc, out = make_encoder()
    enc.send_raw(b"")
    body = unframe(out)
    assert len(body) == 2
    assert crc_ccit(body) == AX25_CRC_CORRECT


def test_raw_payload_round_trip():
    enc, out = make_encoder()
    enc.send_raw(b"hello")
    body = unframe(out)
    assert body[:-2] == b"hello"
    assert crc_ccit(body) == AX25_CRC_CORRECT


def test_special_bytes_are_escaped():
    enc, out = make_encoder()
    enc.send_raw(bytes([HDLC_FLAG, HDLC_RESET, AX25_ESC]))
    assert out[1:7] == [AX25_ESC, HDLC_FLAG, AX25_ESC, HDLC_RESET, AX25_ESC, AX25_ESC]
    body = unframe(out)
    assert body[:3] == bytes([HDLC_FLAG, HDLC_RESET, AX25_ESC])
    assert crc_ccit(body) == AX25_CRC_CORRECT


def test_send_via_structure():
    enc, out = make_encoder()
    path = [Callsign("n0cal", 7), Callsign("src", 1), Callsign("WIDE1", 1)]
    enc.send_via(path, b"data")
    body = unframe(out)
    assert decode_addresses(body, 3) == [("N0CAL", 7, 0), ("SRC", 1, 0), ("WIDE1", 1, 1)]
    assert all(body[n * 7 + 6] & 0x60 == 0x60 for n in range(3))
    assert body[21] == AX25_CTRL_UI
    assert body[22] == AX25_PID_NOLAYER3
    assert body[23:-2] == b"data"
    assert crc_ccit(body) == AX25_CRC_CORRECT


def test_send_matches_send_via_with_two_addresses():
    dst, src = Callsign("APRS"), Callsign("ME", 9)
    enc1, out1 = make_encoder()
    enc1.send(dst, src, b"x")
    enc2, out2 = make_encoder()
    enc2.send_via([dst, src], b"x")
    assert out1 == out2


def test_minimum_frame_length():
    enc, out = make_encoder()
    enc.send(Callsign("A"), Callsign("B"), b"")
    assert len(unframe(out)) == AX25_MIN_FRAME_LEN


@pytest.mark.parametrize(
    "call, expected",
    [("ABCDEFGH", "ABCDEF"), ("AB\0CD", "AB"), ("", "")],
)
def test_callsign_clipping(call, expected):
    enc, out = make_encoder()
    enc.send(Callsign(call), Callsign("SRC"), b"")
    assert decode_addresses(unframe(out), 1)[0][0] == expected


def test_non_latin_callsign_rejected():
    enc, _ = make_encoder()
    with pytest.raises(ValueError):
        enc.send(Callsign("\u03a9"), Callsign("SRC"), b"")


def test_frame_drives_modulator_to_completion():
    modem = AfskModulator(preamble_ms=20, tail_ms=10)
    enc = AX25Encoder(modem.putchar)
    enc.send(Callsign("APRS"), Callsign("ME"), b"payload")
    samples = list(modem.samples())
    assert len(samples) > 0
    assert all(0 <= s <= 255 for s in samples)
    assert modem.sending is False