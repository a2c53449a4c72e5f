"""AX.25 UI frame encoding: addresses, control fields, escaping and FCS."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .afsk import AX25_ESC, HDLC_FLAG, HDLC_RESET
from .crc import CRC_CCIT_INIT_VAL, update_crc_ccit

AX25_MIN_FRAME_LEN = 18
AX25_MAX_FRAME_LEN = 330
AX25_CRC_CORRECT = 0xF0B8
AX25_CTRL_UI = 0x03
AX25_PID_NOLAYER3 = 0xF0
AX25_MAX_RPT = 8
CALL_LEN = 6

_SPECIAL = frozenset((HDLC_FLAG, HDLC_RESET, AX25_ESC))


@dataclass(frozen=True)
class Callsign:
    """A station callsign with its secondary station identifier."""

    call: str
    ssid: int = 0


def _address_bytes(callsign: Callsign, last: bool) -> bytes:
    raw = callsign.call.split("\0", 1)[0].encode("latin-1")[:CALL_LEN].upper()
    shifted = bytes((c << 1) & 0xFF for c in raw.ljust(CALL_LEN, b" "))
    ssid = (0x60 | ((callsign.ssid & 0xFF) << 1) | (0x01 if last else 0)) & 0xFF
    return shifted + bytes((ssid,))


class AX25Encoder:
    """Writes AX.25 frames byte by byte into ``sink``, a callable taking one byte."""

    def __init__(self, sink: Callable[[int], object]) -> None:
        self._sink = sink
        self.crc_in = CRC_CCIT_INIT_VAL
        self.crc_out = CRC_CCIT_INIT_VAL

    def _put(self, c: int) -> None:
        if c in _SPECIAL:
            self._sink(AX25_ESC)
        self.crc_out = update_crc_ccit(c, self.crc_out)
        self._sink(c)

    def _put_all(self, data: Iterable[int]) -> None:
        for byte in data:
            self._put(byte)

    def _begin(self) -> None:
        self.crc_out = CRC_CCIT_INIT_VAL
        self._sink(HDLC_FLAG)

    def _finish(self) -> None:
        crc = self.crc_out
        self._put((crc & 0xFF) ^ 0xFF)
        self._put((crc >> 8) ^ 0xFF)
        self._sink(HDLC_FLAG)

    def send_raw(self, data: Iterable[int]) -> None:
        """Send ``data`` as the whole frame body, followed by its FCS."""
        self._begin()
        self._put_all(bytes(data))
        self._finish()

    def send_via(self, path: Sequence[Callsign], data: Iterable[int]) -> None:
        """Send a UI frame addressed along ``path`` (destination, source, repeaters)."""
        payload = bytes(data)
        self._begin()
        last_index = len(path) - 1
        for index, callsign in enumerate(path):
            self._put_all(_address_bytes(callsign, index == last_index))
        self._put(AX25_CTRL_UI)
        self._put(AX25_PID_NOLAYER3)
        self._put_all(payload)
        self._finish()

    def send(self, dst: Callsign, src: Callsign, data: Iterable[int]) -> None:
        """Send a UI frame from ``src`` to ``dst`` with no repeaters."""
        self.send_via((dst, src), data)