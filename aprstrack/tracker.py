"""APRS position tracker: station settings and position report transmission."""

from __future__ import annotations

from collections.abc import Iterable

from .afsk import AfskModulator
from .ax25 import CALL_LEN, AX25Encoder, Callsign

LAT_LEN = 8
LON_LEN = 9
PRIMARY_TABLE = "/"
ALTERNATE_TABLE = "\\"
_PACKET_TYPES = (" ", "p", "c", "d")


class _Bounded:
    """Integer attribute that ignores values outside ``0 <= value < limit``."""

    def __init__(self, limit: int) -> None:
        self._limit = limit
        self._attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr = "_" + name

    def __get__(self, obj: object, objtype: type | None = None):
        if obj is None:
            return self
        return getattr(obj, self._attr)

    def __set__(self, obj: object, value: int) -> None:
        if 0 <= value < self._limit:
            setattr(obj, self._attr, value)


def _clip_call(call: str) -> str:
    return call.split("\0", 1)[0][:CALL_LEN]


def _clip_field(text: str, width: int) -> bytes:
    return text.split("\0", 1)[0].encode("latin-1")[:width].ljust(width, b"\0")


def _number_field(value: int | None) -> bytes:
    # the field keeps two digits and a NUL, as transmitted
    if value is None:
        return bytes(3)
    return f"{value:03d}".encode("ascii")[:2] + b"\0"


class Tracker:
    """Holds station and position settings and sends APRS frames through a modem."""

    power = _Bounded(10)
    height = _Bounded(10)
    gain = _Bounded(10)
    directivity = _Bounded(10)
    speed = _Bounded(1000)
    course = _Bounded(360)
    direction = _Bounded(360)

    def __init__(self, modem=None) -> None:
        self.modem = modem if modem is not None else AfskModulator()
        self._encoder = AX25Encoder(self.modem.putchar)
        self.callsign = Callsign("NOCALL", 0)
        self.destination = Callsign("HYMTR", 0)
        self.path1 = Callsign("WIDE1", 1)
        self.path2 = Callsign("WIDE2", 2)
        self.symbol_table = PRIMARY_TABLE
        self._symbol = ">"
        self._latitude = bytes(LAT_LEN)
        self._longitude = bytes(LON_LEN)
        self._power = 10
        self._height = 10
        self._gain = 10
        self._directivity = 9
        self._speed: int | None = None
        self._course: int | None = None
        self._direction: int | None = None

    def set_callsign(self, call: str, ssid: int) -> None:
        self.callsign = Callsign(_clip_call(call), ssid)

    def set_destination(self, call: str, ssid: int) -> None:
        self.destination = Callsign(_clip_call(call), ssid)

    def set_path1(self, call: str, ssid: int) -> None:
        self.path1 = Callsign(_clip_call(call), ssid)

    def set_path2(self, call: str, ssid: int) -> None:
        self.path2 = Callsign(_clip_call(call), ssid)

    def use_alternate_symbol_table(self, use: bool) -> None:
        self.symbol_table = ALTERNATE_TABLE if use else PRIMARY_TABLE

    @property
    def preamble(self) -> int:
        """Preamble duration in milliseconds, kept by the modem."""
        return self.modem.preamble_ms

    @preamble.setter
    def preamble(self, ms: int) -> None:
        self.modem.preamble_ms = ms

    @property
    def tail(self) -> int:
        """Tail duration in milliseconds, kept by the modem."""
        return self.modem.tail_ms

    @tail.setter
    def tail(self, ms: int) -> None:
        self.modem.tail_ms = ms

    @property
    def symbol(self) -> str:
        return self._symbol

    @symbol.setter
    def symbol(self, sym: str) -> None:
        if len(sym) != 1:
            raise ValueError("symbol must be a single character")
        sym.encode("latin-1")
        self._symbol = sym

    @property
    def latitude(self) -> str:
        return self._latitude.rstrip(b"\0").decode("latin-1")

    @latitude.setter
    def latitude(self, lat: str) -> None:
        self._latitude = _clip_field(lat, LAT_LEN)

    @property
    def longitude(self) -> str:
        return self._longitude.rstrip(b"\0").decode("latin-1")

    @longitude.setter
    def longitude(self, lon: str) -> None:
        self._longitude = _clip_field(lon, LON_LEN)

    def _phg(self) -> bytes:
        digits = (self._power, self._height, self._gain, self._directivity)
        return b"PHG" + bytes(d + 48 for d in digits)

    def location_payload(self, data: Iterable[int] = b"", packet_type: str = " ") -> bytes:
        """Build the position report body, with an optional 7-byte extension."""
        if packet_type not in _PACKET_TYPES:
            raise ValueError(f"unknown packet type: {packet_type!r}")
        speed = _number_field(self._speed)
        # later extensions overwrite earlier ones in the same 7-byte slot
        extensions = []
        if packet_type == "p":
            extensions.append(self._phg())
        if packet_type in ("p", "c"):
            extensions.append(_number_field(self._course) + b"/" + speed)
        if packet_type in ("p", "c", "d"):
            extensions.append(_number_field(self._direction) + b"/" + speed)
        extension = extensions[-1] if extensions else b""
        return b"".join((
            b"=",
            self._latitude,
            self.symbol_table.encode("latin-1"),
            self._longitude,
            self._symbol.encode("latin-1"),
            extension,
            bytes(data),
        ))

    def send_packet(self, data: Iterable[int]) -> None:
        """Send ``data`` as a UI frame along destination, source and both paths."""
        path = (self.destination, self.callsign, self.path1, self.path2)
        self._encoder.send_via(path, data)

    def send_location(self, data: Iterable[int] = b"", packet_type: str = " ") -> None:
        """Send a position report with ``data`` appended as its comment."""
        self.send_packet(self.location_payload(data, packet_type))