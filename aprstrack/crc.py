"""CRC-CCITT (reflected, polynomial 0x8408) as used for AX.25 frame check sequences."""

from __future__ import annotations

from collections.abc import Iterable

CRC_CCIT_INIT_VAL = 0xFFFF
_POLY = 0x8408


def _build_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


CRC_CCIT_TABLE: tuple[int, ...] = _build_table()


def update_crc_ccit(c: int, prev_crc: int) -> int:
    """Fold one byte into a running CRC and return the new CRC."""
    return ((prev_crc & 0xFFFF) >> 8) ^ CRC_CCIT_TABLE[(prev_crc ^ c) & 0xFF]


def crc_ccit(data: Iterable[int], init: int = CRC_CCIT_INIT_VAL) -> int:
    """Run the CRC over every byte of ``data`` starting from ``init``."""
    crc = init & 0xFFFF
    for byte in data:
        crc = update_crc_ccit(byte, crc)
    return crc