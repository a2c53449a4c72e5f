import pytest

from aprstrack.crc import CRC_CCIT_INIT_VAL, CRC_CCIT_TABLE, crc_ccit, update_crc_ccit

AX25_CRC_CORRECT = 0xF0B8


def _with_fcs(data: bytes) -> bytes:
    crc = crc_ccit(data)
    return data + bytes([(crc & 0xFF) ^ 0xFF, (crc >> 8) ^ 0xFF])


@pytest.mark.parametrize(
    "byte, expected",
    [(0, 0x0000), (1, 0x1189), (128, 0x8408), (255, 0x0F78)],
)
def test_table_pinned_entries(byte, expected):
    assert update_crc_ccit(byte, 0) == expected
    assert CRC_CCIT_TABLE[byte] == expected


def test_table_matches_update_from_zero():
    assert [update_crc_ccit(byte, 0) for byte in range(256)] == list(CRC_CCIT_TABLE)


def test_update_from_zero_is_table_lookup():
    assert update_crc_ccit(1, 0) == 0x1189
    assert update_crc_ccit(0, 0) == 0


def test_standard_check_value():
    assert crc_ccit(b"123456789") ^ 0xFFFF == 0x906E


def test_default_init_value():
    assert crc_ccit(b"abc") == crc_ccit(b"abc", CRC_CCIT_INIT_VAL)
    assert crc_ccit(b"") == CRC_CCIT_INIT_VAL


@pytest.mark.parametrize("data", [b"", b"A", b"hello world", bytes(range(256)), b"\x7e\x7f\x1b"])
def test_residue_after_fcs_is_constant(data):
    assert crc_ccit(_with_fcs(data)) == AX25_CRC_CORRECT


def test_incremental_matches_whole():
    data = b"The quick brown fox"
    crc = CRC_CCIT_INIT_VAL
    for byte in data:
        crc = update_crc_ccit(byte, crc)
    assert crc == crc_ccit(data)
    assert crc_ccit(data[5:], crc_ccit(data[:5])) == crc_ccit(data)


def test_result_stays_sixteen_bits():
    for byte in range(256):
        assert 0 <= update_crc_ccit(byte, 0xFFFF) <= 0xFFFF