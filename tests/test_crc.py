import pytest

from pycoremark.crc import crc16, crcu8, crcu16, crcu32, parse_value


def _seed_crc(seed1, seed2, seed3, size):
    crc = 0
    for value in (seed1, seed2, seed3, size):
        crc = crc16(value, crc)
    return crc


@pytest.mark.parametrize(
    "seeds, expected",
    [
        ((0, 0, 0x66, 2000), 0x8A02),
        ((0x3415, 0x3415, 0x66, 2000), 0x7B05),
        ((0x8, 0x8, 0x8, 400), 0x4EAF),
        ((0, 0, 0x66, 666), 0xE9F5),
        ((0x3415, 0x3415, 0x66, 666), 0x18F2),
    ],
)
def test_known_seed_crcs(seeds, expected):
    assert _seed_crc(*seeds) == expected


def test_crcu8_zero_stays_zero():
    assert crcu8(0, 0) == 0


@pytest.mark.parametrize("data", [0, 1, 0x5A, 0xFF])
@pytest.mark.parametrize("crc", [0, 0x1234, 0xFFFF])
def test_crcu8_stays_16_bit(data, crc):
    assert 0 <= crcu8(data, crc) <= 0xFFFF


def test_crcu16_is_low_byte_then_high_byte():
    value = 0xBEEF
    assert crcu16(value, 0x1111) == crcu8(0xBE, crcu8(0xEF, 0x1111))


def test_crc16_of_negative_matches_unsigned():
    assert crc16(-1, 0x4321) == crcu16(0xFFFF, 0x4321)
    assert crc16(-32768, 7) == crcu16(0x8000, 7)


def test_crcu32_is_low_half_then_high_half():
    value = 0x12345678
    assert crcu32(value, 0xABCD) == crcu16(0x1234, crcu16(0x5678, 0xABCD))


def test_crcu32_of_small_value_adds_zero_half():
    assert crcu32(0x66, 0) == crcu16(0, crcu16(0x66, 0))


def test_crc_sensitive_to_input():
    assert crcu16(1, 0) != crcu16(2, 0)
    assert crcu16(1, 0) > 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0x66", 0x66),
        ("0x3415", 0x3415),
        ("0x0", 0),
        ("2000", 2000),
        ("-5", -5),
        ("7", 7),
        ("", 0),
        ("abc", 0),
        ("12abc", 12),
        ("0xAB", 0),
    ],
)
def test_parse_value(text, expected):
    assert parse_value(text) == expected


def test_parse_value_suffixes():
    assert parse_value("2K") == 2 * 1024
    assert parse_value("1M") == 1024 * 1024
    assert parse_value("-1K") == -1024