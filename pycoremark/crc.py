"""16-bit CRC helpers and command-line seed parsing."""

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def _s32(value: int) -> int:
    return ((value + 0x80000000) & _U32) - 0x80000000


def crcu8(data: int, crc: int) -> int:
    """Fold one byte into a 16-bit CRC."""
    data &= 0xFF
    crc &= _U16
    for _ in range(8):
        feedback = (data ^ crc) & 1
        data >>= 1
        if feedback:
            crc ^= 0x4002
        crc >>= 1
        if feedback:
            crc |= 0x8000
        else:
            crc &= 0x7FFF
    return crc


def crcu16(newval: int, crc: int) -> int:
    """Fold an unsigned 16-bit value into the CRC, low byte first."""
    newval &= _U16
    crc = crcu8(newval & 0xFF, crc)
    return crcu8(newval >> 8, crc)


def crc16(newval: int, crc: int) -> int:
    """Fold a signed 16-bit value into the CRC."""
    return crcu16(newval & _U16, crc)


def crcu32(newval: int, crc: int) -> int:
    """Fold an unsigned 32-bit value into the CRC, low half first."""
    newval &= _U32
    crc = crc16(newval & _U16, crc)
    return crc16(newval >> 16, crc)


def parse_value(text: str) -> int:
    """Parse a decimal or lower-case ``0x`` hex number with optional K/M suffix.

    Parsing stops at the first character that is not a digit; anything that
    cannot be read yields 0, as the benchmark's seed reader does.
    """
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    if text.startswith("0x"):
        text = text[2:]
        base, alphabet = 16, "0123456789abcdef"
    else:
        base, alphabet = 10, "0123456789"

    value = 0
    consumed = 0
    for char in text:
        if char not in alphabet:
            break
        value = value * base + alphabet.index(char)
        consumed += 1

    suffix = text[consumed:consumed + 1]
    if suffix == "K":
        value *= 1024
    elif suffix == "M":
        value *= 1024 * 1024

    if negative:
        value = -value
    return _s32(value)