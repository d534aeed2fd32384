"""State-machine workload: classify comma-separated tokens as numbers."""

from enum import IntEnum

from .crc import crcu32


class CoreState(IntEnum):
    """States of the token-classifying Moore machine."""

    START = 0
    INVALID = 1
    S1 = 2
    S2 = 3
    INT = 4
    FLOAT = 5
    EXPONENT = 6
    SCIENTIFIC = 7


NUM_CORE_STATES = len(CoreState)

_INT_PATTERNS = (b"5012", b"1234", b"-874", b"+122")
_FLOAT_PATTERNS = (b"35.54400", b".1234500", b"-110.700", b"+0.64400")
_SCI_PATTERNS = (b"5.500e+3", b"-.123e-2", b"-87e+832", b"+0.6e-12")
_ERR_PATTERNS = (b"T0.3e-1F", b"-T.T++Tq", b"1T3.4e4z", b"34.0e-T^")

_COMMA = ord(",")
_DIGITS = frozenset(b"0123456789")
_SIGNS = frozenset(b"+-")
_DOT = ord(".")
_EXP_MARKS = frozenset(b"Ee")


def _s16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _pattern(seed: int) -> bytes:
    choice = (seed >> 3) & 0x3
    kind = seed & 0x7
    if kind <= 2:
        return _INT_PATTERNS[choice]
    if kind <= 4:
        return _FLOAT_PATTERNS[choice]
    if kind <= 6:
        return _SCI_PATTERNS[choice]
    return _ERR_PATTERNS[choice]


def init_state(size: int, seed: int) -> bytearray:
    """Fill ``size`` bytes with seed-chosen tokens, each followed by a comma.

    The remainder of the buffer is zero, so the input is always terminated.
    """
    if size < 1:
        raise ValueError(f"state block size must be positive, got {size}")
    data = bytearray(size)
    limit = size - 1
    seed = _s16(seed)
    total = 0
    pending = b""
    while total + len(pending) + 1 < limit:
        if pending:
            end = total + len(pending)
            data[total:end] = pending
            data[end] = _COMMA
            total = end + 1
        seed = _s16(seed + 1)
        pending = _pattern(seed)
    return data


def state_transition(data, pos: int, counts: list[int]) -> tuple[CoreState, int]:
    """Scan one token starting at ``pos``.

    Stops at a comma (which is consumed), at a zero byte or the end of the
    buffer, or right after the input proves invalid.  Transition counts are
    added to ``counts``.  Returns the final state and the position after the
    token.
    """
    state = CoreState.START
    end = len(data)
    while pos < end and data[pos] != 0 and state is not CoreState.INVALID:
        symbol = data[pos]
        if symbol == _COMMA:
            pos += 1
            break
        is_digit = symbol in _DIGITS
        if state is CoreState.START:
            if is_digit:
                state = CoreState.INT
            elif symbol in _SIGNS:
                state = CoreState.S1
            elif symbol == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
                counts[CoreState.INVALID] += 1
            counts[CoreState.START] += 1
        elif state is CoreState.S1:
            if is_digit:
                state = CoreState.INT
            elif symbol == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
            counts[CoreState.S1] += 1
        elif state is CoreState.INT:
            if symbol == _DOT:
                state = CoreState.FLOAT
                counts[CoreState.INT] += 1
            elif not is_digit:
                state = CoreState.INVALID
                counts[CoreState.INT] += 1
        elif state is CoreState.FLOAT:
            if symbol in _EXP_MARKS:
                state = CoreState.S2
                counts[CoreState.FLOAT] += 1
            elif not is_digit:
                state = CoreState.INVALID
                counts[CoreState.FLOAT] += 1
        elif state is CoreState.S2:
            state = CoreState.EXPONENT if symbol in _SIGNS else CoreState.INVALID
            counts[CoreState.S2] += 1
        elif state is CoreState.EXPONENT:
            state = CoreState.SCIENTIFIC if is_digit else CoreState.INVALID
            counts[CoreState.EXPONENT] += 1
        elif state is CoreState.SCIENTIFIC:
            if not is_digit:
                state = CoreState.INVALID
                counts[CoreState.INVALID] += 1
        pos += 1
    return state, pos


def _run_machine(data, final_counts: list[int], track_counts: list[int]) -> None:
    pos = 0
    while pos < len(data) and data[pos] != 0:
        state, pos = state_transition(data, pos, track_counts)
        final_counts[state] += 1


def _xor_every(data: bytearray, blksize: int, step: int, key: int) -> None:
    key &= 0xFF
    for pos in range(0, min(blksize, len(data)), step):
        if data[pos] != _COMMA:
            data[pos] ^= key


def bench_state(
    blksize: int, data: bytearray, seed1: int, seed2: int, step: int, crc: int
) -> int:
    """Run the machine over ``data``, corrupt it, run again, and fold counts into ``crc``.

    Every ``step``-th byte is XORed with ``seed1`` before the second pass and
    with ``seed2`` afterwards, so equal seeds leave ``data`` as it was.
    """
    if step <= 0:
        raise ValueError(f"corruption step must be positive, got {step}")
    final_counts = [0] * NUM_CORE_STATES
    track_counts = [0] * NUM_CORE_STATES

    _run_machine(data, final_counts, track_counts)
    _xor_every(data, blksize, step, seed1)
    _run_machine(data, final_counts, track_counts)
    _xor_every(data, blksize, step, seed2)

    for final, track in zip(final_counts, track_counts):
        crc = crcu32(final, crc)
        crc = crcu32(track, crc)
    return crc