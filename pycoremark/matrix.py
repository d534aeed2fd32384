"""Matrix manipulation workload: small integer matrices with 16/32-bit wrap."""

from dataclasses import dataclass, field

from .crc import crc16


def _s16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def _s32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def _c_mod(value: int, modulus: int) -> int:
    """Remainder truncated toward zero."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def _rows(n: int, matrix: list[int]) -> list[list[int]]:
    return [matrix[i * n:(i + 1) * n] for i in range(n)]


def _columns(n: int, matrix: list[int]) -> list[list[int]]:
    return [matrix[j:n * n:n] for j in range(n)]


def _bit_extract(value: int, start: int, width: int) -> int:
    return (value >> start) & ((1 << width) - 1)


@dataclass
class MatrixParams:
    """Square matrices A (input), B (operator) and C (result), stored row-major."""

    n: int
    a: list[int] = field(default_factory=list)
    b: list[int] = field(default_factory=list)
    c: list[int] = field(default_factory=list)


def _dimension(blksize: int) -> int:
    i = j = 0
    while j < blksize:
        i += 1
        j = i * i * 2 * 4
    return i - 1


def init_matrix(blksize: int, seed: int) -> MatrixParams:
    """Build the matrices that fit in ``blksize`` bytes, seeded by ``seed``."""
    n = _dimension(blksize)
    if n < 0:
        raise ValueError(f"block size must be positive, got {blksize}")
    seed = _s32(seed) or 1
    a: list[int] = []
    b: list[int] = []
    for order in range(1, n * n + 1):
        seed = _c_mod(_s32(order * seed), 65536)
        operator = _s16(seed + order)
        b.append(operator)
        a.append(_s16(operator + order) & 0xFF)
    return MatrixParams(n=n, a=a, b=b, c=[0] * (n * n))


def matrix_sum(n: int, c: list[int], clipval: int) -> int:
    """Score the result matrix: +1 per increase, +10 per accumulator overflow."""
    tmp = prev = 0
    ret = 0
    for cur in c[:n * n]:
        tmp = _s32(tmp + cur)
        if tmp > clipval:
            ret += 10
            tmp = 0
        elif cur > prev:
            ret += 1
        prev = cur
    return _s16(ret)


def matrix_mul_const(n: int, c: list[int], a: list[int], val: int) -> None:
    """C = A * val."""
    c[:n * n] = [_s32(x * val) for x in a[:n * n]]


def matrix_add_const(n: int, a: list[int], val: int) -> None:
    """Add ``val`` to every element of A in place, wrapping at 16 bits."""
    a[:n * n] = [_s16(x + val) for x in a[:n * n]]


def matrix_mul_vect(n: int, c: list[int], a: list[int], b: list[int]) -> None:
    """C[i] = row i of A dotted with the first n entries of B."""
    vector = b[:n]
    c[:n] = [_s32(sum(x * y for x, y in zip(row, vector))) for row in _rows(n, a)]


def matrix_mul_matrix(n: int, c: list[int], a: list[int], b: list[int]) -> None:
    """C = A x B."""
    columns = _columns(n, b)
    c[:n * n] = [
        _s32(sum(x * y for x, y in zip(row, column)))
        for row in _rows(n, a)
        for column in columns
    ]


def matrix_mul_matrix_bitextract(n: int, c: list[int], a: list[int], b: list[int]) -> None:
    """C = A x B where each product contributes the product of two bit fields."""
    columns = _columns(n, b)
    c[:n * n] = [
        _s32(
            sum(
                _bit_extract(x * y, 2, 4) * _bit_extract(x * y, 5, 7)
                for x, y in zip(row, column)
            )
        )
        for row in _rows(n, a)
        for column in columns
    ]


def matrix_test(n: int, c: list[int], a: list[int], b: list[int], val: int) -> int:
    """Run every matrix step and return a CRC of the scores; A is left unchanged."""
    val = _s16(val)
    crc = 0
    clipval = _s16(0xF000 | val)

    matrix_add_const(n, a, val)
    matrix_mul_const(n, c, a, val)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_vect(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix_bitextract(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)

    matrix_add_const(n, a, _s16(-val))
    return _s16(crc)


def bench_matrix(params: MatrixParams, seed: int, crc: int) -> int:
    """Run one matrix pass with ``seed`` as the constant and fold it into ``crc``."""
    return crc16(
        matrix_test(params.n, params.c, params.a, params.b, _s16(seed)), crc
    )