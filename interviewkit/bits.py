"""Bit manipulation helpers over 32-bit integers and monochrome screens."""

from __future__ import annotations

_WIDTH = 32
_MASK32 = (1 << _WIDTH) - 1


def _popcount(n: int) -> int:
    return bin(n).count("1")


def longest_sequence_of_ones(n: int) -> int:
    """Length of the longest run of 1s reachable by flipping one 0 bit of ``n``."""
    n &= _MASK32
    if n == _MASK32:
        return _WIDTH
    best = 1
    current = 0
    previous = 0
    for pos in range(_WIDTH):
        if (n >> pos) & 1:
            current += 1
        else:
            previous = current if (n >> (pos + 1)) & 1 else 0
            current = 0
        best = max(best, previous + current + 1)
    return min(best, _WIDTH)


def next_number(n: int) -> int:
    """Smallest integer larger than ``n`` with the same number of 1 bits.

    Raises ValueError when no such number fits in 31 bits.
    """
    if n <= 0:
        raise ValueError("n must be a positive integer")
    ones = 0
    pos = 0
    while pos < _WIDTH - 1 and not (n >> pos) & 1:
        pos += 1
    while pos < _WIDTH - 1 and (n >> pos) & 1:
        ones += 1
        pos += 1
    if pos >= _WIDTH - 1:
        raise ValueError("no larger number with the same count of 1 bits")
    result = (n | (1 << pos)) & ~((1 << pos) - 1)
    return result | ((1 << (ones - 1)) - 1)


def bit_flips(a: int, b: int) -> int:
    """Number of bits to flip to turn ``a`` into ``b`` (as 32-bit values)."""
    return _popcount((a ^ b) & _MASK32)


def pairwise_swap(n: int) -> int:
    """Swap each even bit with the odd bit next to it, as a 32-bit value."""
    n &= _MASK32
    return ((n & 0xAAAAAAAA) >> 1) | ((n & 0x55555555) << 1)


def draw_line(screen: bytearray, width: int, x1: int, x2: int, y: int) -> None:
    """Set pixels ``x1``..``x2`` (inclusive) of row ``y`` on a packed screen.

    Pixel 0 of each byte is its most significant bit.
    """
    if width <= 0 or width % 8:
        raise ValueError("width must be a positive multiple of 8")
    if not 0 <= x1 <= x2 < width:
        raise ValueError("need 0 <= x1 <= x2 < width")
    row_bytes = width // 8
    if not 0 <= y < len(screen) // row_bytes:
        raise IndexError("row is outside the screen")
    row = y * row_bytes
    start, end = row + x1 // 8, row + x2 // 8
    start_mask = 0xFF >> (x1 % 8)
    end_mask = (0xFF << (7 - x2 % 8)) & 0xFF
    if start == end:
        screen[start] |= start_mask & end_mask
        return
    screen[start] |= start_mask
    screen[start + 1:end] = b"\xff" * (end - start - 1)
    screen[end] |= end_mask


def binary_to_string(num: float) -> str:
    """Binary digits after the point of ``num`` in [0, 1], at most 32 of them."""
    if not 0 <= num <= 1:
        raise ValueError("number must lie between 0 and 1")
    digits = []
    while num > 0 and len(digits) < _WIDTH:
        num *= 2
        if num >= 1:
            digits.append("1")
            num -= 1
        else:
            digits.append("0")
    return "".join(digits)


def get_bit(num: int, i: int) -> bool:
    """Whether bit ``i`` of ``num`` is set."""
    return (num >> i) & 1 == 1


def set_bit(num: int, i: int) -> int:
    """``num`` with bit ``i`` set."""
    return num | (1 << i)


def clear_bit(num: int, i: int) -> int:
    """``num`` with bit ``i`` cleared."""
    return num & ~(1 << i)


def clear_bits_through(num: int, i: int) -> int:
    """``num`` with bits ``i`` through 0 cleared."""
    return num & (-1 << (i + 1))


def update_bit(num: int, i: int, bit_is_one: bool) -> int:
    """``num`` with bit ``i`` set to ``bit_is_one``."""
    return (num & ~(1 << i)) | (int(bool(bit_is_one)) << i)


def insert_bits(n: int, m: int, j: int, i: int) -> int:
    """Insert ``m`` into ``n`` so that it occupies bits ``j`` down to ``i``."""
    if i < 0 or j < i:
        raise ValueError("need 0 <= i <= j")
    span = j - i + 1
    if m < 0 or m >> span:
        raise ValueError("m does not fit between bits i and j")
    mask = ~(((1 << span) - 1) << i)
    return (n & mask) | (m << i)