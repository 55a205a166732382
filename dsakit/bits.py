"""Bit-twiddling routines on integers, mostly with 32-bit word semantics."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

WORD_BITS = 32
_MASK32 = (1 << WORD_BITS) - 1
_SIGN32 = 1 << (WORD_BITS - 1)


def _to_uint32(value: int) -> int:
    return value & _MASK32


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << WORD_BITS) if value & _SIGN32 else value


def _check_bit_index(i: int) -> None:
    if not 0 <= i < WORD_BITS:
        raise ValueError(f"bit index must be in 0..{WORD_BITS - 1}, got {i}")


def _code(ch: str) -> int:
    if not isinstance(ch, str):
        raise TypeError(f"expected a one-character string, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ord(ch)


def single_number(nums: Iterable[int]) -> int:
    """Return the element that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def single_number_thrice(nums: Iterable[int]) -> int:
    """Return the element that appears once when every other appears three times."""
    ones = twos = 0
    for n in nums:
        twos |= ones & n
        ones ^= n
        common = ~(ones & twos)
        ones &= common
        twos &= common
    return ones


def abs_no_branch(value: int) -> int:
    """Absolute value of a 32-bit signed integer, computed without branching.

    The result is unsigned, so the absolute value of the most negative
    32-bit integer is representable.
    """
    v = _to_int32(value)
    mask = v >> (WORD_BITS - 1)
    return ((v ^ mask) - mask) & _MASK32


def to_lower(ch: str) -> str:
    """Lower-case an ASCII letter by setting the 0x20 bit."""
    return chr(_code(ch) | 0x20)


def to_upper(ch: str) -> str:
    """Upper-case an ASCII letter by clearing the 0x20 bit."""
    return chr(_code(ch) & 0x5F)


def invert_case(ch: str) -> str:
    """Swap the case of an ASCII letter by flipping the 0x20 bit."""
    return chr(_code(ch) ^ 0x20)


def letter_position(ch: str) -> int:
    """Position of an ASCII letter in the alphabet, counting from 1."""
    return _code(ch) & 31


def _range_mask(low: int, high: int) -> int:
    if not 0 <= low <= high < WORD_BITS:
        raise ValueError(
            f"bit range must satisfy 0 <= low <= high < {WORD_BITS}, got {low}..{high}"
        )
    return ((1 << (high + 1)) - 1) & ~((1 << low) - 1)


def copy_bits_in_range(a: int, b: int, low: int, high: int) -> int:
    """Copy bits low..high (inclusive) of ``b`` into ``a``; returns a 32-bit word."""
    mask = _range_mask(low, high)
    return ((a & ~mask) | (b & mask)) & _MASK32


def toggle_bits_in_range(a: int, low: int, high: int) -> int:
    """Flip bits low..high (inclusive) of ``a``; returns a 32-bit word."""
    return (a ^ _range_mask(low, high)) & _MASK32


def is_power_of_2(num: int) -> bool:
    """True if the 32-bit word ``num`` has exactly one bit set."""
    u = _to_uint32(num)
    return u != 0 and u & (u - 1) == 0


def is_power_of_4(num: int) -> bool:
    """True if the 32-bit word ``num`` is a power of four."""
    return is_power_of_2(num) and not _to_uint32(num) & 0xAAAAAAAA


def is_power_of_8(num: int) -> bool:
    """True if the 32-bit word ``num`` is a power of eight."""
    return is_power_of_2(num) and not _to_uint32(num) & 0xB6DB6DB6


def count_set_bits(num: int) -> int:
    """Count set bits of the 32-bit word ``num`` by clearing the lowest each step."""
    u = _to_uint32(num)
    count = 0
    while u:
        u &= u - 1
        count += 1
    return count


def count_set_bits_by_shift(num: int) -> int:
    """Count set bits of the 32-bit word ``num`` by shifting one bit at a time."""
    u = _to_uint32(num)
    count = 0
    while u:
        count += u & 1
        u >>= 1
    return count


def bits_to_flip(a: int, b: int) -> int:
    """Number of bits that must change to turn ``a`` into ``b``."""
    return count_set_bits(a ^ b)


def is_odd(num: int) -> bool:
    """True if the lowest bit of ``num`` is set."""
    return num & 1 == 1


def is_bit_set(num: int, i: int) -> bool:
    """True if bit ``i`` (0-indexed) of ``num`` is set."""
    _check_bit_index(i)
    return bool(num & (1 << i))


def set_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` set, as a signed 32-bit integer."""
    _check_bit_index(i)
    return _to_int32(num | (1 << i))


def clear_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` cleared, as a signed 32-bit integer."""
    _check_bit_index(i)
    return _to_int32(num & ~(1 << i))


def toggle_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` flipped, as a signed 32-bit integer."""
    _check_bit_index(i)
    return _to_int32(num ^ (1 << i))


def branchless_max(x: int, y: int) -> int:
    """Larger of ``x`` and ``y`` without a conditional branch."""
    return x ^ ((x ^ y) & -(x < y))


def branchless_min(x: int, y: int) -> int:
    """Smaller of ``x`` and ``y`` without a conditional branch."""
    return y ^ ((x ^ y) & -(x < y))


def missing_number(nums: Iterable[int]) -> int:
    """The one value of 0..n absent from ``nums``, which holds n distinct values."""
    values = list(nums)
    return reduce(xor, values, 0) ^ reduce(xor, range(len(values) + 1), 0)


def odd_occurring(nums: Iterable[int]) -> int:
    """The value that occurs an odd number of times when all others occur evenly."""
    return reduce(xor, nums, 0)


def opposite_signs(x: int, y: int) -> bool:
    """True if exactly one of ``x`` and ``y`` is negative."""
    return (x ^ y) < 0


def binary_string(num: int, group: int = 0) -> str:
    """The 32-bit two's-complement digits of ``num``.

    With ``group`` above zero the digits are split, from the right, into
    space-separated groups of that many digits.
    """
    if group < 0:
        raise ValueError(f"group size must not be negative, got {group}")
    digits = format(_to_uint32(num), f"0{WORD_BITS}b")
    if group == 0:
        return digits
    head = len(digits) % group
    chunks = [digits[:head]] if head else []
    chunks.extend(digits[start:start + group] for start in range(head, len(digits), group))
    return " ".join(chunks)


def remove_last_set_bit(num: int) -> int:
    """Return ``num`` with its lowest set bit cleared."""
    return num & (num - 1) if num else 0


def reverse_bits(num: int) -> int:
    """Reverse the order of the bits in the 32-bit word ``num``."""
    return int(format(_to_uint32(num), f"0{WORD_BITS}b")[::-1], 2)


def sign_extend(value: int, bits: int) -> int:
    """Interpret the low ``bits`` bits of ``value`` as a two's-complement number."""
    if bits < 1:
        raise ValueError(f"bit width must be at least 1, got {bits}")
    x = value & ((1 << bits) - 1)
    m = 1 << (bits - 1)
    return (x ^ m) - m


def swap_even_odd_bits(num: int) -> int:
    """Swap each even-position bit with its odd neighbour; returns a 32-bit word."""
    u = _to_uint32(num)
    return (((u & 0x55555555) << 1) | ((u & 0xAAAAAAAA) >> 1)) & _MASK32


def swap_bits(num: int, i: int, j: int) -> int:
    """Exchange bits ``i`` and ``j`` (0-indexed) of ``num``."""
    if i < 0 or j < 0:
        raise ValueError(f"bit indices must not be negative, got {i} and {j}")
    bit_i = (num >> i) & 1
    bit_j = (num >> j) & 1
    num &= ~((1 << i) | (1 << j))
    return num | (bit_i << j) | (bit_j << i)


def xor_swap(x: int, y: int) -> tuple[int, int]:
    """Return ``(y, x)``, exchanged with three XORs."""
    if x == y:
        return x, y
    x ^= y
    y ^= x
    x ^= y
    return x, y


def xor_up_to(n: int) -> int:
    """XOR of all integers from 0 to ``n`` inclusive, in constant time."""
    if n < 0:
        raise ValueError(f"upper bound must not be negative, got {n}")
    return (n, 1, n + 1, 0)[n % 4]


def xor_range(low: int, high: int) -> int:
    """XOR of all integers from ``low`` to ``high`` inclusive."""
    if not 0 <= low <= high:
        raise ValueError(f"range must satisfy 0 <= low <= high, got {low}..{high}")
    prefix = xor_up_to(low - 1) if low > 0 else 0
    return prefix ^ xor_up_to(high)