from enum import IntEnum
from typing import Type, TypeVar

from tf2.error import IntErrorKind, SkuIntError, SkuValueError

I32_MIN = -2 ** 31
I32_MAX = 2 ** 31 - 1
U32_MIN = 0
U32_MAX = 2 ** 32 - 1

ASCII_DIGITS = frozenset('0123456789')
MAX_DIGITS = len(str(U32_MAX))

E = TypeVar('E', bound=IntEnum)


def is_ascii_digit(c: str) -> bool:
    return c in ASCII_DIGITS


def parse_int(key: str, value: str, min_value: int, max_value: int) -> int:
    """Parse a base-10 integer within [min_value, max_value].

    Only ASCII digits are accepted, with an optional leading sign. A minus sign
    on an unsigned range is an invalid digit.
    """
    if not value:
        raise SkuIntError(key, IntErrorKind.EMPTY, value)

    negative = value[0] == '-'
    digits = value[1:] if value[0] in '+-' else value
    if not digits or not all(is_ascii_digit(c) for c in digits) or (negative and min_value >= 0):
        raise SkuIntError(key, IntErrorKind.INVALID_DIGIT, value)

    significant = digits.lstrip('0')
    if len(significant) > MAX_DIGITS:
        raise SkuIntError(key, IntErrorKind.NEG_OVERFLOW if negative else IntErrorKind.POS_OVERFLOW, value)

    number = int(significant or '0')
    number = -number if negative else number
    if number > max_value:
        raise SkuIntError(key, IntErrorKind.POS_OVERFLOW, value)
    if number < min_value:
        raise SkuIntError(key, IntErrorKind.NEG_OVERFLOW, value)

    return number


def parse_i32(key: str, value: str) -> int:
    return parse_int(key, value, I32_MIN, I32_MAX)


def parse_u32(key: str, value: str) -> int:
    return parse_int(key, value, U32_MIN, U32_MAX)


def from_code(enum_type: Type[E], key: str, number: int) -> E:
    try:
        return enum_type(number)
    except ValueError:
        raise SkuValueError(key, number) from None


def to_code(value: IntEnum) -> int:
    return int(value)


def parse_code(enum_type: Type[E], key: str, value: str) -> E:
    return from_code(enum_type, key, parse_u32(key, value))
