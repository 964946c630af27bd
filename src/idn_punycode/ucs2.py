"""Conversion between code-unit strings and Unicode code points.

A Python ``str`` already holds code points, but text that crossed a UTF-16
boundary may carry astral characters as two surrogate characters. The
decoder merges such pairs; the encoder produces them again.
"""

from typing import Iterable

from .exceptions import InvalidCodePointError

MAX_CODE_POINT = 0x10FFFF
CHUNK_SIZE = 0x4000


def ucs2_decode(string: str) -> list[int]:
    """Create a list with the numeric code point of each character in the string.

    A high surrogate immediately followed by a low surrogate is merged into a
    single astral code point. Unmatched surrogates are kept as they are, so
    ill-formed input round-trips through ``ucs2_encode``.

    Args:
        string (str): Text to split into code points.

    Returns:
        list[int]: The code points, in order.
    """
    output = []
    counter = 0
    length = len(string)
    while counter < length:
        value = ord(string[counter])
        counter += 1
        if 0xD800 <= value <= 0xDBFF and counter < length:
            extra = ord(string[counter])
            counter += 1
            if 0xDC00 <= extra <= 0xDFFF:
                output.append(((value & 0x3FF) << 10) + (extra & 0x3FF) + 0x10000)
            else:
                # Unmatched high surrogate; the next unit may start a pair.
                output.append(value)
                counter -= 1
        else:
            output.append(value)
    return output


def ucs2_encode(
    code_points: Iterable[int], *, surrogates: bool = True, chunk_size: int = CHUNK_SIZE
) -> str:
    """Create a string from a sequence of numeric code points.

    Args:
        code_points (Iterable[int]): Code points to render.
        surrogates (bool): Split astral code points into surrogate pairs.
            When False they are emitted as single Python characters.
        chunk_size (int): Number of buffered code units flushed at a time.

    Returns:
        str: The rendered string.

    Raises:
        InvalidCodePointError: If a value lies outside [0, 0x10FFFF].
    """
    result = []
    code_units = []
    for code_point in code_points:
        if code_point < 0 or code_point > MAX_CODE_POINT:
            raise InvalidCodePointError(code_point)
        if code_point <= 0xFFFF or not surrogates:
            code_units.append(chr(code_point))
        else:
            code_point -= 0x10000
            code_units.append(chr((code_point >> 10) + 0xD800))
            code_units.append(chr((code_point % 0x400) + 0xDC00))
        if len(code_units) >= chunk_size:
            result.append("".join(code_units))
            code_units = []
    result.append("".join(code_units))
    return "".join(result)


class Ucs2:
    """Shortcuts mirroring the two code-point conversions."""

    @staticmethod
    def decode(string: str) -> list[int]:
        return ucs2_decode(string)

    @staticmethod
    def encode(*code_points: int) -> str:
        return ucs2_encode(code_points)
