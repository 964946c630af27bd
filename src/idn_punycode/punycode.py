"""Bootstring encoder and decoder with the Punycode parameters of RFC 3492.

Both directions work on a single label. Integers are unbounded in Python, so
every accumulator is checked against ``MAX_INT`` before it is updated, which
keeps the results interoperable with implementations limited to signed
32-bit arithmetic.
"""

from .exceptions import InvalidInputError, NotBasicError, PunycodeOverflowError
from .ucs2 import ucs2_decode, ucs2_encode

MAX_INT = 0x7FFFFFFF

# Bootstring parameters
BASE = 36
TMIN = 1
TMAX = 26
SKEW = 38
DAMP = 700
INITIAL_BIAS = 72
INITIAL_N = 0x80
DELIMITER = "-"

BASE_MINUS_TMIN = BASE - TMIN


def basic_to_digit(code_point: int) -> int:
    """Convert a basic code point into its digit value.

    Returns:
        int: A value in the range 0 to ``BASE - 1``, or ``BASE`` if the code
        point does not represent a digit.
    """
    if 0x30 <= code_point <= 0x39:
        return code_point - 0x16
    if 0x41 <= code_point <= 0x5A:
        return code_point - 0x41
    if 0x61 <= code_point <= 0x7A:
        return code_point - 0x61
    return BASE


def digit_to_basic(digit: int, flag: bool = False) -> int:
    """Convert a digit value into a basic code point.

    0..25 map to ``a``..``z`` (``A``..``Z`` when ``flag`` is set) and 26..35
    map to ``0``..``9``.
    """
    if digit < 26:
        return digit + (0x41 if flag else 0x61)
    return digit + 22


def threshold(k: int, bias: int) -> int:
    if k <= bias:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt(delta: int, num_points: int, first_time: bool) -> int:
    """Bias adaptation function as per section 3.4 of RFC 3492."""
    k = 0
    delta = delta // DAMP if first_time else delta >> 1
    delta += delta // num_points
    while delta > (BASE_MINUS_TMIN * TMAX) >> 1:
        delta //= BASE_MINUS_TMIN
        k += BASE
    return k + (BASE_MINUS_TMIN + 1) * delta // (delta + SKEW)


def decode(string: str) -> str:
    """Convert a Punycode string of ASCII-only symbols to a string of Unicode symbols.

    Args:
        string (str): The Bootstring-encoded label, without ACE prefix.

    Returns:
        str: The decoded label.

    Raises:
        NotBasicError: If a character before the last delimiter is >= 0x80.
        InvalidInputError: If the input ends in the middle of an integer.
        PunycodeOverflowError: If a value would exceed ``MAX_INT``.
        InvalidCodePointError: If a decoded value is not a Unicode code point.
    """
    output = []
    input_length = len(string)
    i = 0
    n = INITIAL_N
    bias = INITIAL_BIAS

    # Everything before the last delimiter is copied verbatim.
    basic = string.rfind(DELIMITER)
    if basic < 0:
        basic = 0

    for j in range(basic):
        if ord(string[j]) >= 0x80:
            raise NotBasicError()
        output.append(ord(string[j]))

    index = basic + 1 if basic > 0 else 0
    while index < input_length:
        # Accumulate directly into `i`; the delta is recovered via `oldi`.
        oldi = i
        w = 1
        k = BASE
        while True:
            if index >= input_length:
                raise InvalidInputError()

            digit = basic_to_digit(ord(string[index]))
            index += 1

            if digit >= BASE or digit > (MAX_INT - i) // w:
                raise PunycodeOverflowError()

            i += digit * w
            t = threshold(k, bias)
            if digit < t:
                break

            base_minus_t = BASE - t
            if w > MAX_INT // base_minus_t:
                raise PunycodeOverflowError()
            w *= base_minus_t
            k += BASE

        out = len(output) + 1
        bias = adapt(i - oldi, out, oldi == 0)

        # `i` wraps around from `out` to 0, bumping `n` each time.
        if i // out > MAX_INT - n:
            raise PunycodeOverflowError()
        n += i // out
        i %= out

        output.insert(i, n)
        i += 1

    return ucs2_encode(output, surrogates=False)


def encode(string: str) -> str:
    """Convert a string of Unicode symbols to a Punycode string of ASCII-only symbols.

    Args:
        string (str): The label to encode, without ACE prefix.

    Returns:
        str: The Bootstring-encoded label.

    Raises:
        PunycodeOverflowError: If the input needs wider integers to process.
    """
    output = []
    code_points = ucs2_decode(string)
    input_length = len(code_points)

    n = INITIAL_N
    delta = 0
    bias = INITIAL_BIAS

    for code_point in code_points:
        if code_point < 0x80:
            output.append(chr(code_point))

    basic_length = len(output)
    handled = basic_length

    if basic_length > 0:
        output.append(DELIMITER)

    while handled < input_length:
        # All code points below `n` are handled; find the next larger one.
        m = MAX_INT
        for code_point in code_points:
            if n <= code_point < m:
                m = code_point

        if m - n > (MAX_INT - delta) // (handled + 1):
            raise PunycodeOverflowError()
        delta += (m - n) * (handled + 1)
        n = m

        for code_point in code_points:
            if code_point < n:
                delta += 1
                if delta > MAX_INT:
                    raise PunycodeOverflowError()
            if code_point == n:
                q = delta
                k = BASE
                while True:
                    t = threshold(k, bias)
                    if q < t:
                        break
                    q_minus_t = q - t
                    base_minus_t = BASE - t
                    output.append(chr(digit_to_basic(t + q_minus_t % base_minus_t)))
                    q = q_minus_t // base_minus_t
                    k += BASE

                output.append(chr(digit_to_basic(q)))
                bias = adapt(delta, handled + 1, handled == basic_length)
                delta = 0
                handled += 1

        delta += 1
        n += 1

    return "".join(output)
