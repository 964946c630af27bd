"""Exception types and error processing for Punycode operations.

This module defines the errors raised by the Bootstring codec, the code-point
codec and the domain mapper, plus a helper that turns any exception raised
during a conversion into a short, human-readable message.

The module serves two main purposes:
1. Define one exception type per failure kind of the codec
2. Map codec and dnspython exceptions to user-friendly messages

Note: ``PunycodeError`` derives from ``ValueError`` so callers that only care
about "bad input" can catch the builtin type.
"""

import dns.exception
import dns.name


class PunycodeError(ValueError):
    """Base exception for Punycode conversion errors."""


class NotBasicError(PunycodeError):
    """A character before the last delimiter is not a basic code point."""

    def __init__(self, message: str = "Illegal input >= 0x80 (not a basic code point)") -> None:
        super().__init__(message)


class InvalidInputError(PunycodeError):
    """Input ended before a complete variable-length integer was read."""

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message)


class PunycodeOverflowError(PunycodeError, OverflowError):
    """An accumulator would exceed the signed 32-bit maximum."""

    def __init__(self, message: str = "Overflow: input needs wider integers to process") -> None:
        super().__init__(message)


class InvalidCodePointError(PunycodeError):
    """A value outside [0, 0x10FFFF] was given to the code-point encoder."""

    def __init__(self, code_point: int) -> None:
        self.code_point = code_point
        super().__init__(f"Invalid code point: {code_point}")


def handle_punycode_error(error: Exception) -> str:
    """Convert Punycode and DNS name exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, NotBasicError):
        err_str = "Encoded label contains non-ASCII characters before the delimiter"
    elif isinstance(error, InvalidInputError):
        err_str = "Encoded label ends in the middle of a digit sequence"
    elif isinstance(error, PunycodeOverflowError):
        err_str = "Encoded label is malformed or too long to process"
    elif isinstance(error, InvalidCodePointError):
        err_str = f"Decoded value {error.code_point:#x} is not a Unicode code point"
    elif isinstance(error, dns.name.LabelTooLong):
        err_str = "Domain name label too long"
    elif isinstance(error, dns.name.NameTooLong):
        err_str = "Domain name too long"
    elif isinstance(error, dns.name.EmptyLabel):
        err_str = "Domain name contains an empty label"
    elif isinstance(error, dns.exception.DNSException):
        err_str = f"DNS error: {str(error)}"
    return err_str
