"""
idn-punycode - Punycode (RFC 3492) conversion for domain names and email addresses.
"""

from .config import load_config
from .dns_names import from_dns_name, to_dns_name
from .domain import ACE_PREFIX, LABEL_SEPARATORS, map_domain, to_ascii, to_unicode
from .exceptions import (
    InvalidCodePointError,
    InvalidInputError,
    NotBasicError,
    PunycodeError,
    PunycodeOverflowError,
    handle_punycode_error,
)
from .punycode import decode, encode
from .typedefs import ToolResult
from .ucs2 import Ucs2, ucs2_decode, ucs2_encode

__version__ = "1.0.0"

__all__ = [
    "decode",
    "encode",
    "to_ascii",
    "to_unicode",
    "map_domain",
    "ucs2_decode",
    "ucs2_encode",
    "Ucs2",
    "to_dns_name",
    "from_dns_name",
    "load_config",
    "ToolResult",
    "ACE_PREFIX",
    "LABEL_SEPARATORS",
    "PunycodeError",
    "NotBasicError",
    "InvalidInputError",
    "PunycodeOverflowError",
    "InvalidCodePointError",
    "handle_punycode_error",
]
