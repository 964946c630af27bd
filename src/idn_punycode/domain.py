"""Domain name and email address conversion (RFC 3490 label handling).

Only the labels that need it are converted, so calling ``to_ascii`` on a
domain that is already ASCII, or ``to_unicode`` on one without ACE labels,
returns it unchanged.
"""

import re
from typing import Callable

from .punycode import decode, encode

ACE_PREFIX = "xn--"

# U+002E full stop, U+3002 ideographic full stop, U+FF0E fullwidth full stop,
# U+FF61 halfwidth ideographic full stop
LABEL_SEPARATORS = (".", "。", "．", "｡")

_SEPARATOR_SPLIT = re.compile("[" + "".join(LABEL_SEPARATORS) + "]")


def split_labels(domain: str) -> list[str]:
    """Split a domain name on any of the RFC 3490 label separators."""
    return _SEPARATOR_SPLIT.split(domain)


def map_domain(string: str, fn: Callable[[str], str]) -> str:
    """Apply ``fn`` to every label of a domain name or email address.

    In email addresses only the domain part is processed; the local part
    (everything up to the first ``@``) is kept intact.

    Args:
        string (str): Domain name or email address.
        fn (Callable[[str], str]): Transformation applied per label.

    Returns:
        str: The transformed labels joined with ``.``.
    """
    prefix = ""
    parts = string.split("@", 1)
    if len(parts) > 1:
        prefix = parts[0] + "@"
        string = parts[1]
    return prefix + ".".join(fn(label) for label in split_labels(string))


def is_ace_label(label: str) -> bool:
    return label[: len(ACE_PREFIX)].lower() == ACE_PREFIX


def has_non_ascii(string: str) -> bool:
    return any(ord(char) > 0x7E for char in string)


def _label_to_unicode(label: str) -> str:
    if is_ace_label(label):
        return decode(label[len(ACE_PREFIX) :].lower())
    return label


def _label_to_ascii(label: str) -> str:
    if has_non_ascii(label):
        return ACE_PREFIX + encode(label)
    return label


def to_unicode(string: str) -> str:
    """Convert a Punycoded domain name or email address to Unicode.

    Args:
        string (str): e.g. ``"xn--maana-pta.com"``.

    Returns:
        str: e.g. ``"mañana.com"``.
    """
    return map_domain(string, _label_to_unicode)


def to_ascii(string: str) -> str:
    """Convert a Unicode domain name or email address to Punycode.

    Args:
        string (str): e.g. ``"mañana.com"``.

    Returns:
        str: e.g. ``"xn--maana-pta.com"``.
    """
    return map_domain(string, _label_to_ascii)
