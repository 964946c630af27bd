"""Interop between Unicode domain names and dnspython ``Name`` objects."""

import dns.name

from .domain import to_ascii, to_unicode


def to_dns_name(domain: str) -> dns.name.Name:
    """Convert a Unicode domain name into an absolute dnspython name.

    Non-ASCII labels are Punycoded first, so dnspython only ever sees ASCII
    and its own IDNA processing is not involved.

    Args:
        domain (str): Domain name that may contain Unicode characters.

    Returns:
        dns.name.Name: The ASCII-compatible name.

    Raises:
        dns.name.LabelTooLong: If an encoded label exceeds 63 octets.
        dns.name.NameTooLong: If the encoded name exceeds 255 octets.
        dns.name.EmptyLabel: If the name contains an empty label.
    """
    return dns.name.from_text(to_ascii(domain))


def from_dns_name(name: dns.name.Name) -> str:
    """Render a dnspython name as Unicode text, without the final dot."""
    return to_unicode(name.to_text(omit_final_dot=True))
