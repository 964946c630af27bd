from typing import Any, Callable

import dns.exception
from fastmcp.utilities.logging import get_logger

from ..config import DEFAULT_CONFIG, merge_section
from ..dns_names import to_dns_name
from ..domain import to_ascii, to_unicode
from ..exceptions import PunycodeError, handle_punycode_error
from ..punycode import decode, encode
from ..typedefs import ToolResult

logger = get_logger(__name__)


def _converter_settings(config: dict[str, Any] | None) -> dict[str, Any]:
    section = config.get("converter") if isinstance(config, dict) else None
    return merge_section("converter", DEFAULT_CONFIG["converter"], section)


def _prepare_input(value: str, settings: dict[str, Any]) -> tuple[str, str | None]:
    """Apply the configured input policy.

    Returns:
        tuple[str, str | None]: The (possibly stripped) value and an error
        message, or None if the value is acceptable.
    """
    if settings["strip_whitespace"]:
        value = value.strip()
    max_length = settings["max_input_length"]
    if max_length and len(value) > max_length:
        return value, f"Input length {len(value)} exceeds maximum of {max_length} characters"
    return value, None


def _run_conversion(
    value: str,
    convert: Callable[[str], str],
    input_key: str,
    output_key: str,
    config: dict[str, Any] | None,
) -> ToolResult:
    value, error = _prepare_input(value, _converter_settings(config))
    if error:
        logger.warning("Rejected input for %s conversion: %s", output_key, error)
        return ToolResult(success=False, error=error)

    try:
        converted = convert(value)
    except PunycodeError as e:
        logger.warning("Conversion of %r to %s failed: %s", value, output_key, e)
        return ToolResult(success=False, error=handle_punycode_error(e))

    logger.debug("Converted %r to %s %r", value, output_key, converted)
    return ToolResult(
        success=True,
        output={input_key: value, output_key: converted},
        details={"changed": converted != value},
    )


async def punycode_converter_impl(domain: str, config: dict[str, Any] | None = None) -> ToolResult:
    """Perform Unicode IDN domain name conversion into punycode ASCII format.

    Args:
        domain (str): The domain name or email address to convert to punycode.
        config (dict[str, Any] | None): Loaded configuration, defaults if None.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    return _run_conversion(domain, to_ascii, "domain", "punycode", config)


async def unicode_converter_impl(domain: str, config: dict[str, Any] | None = None) -> ToolResult:
    """Perform punycode domain name conversion into Unicode format.

    Args:
        domain (str): The domain name or email address with ``xn--`` labels.
        config (dict[str, Any] | None): Loaded configuration, defaults if None.

    Returns:
        ToolResult: Unicode domain name or error details.
    """
    return _run_conversion(domain, to_unicode, "domain", "unicode", config)


async def encode_label_impl(label: str, config: dict[str, Any] | None = None) -> ToolResult:
    """Bootstring-encode a single label, without adding the ACE prefix."""
    return _run_conversion(label, encode, "label", "encoded", config)


async def decode_label_impl(label: str, config: dict[str, Any] | None = None) -> ToolResult:
    """Bootstring-decode a single label given without the ACE prefix."""
    return _run_conversion(label, decode, "label", "decoded", config)


async def dns_name_impl(domain: str, config: dict[str, Any] | None = None) -> ToolResult:
    """Convert a Unicode domain name into an absolute DNS name.

    Args:
        domain (str): Domain name that may contain Unicode characters.
        config (dict[str, Any] | None): Loaded configuration, defaults if None.

    Returns:
        ToolResult: The DNS name in presentation format, its labels and
        its wire length, or error details.
    """
    domain, error = _prepare_input(domain, _converter_settings(config))
    if error:
        logger.warning("Rejected input for DNS name conversion: %s", error)
        return ToolResult(success=False, error=error)

    try:
        name = to_dns_name(domain)
    except (PunycodeError, dns.exception.DNSException) as e:
        logger.warning("Conversion of %r to a DNS name failed: %s", domain, e)
        return ToolResult(success=False, error=handle_punycode_error(e))

    labels = [label.decode("ascii") for label in name.labels if label]
    logger.debug("Converted %r to DNS name %s", domain, name.to_text())
    return ToolResult(
        success=True,
        output={"domain": domain, "name": name.to_text()},
        details={"labels": labels, "wire_length": len(name.to_wire())},
    )
