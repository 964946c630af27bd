"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    decode_label_impl,
    dns_name_impl,
    encode_label_impl,
    punycode_converter_impl,
    unicode_converter_impl,
)

__all__ = [
    "punycode_converter_impl",
    "unicode_converter_impl",
    "encode_label_impl",
    "decode_label_impl",
    "dns_name_impl",
]
