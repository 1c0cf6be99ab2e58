from pixcode.pix.checksum import checksum, crc16_ccitt
from pixcode.pix.fields import encode_field
from pixcode.pix.merchant_account import build_merchant_account_info
from pixcode.pix.normalize import normalize_text, strip_accents, to_printable_ascii
from pixcode.pix.payload import format_amount, generate_payload, validate_request

__all__ = [
    "build_merchant_account_info",
    "checksum",
    "crc16_ccitt",
    "encode_field",
    "format_amount",
    "generate_payload",
    "normalize_text",
    "strip_accents",
    "to_printable_ascii",
    "validate_request",
]
