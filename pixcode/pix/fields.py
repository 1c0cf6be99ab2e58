from __future__ import annotations

from pixcode.constants import MAX_FIELD_LENGTH
from pixcode.exceptions import FieldTooLongError


def encode_field(tag: str, value: str) -> str:
    """Build a TLV (Tag-Length-Value) field.

    The length is the UTF-8 byte length of ``value`` written as two decimal
    digits. Values longer than 99 bytes raise ``FieldTooLongError``; callers
    that want truncation must apply it before encoding.
    """
    if len(tag) != 2 or not (tag.isascii() and tag.isdigit()):
        raise ValueError(f"Invalid field tag: {tag!r}")

    length = len(value.encode("utf-8"))
    if length > MAX_FIELD_LENGTH:
        raise FieldTooLongError(tag, length)

    return f"{tag}{length:02d}{value}"
