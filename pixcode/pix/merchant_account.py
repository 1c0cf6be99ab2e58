from __future__ import annotations

from pixcode.constants import (
    PIX_GUI,
    TAG_MAI_DESCRIPTION,
    TAG_MAI_GUI,
    TAG_MAI_KEY,
    TAG_MERCHANT_ACCOUNT,
)
from pixcode.pix.fields import encode_field


def build_merchant_account_info(key: str, note: str | None = None) -> str:
    """Build the Merchant Account Information field (tag 26).

    Nests the PIX GUI, the key and, when given, the note (description). The
    combined value is subject to the same 99-byte limit as any other field,
    so a long key plus a long note raises ``FieldTooLongError`` for tag 26.
    """
    value = encode_field(TAG_MAI_GUI, PIX_GUI) + encode_field(TAG_MAI_KEY, key)
    if note is not None:
        value += encode_field(TAG_MAI_DESCRIPTION, note)
    return encode_field(TAG_MERCHANT_ACCOUNT, value)
