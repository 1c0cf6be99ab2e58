"""PIX BR Code payload assembly following the BCB EMV QR Code specification.

Generates the "copia e cola" payload string of a static PIX QR code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from pixcode.constants import (
    COUNTRY_CODE,
    CRC_PREFIX,
    CURRENCY_BRL,
    MAX_AMOUNT,
    MAX_MERCHANT_CITY_LENGTH,
    MAX_MERCHANT_NAME_LENGTH,
    MAX_TXID_LENGTH,
    MERCHANT_CATEGORY_CODE,
    PAYLOAD_FORMAT_INDICATOR,
    TAG_ADDITIONAL_DATA,
    TAG_ADF_TXID,
    TAG_AMOUNT,
    TAG_COUNTRY,
    TAG_CURRENCY,
    TAG_MERCHANT_ACCOUNT,
    TAG_MERCHANT_CATEGORY,
    TAG_MERCHANT_CITY,
    TAG_MERCHANT_NAME,
    TAG_PAYLOAD_FORMAT,
    TXID_PLACEHOLDER,
)
from pixcode.exceptions import ValidationError
from pixcode.models.payment_code import PaymentCodeRequest
from pixcode.pix.checksum import checksum
from pixcode.pix.fields import encode_field
from pixcode.pix.merchant_account import build_merchant_account_info
from pixcode.pix.normalize import normalize_text, to_printable_ascii

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Format an amount for tag 54: two fraction digits, '.' separator."""
    return f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"


def _normalized_note(request: PaymentCodeRequest) -> str | None:
    if request.note is None:
        return None
    # A note made only of characters we cannot encode is dropped.
    return to_printable_ascii(request.note) or None


def validate_request(request: PaymentCodeRequest) -> None:
    """Raise ``ValidationError`` unless ``request`` can be encoded."""
    if not request.key.strip():
        raise ValidationError("PIX key is required")
    if not (request.key.isascii() and request.key.isprintable()):
        raise ValidationError("PIX key must contain only printable ASCII characters")

    if not request.payee_name.strip():
        raise ValidationError("Payee name is required")
    if not normalize_text(request.payee_name, MAX_MERCHANT_NAME_LENGTH):
        raise ValidationError("Payee name has no characters that can be encoded")

    if not request.payee_city.strip():
        raise ValidationError("Payee city is required")
    if not normalize_text(request.payee_city, MAX_MERCHANT_CITY_LENGTH):
        raise ValidationError("Payee city has no characters that can be encoded")

    if request.amount is not None:
        if not request.amount.is_finite() or request.amount <= 0:
            raise ValidationError(f"Amount must be positive, got {request.amount}")
        # Checked before quantize, which fails on values with too many digits.
        if request.amount > MAX_AMOUNT:
            raise ValidationError(f"Amount must be at most {MAX_AMOUNT}, got {request.amount}")
        if request.amount.quantize(CENTS, rounding=ROUND_HALF_UP) <= 0:
            raise ValidationError(f"Amount rounds to zero: {request.amount}")

    if request.reference is not None:
        ref = request.reference
        if len(ref) > MAX_TXID_LENGTH or not (ref.isascii() and ref.isalnum()):
            raise ValidationError(
                f"Reference must be 1-{MAX_TXID_LENGTH} alphanumeric characters, got {ref!r}"
            )


# Each builder returns the encoded field, or None to omit it.
FieldBuilder = Callable[[PaymentCodeRequest], str | None]


def _amount_field(request: PaymentCodeRequest) -> str | None:
    if request.amount is None:
        return None
    return encode_field(TAG_AMOUNT, format_amount(request.amount))


def _additional_data_field(request: PaymentCodeRequest) -> str:
    txid = request.reference or TXID_PLACEHOLDER
    return encode_field(TAG_ADDITIONAL_DATA, encode_field(TAG_ADF_TXID, txid))


FIELDS: tuple[tuple[str, FieldBuilder], ...] = (
    (TAG_PAYLOAD_FORMAT, lambda r: encode_field(TAG_PAYLOAD_FORMAT, PAYLOAD_FORMAT_INDICATOR)),
    (TAG_MERCHANT_ACCOUNT, lambda r: build_merchant_account_info(r.key, _normalized_note(r))),
    (TAG_MERCHANT_CATEGORY, lambda r: encode_field(TAG_MERCHANT_CATEGORY, MERCHANT_CATEGORY_CODE)),
    (TAG_CURRENCY, lambda r: encode_field(TAG_CURRENCY, CURRENCY_BRL)),
    (TAG_AMOUNT, _amount_field),
    (TAG_COUNTRY, lambda r: encode_field(TAG_COUNTRY, COUNTRY_CODE)),
    (
        TAG_MERCHANT_NAME,
        lambda r: encode_field(TAG_MERCHANT_NAME, normalize_text(r.payee_name, MAX_MERCHANT_NAME_LENGTH)),
    ),
    (
        TAG_MERCHANT_CITY,
        lambda r: encode_field(TAG_MERCHANT_CITY, normalize_text(r.payee_city, MAX_MERCHANT_CITY_LENGTH)),
    ),
    (TAG_ADDITIONAL_DATA, _additional_data_field),
)


def generate_payload(request: PaymentCodeRequest) -> str:
    """Generate a PIX BR Code payload string.

    Fields are emitted in the order of ``FIELDS`` and the payload ends with
    the CRC field (tag 63), whose checksum covers everything before it,
    including its own "6304" prefix.

    Raises:
        ValidationError: a required input is missing or malformed.
        FieldTooLongError: an encoded field would exceed 99 bytes.
    """
    validate_request(request)

    parts = [field for _, build in FIELDS if (field := build(request)) is not None]
    payload = "".join(parts) + CRC_PREFIX
    payload += checksum(payload)

    logger.debug("PIX payload generated: fields=%d length=%d", len(parts) + 1, len(payload))
    return payload
