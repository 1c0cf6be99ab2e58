from pixcode.constants import MAX_FIELD_LENGTH


class PaymentCodeError(Exception):
    """Base class for errors raised while building a payment code."""


class ValidationError(PaymentCodeError):
    """A required input is missing, empty or malformed."""


class FieldTooLongError(PaymentCodeError):
    """A field value does not fit the two-digit length of the TLV grammar."""

    def __init__(self, tag: str, length: int, limit: int = MAX_FIELD_LENGTH) -> None:
        self.tag = tag
        self.length = length
        self.limit = limit
        super().__init__(f"Field {tag} is {length} bytes long (max {limit})")
