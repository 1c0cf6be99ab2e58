"""Root conftest: sample payment code requests and a TLV walker for assertions."""

from __future__ import annotations

from decimal import Decimal

import pytest

from pixcode.models.payment_code import PaymentCodeRequest


def _sample_request(**overrides) -> PaymentCodeRequest:
    defaults = dict(
        key="11999999999",
        payee_name="JOAO SILVA",
        payee_city="SAO PAULO",
        amount=Decimal("10.00"),
    )
    defaults.update(overrides)
    return PaymentCodeRequest(**defaults)


def parse_fields(payload: str) -> list[tuple[str, str]]:
    """Split a TLV string into (tag, value) pairs, checking declared lengths."""
    fields = []
    i = 0
    while i < len(payload):
        tag = payload[i : i + 2]
        length = int(payload[i + 2 : i + 4])
        value = payload[i + 4 : i + 4 + length]
        assert len(value.encode("utf-8")) == length, f"field {tag} is truncated"
        fields.append((tag, value))
        i += 4 + length
    return fields


@pytest.fixture()
def sample_request():
    return _sample_request
