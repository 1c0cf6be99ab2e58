from __future__ import annotations

import logging
from decimal import Decimal

import pydantic

from pixcode.exceptions import ValidationError
from pixcode.models.payment_code import PaymentCode, PaymentCodeRequest
from pixcode.pix.payload import generate_payload
from pixcode.render.base import QRRenderer

logger = logging.getLogger(__name__)


class PaymentCodeService:
    def __init__(self, renderer: QRRenderer) -> None:
        self.renderer = renderer

    def build_request(
        self,
        key: str,
        payee_name: str,
        payee_city: str,
        amount: Decimal | float | str | None = None,
        note: str | None = None,
        reference: str | None = None,
    ) -> PaymentCodeRequest:
        try:
            return PaymentCodeRequest(
                key=key,
                payee_name=payee_name,
                payee_city=payee_city,
                amount=amount,
                note=note,
                reference=reference,
            )
        except pydantic.ValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            logger.warning("Invalid payment code request: %s", fields)
            raise ValidationError(f"Invalid payment code request: {fields}") from exc

    def generate(self, request: PaymentCodeRequest) -> PaymentCode:
        payload = generate_payload(request)
        image_uri = self.renderer.to_data_uri(payload)
        logger.info(
            "Payment code generated: key=%s amount=%s note=%s",
            request.key,
            request.amount if request.amount is not None else "open",
            request.note is not None,
        )
        logger.debug("Payment code payload length=%d image=%s", len(payload), self.renderer.content_type)
        return PaymentCode(
            request=request,
            payload=payload,
            image_uri=image_uri,
            content_type=self.renderer.content_type,
        )

    def render_image(self, payload: str) -> bytes:
        return self.renderer.render(payload)
