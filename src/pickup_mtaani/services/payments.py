"""M-Pesa payments for package delivery charges.

Both calls hand the request to the remote payment processor and return its
acknowledgement. Completion arrives later (SMS, webhook); nothing is polled
or reconciled here.
"""

from __future__ import annotations

from ..schemas.common import BusinessId
from ..schemas.payments import PaymentResponse, PaymentSTKRequest, VerifyPaymentRequest
from .base import BaseService


class PaymentsService(BaseService):
    def pay_with_stk(self, business_id: BusinessId, data: PaymentSTKRequest) -> PaymentResponse:
        """Push an M-Pesa STK prompt to ``data.phone`` for the listed packages."""
        response = self._http.post("/payments/stk-push", data, params={"b_id": business_id})
        return PaymentResponse.model_validate(response)

    def verify_payment(self, business_id: BusinessId, data: VerifyPaymentRequest) -> PaymentResponse:
        """Confirm a completed payment by its M-Pesa transaction code."""
        response = self._http.post("/payments/verify", data, params={"b_id": business_id})
        return PaymentResponse.model_validate(response)
