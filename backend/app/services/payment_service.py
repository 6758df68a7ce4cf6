"""
Restaurant Ordering API: Payment Service
===========================================

What:  /api/payments on the generic contract.

Rules:
    payment_method ∈ {cash, CQ_code, prompay}
    payment_status ∈ {paid, unpaid}, 'unpaid' when omitted on create
    paid_at is derived: now() when the status is/becomes 'paid', cleared
    when an update sets any other status
    amount must be positive when an update sends it
"""

from typing import Any, Dict

from app.exceptions import ValidationError
from app.models.payment import PAYMENT_METHODS, PAYMENT_STATUSES, Payment
from app.models.timestamps import utcnow
from app.schemas.payment import PaymentOut
from app.services.resource_service import ResourceService


def _check_method(method: Any) -> None:
    if method not in PAYMENT_METHODS:
        raise ValidationError("Invalid payment_method", field="payment_method",
                              context={"value": method})


def _check_status(status: Any) -> None:
    if status not in PAYMENT_STATUSES:
        raise ValidationError("Invalid payment_status", field="payment_status",
                              context={"value": status})


class PaymentService(ResourceService):
    model = Payment
    schema = PaymentOut
    label = "Payment"
    columns = (
        Payment.id,
        Payment.order_id,
        Payment.payment_method,
        Payment.payment_status,
        Payment.amount,
        Payment.paid_at,
        Payment.created_at,
        Payment.updated_at,
    )
    required_fields = ("order_id", "payment_method", "amount")
    mutable_columns = ("payment_method", "payment_status", "amount")

    def prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        status = values.get("payment_status") or "unpaid"
        _check_method(values["payment_method"])
        _check_status(status)
        return {
            "order_id": values["order_id"],
            "payment_method": values["payment_method"],
            "payment_status": status,
            "amount": values["amount"],
            "paid_at": utcnow() if status == "paid" else None,
        }

    def validate_changes(self, changes: Dict[str, Any]) -> None:
        if "payment_method" in changes:
            _check_method(changes["payment_method"])
        if "payment_status" in changes:
            _check_status(changes["payment_status"])
        if "amount" in changes:
            amount = changes["amount"]
            if amount is None or amount <= 0:
                raise ValidationError("amount must be a positive number", field="amount")

    def derived_columns(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        if "payment_status" not in changes:
            return {}
        return {"paid_at": utcnow() if changes["payment_status"] == "paid" else None}


payment_service = PaymentService()
