from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from condofee.constants import UNPAID_STATUS


class Payment(BaseModel):
    id: int | None = None
    uuid: str = ""
    fee_id: int
    resident_id: int
    quantity: int = Field(default=0, ge=0)
    amount_paid: int = Field(default=0, ge=0)
    status: str = UNPAID_STATUS
    date_paid: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_paid(self) -> bool:
        return self.date_paid is not None


class PaymentView(BaseModel):
    """Outward projection of a payment handed back to callers."""

    id: int | None
    uuid: str
    fee_id: int
    resident_id: int
    quantity: int
    amount_paid: int
    status: str
    date_paid: date | None = None

    @classmethod
    def from_payment(cls, payment: Payment) -> PaymentView:
        return cls(
            id=payment.id,
            uuid=payment.uuid,
            fee_id=payment.fee_id,
            resident_id=payment.resident_id,
            quantity=payment.quantity,
            amount_paid=payment.amount_paid,
            status=payment.status,
            date_paid=payment.date_paid,
        )


class FeePayment(BaseModel):
    payment: PaymentView
    resident_name: str = ""
    apartment_number: str = ""
