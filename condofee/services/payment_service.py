from __future__ import annotations

import logging
from datetime import date, datetime

from condofee.constants import LOCAL_TZ, UNPAID_STATUS
from condofee.errors import InvalidInputError, NotFoundError
from condofee.models.fee import Fee, FeeType
from condofee.models.payment import Payment, PaymentView
from condofee.models.resident import Apartment, Resident, VehicleCategory
from condofee.repositories.base import FeeRepository, PaymentRepository, ResidentRepository
from condofee.settings import settings

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(LOCAL_TZ).date()


def _check_quantity(quantity: int | None) -> None:
    if quantity is not None and quantity < 0:
        raise InvalidInputError(f"Quantity must not be negative (got {quantity})")


class PaymentService:
    """Derives quantity and amount for a (fee, resident) pair and keeps payment status in step.

    Two derivation paths exist. The manual path (``create_payment`` / ``update_payment``)
    trusts the caller's quantity except for area fees and always charges
    ``fee.amount * quantity``. The auto path (``auto_generate``, run when a compulsory fee
    is introduced) also counts vehicles for vehicle fees and bills them from the flat
    per-category tariff table instead of the fee's unit amount.
    """

    def __init__(
        self,
        payment_repo: PaymentRepository,
        fee_repo: FeeRepository,
        resident_repo: ResidentRepository,
        tariffs: dict[VehicleCategory, int] | None = None,
    ) -> None:
        self.payment_repo = payment_repo
        self.fee_repo = fee_repo
        self.resident_repo = resident_repo
        self.tariffs = tariffs if tariffs is not None else settings.vehicle_tariffs()

    # ---- lookups ----

    def _get_fee(self, fee_id: int) -> Fee:
        fee = self.fee_repo.get_by_id(fee_id)
        if fee is None:
            logger.warning("Fee %s not found", fee_id)
            raise NotFoundError("Fee", fee_id)
        return fee

    def _get_resident(self, resident_id: int) -> Resident:
        resident = self.resident_repo.get_by_id(resident_id)
        if resident is None:
            logger.warning("Resident %s not found", resident_id)
            raise NotFoundError("Resident", resident_id)
        return resident

    def _get_payment(self, payment_id: int) -> Payment:
        payment = self.payment_repo.get_by_id(payment_id)
        if payment is None:
            logger.warning("Payment %s not found", payment_id)
            raise NotFoundError("Payment", payment_id)
        return payment

    @staticmethod
    def _apartment_of(resident: Resident) -> Apartment:
        if resident.apartment is None:
            raise NotFoundError("Apartment", resident.apartment_id)
        return resident.apartment

    # ---- derivation ----

    def tariff_for(self, category: VehicleCategory) -> int:
        if category in self.tariffs:
            return self.tariffs[category]
        return self.tariffs.get(VehicleCategory.OTHER, settings.other_vehicle_tariff)

    def derive_quantity(self, fee: Fee, resident: Resident, quantity: int | None = None, *, auto: bool = False) -> int:
        if fee.fee_type == FeeType.AREA:
            return self._apartment_of(resident).area
        if fee.fee_type == FeeType.VEHICLE and auto:
            return len(self._apartment_of(resident).vehicles)
        if fee.fee_type in (FeeType.VEHICLE, FeeType.PER_UNIT):
            return 1 if quantity is None else quantity
        raise InvalidInputError(f"Unsupported fee type: {fee.fee_type}")  # pragma: no cover

    def derive_amount(self, fee: Fee, resident: Resident, quantity: int, *, auto: bool = False) -> int:
        if fee.fee_type == FeeType.VEHICLE and auto:
            return sum(self.tariff_for(vehicle.category) for vehicle in self._apartment_of(resident).vehicles)
        return fee.amount * quantity

    def compute(self, fee_id: int, resident_id: int, quantity: int | None = None) -> tuple[int, int]:
        """Return ``(quantity, amount_paid)`` for a manual payment without persisting anything."""
        _check_quantity(quantity)
        fee = self._get_fee(fee_id)
        resident = self._get_resident(resident_id)
        derived = self.derive_quantity(fee, resident, quantity)
        return derived, self.derive_amount(fee, resident, derived)

    @staticmethod
    def apply_status(payment: Payment, method: str | None, *, creating: bool) -> None:
        """Move ``payment`` to the status implied by ``method``.

        A blank method means unpaid and clears ``date_paid``. Otherwise the method
        becomes the status and ``date_paid`` is stamped with today on creation or on
        the first transition to paid; a paid record keeps its original date.
        """
        if method is None or not method.strip():
            payment.status = UNPAID_STATUS
            payment.date_paid = None
            return
        payment.status = method
        if creating or payment.date_paid is None:
            payment.date_paid = _today()

    # ---- mutations ----

    def create_payment(
        self,
        fee_id: int | None,
        resident_id: int | None,
        quantity: int | None = None,
        payment_method: str | None = None,
    ) -> PaymentView:
        if fee_id is None or resident_id is None:
            raise InvalidInputError("fee_id and resident_id are required")
        derived, amount = self.compute(fee_id, resident_id, quantity)

        payment = Payment(fee_id=fee_id, resident_id=resident_id, quantity=derived, amount_paid=amount)
        self.apply_status(payment, payment_method, creating=True)
        payment = self.payment_repo.create(payment)
        logger.info(
            "Payment created: id=%s, fee=%s, resident=%s, quantity=%d, amount=%d, status=%s",
            payment.id,
            fee_id,
            resident_id,
            payment.quantity,
            payment.amount_paid,
            payment.status,
        )
        return PaymentView.from_payment(payment)

    def update_payment(
        self,
        payment_id: int | None,
        fee_id: int | None,
        resident_id: int | None,
        quantity: int | None = None,
        payment_method: str | None = None,
    ) -> PaymentView:
        if payment_id is None or fee_id is None or resident_id is None:
            raise InvalidInputError("payment_id, fee_id and resident_id are required")
        derived, amount = self.compute(fee_id, resident_id, quantity)
        payment = self._get_payment(payment_id)

        payment.fee_id = fee_id
        payment.resident_id = resident_id
        payment.quantity = derived
        payment.amount_paid = amount
        self.apply_status(payment, payment_method, creating=False)
        payment = self.payment_repo.update(payment)
        logger.info(
            "Payment updated: id=%s, quantity=%d, amount=%d, status=%s, date_paid=%s",
            payment.id,
            payment.quantity,
            payment.amount_paid,
            payment.status,
            payment.date_paid,
        )
        return PaymentView.from_payment(payment)

    def auto_generate(self, fee: Fee, resident: Resident) -> PaymentView | None:
        """Create the default unpaid payment of ``fee`` for ``resident``.

        Returns None, persisting nothing, when the derived quantity is zero
        (e.g. a vehicle fee for an apartment without vehicles).
        """
        if fee.id is None or resident.id is None:
            raise InvalidInputError("Cannot bill a fee or resident without an id")
        quantity = self.derive_quantity(fee, resident, auto=True)
        if quantity == 0:
            logger.debug("Skipping fee=%s for resident=%s: nothing to bill", fee.id, resident.id)
            return None
        amount = self.derive_amount(fee, resident, quantity, auto=True)

        payment = Payment(fee_id=fee.id, resident_id=resident.id, quantity=quantity, amount_paid=amount)
        self.apply_status(payment, None, creating=True)
        payment = self.payment_repo.create(payment)
        logger.debug(
            "Auto-generated payment id=%s fee=%s resident=%s amount=%d",
            payment.id,
            fee.id,
            resident.id,
            amount,
        )
        return PaymentView.from_payment(payment)

    def delete_payment(self, payment_id: int) -> None:
        self._get_payment(payment_id)
        self.payment_repo.delete(payment_id)
        logger.info("Payment %s deleted", payment_id)

    # ---- queries ----

    def get_payment(self, payment_id: int) -> PaymentView:
        return PaymentView.from_payment(self._get_payment(payment_id))

    def list_payments(self) -> list[PaymentView]:
        result = self.payment_repo.list_all()
        logger.debug("Listed %d payments", len(result))
        return [PaymentView.from_payment(p) for p in result]

    def list_for_resident(self, resident_id: int) -> list[PaymentView]:
        self._get_resident(resident_id)
        result = self.payment_repo.list_by_resident(resident_id)
        logger.debug("Listed %d payments for resident=%s", len(result), resident_id)
        return [PaymentView.from_payment(p) for p in result]

    def search_payments(self, query: str) -> list[PaymentView]:
        if not query or not query.strip():
            return self.list_payments()
        result = self.payment_repo.search(query)
        logger.debug("search_payments query=%r matched=%d", query, len(result))
        return [PaymentView.from_payment(p) for p in result]
