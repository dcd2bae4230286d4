from __future__ import annotations

import logging

from pydantic import ValidationError

from condofee.errors import InvalidInputError, NotFoundError
from condofee.models.fee import Fee, FeeType
from condofee.models.payment import FeePayment, PaymentView
from condofee.repositories.base import FeeRepository, PaymentRepository, ResidentRepository
from condofee.services.payment_service import PaymentService

logger = logging.getLogger(__name__)


def _build_fee(**fields) -> Fee:
    try:
        return Fee(**fields)
    except ValidationError as exc:
        logger.warning("Rejected fee data: %s", exc.errors(include_url=False))
        raise InvalidInputError(f"Invalid fee: {exc.error_count()} validation error(s)") from exc


class FeeService:
    def __init__(
        self,
        repo: FeeRepository,
        resident_repo: ResidentRepository,
        payment_repo: PaymentRepository,
        payment_service: PaymentService,
    ) -> None:
        self.repo = repo
        self.resident_repo = resident_repo
        self.payment_repo = payment_repo
        self.payment_service = payment_service

    def create_fee(
        self,
        fee_type: FeeType | str,
        amount: int,
        year: int,
        month: int,
        description: str = "",
        compulsory: bool = False,
    ) -> tuple[Fee, int]:
        """Persist a new fee. A compulsory fee bills every resident straight away.

        Returns the fee and the number of payments generated for it.
        """
        fee = _build_fee(
            fee_type=FeeType.from_tag(fee_type) if isinstance(fee_type, str) else fee_type,
            amount=amount,
            year=year,
            month=month,
            description=description,
            compulsory=compulsory,
        )
        fee = self.repo.create(fee)
        logger.info("Fee created: id=%s, type=%s, period=%s, amount=%d", fee.id, fee.fee_type.value, fee.period, fee.amount)

        generated = 0
        if fee.compulsory:
            generated = self.generate_payments(fee)
        return fee, generated

    def generate_payments(self, fee: Fee) -> int:
        residents = self.resident_repo.list_all()
        generated = 0
        for resident in residents:
            if self.payment_service.auto_generate(fee, resident) is not None:
                generated += 1
        logger.info("Fee %s billed to %d of %d residents", fee.id, generated, len(residents))
        return generated

    def get_fee(self, fee_id: int) -> Fee:
        result = self.repo.get_by_id(fee_id)
        logger.debug("get_fee id=%s found=%s", fee_id, result is not None)
        if result is None:
            logger.warning("Fee %s not found", fee_id)
            raise NotFoundError("Fee", fee_id)
        return result

    def list_fees(self) -> list[Fee]:
        result = self.repo.list_all()
        logger.debug("Listed %d fees", len(result))
        return result

    def list_by_month(self, year: int, month: int) -> list[Fee]:
        if not 1 <= month <= 12:
            raise InvalidInputError(f"Invalid month: {month}")
        result = self.repo.list_by_period(year, month)
        logger.debug("Listed %d fees for %d-%02d", len(result), year, month)
        return result

    def search_by_type(self, fee_type: str) -> list[Fee]:
        if not fee_type or not fee_type.strip():
            return self.list_fees()
        return self.repo.search_by_type(fee_type)

    def update_fee(
        self,
        fee_id: int,
        fee_type: FeeType | str,
        amount: int,
        year: int,
        month: int,
        description: str = "",
        compulsory: bool = False,
    ) -> Fee:
        existing = self.get_fee(fee_id)
        fee = _build_fee(
            id=existing.id,
            uuid=existing.uuid,
            fee_type=FeeType.from_tag(fee_type) if isinstance(fee_type, str) else fee_type,
            amount=amount,
            year=year,
            month=month,
            description=description,
            compulsory=compulsory,
            created_at=existing.created_at,
        )
        result = self.repo.update(fee)
        logger.info("Fee updated: id=%s, type=%s, amount=%d", result.id, result.fee_type.value, result.amount)
        return result

    def delete_fee(self, fee_id: int) -> None:
        self.get_fee(fee_id)
        self.repo.delete(fee_id)
        logger.info("Fee %s deleted with its payments", fee_id)

    def list_payments(self, fee_id: int) -> list[FeePayment]:
        self.get_fee(fee_id)
        rows: list[FeePayment] = []
        for payment in self.payment_repo.list_by_fee(fee_id):
            resident = self.resident_repo.get_by_id(payment.resident_id)
            rows.append(
                FeePayment(
                    payment=PaymentView.from_payment(payment),
                    resident_name=resident.name if resident else "",
                    apartment_number=resident.apartment.number if resident and resident.apartment else "",
                )
            )
        logger.debug("Listed %d payments for fee=%s", len(rows), fee_id)
        return rows
