"""In-memory repositories for exercising the services without a database."""

from __future__ import annotations

from itertools import count

from condofee.models.fee import Fee
from condofee.models.payment import Payment
from condofee.models.resident import Apartment, Resident, Vehicle
from condofee.repositories.base import (
    ApartmentRepository,
    FeeRepository,
    PaymentRepository,
    ResidentRepository,
)


class InMemoryFeeRepository(FeeRepository):
    def __init__(self, fees: list[Fee] | None = None) -> None:
        self._ids = count(1)
        self.rows: dict[int, Fee] = {}
        for fee in fees or []:
            self.create(fee)

    def create(self, fee: Fee) -> Fee:
        fee_id = fee.id if fee.id is not None else next(self._ids)
        stored = fee.model_copy(update={"id": fee_id, "uuid": fee.uuid or f"fee-{fee_id}"})
        self.rows[fee_id] = stored
        return stored.model_copy()

    def get_by_id(self, fee_id: int) -> Fee | None:
        fee = self.rows.get(fee_id)
        return fee.model_copy() if fee else None

    def get_by_uuid(self, uuid: str) -> Fee | None:
        return next((f.model_copy() for f in self.rows.values() if f.uuid == uuid), None)

    def list_all(self) -> list[Fee]:
        return [f.model_copy() for f in self.rows.values()]

    def list_by_period(self, year: int, month: int) -> list[Fee]:
        return [f.model_copy() for f in self.rows.values() if (f.year, f.month) == (year, month)]

    def search_by_type(self, fee_type: str) -> list[Fee]:
        needle = fee_type.strip().lower()
        return [f.model_copy() for f in self.rows.values() if needle in f.fee_type.value]

    def update(self, fee: Fee) -> Fee:
        self.rows[fee.id] = fee.model_copy()
        return fee.model_copy()

    def delete(self, fee_id: int) -> None:
        self.rows.pop(fee_id, None)


class InMemoryApartmentRepository(ApartmentRepository):
    def __init__(self) -> None:
        self._ids = count(1)
        self._vehicle_ids = count(1)
        self.rows: dict[int, Apartment] = {}

    def create(self, apartment: Apartment) -> Apartment:
        apartment_id = next(self._ids)
        vehicles = [
            v.model_copy(update={"id": next(self._vehicle_ids), "apartment_id": apartment_id})
            for v in apartment.vehicles
        ]
        stored = apartment.model_copy(update={"id": apartment_id, "vehicles": vehicles})
        self.rows[apartment_id] = stored
        return stored.model_copy(deep=True)

    def get_by_id(self, apartment_id: int) -> Apartment | None:
        apartment = self.rows.get(apartment_id)
        return apartment.model_copy(deep=True) if apartment else None

    def list_all(self) -> list[Apartment]:
        return [a.model_copy(deep=True) for a in self.rows.values()]

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        stored = vehicle.model_copy(update={"id": next(self._vehicle_ids)})
        self.rows[vehicle.apartment_id].vehicles.append(stored)
        return stored

    def remove_vehicle(self, vehicle_id: int) -> None:
        for apartment in self.rows.values():
            apartment.vehicles = [v for v in apartment.vehicles if v.id != vehicle_id]


class InMemoryResidentRepository(ResidentRepository):
    def __init__(self, apartments: InMemoryApartmentRepository) -> None:
        self._ids = count(1)
        self.apartments = apartments
        self.rows: dict[int, Resident] = {}

    def _with_apartment(self, resident: Resident) -> Resident:
        return resident.model_copy(update={"apartment": self.apartments.get_by_id(resident.apartment_id)})

    def create(self, resident: Resident) -> Resident:
        resident_id = next(self._ids)
        self.rows[resident_id] = resident.model_copy(update={"id": resident_id, "uuid": f"res-{resident_id}"})
        return self._with_apartment(self.rows[resident_id])

    def get_by_id(self, resident_id: int) -> Resident | None:
        resident = self.rows.get(resident_id)
        return self._with_apartment(resident) if resident else None

    def list_all(self, search: str = "", gender: str = "") -> list[Resident]:
        result = []
        for resident in self.rows.values():
            if search and search.lower() not in resident.name.lower() and search not in resident.phone:
                continue
            if gender and resident.gender != gender:
                continue
            result.append(self._with_apartment(resident))
        return result

    def update(self, resident: Resident) -> Resident:
        self.rows[resident.id] = resident.model_copy(update={"apartment": None})
        return self._with_apartment(self.rows[resident.id])

    def delete(self, resident_id: int) -> None:
        self.rows.pop(resident_id, None)


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self) -> None:
        self._ids = count(1)
        self.rows: dict[int, Payment] = {}

    def create(self, payment: Payment) -> Payment:
        payment_id = next(self._ids)
        self.rows[payment_id] = payment.model_copy(update={"id": payment_id, "uuid": f"pay-{payment_id}"})
        return self.rows[payment_id].model_copy()

    def get_by_id(self, payment_id: int) -> Payment | None:
        payment = self.rows.get(payment_id)
        return payment.model_copy() if payment else None

    def update(self, payment: Payment) -> Payment:
        self.rows[payment.id] = payment.model_copy()
        return payment.model_copy()

    def delete(self, payment_id: int) -> None:
        self.rows.pop(payment_id, None)

    def list_all(self) -> list[Payment]:
        return [p.model_copy() for p in self.rows.values()]

    def list_by_fee(self, fee_id: int) -> list[Payment]:
        return [p.model_copy() for p in self.rows.values() if p.fee_id == fee_id]

    def list_by_resident(self, resident_id: int) -> list[Payment]:
        return [p.model_copy() for p in self.rows.values() if p.resident_id == resident_id]

    def search(self, query: str) -> list[Payment]:
        needle = query.strip().lower()
        return [p.model_copy() for p in self.rows.values() if needle in p.status.lower()]
