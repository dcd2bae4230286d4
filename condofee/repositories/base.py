from abc import ABC, abstractmethod

from condofee.models.fee import Fee
from condofee.models.payment import Payment
from condofee.models.resident import Apartment, Resident, Vehicle


class FeeRepository(ABC):
    @abstractmethod
    def create(self, fee: Fee) -> Fee: ...

    @abstractmethod
    def get_by_id(self, fee_id: int) -> Fee | None: ...

    @abstractmethod
    def get_by_uuid(self, uuid: str) -> Fee | None: ...

    @abstractmethod
    def list_all(self) -> list[Fee]: ...

    @abstractmethod
    def list_by_period(self, year: int, month: int) -> list[Fee]: ...

    @abstractmethod
    def search_by_type(self, fee_type: str) -> list[Fee]: ...

    @abstractmethod
    def update(self, fee: Fee) -> Fee: ...

    @abstractmethod
    def delete(self, fee_id: int) -> None: ...


class ApartmentRepository(ABC):
    @abstractmethod
    def create(self, apartment: Apartment) -> Apartment: ...

    @abstractmethod
    def get_by_id(self, apartment_id: int) -> Apartment | None: ...

    @abstractmethod
    def list_all(self) -> list[Apartment]: ...

    @abstractmethod
    def add_vehicle(self, vehicle: Vehicle) -> Vehicle: ...

    @abstractmethod
    def remove_vehicle(self, vehicle_id: int) -> None: ...


class ResidentRepository(ABC):
    @abstractmethod
    def create(self, resident: Resident) -> Resident: ...

    @abstractmethod
    def get_by_id(self, resident_id: int) -> Resident | None: ...

    @abstractmethod
    def list_all(self, search: str = "", gender: str = "") -> list[Resident]: ...

    @abstractmethod
    def update(self, resident: Resident) -> Resident: ...

    @abstractmethod
    def delete(self, resident_id: int) -> None: ...


class PaymentRepository(ABC):
    @abstractmethod
    def create(self, payment: Payment) -> Payment: ...

    @abstractmethod
    def get_by_id(self, payment_id: int) -> Payment | None: ...

    @abstractmethod
    def update(self, payment: Payment) -> Payment: ...

    @abstractmethod
    def delete(self, payment_id: int) -> None: ...

    @abstractmethod
    def list_all(self) -> list[Payment]: ...

    @abstractmethod
    def list_by_fee(self, fee_id: int) -> list[Payment]: ...

    @abstractmethod
    def list_by_resident(self, resident_id: int) -> list[Payment]: ...

    @abstractmethod
    def search(self, query: str) -> list[Payment]: ...
