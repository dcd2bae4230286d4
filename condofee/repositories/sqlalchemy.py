from __future__ import annotations

from datetime import datetime

from sqlalchemy import Connection, text
from sqlalchemy.engine import RowMapping
from ulid import ULID

from condofee.constants import LOCAL_TZ
from condofee.models.fee import Fee, FeeType
from condofee.models.payment import Payment
from condofee.models.resident import Apartment, Resident, Vehicle, VehicleCategory
from condofee.repositories.base import (
    ApartmentRepository,
    FeeRepository,
    PaymentRepository,
    ResidentRepository,
)


def _now() -> datetime:
    return datetime.now(LOCAL_TZ)


class SQLAlchemyFeeRepository(FeeRepository):
    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    def create(self, fee: Fee) -> Fee:
        now = _now()
        result = self.conn.execute(
            text(
                "INSERT INTO fees (uuid, fee_type, amount, year, month, description, compulsory, "
                "created_at, updated_at) "
                "VALUES (:uuid, :fee_type, :amount, :year, :month, :description, :compulsory, "
                ":created_at, :updated_at)"
            ),
            {
                "uuid": str(ULID()),
                "fee_type": fee.fee_type.value,
                "amount": fee.amount,
                "year": fee.year,
                "month": fee.month,
                "description": fee.description,
                "compulsory": fee.compulsory,
                "created_at": now,
                "updated_at": now,
            },
        )
        fee_id = result.lastrowid
        self.conn.commit()
        created = self.get_by_id(fee_id)
        if created is None:
            raise RuntimeError(f"Failed to retrieve fee after create (id={fee_id})")
        return created

    @staticmethod
    def _build_fee(row: RowMapping) -> Fee:
        return Fee(
            id=row["id"],
            uuid=row["uuid"],
            fee_type=FeeType.from_tag(row["fee_type"]),
            amount=row["amount"],
            year=row["year"],
            month=row["month"],
            description=row["description"],
            compulsory=bool(row["compulsory"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def get_by_id(self, fee_id: int) -> Fee | None:
        row = self.conn.execute(text("SELECT * FROM fees WHERE id = :id"), {"id": fee_id}).mappings().fetchone()
        if row is None:
            return None
        return self._build_fee(row)

    def get_by_uuid(self, uuid: str) -> Fee | None:
        row = (
            self.conn.execute(text("SELECT * FROM fees WHERE uuid = :uuid"), {"uuid": uuid})
            .mappings()
            .fetchone()
        )
        if row is None:
            return None
        return self._build_fee(row)

    def list_all(self) -> list[Fee]:
        rows = (
            self.conn.execute(text("SELECT * FROM fees ORDER BY year DESC, month DESC, id DESC"))
            .mappings()
            .fetchall()
        )
        return [self._build_fee(row) for row in rows]

    def list_by_period(self, year: int, month: int) -> list[Fee]:
        rows = (
            self.conn.execute(
                text("SELECT * FROM fees WHERE year = :year AND month = :month ORDER BY id"),
                {"year": year, "month": month},
            )
            .mappings()
            .fetchall()
        )
        return [self._build_fee(row) for row in rows]

    def search_by_type(self, fee_type: str) -> list[Fee]:
        rows = (
            self.conn.execute(
                text("SELECT * FROM fees WHERE LOWER(fee_type) LIKE :pattern ORDER BY year DESC, month DESC, id DESC"),
                {"pattern": f"%{fee_type.strip().lower()}%"},
            )
            .mappings()
            .fetchall()
        )
        return [self._build_fee(row) for row in rows]

    def update(self, fee: Fee) -> Fee:
        if fee.id is None:
            raise ValueError("Cannot update fee without an id")
        self.conn.execute(
            text(
                "UPDATE fees SET fee_type = :fee_type, amount = :amount, year = :year, month = :month, "
                "description = :description, compulsory = :compulsory, updated_at = :updated_at "
                "WHERE id = :id"
            ),
            {
                "fee_type": fee.fee_type.value,
                "amount": fee.amount,
                "year": fee.year,
                "month": fee.month,
                "description": fee.description,
                "compulsory": fee.compulsory,
                "updated_at": _now(),
                "id": fee.id,
            },
        )
        self.conn.commit()
        result = self.get_by_id(fee.id)
        if result is None:
            raise RuntimeError(f"Failed to retrieve fee after update (id={fee.id})")
        return result

    def delete(self, fee_id: int) -> None:
        self.conn.execute(text("DELETE FROM payments WHERE fee_id = :id"), {"id": fee_id})
        self.conn.execute(text("DELETE FROM fees WHERE id = :id"), {"id": fee_id})
        self.conn.commit()


class SQLAlchemyApartmentRepository(ApartmentRepository):
    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    def create(self, apartment: Apartment) -> Apartment:
        result = self.conn.execute(
            text("INSERT INTO apartments (number, floor, area) VALUES (:number, :floor, :area)"),
            {"number": apartment.number, "floor": apartment.floor, "area": apartment.area},
        )
        apartment_id = result.lastrowid
        for vehicle in apartment.vehicles:
            self._insert_vehicle(apartment_id, vehicle)
        self.conn.commit()
        created = self.get_by_id(apartment_id)
        if created is None:
            raise RuntimeError(f"Failed to retrieve apartment after create (id={apartment_id})")
        return created

    def _insert_vehicle(self, apartment_id: int, vehicle: Vehicle) -> int:
        result = self.conn.execute(
            text("INSERT INTO vehicles (apartment_id, plate, category) VALUES (:apartment_id, :plate, :category)"),
            {"apartment_id": apartment_id, "plate": vehicle.plate, "category": vehicle.category.value},
        )
        return result.lastrowid

    @staticmethod
    def _build_apartment(row: RowMapping, vehicle_rows: list[RowMapping]) -> Apartment:
        return Apartment(
            id=row["id"],
            number=row["number"],
            floor=row["floor"],
            area=row["area"],
            vehicles=[
                Vehicle(
                    id=vehicle_row["id"],
                    apartment_id=vehicle_row["apartment_id"],
                    plate=vehicle_row["plate"],
                    category=VehicleCategory(vehicle_row["category"]),
                )
                for vehicle_row in vehicle_rows
            ],
        )

    def get_by_id(self, apartment_id: int) -> Apartment | None:
        row = (
            self.conn.execute(text("SELECT * FROM apartments WHERE id = :id"), {"id": apartment_id})
            .mappings()
            .fetchone()
        )
        if row is None:
            return None
        vehicles = (
            self.conn.execute(
                text("SELECT * FROM vehicles WHERE apartment_id = :apartment_id ORDER BY id"),
                {"apartment_id": apartment_id},
            )
            .mappings()
            .fetchall()
        )
        return self._build_apartment(row, list(vehicles))

    def list_all(self) -> list[Apartment]:
        rows = self.conn.execute(text("SELECT * FROM apartments ORDER BY number")).mappings().fetchall()
        if not rows:
            return []
        vehicle_rows = self.conn.execute(text("SELECT * FROM vehicles ORDER BY id")).mappings().fetchall()
        by_apartment: dict[int, list[RowMapping]] = {}
        for vehicle_row in vehicle_rows:
            by_apartment.setdefault(vehicle_row["apartment_id"], []).append(vehicle_row)
        return [self._build_apartment(row, by_apartment.get(row["id"], [])) for row in rows]

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        if vehicle.apartment_id is None:
            raise ValueError("Cannot register a vehicle without an apartment")
        vehicle_id = self._insert_vehicle(vehicle.apartment_id, vehicle)
        self.conn.commit()
        return vehicle.model_copy(update={"id": vehicle_id})

    def remove_vehicle(self, vehicle_id: int) -> None:
        self.conn.execute(text("DELETE FROM vehicles WHERE id = :id"), {"id": vehicle_id})
        self.conn.commit()


class SQLAlchemyResidentRepository(ResidentRepository):
    def __init__(self, conn: Connection) -> None:
        self.conn = conn
        self.apartments = SQLAlchemyApartmentRepository(conn)

    def create(self, resident: Resident) -> Resident:
        result = self.conn.execute(
            text(
                "INSERT INTO residents (uuid, name, gender, phone, apartment_id, created_at) "
                "VALUES (:uuid, :name, :gender, :phone, :apartment_id, :created_at)"
            ),
            {
                "uuid": str(ULID()),
                "name": resident.name,
                "gender": resident.gender,
                "phone": resident.phone,
                "apartment_id": resident.apartment_id,
                "created_at": _now(),
            },
        )
        resident_id = result.lastrowid
        self.conn.commit()
        created = self.get_by_id(resident_id)
        if created is None:
            raise RuntimeError(f"Failed to retrieve resident after create (id={resident_id})")
        return created

    @staticmethod
    def _build_resident(row: RowMapping, apartment: Apartment | None = None) -> Resident:
        return Resident(
            id=row["id"],
            uuid=row["uuid"],
            name=row["name"],
            gender=row["gender"],
            phone=row["phone"],
            apartment_id=row["apartment_id"],
            apartment=apartment,
            created_at=row["created_at"],
        )

    def get_by_id(self, resident_id: int) -> Resident | None:
        row = (
            self.conn.execute(text("SELECT * FROM residents WHERE id = :id"), {"id": resident_id})
            .mappings()
            .fetchone()
        )
        if row is None:
            return None
        return self._build_resident(row, self.apartments.get_by_id(row["apartment_id"]))

    def list_all(self, search: str = "", gender: str = "") -> list[Resident]:
        clauses = []
        params: dict[str, str] = {}
        if search:
            clauses.append("(LOWER(name) LIKE :search OR phone LIKE :search)")
            params["search"] = f"%{search.strip().lower()}%"
        if gender:
            clauses.append("gender = :gender")
            params["gender"] = gender
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        rows = self.conn.execute(text(f"SELECT * FROM residents{where} ORDER BY name"), params).mappings().fetchall()
        if not rows:
            return []
        apartments = {apartment.id: apartment for apartment in self.apartments.list_all()}
        return [self._build_resident(row, apartments.get(row["apartment_id"])) for row in rows]

    def update(self, resident: Resident) -> Resident:
        if resident.id is None:
            raise ValueError("Cannot update resident without an id")
        self.conn.execute(
            text(
                "UPDATE residents SET name = :name, gender = :gender, phone = :phone, "
                "apartment_id = :apartment_id WHERE id = :id"
            ),
            {
                "name": resident.name,
                "gender": resident.gender,
                "phone": resident.phone,
                "apartment_id": resident.apartment_id,
                "id": resident.id,
            },
        )
        self.conn.commit()
        result = self.get_by_id(resident.id)
        if result is None:
            raise RuntimeError(f"Failed to retrieve resident after update (id={resident.id})")
        return result

    def delete(self, resident_id: int) -> None:
        self.conn.execute(text("DELETE FROM payments WHERE resident_id = :id"), {"id": resident_id})
        self.conn.execute(text("DELETE FROM residents WHERE id = :id"), {"id": resident_id})
        self.conn.commit()


class SQLAlchemyPaymentRepository(PaymentRepository):
    def __init__(self, conn: Connection) -> None:
        self.conn = conn

    def create(self, payment: Payment) -> Payment:
        now = _now()
        result = self.conn.execute(
            text(
                "INSERT INTO payments (uuid, fee_id, resident_id, quantity, amount_paid, status, date_paid, "
                "created_at, updated_at) "
                "VALUES (:uuid, :fee_id, :resident_id, :quantity, :amount_paid, :status, :date_paid, "
                ":created_at, :updated_at)"
            ),
            {
                "uuid": str(ULID()),
                "fee_id": payment.fee_id,
                "resident_id": payment.resident_id,
                "quantity": payment.quantity,
                "amount_paid": payment.amount_paid,
                "status": payment.status,
                "date_paid": payment.date_paid,
                "created_at": now,
                "updated_at": now,
            },
        )
        payment_id = result.lastrowid
        self.conn.commit()
        created = self.get_by_id(payment_id)
        if created is None:
            raise RuntimeError(f"Failed to retrieve payment after create (id={payment_id})")
        return created

    @staticmethod
    def _build_payment(row: RowMapping) -> Payment:
        return Payment(
            id=row["id"],
            uuid=row["uuid"],
            fee_id=row["fee_id"],
            resident_id=row["resident_id"],
            quantity=row["quantity"],
            amount_paid=row["amount_paid"],
            status=row["status"],
            date_paid=row["date_paid"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def _fetch(self, sql: str, params: dict | None = None) -> list[Payment]:
        rows = self.conn.execute(text(sql), params or {}).mappings().fetchall()
        return [self._build_payment(row) for row in rows]

    def get_by_id(self, payment_id: int) -> Payment | None:
        found = self._fetch("SELECT * FROM payments WHERE id = :id", {"id": payment_id})
        return found[0] if found else None

    def update(self, payment: Payment) -> Payment:
        if payment.id is None:
            raise ValueError("Cannot update payment without an id")
        self.conn.execute(
            text(
                "UPDATE payments SET fee_id = :fee_id, resident_id = :resident_id, quantity = :quantity, "
                "amount_paid = :amount_paid, status = :status, date_paid = :date_paid, "
                "updated_at = :updated_at WHERE id = :id"
            ),
            {
                "fee_id": payment.fee_id,
                "resident_id": payment.resident_id,
                "quantity": payment.quantity,
                "amount_paid": payment.amount_paid,
                "status": payment.status,
                "date_paid": payment.date_paid,
                "updated_at": _now(),
                "id": payment.id,
            },
        )
        self.conn.commit()
        result = self.get_by_id(payment.id)
        if result is None:
            raise RuntimeError(f"Failed to retrieve payment after update (id={payment.id})")
        return result

    def delete(self, payment_id: int) -> None:
        self.conn.execute(text("DELETE FROM payments WHERE id = :id"), {"id": payment_id})
        self.conn.commit()

    def list_all(self) -> list[Payment]:
        return self._fetch("SELECT * FROM payments ORDER BY id DESC")

    def list_by_fee(self, fee_id: int) -> list[Payment]:
        return self._fetch("SELECT * FROM payments WHERE fee_id = :fee_id ORDER BY id", {"fee_id": fee_id})

    def list_by_resident(self, resident_id: int) -> list[Payment]:
        return self._fetch(
            "SELECT * FROM payments WHERE resident_id = :resident_id ORDER BY id DESC",
            {"resident_id": resident_id},
        )

    def search(self, query: str) -> list[Payment]:
        return self._fetch(
            "SELECT p.* FROM payments p "
            "JOIN fees f ON f.id = p.fee_id "
            "JOIN residents r ON r.id = p.resident_id "
            "WHERE LOWER(p.status) LIKE :pattern OR LOWER(f.description) LIKE :pattern "
            "OR LOWER(f.fee_type) LIKE :pattern OR LOWER(r.name) LIKE :pattern "
            "ORDER BY p.id DESC",
            {"pattern": f"%{query.strip().lower()}%"},
        )
