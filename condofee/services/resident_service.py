from __future__ import annotations

import logging

from pydantic import ValidationError

from condofee.errors import InvalidInputError, NotFoundError
from condofee.models.resident import Apartment, Resident, Vehicle, VehicleCategory
from condofee.repositories.base import ApartmentRepository, ResidentRepository

logger = logging.getLogger(__name__)


class ResidentService:
    def __init__(self, repo: ResidentRepository, apartment_repo: ApartmentRepository) -> None:
        self.repo = repo
        self.apartment_repo = apartment_repo

    def get_resident(self, resident_id: int) -> Resident:
        result = self.repo.get_by_id(resident_id)
        logger.debug("get_resident id=%s found=%s", resident_id, result is not None)
        if result is None:
            raise NotFoundError("Resident", resident_id)
        return result

    def list_residents(self, search: str = "", gender: str = "") -> list[Resident]:
        result = self.repo.list_all(search=search, gender=gender)
        logger.debug("Listed %d residents (search=%r, gender=%r)", len(result), search, gender)
        return result

    def create_resident(self, name: str, apartment_id: int, gender: str = "", phone: str = "") -> Resident:
        if not name or not name.strip():
            raise InvalidInputError("Resident name is required")
        self._require_apartment(apartment_id)
        resident = self.repo.create(
            Resident(name=name.strip(), apartment_id=apartment_id, gender=gender, phone=phone)
        )
        logger.info("Resident created: id=%s, apartment=%s", resident.id, apartment_id)
        return resident

    def update_resident(
        self,
        resident_id: int,
        name: str,
        apartment_id: int,
        gender: str = "",
        phone: str = "",
    ) -> Resident:
        resident = self.get_resident(resident_id)
        if not name or not name.strip():
            raise InvalidInputError("Resident name is required")
        self._require_apartment(apartment_id)
        resident.name = name.strip()
        resident.apartment_id = apartment_id
        resident.gender = gender
        resident.phone = phone
        result = self.repo.update(resident)
        logger.info("Resident updated: id=%s", result.id)
        return result

    def delete_resident(self, resident_id: int) -> None:
        self.get_resident(resident_id)
        self.repo.delete(resident_id)
        logger.info("Resident %s deleted", resident_id)

    # ---- apartments ----

    def _require_apartment(self, apartment_id: int) -> Apartment:
        apartment = self.apartment_repo.get_by_id(apartment_id)
        if apartment is None:
            logger.warning("Apartment %s not found", apartment_id)
            raise NotFoundError("Apartment", apartment_id)
        return apartment

    def create_apartment(self, number: str, area: int, floor: int = 0) -> Apartment:
        try:
            apartment = Apartment(number=number, floor=floor, area=area)
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid apartment: {exc.error_count()} validation error(s)") from exc
        result = self.apartment_repo.create(apartment)
        logger.info("Apartment created: id=%s, number=%s, area=%d", result.id, result.number, result.area)
        return result

    def get_apartment(self, apartment_id: int) -> Apartment:
        return self._require_apartment(apartment_id)

    def list_apartments(self) -> list[Apartment]:
        return self.apartment_repo.list_all()

    def register_vehicle(self, apartment_id: int, plate: str, category: VehicleCategory | str) -> Vehicle:
        self._require_apartment(apartment_id)
        try:
            vehicle = Vehicle(apartment_id=apartment_id, plate=plate, category=VehicleCategory(category))
        except ValueError as exc:
            raise InvalidInputError(f"Unknown vehicle category: {category}") from exc
        result = self.apartment_repo.add_vehicle(vehicle)
        logger.info("Vehicle %s registered to apartment %s", result.plate, apartment_id)
        return result

    def remove_vehicle(self, vehicle_id: int) -> None:
        self.apartment_repo.remove_vehicle(vehicle_id)
        logger.info("Vehicle %s removed", vehicle_id)
