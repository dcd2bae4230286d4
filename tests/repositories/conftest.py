import pytest
from sqlalchemy import Connection

from condofee.repositories.sqlalchemy import (
    SQLAlchemyApartmentRepository,
    SQLAlchemyFeeRepository,
    SQLAlchemyPaymentRepository,
    SQLAlchemyResidentRepository,
)


@pytest.fixture()
def fee_repo(db_connection: Connection) -> SQLAlchemyFeeRepository:
    return SQLAlchemyFeeRepository(db_connection)


@pytest.fixture()
def apartment_repo(db_connection: Connection) -> SQLAlchemyApartmentRepository:
    return SQLAlchemyApartmentRepository(db_connection)


@pytest.fixture()
def resident_repo(db_connection: Connection) -> SQLAlchemyResidentRepository:
    return SQLAlchemyResidentRepository(db_connection)


@pytest.fixture()
def payment_repo(db_connection: Connection) -> SQLAlchemyPaymentRepository:
    return SQLAlchemyPaymentRepository(db_connection)


@pytest.fixture()
def resident_in_db(apartment_repo, resident_repo, sample_apartment, sample_resident):
    apartment = apartment_repo.create(sample_apartment())
    return resident_repo.create(sample_resident(apartment_id=apartment.id))
