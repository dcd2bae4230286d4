from condofee.repositories.base import (
    ApartmentRepository,
    FeeRepository,
    PaymentRepository,
    ResidentRepository,
)


def get_fee_repository() -> FeeRepository:
    from condofee.db import get_connection
    from condofee.repositories.sqlalchemy import SQLAlchemyFeeRepository

    return SQLAlchemyFeeRepository(get_connection())


def get_apartment_repository() -> ApartmentRepository:
    from condofee.db import get_connection
    from condofee.repositories.sqlalchemy import SQLAlchemyApartmentRepository

    return SQLAlchemyApartmentRepository(get_connection())


def get_resident_repository() -> ResidentRepository:
    from condofee.db import get_connection
    from condofee.repositories.sqlalchemy import SQLAlchemyResidentRepository

    return SQLAlchemyResidentRepository(get_connection())


def get_payment_repository() -> PaymentRepository:
    from condofee.db import get_connection
    from condofee.repositories.sqlalchemy import SQLAlchemyPaymentRepository

    return SQLAlchemyPaymentRepository(get_connection())
