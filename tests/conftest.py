"""Root conftest: in-memory SQLite engine and fixtures for the full schema."""

from __future__ import annotations

import pytest
from sqlalchemy import Connection, create_engine, event, text
from sqlalchemy.engine import Engine

from condofee.models.fee import Fee, FeeType
from condofee.models.resident import Apartment, Resident, Vehicle, VehicleCategory

# Matches Alembic head: 3f1a9c2b7d10 (initial schema)
SCHEMA_DDL = """
CREATE TABLE fees (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    uuid VARCHAR(26) NOT NULL UNIQUE,
    fee_type VARCHAR(32) NOT NULL,
    amount INTEGER NOT NULL DEFAULT 0,
    year INTEGER NOT NULL,
    month INTEGER NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    compulsory BOOLEAN NOT NULL DEFAULT 0,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
);

CREATE TABLE apartments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    number VARCHAR(32) NOT NULL UNIQUE,
    floor INTEGER NOT NULL DEFAULT 0,
    area INTEGER NOT NULL
);

CREATE TABLE vehicles (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    apartment_id INTEGER NOT NULL REFERENCES apartments(id) ON DELETE CASCADE,
    plate VARCHAR(32) NOT NULL DEFAULT '',
    category VARCHAR(16) NOT NULL
);

CREATE TABLE residents (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    uuid VARCHAR(26) NOT NULL UNIQUE,
    name TEXT NOT NULL,
    gender VARCHAR(16) NOT NULL DEFAULT '',
    phone VARCHAR(32) NOT NULL DEFAULT '',
    apartment_id INTEGER NOT NULL REFERENCES apartments(id),
    created_at DATETIME NOT NULL
);

CREATE TABLE payments (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    uuid VARCHAR(26) NOT NULL UNIQUE,
    fee_id INTEGER NOT NULL REFERENCES fees(id) ON DELETE CASCADE,
    resident_id INTEGER NOT NULL REFERENCES residents(id) ON DELETE CASCADE,
    quantity INTEGER NOT NULL DEFAULT 0,
    amount_paid INTEGER NOT NULL DEFAULT 0,
    status TEXT NOT NULL,
    date_paid DATE,
    created_at DATETIME NOT NULL,
    updated_at DATETIME NOT NULL
);
"""


@pytest.fixture()
def db_engine() -> Engine:
    engine = create_engine("sqlite:///:memory:")

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()

    return engine


@pytest.fixture()
def db_connection(db_engine: Engine) -> Connection:
    conn = db_engine.connect()
    for statement in SCHEMA_DDL.strip().split(";"):
        stmt = statement.strip()
        if stmt:
            conn.execute(text(stmt))
    conn.commit()
    yield conn
    conn.close()


def _sample_fee(**overrides) -> Fee:
    defaults = dict(
        fee_type=FeeType.AREA,
        amount=5000,
        year=2024,
        month=1,
        description="Service charge",
        compulsory=True,
    )
    defaults.update(overrides)
    return Fee(**defaults)


def _sample_apartment(**overrides) -> Apartment:
    defaults = dict(
        number="1204",
        floor=12,
        area=80,
        vehicles=[
            Vehicle(plate="30A-123.45", category=VehicleCategory.CAR),
            Vehicle(plate="29B1-678.90", category=VehicleCategory.MOTORBIKE),
        ],
    )
    defaults.update(overrides)
    return Apartment(**defaults)


def _sample_resident(apartment_id: int = 1, **overrides) -> Resident:
    defaults = dict(
        name="Nguyen Van An",
        gender="male",
        phone="0912345678",
        apartment_id=apartment_id,
    )
    defaults.update(overrides)
    return Resident(**defaults)


@pytest.fixture()
def sample_fee():
    return _sample_fee


@pytest.fixture()
def sample_apartment():
    return _sample_apartment


@pytest.fixture()
def sample_resident():
    return _sample_resident
